from dataclasses import dataclass, field

PENDING_SUMMARY = "Analysis pending..."
NO_TEXT_SUMMARY = (
    "Could not extract text from this document. "
    "It might be an image-based PDF or empty."
)
FAILED_SUMMARY = "AI analysis failed/incomplete."


@dataclass(frozen=True)
class Analysis:
    """Structured AI analysis of a single document."""

    summary: str = ""
    key_topics: list[str] = field(default_factory=list)
    important_findings: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)

    @classmethod
    def pending(cls) -> "Analysis":
        return cls(summary=PENDING_SUMMARY)

    @classmethod
    def no_text(cls) -> "Analysis":
        return cls(summary=NO_TEXT_SUMMARY)

    @classmethod
    def failed(cls) -> "Analysis":
        return cls(summary=FAILED_SUMMARY)

    def to_dict(self) -> dict[str, object]:
        return {
            "summary": self.summary,
            "key_topics": list(self.key_topics),
            "important_findings": list(self.important_findings),
            "recommendations": list(self.recommendations),
        }
