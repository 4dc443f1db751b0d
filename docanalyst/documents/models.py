from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import PurePath

from docanalyst.analysis.models import Analysis


def count_words(content: str) -> int:
    """Number of whitespace-separated words. Blank content counts as 0."""
    return len(content.split())


def type_tag(filename: str) -> str:
    """Uppercased extension of *filename* without the dot, e.g. ``PDF``."""
    return PurePath(filename).suffix.lstrip(".").upper()


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Document:
    """An ingested document with its extracted text and analysis."""

    id: str
    stored_name: str
    filename: str
    size_bytes: int
    type_tag: str
    uploaded_at: datetime
    content: str = ""
    word_count: int = 0
    analysis: Analysis = field(default_factory=Analysis.pending)

    def to_listing(self) -> dict[str, object]:
        """Wire shape used for listings: everything except ``content``."""
        return {
            "id": self.id,
            "storedName": self.stored_name,
            "filename": self.filename,
            "sizeBytes": self.size_bytes,
            "typeTag": self.type_tag,
            "uploadedAt": self.uploaded_at.isoformat(),
            "wordCount": self.word_count,
            "analysis": self.analysis.to_dict(),
        }

    def to_detail(self) -> dict[str, object]:
        detail = self.to_listing()
        detail["content"] = self.content
        return detail


@dataclass(frozen=True)
class StoreStats:
    """Aggregate figures over the documents currently stored."""

    total_documents: int = 0
    total_size_bytes: int = 0
    total_words: int = 0
    last_uploaded_at: datetime | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "totalDocuments": self.total_documents,
            "totalSizeBytes": self.total_size_bytes,
            "totalWords": self.total_words,
            "lastUploadedAt": (
                self.last_uploaded_at.isoformat() if self.last_uploaded_at else None
            ),
        }
