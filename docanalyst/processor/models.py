from dataclasses import dataclass, field
from datetime import datetime

from docanalyst.analysis.models import Analysis
from docanalyst.documents.models import Document


@dataclass(frozen=True)
class UploadedFile:
    """A file as handed over by the upload boundary."""

    filename: str
    data: bytes
    declared_size_bytes: int | None = None

    @property
    def size_bytes(self) -> int:
        if self.declared_size_bytes is None:
            return len(self.data)
        return self.declared_size_bytes


@dataclass(slots=True)
class IngestionContext:
    """Accumulates data as one file moves through the ingestion steps."""

    upload: UploadedFile
    position: int
    document_id: str
    uploaded_at: datetime
    stored_name: str = ""
    size_bytes: int = 0
    extracted_text: str = ""
    analysis: Analysis = field(default_factory=Analysis.pending)
    document: Document | None = None
    errors: list[str] = field(default_factory=list)
