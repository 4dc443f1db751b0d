import io

import docx

from docanalyst.extraction.base import BaseTextExtractor
from docanalyst.extraction.exceptions import ExtractionError


class DocxAdapter(BaseTextExtractor):
    """Extracts raw paragraph text from a Word document, dropping styling."""

    def extract(self, data: bytes) -> str:
        try:
            document = docx.Document(io.BytesIO(data))
            paragraphs = [paragraph.text for paragraph in document.paragraphs]
        except Exception as exc:
            raise ExtractionError(f"docx extraction failed: {exc}") from exc
        return "\n".join(paragraphs).strip()
