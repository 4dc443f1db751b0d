from docanalyst.extraction.base import BaseTextExtractor
from docanalyst.extraction.exceptions import ExtractionError


class PlainTextAdapter(BaseTextExtractor):
    """Reads plain and delimited text files verbatim as UTF-8."""

    def extract(self, data: bytes) -> str:
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ExtractionError(f"File is not valid UTF-8: {exc}") from exc
