import asyncio
from pathlib import PurePath

from docanalyst.extraction.base import BaseTextExtractor
from docanalyst.logging.logger import Log


def file_extension(filename: str) -> str:
    """Return the lowercased extension of *filename* without the dot."""
    return PurePath(filename).suffix.lower().lstrip(".")


class ExtractionDispatcher:
    """Maps a file's extension to an extractor and runs it off the event loop.

    Extensions without a registered extractor (images, for instance) yield
    an empty string. Extractor failures are logged and also yield an empty
    string, so a single bad file never aborts a batch.
    """

    def __init__(self, extractors: dict[str, BaseTextExtractor]) -> None:
        self._extractors = {ext.lower().lstrip("."): e for ext, e in extractors.items()}

    @property
    def supported_extensions(self) -> frozenset[str]:
        return frozenset(self._extractors)

    def extractor_for(self, filename: str) -> BaseTextExtractor | None:
        return self._extractors.get(file_extension(filename))

    async def extract(self, data: bytes, declared_name: str) -> str:
        """Extract plain text from *data* using the extractor for *declared_name*."""
        extension = file_extension(declared_name)
        Log.info(f"Processing file: {declared_name} (.{extension})")

        extractor = self._extractors.get(extension)
        if extractor is None:
            Log.debug(f"No text extractor registered for .{extension}, skipping")
            return ""

        try:
            text = await asyncio.to_thread(extractor.extract, data)
        except Exception as exc:
            Log.warning(f"Error extracting text from {declared_name}: {exc}")
            return ""

        Log.info(f"Extracted {len(text)} chars from {declared_name}")
        if len(text) < 100:
            Log.debug(f"Preview: {text[:100]!r}")
        return text
