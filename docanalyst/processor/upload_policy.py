from collections.abc import Iterable, Sequence

from docanalyst.config.settings import Settings
from docanalyst.extraction.dispatcher import file_extension
from docanalyst.processor.exceptions import BatchValidationError
from docanalyst.processor.models import UploadedFile


class UploadPolicy:
    """Checks an upload batch against size, count and file type limits."""

    def __init__(
        self,
        *,
        allowed_extensions: Iterable[str],
        max_file_size_bytes: int,
        max_files_per_batch: int,
    ) -> None:
        self._allowed = frozenset(ext.lower().lstrip(".") for ext in allowed_extensions)
        self._max_file_size_bytes = max_file_size_bytes
        self._max_files_per_batch = max_files_per_batch

    @classmethod
    def from_settings(cls, settings: Settings) -> "UploadPolicy":
        return cls(
            allowed_extensions=settings.allowed_extensions,
            max_file_size_bytes=settings.max_file_size_bytes,
            max_files_per_batch=settings.max_files_per_batch,
        )

    def validate(self, batch: Sequence[UploadedFile]) -> None:
        """Raise BatchValidationError on the first policy violation."""
        if not batch:
            raise BatchValidationError("No files selected")
        if len(batch) > self._max_files_per_batch:
            raise BatchValidationError(
                f"Too many files: {len(batch)} (max {self._max_files_per_batch})"
            )
        for upload in batch:
            self._validate_file(upload)

    def _validate_file(self, upload: UploadedFile) -> None:
        extension = file_extension(upload.filename)
        if extension not in self._allowed:
            raise BatchValidationError(f"Unsupported file type: .{extension}")
        size = max(upload.size_bytes, len(upload.data))
        if size > self._max_file_size_bytes:
            max_mb = self._max_file_size_bytes // (1024 * 1024)
            raise BatchValidationError(
                f"File too large: {upload.filename}. Maximum size is {max_mb}MB."
            )
