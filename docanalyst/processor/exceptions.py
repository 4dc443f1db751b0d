class ProcessorError(Exception):
    """Base exception for all ingestion-related errors."""


class BatchValidationError(ProcessorError):
    """Raised when an upload batch violates the upload policy.

    The whole batch is rejected before any file is processed.
    """
