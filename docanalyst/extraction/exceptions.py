class ExtractionError(Exception):
    """Raised when a document's text cannot be extracted."""
