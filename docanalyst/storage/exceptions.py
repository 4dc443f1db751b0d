class StorageError(Exception):
    """Raised when an artifact cannot be written or read."""
