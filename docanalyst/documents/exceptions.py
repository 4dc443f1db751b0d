class DocumentStoreError(Exception):
    """Base exception for document store consistency errors."""


class DocumentNotFoundError(DocumentStoreError):
    """Raised when no document matches the requested key."""


class DuplicateDocumentError(DocumentStoreError):
    """Raised when inserting a document whose id or stored name is already taken."""
