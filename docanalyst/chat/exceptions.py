class ChatError(Exception):
    """Raised when a chat request cannot be answered."""
