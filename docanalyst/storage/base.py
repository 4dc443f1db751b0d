from abc import ABC, abstractmethod


class BaseArtifactStorage(ABC):
    """Contract for the medium that keeps the raw bytes of uploaded files."""

    @abstractmethod
    def save(self, stored_name: str, data: bytes) -> int:
        """Persist *data* under *stored_name*. Returns the number of bytes written."""

    @abstractmethod
    def delete(self, stored_name: str) -> bool:
        """Delete the artifact. Returns False if it was already absent."""
