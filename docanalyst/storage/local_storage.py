from pathlib import Path

from docanalyst.logging.logger import Log
from docanalyst.storage.base import BaseArtifactStorage
from docanalyst.storage.exceptions import StorageError


class LocalArtifactStorage(BaseArtifactStorage):
    """Keeps uploaded files in a directory on the local filesystem."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def ensure_root(self) -> None:
        if not self._root.exists():
            self._root.mkdir(parents=True, exist_ok=True)
            Log.info(f"Created uploads directory {self._root}")

    def save(self, stored_name: str, data: bytes) -> int:
        self.ensure_root()
        path = self._resolve_path(stored_name)
        try:
            path.write_bytes(data)
        except OSError as exc:
            raise StorageError(f"Failed to write {path}: {exc}") from exc
        return len(data)

    def delete(self, stored_name: str) -> bool:
        path = self._resolve_path(stored_name)
        if not path.exists():
            Log.warning(f"File not found on disk: {path}")
            return False
        path.unlink()
        Log.info(f"Deleted file: {path}")
        return True

    def _resolve_path(self, stored_name: str) -> Path:
        path = self._root / stored_name
        if stored_name in ("", ".", "..") or path.parent != self._root:
            raise StorageError(f"Invalid stored name: {stored_name!r}")
        return path
