import re
from pathlib import Path

import pytest

from docanalyst.storage.base import BaseArtifactStorage
from docanalyst.storage.exceptions import StorageError
from docanalyst.storage.local_storage import LocalArtifactStorage
from docanalyst.storage.naming import generate_stored_name


class TestLocalArtifactStorage:
    def test_save_creates_root_and_writes_bytes(self, tmp_path: Path) -> None:
        storage = LocalArtifactStorage(tmp_path / "uploads")
        written = storage.save("a.txt", b"hello")
        assert written == 5
        assert (tmp_path / "uploads" / "a.txt").read_bytes() == b"hello"

    def test_save_keeps_binary_bytes_verbatim(self, tmp_path: Path) -> None:
        LocalArtifactStorage(tmp_path).save("a.bin", b"\x00\x01\xff")
        assert (tmp_path / "a.bin").read_bytes() == b"\x00\x01\xff"

    def test_contract_is_write_and_delete_only(self) -> None:
        assert BaseArtifactStorage.__abstractmethods__ == frozenset({"save", "delete"})

    def test_delete_existing(self, tmp_path: Path) -> None:
        storage = LocalArtifactStorage(tmp_path)
        storage.save("a.txt", b"x")
        assert storage.delete("a.txt") is True
        assert not (tmp_path / "a.txt").exists()

    def test_delete_missing_is_tolerated(self, tmp_path: Path) -> None:
        assert LocalArtifactStorage(tmp_path).delete("gone.txt") is False

    @pytest.mark.parametrize("name", ["../escape.txt", "sub/dir.txt", "..", ""])
    def test_rejects_names_outside_root(self, tmp_path: Path, name: str) -> None:
        with pytest.raises(StorageError, match="Invalid stored name"):
            LocalArtifactStorage(tmp_path).save(name, b"x")


class TestGenerateStoredName:
    def test_format(self) -> None:
        name = generate_stored_name("report.pdf")
        assert re.fullmatch(r"\d{13}-[a-z0-9]{9}-report\.pdf", name)

    def test_whitespace_becomes_underscore(self) -> None:
        assert generate_stored_name("my  annual\treport.pdf").endswith("-my_annual_report.pdf")

    def test_path_separators_are_replaced(self) -> None:
        assert "/" not in generate_stored_name("../../etc/passwd")

    def test_names_are_unique(self) -> None:
        names = {generate_stored_name("a.txt") for _ in range(200)}
        assert len(names) == 200
