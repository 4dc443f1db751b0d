from unittest.mock import MagicMock, patch

import pytest

from docanalyst.extraction.base import BaseTextExtractor
from docanalyst.extraction.dispatcher import ExtractionDispatcher, file_extension
from docanalyst.extraction.exceptions import ExtractionError


def _extractor(result: str = "text", error: Exception | None = None) -> MagicMock:
    extractor = MagicMock(spec=BaseTextExtractor)
    if error is not None:
        extractor.extract.side_effect = error
    else:
        extractor.extract.return_value = result
    return extractor


class TestFileExtension:
    @pytest.mark.parametrize(
        ("filename", "expected"),
        [
            ("report.PDF", "pdf"),
            ("archive.tar.xlsx", "xlsx"),
            ("notes", ""),
            ("my file.Docx", "docx"),
        ],
    )
    def test_lowercased_without_dot(self, filename: str, expected: str) -> None:
        assert file_extension(filename) == expected


class TestDispatch:
    @pytest.mark.asyncio
    async def test_uses_extractor_for_lowercased_extension(self) -> None:
        pdf = _extractor("pdf text")
        dispatcher = ExtractionDispatcher({"pdf": pdf})
        result = await dispatcher.extract(b"%PDF", "Report.PDF")
        assert result == "pdf text"
        pdf.extract.assert_called_once_with(b"%PDF")

    @pytest.mark.asyncio
    async def test_normalizes_registered_extensions(self) -> None:
        txt = _extractor("plain")
        dispatcher = ExtractionDispatcher({".TXT": txt})
        assert await dispatcher.extract(b"x", "a.txt") == "plain"
        assert dispatcher.supported_extensions == frozenset({"txt"})

    @pytest.mark.asyncio
    async def test_unregistered_extension_returns_empty(self) -> None:
        dispatcher = ExtractionDispatcher({"pdf": _extractor()})
        assert await dispatcher.extract(b"\x89PNG", "photo.png") == ""

    @pytest.mark.asyncio
    async def test_extraction_error_returns_empty_and_warns(self) -> None:
        dispatcher = ExtractionDispatcher(
            {"pdf": _extractor(error=ExtractionError("corrupt"))}
        )
        with patch("docanalyst.extraction.dispatcher.Log") as mock_log:
            result = await dispatcher.extract(b"junk", "broken.pdf")
        assert result == ""
        warning = mock_log.warning.call_args.args[0]
        assert "broken.pdf" in warning
        assert "corrupt" in warning

    @pytest.mark.asyncio
    async def test_unexpected_exception_returns_empty(self) -> None:
        dispatcher = ExtractionDispatcher({"txt": _extractor(error=RuntimeError("boom"))})
        assert await dispatcher.extract(b"x", "a.txt") == ""

    def test_extractor_for(self) -> None:
        pdf = _extractor()
        dispatcher = ExtractionDispatcher({"pdf": pdf})
        assert dispatcher.extractor_for("x.PDF") is pdf
        assert dispatcher.extractor_for("x.jpg") is None
