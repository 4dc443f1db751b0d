"""Tests for the Analyzer (AI-powered document analysis)."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from docanalyst.analysis.analyzer import Analyzer
from docanalyst.analysis.exceptions import AnalysisError, AnalysisNetworkError
from docanalyst.analysis.models import FAILED_SUMMARY, NO_TEXT_SUMMARY, Analysis


def _make_client(content: str | None = None) -> MagicMock:
    client = MagicMock()
    client.complete = AsyncMock(return_value=content)
    return client


def _make_analyzer(client: MagicMock, **kwargs: object) -> Analyzer:
    return Analyzer(client=client, model="test-model", **kwargs)  # type: ignore[arg-type]


def _valid_json_response() -> str:
    return json.dumps({
        "summary": "Quarterly revenue report.",
        "key_topics": ["Revenue", "Costs", "Outlook"],
        "important_findings": ["Revenue up 12%"],
        "recommendations": ["Expand sales team"],
    })


class TestAnalyzeSuccess:
    @pytest.mark.asyncio
    async def test_returns_parsed_analysis(self) -> None:
        client = _make_client(_valid_json_response())
        analysis = await _make_analyzer(client).analyze("document text")
        assert analysis.summary == "Quarterly revenue report."
        assert analysis.key_topics == ["Revenue", "Costs", "Outlook"]
        assert analysis.important_findings == ["Revenue up 12%"]
        assert analysis.recommendations == ["Expand sales team"]

    @pytest.mark.asyncio
    async def test_unwraps_json_code_fences(self) -> None:
        client = _make_client("```json\n" + _valid_json_response() + "\n```")
        analysis = await _make_analyzer(client).analyze("document text")
        assert analysis.summary == "Quarterly revenue report."

    @pytest.mark.asyncio
    async def test_passes_text_and_model(self) -> None:
        client = _make_client(_valid_json_response())
        await _make_analyzer(client).analyze("clinical input")
        kwargs = client.complete.call_args.kwargs
        assert "clinical input" in kwargs["user_prompt"]
        assert kwargs["model"] == "test-model"

    @pytest.mark.asyncio
    async def test_prompt_asks_for_the_four_fields(self) -> None:
        client = _make_client(_valid_json_response())
        await _make_analyzer(client).analyze("text")
        prompt = client.complete.call_args.kwargs["user_prompt"]
        for key in ("summary", "key_topics", "important_findings", "recommendations"):
            assert f'"{key}"' in prompt

    @pytest.mark.asyncio
    async def test_makes_exactly_one_request(self) -> None:
        client = _make_client(_valid_json_response())
        await _make_analyzer(client).analyze("text")
        assert client.complete.await_count == 1


class TestTruncation:
    @pytest.mark.asyncio
    async def test_text_is_cut_to_char_budget_prefix(self) -> None:
        client = _make_client(_valid_json_response())
        text = "a" * 15_000 + "TAIL-MARKER"
        await _make_analyzer(client).analyze(text)
        prompt = client.complete.call_args.kwargs["user_prompt"]
        assert "a" * 15_000 in prompt
        assert "TAIL-MARKER" not in prompt

    def test_custom_budget(self) -> None:
        analyzer = _make_analyzer(_make_client(), char_budget=5)
        prompt = analyzer.build_prompt("0123456789")
        assert "01234" in prompt
        assert "56789" not in prompt


class TestBlankText:
    @pytest.mark.asyncio
    @pytest.mark.parametrize("text", ["", "   \n\t "])
    async def test_skips_service_for_blank_text(self, text: str) -> None:
        client = _make_client(_valid_json_response())
        analysis = await _make_analyzer(client).analyze(text)
        assert client.complete.await_count == 0
        assert analysis == Analysis.no_text()
        assert analysis.summary == NO_TEXT_SUMMARY
        assert analysis.key_topics == []


class TestFailuresDegrade:
    @pytest.mark.asyncio
    async def test_non_json_reply_returns_failed_placeholder(self) -> None:
        client = _make_client("Sorry, I can't help with that.")
        analysis = await _make_analyzer(client).analyze("text")
        assert analysis == Analysis.failed()
        assert analysis.summary == FAILED_SUMMARY

    @pytest.mark.asyncio
    async def test_network_error_returns_failed_placeholder(self) -> None:
        client = MagicMock()
        client.complete = AsyncMock(side_effect=AnalysisNetworkError("network timeout"))
        analysis = await _make_analyzer(client).analyze("text")
        assert analysis == Analysis.failed()

    @pytest.mark.asyncio
    async def test_empty_response_error_returns_failed_placeholder(self) -> None:
        client = MagicMock()
        client.complete = AsyncMock(side_effect=AnalysisError("AI returned empty response"))
        analysis = await _make_analyzer(client).analyze("text")
        assert analysis.summary == FAILED_SUMMARY

    @pytest.mark.asyncio
    async def test_unexpected_exception_is_absorbed(self) -> None:
        client = MagicMock()
        client.complete = AsyncMock(side_effect=RuntimeError("boom"))
        analysis = await _make_analyzer(client).analyze("text")
        assert analysis.summary == FAILED_SUMMARY

    @pytest.mark.asyncio
    async def test_json_array_returns_failed_placeholder(self) -> None:
        client = _make_client("[]")
        analysis = await _make_analyzer(client).analyze("text")
        assert analysis == Analysis.failed()


class TestLogging:
    @pytest.mark.asyncio
    async def test_logs_prompt_in_debug(self) -> None:
        client = _make_client(_valid_json_response())
        with patch("docanalyst.analysis.analyzer.Log") as mock_log:
            await _make_analyzer(client).analyze("test text")
        assert "prompt" in mock_log.debug.call_args_list[0].args[0].lower()

    @pytest.mark.asyncio
    async def test_logs_error_on_failure(self) -> None:
        client = _make_client("not json")
        with patch("docanalyst.analysis.analyzer.Log") as mock_log:
            await _make_analyzer(client).analyze("test text")
        assert mock_log.error.called
