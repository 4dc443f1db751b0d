"""Tolerant parsing of analysis replies returned by the completion service.

The reply is untrusted text. Code fences are stripped, the remainder is
parsed as a JSON object, and every field falls back to its default when
missing or malformed instead of failing the whole analysis.
"""

import json
import re
from typing import Any

from docanalyst.analysis.exceptions import AnalysisError
from docanalyst.analysis.models import Analysis

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def strip_code_fences(raw: str) -> str:
    return _FENCE_RE.sub("", raw).strip()


def parse_json_object(raw: str) -> dict[str, Any]:
    """Parse *raw* into a JSON object, tolerating code fences and chatter.

    Raises:
        AnalysisError: if no JSON object can be recovered.
    """
    cleaned = strip_code_fences(raw)
    try:
        parsed = json.loads(cleaned)
    except json.JSONDecodeError as exc:
        parsed = _parse_embedded_object(cleaned, exc)

    if not isinstance(parsed, dict):
        raise AnalysisError("JSON response must be an object")
    return parsed


def _parse_embedded_object(cleaned: str, original: json.JSONDecodeError) -> Any:
    # Some models wrap the object in prose; fall back to the outermost braces.
    start = cleaned.find("{")
    end = cleaned.rfind("}")
    if start == -1 or end <= start:
        raise AnalysisError(f"Invalid JSON response: {original}") from original
    try:
        return json.loads(cleaned[start : end + 1])
    except json.JSONDecodeError as exc:
        raise AnalysisError(f"Invalid JSON response: {exc}") from exc


def parse_analysis(raw: str) -> Analysis:
    """Build an Analysis from a raw completion reply.

    Raises:
        AnalysisError: if the reply does not contain a JSON object.
    """
    return build_analysis(parse_json_object(raw))


def build_analysis(data: dict[str, Any]) -> Analysis:
    """Build an Analysis from parsed JSON, defaulting missing or bad fields."""
    return Analysis(
        summary=_as_text(data.get("summary")),
        key_topics=_as_text_list(data.get("key_topics")),
        important_findings=_as_text_list(data.get("important_findings")),
        recommendations=_as_text_list(data.get("recommendations")),
    )


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value.strip()
    return str(value)


def _as_text_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list):
        value = [value]
    items = [_as_text(item) for item in value if item is not None]
    return [item for item in items if item]
