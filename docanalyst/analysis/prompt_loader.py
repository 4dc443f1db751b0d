from pathlib import Path

from docanalyst.analysis.exceptions import AnalysisError

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_analysis_prompt(path: Path | None = None) -> str:
    """Load the document analysis prompt template.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled analysis_prompt.txt.

    Returns:
        The raw template string with a ``{document_text}`` placeholder.

    Raises:
        AnalysisError: if the file cannot be read.
    """
    return _load(path or _DEFAULT_PROMPT_DIR / "analysis_prompt.txt", "analysis prompt")


def load_chat_prompt(path: Path | None = None) -> str:
    """Load the chat prompt template (``{context}`` and ``{message}`` placeholders)."""
    return _load(path or _DEFAULT_PROMPT_DIR / "chat_prompt.txt", "chat prompt")


def _load(path: Path, label: str) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise AnalysisError(f"Failed to load {label} template: {exc}") from exc
