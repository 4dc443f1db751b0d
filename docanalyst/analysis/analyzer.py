"""AI-powered document analyzer."""

from pathlib import Path

from docanalyst.analysis.base import BaseAnalyzer
from docanalyst.analysis.client_base import BaseCompletionClient
from docanalyst.analysis.models import Analysis
from docanalyst.analysis.parser import parse_analysis
from docanalyst.analysis.prompt_loader import load_analysis_prompt
from docanalyst.logging.logger import Log

DEFAULT_CHAR_BUDGET = 15_000


class Analyzer(BaseAnalyzer):
    """Analyzes document text with a single completion request.

    Blank text skips the service call. Text longer than the character
    budget is cut to a prefix before it goes into the prompt. Every
    service or parse failure degrades to ``Analysis.failed()``.
    """

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        temperature: float = 0.2,
        char_budget: int = DEFAULT_CHAR_BUDGET,
        prompt_template_path: Path | None = None,
        system_prompt: str = "",
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(1.0, temperature))
        self._char_budget = char_budget
        self._system_prompt = system_prompt
        self._prompt_template = load_analysis_prompt(prompt_template_path)

    async def analyze(self, text: str) -> Analysis:
        if not text.strip():
            Log.warning("No text extracted, skipping AI analysis")
            return Analysis.no_text()

        prompt = self.build_prompt(text)
        Log.debug(f"Analysis prompt:\n{prompt}")

        try:
            raw_response = await self._client.complete(
                model=self._model,
                temperature=self._temperature,
                system_prompt=self._system_prompt,
                user_prompt=prompt,
            )
            Log.debug(f"AI raw response:\n{raw_response}")
            analysis = parse_analysis(raw_response)
        except Exception as exc:
            Log.error(f"AI analysis error: {exc}", exc_info=True)
            return Analysis.failed()

        Log.info(f"Analysis complete: {len(analysis.key_topics)} key topics")
        return analysis

    def build_prompt(self, text: str) -> str:
        return self._prompt_template.format(document_text=text[: self._char_budget])
