from typing import ClassVar

from docanalyst.analysis.analyzer import Analyzer
from docanalyst.analysis.base import BaseAnalyzer
from docanalyst.analysis.client_base import BaseCompletionClient
from docanalyst.analysis.example_client_adapter import ExampleClientAdapter
from docanalyst.analysis.openai_client_adapter import OpenAIClientAdapter
from docanalyst.config.settings import Settings


class CompletionClientFactory:
    """Creates the configured completion client."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseCompletionClient:
        provider = settings.ai_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        return OpenAIClientAdapter(
            api_key=settings.ai_api_key,
            timeout_seconds=settings.ai_timeout_seconds,
            base_url=cls._resolve_base_url(provider, settings),
        )

    @classmethod
    def is_available(cls, settings: Settings) -> bool:
        """Whether the configured provider can be called at all."""
        provider = settings.ai_provider.lower()
        return provider in ("example", "ollama") or bool(settings.ai_api_key)

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        custom_url = settings.ai_base_url.strip()
        if provider == "openai":
            return custom_url or None
        if provider == "openai_compatible":
            if not custom_url:
                raise ValueError(
                    "ai_base_url is required for ai_provider=openai_compatible"
                )
            return custom_url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return custom_url or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown AI provider '{provider}'. Choose from: {supported}")


class AnalyzerFactory:
    """Creates the configured analyzer."""

    @classmethod
    def create(
        cls,
        settings: Settings,
        client: BaseCompletionClient | None = None,
    ) -> BaseAnalyzer:
        if client is None:
            client = CompletionClientFactory.create(settings)
        return Analyzer(
            client=client,
            model=settings.ai_model_name,
            temperature=settings.ai_temperature,
            char_budget=settings.analysis_char_budget,
        )
