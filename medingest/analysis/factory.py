from typing import Any, ClassVar

from medingest.analysis.analyzer import Analyzer
from medingest.analysis.base import BaseAnalyzer
from medingest.analysis.example_client_adapter import ExampleClientAdapter
from medingest.analysis.openai_client_adapter import OpenAIClientAdapter
from medingest.analysis.unconfigured_client_adapter import UnconfiguredClientAdapter
from medingest.config.settings import Settings


class AnalyzerFactory:
    """Creates the configured analyzer adapter."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalyzer:
        """Create a configured analyzer from application settings.

        A missing API key or `openai_compatible` base URL is not an error
        here; the analyzer raises ConfigurationError when it is first asked
        to call the provider.
        """
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return Analyzer(client=ExampleClientAdapter(), model="example")
        compatible_url = settings.analysis_openai_compatible_base_url.strip()
        if provider == "openai_compatible" and not compatible_url:
            return Analyzer(
                client=UnconfiguredClientAdapter(
                    "Base URL missing for analysis provider 'openai_compatible'. "
                    "Set ANALYSIS_OPENAI_COMPATIBLE_BASE_URL."
                ),
                model=settings.analysis_openai_compatible_model_name,
            )
        base_url = cls._resolve_base_url(provider, settings)
        client = OpenAIClientAdapter(
            provider=provider,
            api_key=cls._provider_setting(provider, "api_key", settings) or "",
            timeout_seconds=cls._provider_setting(provider, "timeout_seconds", settings) or 60,
            base_url=base_url,
        )
        return Analyzer(
            client=client,
            model=cls._provider_setting(provider, "model_name", settings) or "",
            temperature=settings.analysis_temperature,
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            return settings.analysis_openai_compatible_base_url.strip()
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(f"Unknown analysis provider '{provider}'. Choose from: {supported}")

    @staticmethod
    def _provider_setting(provider: str, name: str, settings: Settings) -> Any:
        return getattr(settings, f"analysis_{provider}_{name}")
