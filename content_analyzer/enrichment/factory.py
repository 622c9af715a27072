from typing import ClassVar

from content_analyzer.config.settings import Settings
from content_analyzer.enrichment.client_base import BaseEnrichmentClient
from content_analyzer.enrichment.example_client_adapter import ExampleClientAdapter
from content_analyzer.enrichment.openai_client_adapter import OpenAIClientAdapter
from content_analyzer.enrichment.orchestrator import EnrichmentOrchestrator
from content_analyzer.enrichment.retry import RetryPolicy


class EnricherFactory:
    """Creates the configured enrichment orchestrator."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
    }

    @classmethod
    def create(cls, settings: Settings, api_key: str | None) -> EnrichmentOrchestrator:
        """Create an orchestrator from settings and an already-resolved credential.

        A None credential yields an orchestrator that refuses every request.
        """
        return EnrichmentOrchestrator(
            client=cls.create_client(settings, api_key),
            models=settings.enrichment_models,
            retry_policy=RetryPolicy(
                max_attempts=settings.enrichment_max_attempts,
                base_delay_seconds=settings.enrichment_backoff_base_seconds,
            ),
            temperature=settings.enrichment_temperature,
            max_tokens=settings.enrichment_max_tokens,
        )

    @classmethod
    def create_client(
        cls,
        settings: Settings,
        api_key: str | None,
    ) -> BaseEnrichmentClient | None:
        provider = settings.enrichment_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        if not api_key:
            return None
        return OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=settings.enrichment_timeout_seconds,
            base_url=base_url,
            default_headers={
                "HTTP-Referer": settings.site_url,
                "X-Title": settings.app_title,
            },
        )

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        override = settings.enrichment_base_url.strip()
        if provider == "openai":
            return override or None
        if provider == "openai_compatible":
            if not override:
                raise ValueError(
                    "enrichment_base_url is required for "
                    "enrichment_provider=openai_compatible"
                )
            return override
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return override or default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown enrichment provider '{provider}'. Choose from: {supported}"
        )
