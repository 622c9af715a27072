"""Tests for EnricherFactory."""

from unittest.mock import patch

import pytest

from content_analyzer.config.settings import Settings
from content_analyzer.enrichment.example_client_adapter import ExampleClientAdapter
from content_analyzer.enrichment.exceptions import EnrichmentConfigurationError
from content_analyzer.enrichment.factory import EnricherFactory
from content_analyzer.enrichment.orchestrator import EnrichmentOrchestrator


class TestEnricherFactory:
    def test_example_provider_needs_no_credential(self) -> None:
        settings = Settings(enrichment_provider="example")
        client = EnricherFactory.create_client(settings, api_key=None)
        assert isinstance(client, ExampleClientAdapter)

    def test_example_provider_orchestrator_returns_reply(self) -> None:
        orchestrator = EnricherFactory.create(Settings(enrichment_provider="example"), None)
        assert isinstance(orchestrator, EnrichmentOrchestrator)
        assert "brandVoice" in orchestrator.request("text", "a.png", "image")

    def test_missing_credential_refuses_requests(self) -> None:
        orchestrator = EnricherFactory.create(Settings(), api_key=None)
        with pytest.raises(EnrichmentConfigurationError):
            orchestrator.request("text", "a.png", "image")

    def test_openrouter_uses_default_base_url_and_headers(self) -> None:
        settings = Settings(enrichment_timeout_seconds=42)
        with patch("content_analyzer.enrichment.factory.OpenAIClientAdapter") as mock_adapter:
            EnricherFactory.create_client(settings, api_key="k")
        mock_adapter.assert_called_once_with(
            api_key="k",
            timeout_seconds=42,
            base_url="https://openrouter.ai/api/v1",
            default_headers={
                "HTTP-Referer": "http://localhost:3002",
                "X-Title": "Content Analyzer AI",
            },
        )

    def test_openai_provider_uses_sdk_default_url(self) -> None:
        settings = Settings(enrichment_provider="openai")
        with patch("content_analyzer.enrichment.factory.OpenAIClientAdapter") as mock_adapter:
            EnricherFactory.create_client(settings, api_key="k")
        assert mock_adapter.call_args.kwargs["base_url"] is None

    def test_openai_compatible_requires_base_url(self) -> None:
        settings = Settings(enrichment_provider="openai_compatible")
        with pytest.raises(ValueError, match="enrichment_base_url"):
            EnricherFactory.create_client(settings, api_key="k")

    def test_openai_compatible_uses_custom_base_url(self) -> None:
        settings = Settings(
            enrichment_provider="openai_compatible",
            enrichment_base_url="https://llm.example.com/v1",
        )
        with patch("content_analyzer.enrichment.factory.OpenAIClientAdapter") as mock_adapter:
            EnricherFactory.create_client(settings, api_key="k")
        assert mock_adapter.call_args.kwargs["base_url"] == "https://llm.example.com/v1"

    def test_unknown_provider_raises_value_error(self) -> None:
        settings = Settings(enrichment_provider="unknown")
        with pytest.raises(ValueError, match="Unknown enrichment provider"):
            EnricherFactory.create_client(settings, api_key="k")

    def test_retry_settings_flow_into_orchestrator(self) -> None:
        settings = Settings(
            enrichment_provider="example",
            enrichment_max_attempts=5,
            enrichment_backoff_base_seconds=0.1,
        )
        orchestrator = EnricherFactory.create(settings, None)
        assert orchestrator._policy.max_attempts == 5
        assert orchestrator._policy.base_delay_seconds == 0.1
