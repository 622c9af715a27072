"""Submits extracted text to the AI provider under a bounded retry policy."""

import time
from collections.abc import Callable, Sequence
from pathlib import Path

from content_analyzer.enrichment.client_base import BaseEnrichmentClient
from content_analyzer.enrichment.exceptions import (
    EnrichmentConfigurationError,
    EnrichmentFailedError,
    EnrichmentUpstreamError,
)
from content_analyzer.enrichment.prompt_loader import (
    SYSTEM_PROMPT,
    load_prompt_template,
    load_response_shape,
)
from content_analyzer.enrichment.retry import RetryPolicy
from content_analyzer.logging.logger import Log


class EnrichmentOrchestrator:
    """Produces a raw model reply for a piece of content, or fails definitively.

    Only statuses the policy marks retryable (429) are retried, each time with
    the next model in the fallback list. Anything else stops the loop.
    """

    def __init__(
        self,
        *,
        client: BaseEnrichmentClient | None,
        models: Sequence[str],
        retry_policy: RetryPolicy | None = None,
        temperature: float = 0.7,
        max_tokens: int = 2000,
        prompt_template_path: Path | None = None,
        response_shape_path: Path | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if not models:
            raise ValueError("At least one enrichment model is required")
        self._client = client
        self._models = list(models)
        self._policy = retry_policy or RetryPolicy()
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._response_shape = load_response_shape(response_shape_path)
        self._sleep = sleep

    def request(self, text: str, file_name: str, file_type: str) -> str:
        """Return the model's reply text.

        Raises:
            EnrichmentConfigurationError: if no API credential is configured.
            EnrichmentFailedError: if no attempt succeeded.
        """
        if self._client is None:
            raise EnrichmentConfigurationError("Enrichment API key not configured")

        prompt = self.build_prompt(text, file_name, file_type)
        Log.debug(f"Enrichment prompt:\n{prompt}")

        last_error: EnrichmentUpstreamError | None = None
        attempts_made = 0
        for attempt in range(self._policy.max_attempts):
            model = self._policy.model_for(attempt, self._models)
            attempts_made = attempt + 1
            Log.info(
                f"Enrichment attempt {attempts_made}/{self._policy.max_attempts} "
                f"with model {model}"
            )
            try:
                reply = self._client.create_chat_completion(
                    model=model,
                    temperature=self._temperature,
                    max_tokens=self._max_tokens,
                    system_prompt=SYSTEM_PROMPT,
                    user_prompt=prompt,
                )
            except EnrichmentUpstreamError as exc:
                last_error = exc
                if not self._policy.is_retryable(exc.status_code):
                    break
                if attempts_made < self._policy.max_attempts:
                    delay = self._policy.delay_for(attempt)
                    Log.warning(
                        f"AI provider rate limited ({exc.status_code}), retrying in "
                        f"{delay:.1f}s (attempt {attempts_made}/{self._policy.max_attempts})"
                    )
                    self._sleep(delay)
                continue
            Log.debug(f"AI raw response:\n{reply}")
            return reply

        message = _describe_failure(last_error, attempts_made)
        Log.error(message)
        raise EnrichmentFailedError(message) from last_error

    def build_prompt(self, text: str, file_name: str, file_type: str) -> str:
        return self._prompt_template.format(
            content=text,
            file_name=file_name,
            file_type=file_type,
            response_shape=self._response_shape,
        )


def _describe_failure(error: EnrichmentUpstreamError | None, attempts: int) -> str:
    if error is None:
        return f"Enrichment request failed after {attempts} attempt(s)"
    status = error.status_code if error.status_code is not None else "no response"
    detail = error.body or str(error)
    return f"Enrichment request failed after {attempts} attempt(s): {status} - {detail}"
