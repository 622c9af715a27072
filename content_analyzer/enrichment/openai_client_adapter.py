import httpx
import openai

from content_analyzer.enrichment.client_base import BaseEnrichmentClient
from content_analyzer.enrichment.exceptions import EnrichmentUpstreamError


class OpenAIClientAdapter(BaseEnrichmentClient):
    """Enrichment client built on the OpenAI-compatible chat API.

    SDK retries are disabled; the orchestrator owns the retry policy.
    """

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
        default_headers: dict[str, str] | None = None,
    ) -> None:
        self._client = openai.OpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
            default_headers=default_headers,
        )

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                max_tokens=max_tokens,
                response_format={"type": "json_object"},
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": user_prompt},
                ],
            )
        except openai.APIStatusError as exc:
            raise EnrichmentUpstreamError(
                f"AI provider returned {exc.status_code}",
                status_code=exc.status_code,
                body=_response_text(exc.response),
            ) from exc
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise EnrichmentUpstreamError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise EnrichmentUpstreamError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise EnrichmentUpstreamError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise EnrichmentUpstreamError("AI returned empty response")
        return content


def _response_text(response: httpx.Response) -> str:
    try:
        return response.text
    except httpx.ResponseNotRead:
        return ""
