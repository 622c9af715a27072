from abc import ABC, abstractmethod


class BaseEnrichmentClient(ABC):
    """Contract for provider-specific chat completion clients."""

    @abstractmethod
    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        """Return the first choice's message content as plain text.

        Raises:
            EnrichmentUpstreamError: when the request fails, with the HTTP
                status when one was received.
        """
