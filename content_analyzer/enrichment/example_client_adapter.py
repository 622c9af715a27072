"""Example enrichment client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseEnrichmentClient and register the provider in EnricherFactory.
"""

import json
from typing import ClassVar

from content_analyzer.enrichment.client_base import BaseEnrichmentClient


class ExampleClientAdapter(BaseEnrichmentClient):
    """Example adapter that returns a fixed valid enrichment JSON.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = {
        "contentQualityScore": 72,
        "engagementPotentialScore": 65,
        "brandVoice": "Friendly",
        "targetAudience": "Small business owners",
        "platformRecommendations": {
            "twitter": "Lead with the strongest sentence.",
            "instagram": "Pair with a bold visual and emojis.",
            "linkedin": "Frame it as a lesson learned.",
            "facebook": "Ask followers to share their experience.",
        },
        "hashtagStrategy": ["#marketing", "#smallbusiness", "#growth"],
        "optimalPostingTimes": ["9 AM", "12 PM", "6 PM"],
        "improvementSuggestions": ["Shorten the opening line."],
        "competitiveAnalysis": "Comparable to typical posts in the niche.",
        "roiPotential": "Moderate",
    }

    def create_chat_completion(
        self,
        *,
        model: str,
        temperature: float,
        max_tokens: int,
        system_prompt: str,
        user_prompt: str,
    ) -> str:
        _ = model, temperature, max_tokens, system_prompt, user_prompt
        return json.dumps(self.DEFAULT_RESPONSE)
