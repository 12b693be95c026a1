"""Scryfall API client for card lookups by set and collector number."""

import logging
from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import quote

import httpx

logger = logging.getLogger(__name__)


@dataclass
class ScryfallConfig:
    """Configuration for Scryfall API client."""
    base_url: str = "https://api.scryfall.com"
    headers: Dict[str, str] = field(
        default_factory=lambda: {
            "User-Agent": "moxfield-merge/0.1",
            "Accept": "application/json",
        }
    )
    # None waits indefinitely for a response.
    timeout_seconds: Optional[float] = None


@dataclass
class ScryfallClient:
    """Async client for the Scryfall ``/cards/:set/:number`` endpoint.

    Requests are made one at a time; there is no retry or rate limiting.
    """
    config: ScryfallConfig = field(default_factory=ScryfallConfig)

    def card_url(self, set_code: str, collector_number: str) -> str:
        """Build the lookup URL, escaping glyphs such as the promo star."""
        return (
            f"{self.config.base_url}/cards/"
            f"{quote(set_code, safe='')}/{quote(collector_number, safe='')}"
        )

    async def get_card(self, set_code: str, collector_number: str) -> httpx.Response:
        """Fetch one card.

        GET /cards/:set/:number

        Args:
            set_code: Scryfall set code (e.g., "neo", "pneo")
            collector_number: Collector number as printed, with any suffix

        Returns:
            The raw response; callers decide what a non-2xx status means.

        Raises:
            httpx.HTTPError: On transport failures
        """
        url = self.card_url(set_code, collector_number)
        async with httpx.AsyncClient(timeout=self.config.timeout_seconds) as client:
            response = await client.request("GET", url, headers=self.config.headers)
        logger.debug(f"GET {url} -> {response.status_code}")
        return response
