"""Resolve merged cards to canonical Scryfall names, cache first."""

import logging

import httpx

from .api_client import ScryfallClient
from .exceptions import CardLookupError
from .models import CardRecord, ResolvedName
from .name_cache import NameCache

logger = logging.getLogger(__name__)

CACHE_KEY_SEPARATOR = "__"
# Old promo print runs number their cards with a trailing star.
PROMO_STAR = "★"


def effective_set(card: CardRecord) -> str:
    """Scryfall files promos and pre-release cards under ``p<set>``."""
    return f"p{card.set_code}" if card.is_promo_print else card.set_code


def effective_collector_number(card: CardRecord) -> str:
    """Collector number with the ``p`` (promo) and ``s`` (pre-release) suffixes."""
    number = card.collector_number
    if card.is_promo:
        number += "p"
    if card.is_pre_release:
        number += "s"
    return number


def star_collector_number(card: CardRecord) -> str:
    return f"{card.collector_number}{PROMO_STAR}"


def cache_key(set_code: str, collector_number: str) -> str:
    return f"{set_code}{CACHE_KEY_SEPARATOR}{collector_number}"


class NameResolver:
    """Looks up card names in a NameCache, falling back to Scryfall on a miss.

    The cache is flushed to disk after every ``resolve`` call, including
    ones that raise, so names fetched before a failure are kept.
    """

    def __init__(self, cache: NameCache, client: ScryfallClient) -> None:
        self.cache = cache
        self.client = client

    async def resolve(self, card: CardRecord) -> ResolvedName:
        set_code = effective_set(card)
        collector_number = effective_collector_number(card)
        key = cache_key(set_code, collector_number)

        with self.cache.flushing():
            cached = self.cache.get(key)
            if cached is not None:
                return ResolvedName(cached, set_code, collector_number)

            try:
                logger.info(f"fetch card {key}")
                response = await self.client.get_card(set_code, collector_number)

                if not response.is_success and card.is_promo_print:
                    collector_number = star_collector_number(card)
                    key = cache_key(set_code, collector_number)
                    cached = self.cache.get(key)
                    if cached is not None:
                        return ResolvedName(cached, set_code, collector_number)
                    logger.info(f"fetch card {key} (star promo numbering)")
                    response = await self.client.get_card(set_code, collector_number)

                if not response.is_success:
                    logger.error(
                        f"Scryfall returned {response.status_code} for {key}: {response.text}"
                    )
                    raise CardLookupError(key)

                name = response.json()["name"]
                if not isinstance(name, str) or not name:
                    logger.error(f"Scryfall returned no usable name for {key}: {response.text}")
                    raise CardLookupError(key)
            except (httpx.HTTPError, ValueError, KeyError, TypeError) as e:
                logger.error(f"Lookup of {key} failed: {e!r}")
                raise CardLookupError(key) from e

            self.cache.set(key, name)
            return ResolvedName(name, set_code, collector_number)
