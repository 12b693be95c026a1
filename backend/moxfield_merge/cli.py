"""Merge binder CSV exports into a single Moxfield import file.

Usage:
  python -m moxfield_merge

Reads every ``*.csv`` under ./binder, merges identical cards, resolves
names through Scryfall (cached in ./binder/scryfall.json) and appends the
result to ./binder/merged.csv.
"""

import asyncio
import logging
from typing import Optional

from .api_client import ScryfallClient
from .config import MergeConfig
from .csv_processor import merge_same_cards, read_cards
from .name_cache import NameCache
from .output import append_row, build_row
from .resolver import NameResolver

logger = logging.getLogger(__name__)


async def run(
    config: Optional[MergeConfig] = None,
    client: Optional[ScryfallClient] = None,
) -> int:
    """Run the merge and return the number of rows written."""
    if config is None:
        config = MergeConfig()
    if client is None:
        client = ScryfallClient()

    cards = merge_same_cards(read_cards(config.binder_dir, exclude=config.output_path))
    resolver = NameResolver(NameCache.load(config.cache_path), client)

    written = 0
    for card in cards.values():
        resolved = await resolver.resolve(card)
        append_row(config.output_path, build_row(card, resolved))
        written += 1

    logger.info(f"Wrote {written} rows to {config.output_path}")
    return written


def main() -> None:
    """CLI entry point."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(run())


if __name__ == "__main__":
    main()
