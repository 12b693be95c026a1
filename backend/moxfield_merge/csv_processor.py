"""CSV reading and deduplication for binder exports."""

import logging
from dataclasses import replace
from pathlib import Path
from typing import Dict, Iterable, List, Optional

import pandas as pd

from .exceptions import MissingColumnsError
from .models import CardRecord

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"number", "set", "lang", "foil", "etched", "pre release", "promo"}


def load_csv(path: Path) -> pd.DataFrame:
    """Load a binder export and return as DataFrame.

    All columns are loaded as strings to preserve formatting (collector
    numbers like ``0117`` or ``12a``). Empty cells become empty strings.
    """
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df = df.fillna("")
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise MissingColumnsError(path, missing)
    return df


def _is_marked(value: str) -> bool:
    # Any non-blank content marks the flag; the text itself is ignored.
    return len(str(value).strip()) > 0


def row_to_card(row: pd.Series) -> CardRecord:
    """Map an export row onto a CardRecord with ``count=1``."""
    return CardRecord(
        collector_number=str(row["number"]),
        set_code=str(row["set"]),
        language=str(row["lang"]),
        is_foil=_is_marked(row["foil"]),
        is_etched=_is_marked(row["etched"]),
        is_pre_release=_is_marked(row["pre release"]),
        is_promo=_is_marked(row["promo"]),
        count=1,
    )


def find_source_files(directory: Path, exclude: Optional[Path] = None) -> List[Path]:
    """List the CSV exports in ``directory`` in name order.

    ``exclude`` is skipped so the merged output, which lives next to the
    exports, is never read back in as a source.
    """
    directory = Path(directory)
    excluded = Path(exclude).resolve() if exclude is not None else None
    files = []
    for path in sorted(directory.iterdir()):
        if not path.is_file() or not path.name.lower().endswith(".csv"):
            continue
        if excluded is not None and path.resolve() == excluded:
            continue
        files.append(path)
    return files


def read_cards(directory: Path, exclude: Optional[Path] = None) -> List[CardRecord]:
    """Read every export in ``directory`` into raw, unmerged card records."""
    cards: List[CardRecord] = []
    for path in find_source_files(directory, exclude=exclude):
        df = load_csv(path)
        cards.extend(row_to_card(row) for _, row in df.iterrows())
        logger.info(f"Read {len(df)} rows from {path.name}")
    return cards


def create_fingerprint(card: CardRecord) -> str:
    """Key under which identical cards are merged."""
    return card.fingerprint


def merge_same_cards(cards: Iterable[CardRecord]) -> Dict[str, CardRecord]:
    """Fold identical cards into one record per fingerprint.

    Records are visited in input order and the mapping keeps first-seen
    order. Each entry is a copy of its first record, so the input records
    are left untouched.
    """
    merged: Dict[str, CardRecord] = {}
    total = 0
    for card in cards:
        total += 1
        fingerprint = create_fingerprint(card)
        if fingerprint in merged:
            merged[fingerprint].count += 1
        else:
            merged[fingerprint] = replace(card, count=1)
    logger.info(f"Merged {total} rows into {len(merged)} unique cards")
    return merged
