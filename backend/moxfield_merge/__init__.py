"""Binder CSV to Moxfield import merge."""

from .models import CardRecord, MoxfieldRow, ResolvedName
from .csv_processor import (
    load_csv,
    read_cards,
    create_fingerprint,
    merge_same_cards,
)
from .name_cache import NameCache
from .api_client import ScryfallClient, ScryfallConfig
from .resolver import NameResolver
from .output import append_row, build_row, foil_state
from .config import MergeConfig
from .exceptions import CardLookupError, MissingColumnsError, MoxfieldMergeError

__all__ = [
    "CardRecord",
    "MoxfieldRow",
    "ResolvedName",
    "load_csv",
    "read_cards",
    "create_fingerprint",
    "merge_same_cards",
    "NameCache",
    "ScryfallClient",
    "ScryfallConfig",
    "NameResolver",
    "append_row",
    "build_row",
    "foil_state",
    "MergeConfig",
    "CardLookupError",
    "MissingColumnsError",
    "MoxfieldMergeError",
]
