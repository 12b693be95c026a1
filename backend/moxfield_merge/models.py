"""Dataclasses for cards moving through the merge."""

from dataclasses import dataclass
from typing import Dict, List

FINGERPRINT_SEPARATOR = "__"

MOXFIELD_COLUMNS = [
    "Count",
    "Name",
    "Edition",
    "Condition",
    "Language",
    "Foil",
    "Collector Number",
    "Alter",
    "Proxy",
    "Purchase Price",
]


@dataclass
class CardRecord:
    """One physical card (or a stack of identical ones) from the binder.

    Variant flags are independent: a card can be both foil and a promo.
    ``count`` starts at 1 per source row and grows as duplicates are merged.
    """
    collector_number: str
    set_code: str
    language: str
    is_foil: bool = False
    is_etched: bool = False
    is_pre_release: bool = False
    is_promo: bool = False
    count: int = 1

    @property
    def fingerprint(self) -> str:
        """Identity key: set, number, language and the tokens of true flags."""
        parts: List[str] = [self.set_code, self.collector_number, self.language]
        if self.is_foil:
            parts.append("foil")
        if self.is_etched:
            parts.append("etched")
        if self.is_pre_release:
            parts.append("pre")
        if self.is_promo:
            parts.append("promo")
        return FINGERPRINT_SEPARATOR.join(parts)

    @property
    def is_promo_print(self) -> bool:
        """Promos and pre-release stamps live in Scryfall's ``p``-prefixed sets."""
        return self.is_promo or self.is_pre_release


@dataclass
class ResolvedName:
    """Canonical name plus the set/number that Scryfall recognised."""
    name: str
    effective_set: str
    effective_collector_number: str


@dataclass
class MoxfieldRow:
    """A row of the Moxfield collection import format."""
    count: str
    name: str
    edition: str
    language: str
    foil: str
    collector_number: str
    condition: str = "NM"
    alter: str = "FALSE"
    proxy: str = "FALSE"
    purchase_price: str = ""

    def as_dict(self) -> Dict[str, str]:
        values = [
            self.count,
            self.name,
            self.edition,
            self.condition,
            self.language,
            self.foil,
            self.collector_number,
            self.alter,
            self.proxy,
            self.purchase_price,
        ]
        return dict(zip(MOXFIELD_COLUMNS, values))
