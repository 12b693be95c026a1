"""Errors raised while merging a binder into a Moxfield import."""

from typing import Iterable


class MoxfieldMergeError(Exception):
    """Base class for merge failures."""


class MissingColumnsError(MoxfieldMergeError, ValueError):
    """A source CSV is missing one or more required columns."""

    def __init__(self, path, missing: Iterable[str]):
        self.path = path
        self.missing = sorted(missing)
        super().__init__(f"Missing required columns in {path}: {self.missing}")


class CardLookupError(MoxfieldMergeError):
    """A card name could not be resolved from the cache or Scryfall."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(f"problem with card {key}")
