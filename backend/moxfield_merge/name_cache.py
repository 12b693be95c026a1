"""On-disk cache of Scryfall card names keyed by ``<set>__<collector number>``."""

import json
import logging
import os
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, Iterator, Optional

logger = logging.getLogger(__name__)


class NameCache:
    """Flat key -> card name mapping backed by a single JSON file.

    Lifecycle: ``load`` once at startup, mutate with ``set`` on every
    lookup miss, and ``flush`` after every resolution attempt (``flushing``
    wraps an attempt so the flush also happens when it raises).
    """

    def __init__(self, path: Path, entries: Optional[Dict[str, str]] = None) -> None:
        self.path = Path(path)
        self.entries: Dict[str, str] = dict(entries or {})

    @classmethod
    def load(cls, path: Path) -> "NameCache":
        """Read the whole cache file; a missing file starts an empty cache."""
        path = Path(path)
        if not path.exists():
            logger.info(f"No name cache at {path}, starting empty")
            return cls(path)
        with open(path, "r", encoding="utf-8") as f:
            entries = json.load(f)
        if not isinstance(entries, dict):
            raise ValueError(f"Name cache {path} must contain a JSON object")
        logger.info(f"Loaded {len(entries)} cached names from {path}")
        return cls(path, entries)

    def get(self, key: str) -> Optional[str]:
        # Empty names are treated as misses.
        return self.entries.get(key) or None

    def set(self, key: str, name: str) -> None:
        self.entries[key] = name

    def __contains__(self, key: str) -> bool:
        return self.get(key) is not None

    def __len__(self) -> int:
        return len(self.entries)

    def flush(self) -> None:
        """Rewrite the cache file in full."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        # Write beside the cache and swap in, so an interrupted flush keeps the old file.
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(self.entries, f, indent=2, ensure_ascii=False)
        os.replace(tmp_path, self.path)

    @contextmanager
    def flushing(self) -> Iterator["NameCache"]:
        """Flush on exit from the block, whether it returns or raises."""
        try:
            yield self
        finally:
            self.flush()
