"""Fixed locations used by the merge run."""

from dataclasses import dataclass, field
from pathlib import Path

BINDER_DIR = Path("./binder")


@dataclass
class MergeConfig:
    """Where the binder exports, the Scryfall name cache and the output live."""
    binder_dir: Path = BINDER_DIR
    cache_path: Path = field(default=BINDER_DIR / "scryfall.json")
    output_path: Path = field(default=BINDER_DIR / "merged.csv")

    @classmethod
    def for_binder(cls, binder_dir: Path) -> "MergeConfig":
        """Config with the cache and output placed inside ``binder_dir``."""
        binder_dir = Path(binder_dir)
        return cls(
            binder_dir=binder_dir,
            cache_path=binder_dir / "scryfall.json",
            output_path=binder_dir / "merged.csv",
        )
