"""Test fixtures for moxfield_merge tests."""

from pathlib import Path
from typing import Callable

import pytest

from moxfield_merge.config import MergeConfig

HEADER = "name,number,set,lang,foil,etched,pre release,promo"


@pytest.fixture
def binder_dir(tmp_path: Path) -> Path:
    """Empty binder directory."""
    path = tmp_path / "binder"
    path.mkdir()
    return path


@pytest.fixture
def merge_config(binder_dir: Path) -> MergeConfig:
    return MergeConfig.for_binder(binder_dir)


@pytest.fixture
def write_export(binder_dir: Path) -> Callable[..., Path]:
    """Write a CRLF export into the binder, header first unless one is given."""
    def _write(name: str, *rows: str, header: str = HEADER) -> Path:
        path = binder_dir / name
        path.write_bytes(("\r\n".join([header, *rows]) + "\r\n").encode("utf-8"))
        return path
    return _write


@pytest.fixture
def sample_binder(binder_dir: Path, write_export) -> Path:
    """Two exports: duplicates across files, a foil variant and a promo."""
    write_export(
        "box1.csv",
        "Lightning Bolt,117,2xm,en,,,,",
        "Lightning Bolt,117,2xm,en,X,,,",
        "Shock,49,sta,ja,,,,",
    )
    write_export(
        "box2.csv",
        "Lightning Bolt,117,2xm,en,,,,",
        "Sol Ring,5,neo,en,,,,yes",
    )
    (binder_dir / "notes.txt").write_text("not a csv", encoding="utf-8")
    return binder_dir
