"""Write resolved cards as Moxfield collection import rows."""

from pathlib import Path

import pandas as pd

from .models import MOXFIELD_COLUMNS, CardRecord, MoxfieldRow, ResolvedName


def foil_state(card: CardRecord) -> str:
    """Moxfield ``Foil`` column; pre-release stamps count as foil."""
    if card.is_foil or card.is_pre_release:
        return "foil"
    if card.is_etched:
        return "etched"
    return ""


def build_row(card: CardRecord, resolved: ResolvedName) -> MoxfieldRow:
    return MoxfieldRow(
        count=str(card.count),
        name=resolved.name,
        edition=resolved.effective_set,
        language=card.language,
        foil=foil_state(card),
        collector_number=resolved.effective_collector_number,
    )


def append_row(path: Path, row: MoxfieldRow) -> None:
    """Append one row to the output CSV, creating it if needed.

    The header is written only when the file is new or empty, so repeated
    appends produce a single header followed by data rows.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    write_header = not path.exists() or path.stat().st_size == 0
    df = pd.DataFrame([row.as_dict()], columns=MOXFIELD_COLUMNS)
    df.to_csv(path, mode="a", header=write_header, index=False, encoding="utf-8")
