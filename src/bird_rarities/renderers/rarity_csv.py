"""Rarity report rendering: report rows → CSV text."""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

    from bird_rarities.schemas import RarityRow

REPORT_COLUMNS = (
    "species_code",
    "scientific_name",
    "common_name",
    "year",
    "loc_id",
    "latitude",
    "longitude",
    "state",
)


def build_rarity_csv(rows: Iterable[RarityRow]) -> str:
    """
    Render report rows as CSV with the fixed eight-column header.

    Rows keep the order given. Fields are only quoted when they contain a
    comma, quote or newline, so ordinary values are written verbatim.
    """
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(REPORT_COLUMNS)
    for row in rows:
        writer.writerow(
            [
                row.species_code,
                row.scientific_name,
                row.common_name,
                row.year,
                row.loc_id,
                row.latitude,
                row.longitude,
                row.state,
            ]
        )
    return buf.getvalue()


def write_rarity_csv(path: Path, rows: Iterable[RarityRow]) -> Path:
    """Write a report, replacing any existing file at ``path``."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", newline="", encoding="utf-8") as f:
        f.write(build_rarity_csv(rows))
    return path
