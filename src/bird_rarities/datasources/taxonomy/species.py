"""Species reference table: fetching and parsing."""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass

import requests

from bird_rarities.datasources.taxonomy import client
from bird_rarities.schemas import SpeciesReference
from bird_rarities.services.http import session

# =============================================================================
# Column layout
# =============================================================================


@dataclass(frozen=True)
class TableLayout:
    """Positions of the code and name columns in a reference table."""

    code: int
    scientific: int
    common: int
    has_header: bool

    @property
    def width(self) -> int:
        return max(self.code, self.scientific, self.common) + 1


POSITIONAL_LAYOUT = TableLayout(
    code=client.CODE_COLUMN,
    scientific=client.SCIENTIFIC_COLUMN,
    common=client.COMMON_COLUMN,
    has_header=False,
)


def detect_layout(first_row: list[str]) -> TableLayout:
    """Use named columns if the first row is a recognizable header, else positions."""
    names = [field.strip().upper() for field in first_row]
    wanted = (client.CODE_HEADER, client.SCIENTIFIC_HEADER, client.COMMON_HEADER)
    if all(name in names for name in wanted):
        return TableLayout(
            code=names.index(client.CODE_HEADER),
            scientific=names.index(client.SCIENTIFIC_HEADER),
            common=names.index(client.COMMON_HEADER),
            has_header=True,
        )
    return POSITIONAL_LAYOUT


# =============================================================================
# Parsing
# =============================================================================


def parse_reference_table(text: str) -> dict[str, SpeciesReference]:
    """
    Parse reference CSV content into a lookup keyed by lower-cased species code.

    Rows too short to hold the code column are skipped. Name columns missing
    from a short row are left blank. The first row for a code wins.
    """
    rows = list(csv.reader(io.StringIO(text)))
    if not rows:
        return {}

    layout = detect_layout(rows[0])
    body = rows[1:] if layout.has_header else rows

    table: dict[str, SpeciesReference] = {}
    for row in body:
        if len(row) <= layout.code:
            continue
        code = row[layout.code].strip().strip('"')
        if not code:
            continue
        key = code.lower()
        if key in table:
            continue
        table[key] = SpeciesReference(
            species_code=code,
            scientific_name=_field(row, layout.scientific),
            common_name=_field(row, layout.common),
        )
    return table


def _field(row: list[str], index: int) -> str:
    return row[index].strip() if index < len(row) else ""


# =============================================================================
# Fetching
# =============================================================================


def fetch_reference_csv(url: str = client.EBIRD_TAXONOMY_CSV, timeout: float | None = None) -> str:
    """Download the reference table. Raises ``requests.RequestException`` on failure."""
    resp = session.get(url, timeout=timeout) if timeout else session.get(url)
    resp.raise_for_status()
    return resp.text


def load_species_reference(
    url: str = client.EBIRD_TAXONOMY_CSV, timeout: float | None = None
) -> dict[str, SpeciesReference]:
    """
    Fetch and parse the reference table, degrading to an empty table.

    A network or HTTP error is reported as a warning; every species then
    reports ``Unknown`` names instead of the run failing.
    """
    try:
        text = fetch_reference_csv(url, timeout=timeout)
    except requests.RequestException as exc:
        print(f"Warning: could not fetch species reference from {url}: {exc}")
        print("Warning: scientific and common names will be reported as Unknown.")
        return {}

    table = parse_reference_table(text)
    if not table:
        print(f"Warning: species reference from {url} contained no entries.")
    return table


def lookup_species(
    table: dict[str, SpeciesReference], species_code: str
) -> SpeciesReference | None:
    """Case-insensitive exact lookup by species code."""
    return table.get(species_code.lower())
