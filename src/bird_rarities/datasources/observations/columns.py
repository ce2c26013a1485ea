"""Map observation CSV header fields to column positions.

Header names vary between dataset vintages, so some fields match exactly and
others by substring, always case-insensitively. The leftmost matching column
wins.
"""

from __future__ import annotations

from dataclasses import dataclass, fields

# Exact (upper-cased) header names.
VALID_HEADER = "VALID"
SPECIES_HEADER = "SPECIES_CODE"
YEAR_HEADER = "YEAR"
LOC_ID_HEADER = "LOC_ID"

# Substrings; e.g. "SUBNATIONAL1_CODE", "LATITUDE_DD".
SUBNATIONAL_FRAGMENT = "SUBNATIONAL"
LATITUDE_FRAGMENT = "LATITUDE"
LONGITUDE_FRAGMENT = "LONGITUDE"

REQUIRED_FIELDS = ("valid", "species", "year", "loc_id", "subnational")


@dataclass(frozen=True)
class ColumnMap:
    """Zero-based column positions for one input file. ``None`` means not found."""

    valid: int | None = None
    species: int | None = None
    year: int | None = None
    loc_id: int | None = None
    subnational: int | None = None
    latitude: int | None = None
    longitude: int | None = None

    @property
    def missing_required(self) -> list[str]:
        """Names of required fields that were not found in the header."""
        return [name for name in REQUIRED_FIELDS if getattr(self, name) is None]

    @property
    def is_complete(self) -> bool:
        return not self.missing_required

    def required(self, name: str) -> int:
        """Position of a required field; raises ``LookupError`` if unresolved."""
        position: int | None = getattr(self, name)
        if position is None:
            msg = f"Column {name!r} was not resolved"
            raise LookupError(msg)
        return position

    @property
    def min_row_width(self) -> int:
        """Fields a row needs to cover every resolved required column."""
        positions = [getattr(self, name) for name in REQUIRED_FIELDS]
        return max((p for p in positions if p is not None), default=-1) + 1

    def describe(self) -> str:
        """One-line summary, e.g. ``valid=0 species=1 ... latitude=-``."""
        parts = []
        for f in fields(self):
            value = getattr(self, f.name)
            parts.append(f"{f.name}={'-' if value is None else value}")
        return " ".join(parts)


def _first_exact(names: list[str], target: str) -> int | None:
    for i, name in enumerate(names):
        if name == target:
            return i
    return None


def _first_containing(names: list[str], fragment: str) -> int | None:
    for i, name in enumerate(names):
        if fragment in name:
            return i
    return None


def resolve_columns(header: list[str]) -> ColumnMap:
    """
    Resolve semantic fields to positions from a parsed header row.

    Args:
        header: Header field names in file order.

    Returns:
        ColumnMap with ``None`` for every field the header does not provide.
    """
    names = [h.strip().upper() for h in header]
    return ColumnMap(
        valid=_first_exact(names, VALID_HEADER),
        species=_first_exact(names, SPECIES_HEADER),
        year=_first_exact(names, YEAR_HEADER),
        loc_id=_first_exact(names, LOC_ID_HEADER),
        subnational=_first_containing(names, SUBNATIONAL_FRAGMENT),
        latitude=_first_containing(names, LATITUDE_FRAGMENT),
        longitude=_first_containing(names, LONGITUDE_FRAGMENT),
    )
