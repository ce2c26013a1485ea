"""Read observation CSV files and merge them into one record list."""

from __future__ import annotations

import csv
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from bird_rarities.datasources.observations.columns import ColumnMap, resolve_columns
from bird_rarities.exceptions import NoValidDataError
from bird_rarities.reference import UNKNOWN
from bird_rarities.schemas import MergedRecord

if TYPE_CHECKING:
    from collections.abc import Iterable
    from pathlib import Path

# =============================================================================
# Data Model
# =============================================================================


@dataclass
class MergeResult:
    """Merged rows plus bookkeeping about which files contributed."""

    records: list[MergedRecord] = field(default_factory=list)
    files_read: list[str] = field(default_factory=list)
    files_skipped: list[str] = field(default_factory=list)


# =============================================================================
# Row parsing
# =============================================================================


def _optional(row: list[str], index: int | None) -> str:
    if index is None or index >= len(row):
        return UNKNOWN
    return row[index]


def parse_row(row: list[str], columns: ColumnMap, source: str) -> MergedRecord | None:
    """
    Build a MergedRecord from one data row.

    Returns None for malformed rows: too few fields to cover the required
    columns, or a year that is not an integer.
    """
    if len(row) < columns.min_row_width:
        return None
    try:
        year = int(row[columns.required("year")])
    except ValueError:
        return None

    return MergedRecord(
        file_source=source,
        species_code=row[columns.required("species")],
        year=year,
        loc_id=row[columns.required("loc_id")],
        latitude=_optional(row, columns.latitude),
        longitude=_optional(row, columns.longitude),
        subnational_code=row[columns.required("subnational")],
        valid=row[columns.required("valid")],
    )


# =============================================================================
# File reading
# =============================================================================


def _read_records(path: Path) -> list[MergedRecord] | None:
    with path.open(newline="", encoding="utf-8-sig") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            print(f"Warning: {path} is empty, skipping.")
            return None

        columns = resolve_columns(header)
        print(f"{path.name}: {columns.describe()}")
        if not columns.is_complete:
            missing = ", ".join(columns.missing_required)
            print(f"Warning: {path} is missing required column(s) ({missing}), skipping.")
            return None

        source = str(path)
        records = []
        for row in reader:
            record = parse_row(row, columns, source)
            if record is not None:
                records.append(record)
    return records


def read_observation_file(path: Path) -> list[MergedRecord] | None:
    """
    Read one observation file.

    Returns None when the file is skipped: it is not a readable file, it
    cannot be decoded or parsed, or its header lacks a required column.
    Malformed data rows are dropped silently.
    """
    if not path.is_file():
        print(f"Warning: {path} is not a readable file, skipping.")
        return None

    try:
        return _read_records(path)
    except (OSError, UnicodeDecodeError, csv.Error) as exc:
        print(f"Warning: could not read {path}: {exc}, skipping.")
        return None


def merge_observation_files(paths: Iterable[Path]) -> MergeResult:
    """
    Read every file in order and concatenate their rows.

    Row order is file order, then row order within each file; later stages
    rely on it to pick the first observation of a species.

    Raises:
        NoValidDataError: If no file contributed a single row.
    """
    result = MergeResult()
    for path in paths:
        records = read_observation_file(path)
        if records is None:
            result.files_skipped.append(str(path))
            continue
        result.files_read.append(str(path))
        result.records.extend(records)

    if not result.records:
        raise NoValidDataError
    return result
