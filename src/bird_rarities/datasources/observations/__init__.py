"""Local observation CSV files.

Reads one or more citizen-science observation exports whose headers may
differ between dataset vintages, and merges their rows in input order.

Public API:
  - columns: ColumnMap, resolve_columns
  - merge: MergeResult, parse_row, read_observation_file, merge_observation_files
"""

from bird_rarities.datasources.observations.columns import ColumnMap, resolve_columns
from bird_rarities.datasources.observations.merge import (
    MergeResult,
    merge_observation_files,
    parse_row,
    read_observation_file,
)

__all__ = [
    "ColumnMap",
    "MergeResult",
    "merge_observation_files",
    "parse_row",
    "read_observation_file",
    "resolve_columns",
]
