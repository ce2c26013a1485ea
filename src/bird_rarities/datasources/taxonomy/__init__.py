"""Species reference (taxonomy) data source.

Maps species codes to scientific and common names. The table is fetched once
per run; if it cannot be fetched the run continues with an empty table.

Public API:
  - client: Source URL and column layout constants
  - species: parse_reference_table, load_species_reference, lookup_species
"""

from bird_rarities.datasources.taxonomy.client import EBIRD_TAXONOMY_CSV
from bird_rarities.datasources.taxonomy.species import (
    TableLayout,
    detect_layout,
    fetch_reference_csv,
    load_species_reference,
    lookup_species,
    parse_reference_table,
)

__all__ = [
    "EBIRD_TAXONOMY_CSV",
    "TableLayout",
    "detect_layout",
    "fetch_reference_csv",
    "load_species_reference",
    "lookup_species",
    "parse_reference_table",
]
