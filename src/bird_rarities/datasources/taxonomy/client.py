"""Species reference table constants.

The default source is the eBird taxonomy (``ref/taxonomy/ebird``) in CSV form.
"""

EBIRD_TAXONOMY_CSV = "https://api.ebird.org/v2/ref/taxonomy/ebird?fmt=csv"

# Header names used when the table carries a header row (eBird layout).
CODE_HEADER = "SPECIES_CODE"
SCIENTIFIC_HEADER = "SCIENTIFIC_NAME"
COMMON_HEADER = "COMMON_NAME"

# Zero-based positions used when the table has no recognizable header:
# code in column 1, scientific name in column 4, common name in column 5.
CODE_COLUMN = 0
SCIENTIFIC_COLUMN = 3
COMMON_COLUMN = 4
