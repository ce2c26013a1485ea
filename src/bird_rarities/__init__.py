"""Bird Rarities - species observed exactly once in US citizen-science data.

Architecture::

    datasources/   Observation CSV files (column resolution, merge) and the
                   remote species reference table
    analysis/      US filter, per-species / per-year counts, singleton
                   extraction, name enrichment
    renderers/     Pure data → CSV report text
    store.py       Per-run temporary work store (enveloped JSON intermediates)
    flows/         Prefect orchestration of the whole run
    services/      Shared utilities (HTTP session)

Data flow: taxonomy + observations → store (work area) → analysis → renderers
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from bird_rarities.config import Settings
from bird_rarities.schemas import ObservationRecord, RarityRow

__all__ = ["ObservationRecord", "RarityRow", "Settings", "__version__"]
