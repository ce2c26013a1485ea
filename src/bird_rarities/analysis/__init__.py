"""Cross-datasource analysis.

Combines observation rows with the species reference table:

- us_filter.py  Valid US observations only, state derived from subnational code
- frequency.py  Counts per species and per species-year, singleton extraction
- enrich.py     Species names attached to singleton observations

All functions here are pure: data in, data out, no I/O beyond diagnostics.
"""

from bird_rarities.analysis.enrich import enrich_observation, enrich_observations
from bird_rarities.analysis.frequency import (
    GroupTally,
    counts,
    singletons,
    tally_by,
    tally_overall,
    tally_yearly,
)
from bird_rarities.analysis.us_filter import (
    filter_us_observations,
    is_us_observation,
    state_from_subnational,
)

__all__ = [
    "GroupTally",
    "counts",
    "enrich_observation",
    "enrich_observations",
    "filter_us_observations",
    "is_us_observation",
    "singletons",
    "state_from_subnational",
    "tally_by",
    "tally_overall",
    "tally_yearly",
]
