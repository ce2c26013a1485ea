"""Attach species names from the reference table to singleton observations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bird_rarities.datasources.taxonomy import lookup_species
from bird_rarities.reference import UNKNOWN
from bird_rarities.schemas import RarityRow

if TYPE_CHECKING:
    from collections.abc import Iterable

    from bird_rarities.schemas import ObservationRecord, SpeciesReference


def _or_unknown(value: str | None) -> str:
    return value if value else UNKNOWN


def enrich_observation(
    obs: ObservationRecord, reference: dict[str, SpeciesReference]
) -> RarityRow:
    """Build a report row; each missing or blank name becomes ``Unknown`` on its own."""
    entry = lookup_species(reference, obs.species_code)
    return RarityRow(
        species_code=obs.species_code,
        scientific_name=_or_unknown(entry.scientific_name if entry else None),
        common_name=_or_unknown(entry.common_name if entry else None),
        year=obs.year,
        loc_id=obs.loc_id,
        latitude=obs.latitude,
        longitude=obs.longitude,
        state=obs.state,
    )


def enrich_observations(
    observations: Iterable[ObservationRecord], reference: dict[str, SpeciesReference]
) -> list[RarityRow]:
    """Enrich every observation, preserving order."""
    return [enrich_observation(obs, reference) for obs in observations]
