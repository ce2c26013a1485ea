"""Observation counts per species and per species-year.

Counting and first-occurrence tracking happen in one pass: each group keeps
its count together with the first observation seen for it. Groups stay in
the order they were first seen.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable, Hashable, Iterable

    from bird_rarities.schemas import ObservationRecord

K = TypeVar("K", bound="Hashable")

SpeciesKey = str
SpeciesYearKey = tuple[str, int]


@dataclass
class GroupTally(Generic[K]):
    """Count for one group plus the first observation that fell into it."""

    key: K
    count: int
    first: ObservationRecord


def tally_by(
    observations: Iterable[ObservationRecord],
    key: Callable[[ObservationRecord], K],
) -> dict[K, GroupTally[K]]:
    """Group observations by ``key``, counting and remembering the first of each."""
    tallies: dict[K, GroupTally[K]] = {}
    for obs in observations:
        k = key(obs)
        tally = tallies.get(k)
        if tally is None:
            tallies[k] = GroupTally(key=k, count=1, first=obs)
        else:
            tally.count += 1
    return tallies


def species_key(obs: ObservationRecord) -> SpeciesKey:
    return obs.species_code


def species_year_key(obs: ObservationRecord) -> SpeciesYearKey:
    return (obs.species_code, obs.year)


def tally_overall(
    observations: Iterable[ObservationRecord],
) -> dict[SpeciesKey, GroupTally[SpeciesKey]]:
    """Observation count per species code."""
    return tally_by(observations, species_key)


def tally_yearly(
    observations: Iterable[ObservationRecord],
) -> dict[SpeciesYearKey, GroupTally[SpeciesYearKey]]:
    """Observation count per (species code, year)."""
    return tally_by(observations, species_year_key)


def counts(tallies: dict[K, GroupTally[K]]) -> dict[K, int]:
    """Plain key → count view of a tally table."""
    return {k: t.count for k, t in tallies.items()}


def singletons(tallies: dict[K, GroupTally[K]]) -> list[ObservationRecord]:
    """The single observation of every group seen exactly once, in group order."""
    return [t.first for t in tallies.values() if t.count == 1]
