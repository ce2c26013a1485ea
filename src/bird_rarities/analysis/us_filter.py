"""Restrict merged rows to valid observations at US locations."""

from __future__ import annotations

from typing import TYPE_CHECKING

from bird_rarities.exceptions import NoUSObservationsError
from bird_rarities.reference import SUBNATIONAL_SEPARATOR, US_SUBNATIONAL_PREFIX, VALID_FLAG
from bird_rarities.schemas import MergedRecord, ObservationRecord

if TYPE_CHECKING:
    from collections.abc import Iterable

PREVIEW_LINES = 10


def is_us_observation(record: MergedRecord) -> bool:
    """Valid flag is exactly "1" and the subnational code starts with "US-"."""
    return record.valid == VALID_FLAG and record.subnational_code.startswith(US_SUBNATIONAL_PREFIX)


def state_from_subnational(code: str) -> str:
    """Everything after the first hyphen: "US-NJ" -> "NJ", "US-NY-061" -> "NY-061"."""
    return code.split(SUBNATIONAL_SEPARATOR, 1)[1]


def to_observation(record: MergedRecord) -> ObservationRecord:
    return ObservationRecord(
        species_code=record.species_code,
        year=record.year,
        loc_id=record.loc_id,
        latitude=record.latitude,
        longitude=record.longitude,
        state=state_from_subnational(record.subnational_code),
    )


def filter_us_observations(records: Iterable[MergedRecord]) -> list[ObservationRecord]:
    """
    Keep valid US rows, in input order.

    Raises:
        NoUSObservationsError: If nothing survives; carries the first merged
            rows as a diagnostic preview.
    """
    merged = list(records)
    observations = [to_observation(r) for r in merged if is_us_observation(r)]
    if not observations:
        preview = [r.as_line() for r in merged[:PREVIEW_LINES]]
        raise NoUSObservationsError(preview)
    return observations
