"""
Domain models for bird rarities.

Pydantic models for records flowing through the pipeline. Every stage
produces new model instances; records are frozen once created.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field

from bird_rarities.reference import COUNTRY_US, UNKNOWN

# =============================================================================
# Core
# =============================================================================


class Result(BaseModel):
    """Generic result wrapper for operations."""

    success: bool
    message: str
    data: dict[str, Any] | None = None
    error: str | None = None


# =============================================================================
# Observations
# =============================================================================


class MergedRecord(BaseModel):
    """One data row from an input file, before geographic filtering."""

    model_config = {"frozen": True}

    file_source: str = Field(..., description="Path of the file the row came from")
    species_code: str
    year: int
    loc_id: str
    latitude: str = UNKNOWN
    longitude: str = UNKNOWN
    subnational_code: str
    valid: str

    def as_line(self) -> str:
        """Comma-joined fields, used for diagnostic previews."""
        return ",".join(
            [
                self.file_source,
                self.species_code,
                str(self.year),
                self.loc_id,
                self.latitude,
                self.longitude,
                self.subnational_code,
                self.valid,
            ]
        )


class ObservationRecord(BaseModel):
    """A valid observation at a US location."""

    model_config = {"frozen": True}

    species_code: str
    year: int
    loc_id: str
    country: Literal["US"] = COUNTRY_US
    latitude: str = UNKNOWN
    longitude: str = UNKNOWN
    state: str


# =============================================================================
# Taxonomy
# =============================================================================


class SpeciesReference(BaseModel):
    """Names for one species code from the reference table.

    Blank names are stored as empty strings; enrichment substitutes
    ``Unknown`` for each blank field on its own.
    """

    model_config = {"frozen": True}

    species_code: str
    scientific_name: str = ""
    common_name: str = ""


# =============================================================================
# Reports
# =============================================================================


class RarityRow(BaseModel):
    """One line of a rarity report."""

    model_config = {"frozen": True}

    species_code: str
    scientific_name: str = UNKNOWN
    common_name: str = UNKNOWN
    year: int
    loc_id: str
    latitude: str
    longitude: str
    state: str
