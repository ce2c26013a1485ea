"""
Prefect flow for finding species observed exactly once in the US.

Stages run strictly in order: fetch the species reference, merge input files,
filter to US observations, count, extract singletons, enrich, write reports.
Intermediate data lives in a temporary work store that is removed when the
flow returns, whether it succeeds or not.

Run locally:
    python -m bird_rarities.flows.rarities observations.csv [more.csv ...]
"""

from __future__ import annotations

import sys
from pathlib import Path

from prefect import flow, task

from bird_rarities.analysis import (
    counts,
    enrich_observations,
    filter_us_observations,
    singletons,
    tally_overall,
    tally_yearly,
)
from bird_rarities.config import get_settings
from bird_rarities.datasources import observations as obs_source
from bird_rarities.datasources import taxonomy
from bird_rarities.exceptions import RarityPipelineError
from bird_rarities.renderers import write_rarity_csv
from bird_rarities.schemas import (
    MergedRecord,
    ObservationRecord,
    RarityRow,
    Result,
    SpeciesReference,
)
from bird_rarities.store import DataStore

# Relative paths within the per-run work store
MERGED_PATH = Path("merged/merged.json")
OBSERVATIONS_PATH = Path("observations/us.json")


# =============================================================================
# Load / save tasks
# =============================================================================


@task(name="fetch-species-reference")
def fetch_reference(url: str, timeout: float | None = None) -> dict[str, SpeciesReference]:
    """Fetch the species reference table; empty if it can't be fetched."""
    return taxonomy.load_species_reference(url, timeout=timeout)


@task(name="merge-observation-files")
def merge_files(paths: list[Path]) -> obs_source.MergeResult:
    """Read and merge every input file in the order given."""
    return obs_source.merge_observation_files(paths)


@task(name="save-merged")
def save_merged(work: DataStore, merged: obs_source.MergeResult) -> Path:
    """Save merged rows to the work store."""
    return work.write(
        MERGED_PATH,
        [r.model_dump() for r in merged.records],
        source="input files",
        files_read=merged.files_read,
        files_skipped=merged.files_skipped,
    )


@task(name="filter-us-observations")
def filter_us(work: DataStore) -> list[ObservationRecord]:
    """Load merged rows from the work store and keep valid US observations."""
    data = work.read(MERGED_PATH) or []
    records = [MergedRecord.model_validate(item) for item in data]
    return filter_us_observations(records)


@task(name="save-observations")
def save_observations(work: DataStore, observations: list[ObservationRecord]) -> Path:
    """Save US observations to the work store."""
    return work.write(
        OBSERVATIONS_PATH,
        [o.model_dump() for o in observations],
        source="merged/merged.json",
    )


# =============================================================================
# Analysis tasks
# =============================================================================


@task(name="find-overall-rarities")
def find_overall_rarities(
    observations: list[ObservationRecord],
    reference: dict[str, SpeciesReference],
) -> list[RarityRow]:
    """Species with exactly one US observation across all input."""
    tallies = tally_overall(observations)
    print(f"Counted {len(tallies)} species overall.")
    return enrich_observations(singletons(tallies), reference)


@task(name="find-yearly-rarities")
def find_yearly_rarities(
    observations: list[ObservationRecord],
    reference: dict[str, SpeciesReference],
) -> list[RarityRow]:
    """(species, year) pairs with exactly one US observation."""
    tallies = tally_yearly(observations)
    years = sorted({year for _, year in counts(tallies)})
    if years:
        print(f"Counted {len(tallies)} species-year pairs over {years[0]}-{years[-1]}.")
    return enrich_observations(singletons(tallies), reference)


@task(name="write-report")
def write_report(path: Path, rows: list[RarityRow]) -> Path:
    """Write one rarity report, replacing any previous file."""
    return write_rarity_csv(path, rows)


# =============================================================================
# Flow
# =============================================================================


@flow(name="find-rarities", log_prints=True)
def find_rarities(paths: list[Path], output_dir: Path | None = None) -> Result:
    """
    Find singleton species overall and per year and write both reports.

    Returns an unsuccessful Result when no data or no US observations
    remain; reports are only written when every stage succeeded.
    """
    settings = get_settings()
    out_dir = output_dir if output_dir is not None else settings.output_dir

    with DataStore.temporary() as work:
        print(f"Fetching species reference from {settings.reference_url}...")
        reference = fetch_reference(settings.reference_url, timeout=settings.http_timeout)
        print(f"Loaded names for {len(reference)} species.")

        print(f"Merging {len(paths)} input file(s)...")
        try:
            merged = merge_files(paths)
            save_merged(work, merged)
            print(f"Merged {len(merged.records)} rows from {len(merged.files_read)} file(s).")

            print("Filtering to US observations...")
            observations = filter_us(work)
        except RarityPipelineError as exc:
            return Result(success=False, message="", error=str(exc))

        save_observations(work, observations)
        print(f"Kept {len(observations)} valid US observations.")

        overall_rows = find_overall_rarities(observations, reference)
        yearly_rows = find_yearly_rarities(observations, reference)

        overall_path = write_report(out_dir / settings.overall_report, overall_rows)
        yearly_path = write_report(out_dir / settings.yearly_report, yearly_rows)

    print(f"Overall rarities: {len(overall_rows)} -> {overall_path}")
    print(f"Yearly rarities: {len(yearly_rows)} -> {yearly_path}")

    return Result(
        success=True,
        message=f"Found {len(overall_rows)} overall and {len(yearly_rows)} yearly rarities",
        data={
            "files_read": merged.files_read,
            "files_skipped": merged.files_skipped,
            "merged_rows": len(merged.records),
            "us_observations": len(observations),
            "overall_rarities": len(overall_rows),
            "yearly_rarities": len(yearly_rows),
            "overall_report": str(overall_path),
            "yearly_report": str(yearly_path),
        },
    )


if __name__ == "__main__":
    result = find_rarities([Path(p) for p in sys.argv[1:]])
    print(f"Flow complete: {result}")
    sys.exit(0 if result.success else 1)
