"""
Prefect flows for the rarity pipeline.

Flows:
- rarities: Merge observation files, keep US observations, report species
  seen exactly once overall and per year

Usage (local):
    python -m bird_rarities.flows.rarities observations.csv

Usage (Prefect):
    prefect server start  # Optional, for dashboard
    bird-rarities observations.csv
"""
