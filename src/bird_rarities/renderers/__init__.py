"""
Renderers: pure data → report output.

- rarity_csv.py  Overall and yearly rarity reports as CSV

Renderers take report rows and return text; flows decide where it is written.
"""

from bird_rarities.renderers.rarity_csv import REPORT_COLUMNS, build_rarity_csv, write_rarity_csv

__all__ = ["REPORT_COLUMNS", "build_rarity_csv", "write_rarity_csv"]
