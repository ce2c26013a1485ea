"""Data sources.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # URLs and layout constants (optional)
    └── {feature}.py      # Read/fetch functions (one per concept)

- observations/  Local observation CSV files (column resolution, merging)
- taxonomy/      Remote species reference table (code → names)
"""
