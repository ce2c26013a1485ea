"""Geographic constants for the US restriction."""

from __future__ import annotations

# Subnational codes look like "US-NJ"; the state is whatever follows the first hyphen.
US_SUBNATIONAL_PREFIX = "US-"
SUBNATIONAL_SEPARATOR = "-"

COUNTRY_US = "US"
