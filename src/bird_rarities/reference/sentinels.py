"""Literal values with fixed meaning in observation and report data."""

# Placeholder for any field that could not be resolved (coordinates, names).
UNKNOWN = "Unknown"

# The observation validity flag must equal this string exactly.
VALID_FLAG = "1"
