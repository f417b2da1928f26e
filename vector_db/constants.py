"""
Project-wide constants that are unlikely to change at runtime.
"""

from typing import Final, List

SUPPORTED_MISMATCH_POLICIES: Final[List[str]] = [
    "skip",
    "raise",
]

DEFAULT_MISMATCH_POLICY: Final[str] = "skip"

# Delimited text defaults
DEFAULT_DELIMITER: Final[str] = ","
DEFAULT_ENCODING: Final[str] = "utf-8"

# Number of records shown by `vector-db inspect`
DEFAULT_PREVIEW_ROWS: Final[int] = 5
