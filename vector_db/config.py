"""
Configuration management for the vector_db project.

Values are primarily sourced from environment variables.
"""

from dataclasses import dataclass
import os
from typing import Optional

from dotenv import load_dotenv

from .constants import (
    SUPPORTED_MISMATCH_POLICIES,
    DEFAULT_MISMATCH_POLICY,
    DEFAULT_DELIMITER,
    DEFAULT_ENCODING,
    DEFAULT_PREVIEW_ROWS,
)


load_dotenv()


def _get_env_int(name: str) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return None
    return int(raw)


@dataclass
class Config:
    # Delimited text ingestion
    delimiter: str = os.getenv("VECTOR_DB_DELIMITER", DEFAULT_DELIMITER)
    encoding: str = os.getenv("VECTOR_DB_ENCODING", DEFAULT_ENCODING)

    # Store behaviour
    on_dimension_mismatch: str = os.getenv(
        "VECTOR_DB_ON_DIMENSION_MISMATCH", DEFAULT_MISMATCH_POLICY
    )
    # None means the store accepts vectors of any dimension
    dimension: Optional[int] = _get_env_int("VECTOR_DB_DIMENSION")

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CLI display
    preview_rows: int = int(
        os.getenv("VECTOR_DB_PREVIEW_ROWS", str(DEFAULT_PREVIEW_ROWS))
    )

    def validate(self) -> None:
        if len(self.delimiter) != 1:
            raise ValueError(
                f"Delimiter must be a single character, got {self.delimiter!r}."
            )

        if self.on_dimension_mismatch not in SUPPORTED_MISMATCH_POLICIES:
            raise ValueError(
                f"Unsupported dimension mismatch policy '{self.on_dimension_mismatch}'. "
                f"Supported policies: {SUPPORTED_MISMATCH_POLICIES}"
            )

        if self.dimension is not None and self.dimension <= 0:
            raise ValueError(
                f"VECTOR_DB_DIMENSION must be a positive integer, got {self.dimension}."
            )
