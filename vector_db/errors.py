"""
Error types raised by the vector store core.

Both recoverable errors subclass ``ValueError`` so callers that only care
about "bad input" can catch that, while the CLI catches ``VectorDBError``.
"""

from __future__ import annotations

from typing import Optional


class VectorDBError(Exception):
    """Base class for recoverable vector store errors."""


class DimensionMismatchError(VectorDBError, ValueError):
    """Two vectors were compared (or inserted) with differing dimensions."""

    def __init__(
        self,
        expected: int,
        actual: int,
        *,
        operation: str = "distance",
        index: Optional[int] = None,
        line_number: Optional[int] = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        self.operation = operation
        self.index = index
        self.line_number = line_number

        location = ""
        if line_number is not None:
            location = f"line {line_number}: "
        elif index is not None:
            location = f"record {index}: "
        super().__init__(
            f"{location}dimension mismatch in {operation} "
            f"(expected {expected}, got {actual})"
        )


class ParseError(VectorDBError, ValueError):
    """A textual field could not be converted to a float."""

    def __init__(
        self,
        token: str,
        *,
        line_number: Optional[int] = None,
        column: Optional[int] = None,
        reason: str = "is not a valid float",
    ) -> None:
        self.token = token
        self.line_number = line_number
        self.column = column
        self.reason = reason

        parts = []
        if line_number is not None:
            parts.append(f"line {line_number}")
        if column is not None:
            parts.append(f"column {column}")
        prefix = ", ".join(parts)
        message = f"{token!r} {reason}"
        super().__init__(f"{prefix}: {message}" if prefix else message)
