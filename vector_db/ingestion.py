"""
Bulk ingestion of delimited numeric text into a vector store.
"""

from __future__ import annotations

import math
from typing import Iterable, List, Optional

from .constants import DEFAULT_DELIMITER
from .errors import ParseError
from .logging_utils import get_logger
from .vector import VectorRecord
from .vector_store import VectorStore


logger = get_logger(__name__)


def parse_float(
    token: str,
    line_number: Optional[int] = None,
    column: Optional[int] = None,
) -> float:
    """
    Parse one field as a finite float, raising ParseError with its location.
    """
    text = token.strip()
    try:
        value = float(text)
    except ValueError:
        raise ParseError(token, line_number=line_number, column=column) from None

    if not math.isfinite(value):
        raise ParseError(
            token,
            line_number=line_number,
            column=column,
            reason="is not a finite float",
        )
    return value


def parse_delimited_line(
    line: str,
    delimiter: str = DEFAULT_DELIMITER,
    line_number: Optional[int] = None,
) -> Optional[VectorRecord]:
    """
    Turn one line into a VectorRecord, or None for a line with no fields.

    Empty fields (doubled or trailing delimiters) are dropped, so "1,2,3,"
    yields a 3-dimensional record. Columns in errors still count every field.
    """
    line = line.rstrip("\r\n")
    values = [
        parse_float(token, line_number=line_number, column=column)
        for column, token in enumerate(line.split(delimiter), start=1)
        if token.strip()
    ]
    if not values:
        return None
    return VectorRecord(values)


def ingest_delimited_text(
    store: VectorStore,
    lines: Iterable[str],
    delimiter: str = DEFAULT_DELIMITER,
) -> int:
    """
    Parse every line into a record and append them all to ``store``.

    ``lines`` is any iterable of lines; a single string is split into lines.

    The batch is all-or-nothing: every line is parsed (and checked against a
    fixed store dimension) before the first insert, so a ParseError or
    DimensionMismatchError leaves the store untouched.

    Returns the number of records inserted.
    """
    if len(delimiter) != 1:
        raise ValueError(f"Delimiter must be a single character, got {delimiter!r}")
    if isinstance(lines, str):
        lines = lines.splitlines()

    records: List[VectorRecord] = []
    skipped = 0
    for line_number, line in enumerate(lines, start=1):
        record = parse_delimited_line(line, delimiter=delimiter, line_number=line_number)
        if record is None:
            skipped += 1
            continue
        store.check_dimension(record, line_number=line_number)
        records.append(record)

    for record in records:
        store.insert(record)

    logger.info(
        "Ingested %d vectors (%d blank lines skipped, store size=%d)",
        len(records),
        skipped,
        len(store),
    )
    return len(records)
