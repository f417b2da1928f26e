"""
Data loading utilities for delimited vector files and CLI tokens.
"""

from pathlib import Path
from typing import Iterator, Optional, Sequence, Union

from .constants import DEFAULT_DELIMITER, DEFAULT_ENCODING
from .ingestion import ingest_delimited_text, parse_float
from .logging_utils import get_logger
from .vector import VectorRecord
from .vector_store import VectorStore


logger = get_logger(__name__)


def read_lines(
    path: Union[str, Path],
    encoding: str = DEFAULT_ENCODING,
) -> Iterator[str]:
    """
    Yield decoded lines of a text file, line endings included.

    Missing files raise FileNotFoundError and undecodable bytes raise
    UnicodeDecodeError; neither is wrapped.
    """
    with open(path, "r", encoding=encoding, newline="") as fh:
        yield from fh


def load_vectors_from_file(
    store: VectorStore,
    path: Union[str, Path],
    delimiter: str = DEFAULT_DELIMITER,
    encoding: str = DEFAULT_ENCODING,
) -> int:
    """
    Load every record of a delimited file into ``store``.

    Returns the number of vectors inserted.
    """
    logger.info(
        "Loading vectors from '%s' (delimiter=%r, encoding=%s)",
        path,
        delimiter,
        encoding,
    )
    count = ingest_delimited_text(store, read_lines(path, encoding), delimiter=delimiter)
    logger.info("Loaded %d vectors from '%s'", count, Path(path).name)
    return count


def parse_vector_tokens(
    tokens: Sequence[str],
    dimension: Optional[int] = None,
) -> VectorRecord:
    """
    Convert command-line tokens into a VectorRecord.

    Args:
        tokens: One string per component
        dimension: Expected number of components, checked when given

    Returns:
        The parsed record
    """
    values = [
        parse_float(token, column=column)
        for column, token in enumerate(tokens, start=1)
    ]
    return VectorRecord.from_values(values, dimension=dimension)
