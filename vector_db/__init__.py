"""
vector_db: a minimal in-memory vector store with nearest-neighbor search.
"""

from .errors import DimensionMismatchError, ParseError, VectorDBError
from .ingestion import ingest_delimited_text
from .vector import VectorRecord
from .vector_store import InMemoryVectorStore, SearchResult, VectorStore

__all__ = [
    "DimensionMismatchError",
    "ParseError",
    "VectorDBError",
    "ingest_delimited_text",
    "VectorRecord",
    "InMemoryVectorStore",
    "SearchResult",
    "VectorStore",
]
