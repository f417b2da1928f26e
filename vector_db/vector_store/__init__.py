"""
Vector store backends and exports.
"""

from .base import SearchResult, VectorStore
from .memory_vector_store import InMemoryVectorStore

__all__ = [
    "SearchResult",
    "VectorStore",
    "InMemoryVectorStore",
]
