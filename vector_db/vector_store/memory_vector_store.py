"""
In-memory vector store searched by linear scan.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Set, Tuple

from ..constants import DEFAULT_MISMATCH_POLICY
from ..logging_utils import get_logger
from ..vector import VectorRecord
from .base import VectorStore


logger = get_logger(__name__)


class InMemoryVectorStore(VectorStore):
    """
    Append-only list of records; every query scans all of them in insertion order.
    """

    def __init__(
        self,
        dimension: Optional[int] = None,
        on_dimension_mismatch: str = DEFAULT_MISMATCH_POLICY,
    ) -> None:
        super().__init__(dimension=dimension, on_dimension_mismatch=on_dimension_mismatch)
        self._records: List[VectorRecord] = []

    def insert(self, vector: VectorRecord) -> int:
        if not isinstance(vector, VectorRecord):
            raise TypeError(f"Expected VectorRecord, got {type(vector).__name__}")
        self.check_dimension(vector)

        self._records.append(vector)
        index = len(self._records) - 1
        logger.debug("Inserted vector %d (dimension=%d)", index, vector.dimension)
        return index

    def candidates(self, query: VectorRecord) -> Iterable[Tuple[int, VectorRecord]]:
        return enumerate(self._records)

    def dimensions(self) -> Set[int]:
        return {record.dimension for record in self._records}

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[VectorRecord]:
        return iter(self._records)

    def __getitem__(self, index: int) -> VectorRecord:
        return self._records[index]
