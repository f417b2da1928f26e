"""
Abstract base interface for vector stores.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from ..constants import DEFAULT_MISMATCH_POLICY, SUPPORTED_MISMATCH_POLICIES
from ..errors import DimensionMismatchError
from ..logging_utils import get_logger
from ..vector import VectorRecord


logger = get_logger(__name__)


@dataclass(frozen=True)
class SearchResult:
    """Result returned by :meth:`VectorStore.nearest_neighbor_with_distance`."""

    index: int
    record: VectorRecord
    distance: float


class VectorStore(ABC):
    """
    Minimal interface for storing vectors and finding the nearest one.

    Subclasses decide where records live and which of them are worth
    comparing against a query (``candidates``). The search itself is shared:
    it walks the candidates in the order given and keeps the first minimum.

    With ``dimension`` set, inserts of any other dimension are rejected.
    Without it, vectors of different dimensions may coexist and mismatches
    are handled per comparison according to ``on_dimension_mismatch``.
    """

    def __init__(
        self,
        dimension: Optional[int] = None,
        on_dimension_mismatch: str = DEFAULT_MISMATCH_POLICY,
    ) -> None:
        if dimension is not None and dimension <= 0:
            raise ValueError(f"Store dimension must be positive, got {dimension}")
        if on_dimension_mismatch not in SUPPORTED_MISMATCH_POLICIES:
            raise ValueError(
                f"Unsupported dimension mismatch policy '{on_dimension_mismatch}'. "
                f"Supported policies: {SUPPORTED_MISMATCH_POLICIES}"
            )
        self.dimension = dimension
        self.on_dimension_mismatch = on_dimension_mismatch

    @abstractmethod
    def insert(self, vector: VectorRecord) -> int:
        """
        Append ``vector`` and return its insertion index.
        """

    @abstractmethod
    def candidates(self, query: VectorRecord) -> Iterable[Tuple[int, VectorRecord]]:
        """
        Yield ``(index, record)`` pairs to compare against ``query``.
        """

    @abstractmethod
    def __len__(self) -> int:
        ...

    def check_dimension(self, vector: VectorRecord, line_number: Optional[int] = None) -> None:
        """
        Raise DimensionMismatchError if ``vector`` cannot go into this store.
        """
        if self.dimension is not None and vector.dimension != self.dimension:
            raise DimensionMismatchError(
                self.dimension,
                vector.dimension,
                operation="insert",
                line_number=line_number,
            )

    def nearest_neighbor_with_distance(self, query: VectorRecord) -> Optional[SearchResult]:
        best: Optional[SearchResult] = None

        for index, record in self.candidates(query):
            try:
                dist = query.distance(record)
            except DimensionMismatchError as exc:
                if self.on_dimension_mismatch == "raise":
                    raise DimensionMismatchError(
                        exc.expected,
                        exc.actual,
                        operation="nearest neighbor search",
                        index=index,
                    ) from exc
                logger.warning(
                    "Skipping record %d: dimension %d does not match query dimension %d",
                    index,
                    record.dimension,
                    query.dimension,
                )
                continue

            # Strict comparison keeps the earliest record on ties.
            if best is None or dist < best.distance:
                best = SearchResult(index=index, record=record, distance=dist)

        return best

    def nearest_neighbor(self, query: VectorRecord) -> Optional[VectorRecord]:
        """
        Return the stored record closest to ``query``, or None when there is none.
        """
        result = self.nearest_neighbor_with_distance(query)
        return result.record if result is not None else None
