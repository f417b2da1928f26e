"""
Immutable numeric vector with Euclidean distance.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional

import numpy as np

from .errors import DimensionMismatchError


class VectorRecord:
    """
    One point in R^n backed by a read-only float64 array.

    The dimension is fixed at construction and the values cannot be written
    afterwards, so a record can be shared freely once it is inside a store.
    """

    __slots__ = ("_data",)

    def __init__(self, values: Iterable[float]) -> None:
        data = np.array(list(values), dtype=np.float64)
        if data.ndim != 1:
            raise ValueError(f"VectorRecord expects a flat sequence, got shape {data.shape}")
        data.setflags(write=False)
        self._data = data

    @classmethod
    def zeros(cls, dimension: int) -> "VectorRecord":
        """Return a zero-filled record of the given dimension."""
        if dimension < 0:
            raise ValueError(f"Dimension must be non-negative, got {dimension}")
        return cls(np.zeros(dimension, dtype=np.float64))

    @classmethod
    def from_values(
        cls,
        values: Iterable[float],
        dimension: Optional[int] = None,
    ) -> "VectorRecord":
        """
        Build a record, checking the value count against ``dimension`` when given.
        """
        record = cls(values)
        if dimension is not None and record.dimension != dimension:
            raise DimensionMismatchError(
                dimension, record.dimension, operation="construction"
            )
        return record

    @property
    def dimension(self) -> int:
        return int(self._data.shape[0])

    @property
    def data(self) -> np.ndarray:
        """Read-only view of the components."""
        return self._data

    def tolist(self) -> List[float]:
        return [float(v) for v in self._data]

    def distance(self, other: "VectorRecord") -> float:
        """
        Euclidean distance to ``other``.

        Raises DimensionMismatchError when the dimensions differ.
        """
        if self.dimension != other.dimension:
            raise DimensionMismatchError(self.dimension, other.dimension)
        diff = self._data - other._data
        return float(np.sqrt(np.sum(diff * diff)))

    def __len__(self) -> int:
        return self.dimension

    def __iter__(self) -> Iterator[float]:
        return iter(self.tolist())

    def __getitem__(self, index: int) -> float:
        return float(self._data[index])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VectorRecord):
            return NotImplemented
        return self.dimension == other.dimension and bool(
            np.array_equal(self._data, other._data)
        )

    def __hash__(self) -> int:
        return hash(tuple(self.tolist()))

    def __repr__(self) -> str:
        return f"VectorRecord({self.tolist()!r})"
