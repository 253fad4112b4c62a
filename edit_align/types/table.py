"""Dense dynamic-programming cost table shared by the aligners."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

import numpy as np

UNSET = -1


@dataclass(frozen=True)
class Cell:
    """A single lattice point of the cost table."""

    distance: int
    trace: int

    @property
    def is_set(self) -> bool:
        """Whether the distance of this cell has been computed."""
        return self.distance != UNSET


class CostTable:
    """Cost table over the cross-product of prefix lengths.

    Distances and trace codes live in two flat row-major buffers; a
    coordinate ``(i, j[, k])`` maps to ``i * strides[0] + j * strides[1] ...``.
    The table is sized eagerly and every cell starts as ``UNSET``.
    """

    def __init__(self, lengths: Sequence[int]) -> None:
        if not lengths:
            raise ValueError("At least one dimension is required.")
        if any(length < 0 for length in lengths):
            raise ValueError(f"Sequence lengths must be non-negative, got {lengths}")

        self.shape: Tuple[int, ...] = tuple(length + 1 for length in lengths)

        strides = []
        step = 1
        for extent in reversed(self.shape):
            strides.append(step)
            step *= extent
        self.strides: Tuple[int, ...] = tuple(reversed(strides))
        self.size = step

        self.distance = np.full(self.size, UNSET, dtype=np.int64)
        self.trace = np.full(self.size, UNSET, dtype=np.int8)

    @property
    def ndim(self) -> int:
        """Number of sequences the table spans."""
        return len(self.shape)

    def index(self, *coord: int) -> int:
        """Return the flat buffer offset of a lattice coordinate."""
        if len(coord) != self.ndim:
            raise ValueError(f"Expected {self.ndim} coordinates, got {len(coord)}")
        offset = 0
        for axis, (value, extent) in enumerate(zip(coord, self.shape)):
            if not 0 <= value < extent:
                raise IndexError(
                    f"Coordinate {value} out of range for axis {axis} (extent {extent})"
                )
            offset += value * self.strides[axis]
        return offset

    def get(self, *coord: int) -> Cell:
        """Return the cell stored at ``coord``."""
        offset = self.index(*coord)
        return Cell(int(self.distance[offset]), int(self.trace[offset]))

    def set(self, coord: Sequence[int], distance: int, trace: int) -> None:
        """Store a cell. Distances are final once written."""
        offset = self.index(*coord)
        if self.distance[offset] != UNSET:
            raise AssertionError(f"Cell {tuple(coord)} is already set")
        self.distance[offset] = distance
        self.trace[offset] = trace

    def final_distance(self) -> int:
        """Distance stored at the full-length corner of the table."""
        corner = tuple(extent - 1 for extent in self.shape)
        cell = self.get(*corner)
        if not cell.is_set:
            raise AssertionError(f"Corner cell {corner} was never filled")
        return cell.distance

    def __repr__(self) -> str:
        filled = int(np.count_nonzero(self.distance != UNSET))
        return f"CostTable(shape={self.shape}, filled={filled}/{self.size})"


__all__ = ["Cell", "CostTable", "UNSET"]
