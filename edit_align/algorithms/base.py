"""Shared interfaces for edit-distance alignment algorithms."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List, Sequence, Tuple

from edit_align.types import (
    Alignment,
    AlignmentResult,
    CostTable,
    DEFAULT_COSTS,
    EditCosts,
)

logger = logging.getLogger(__name__)


class EditAligner(ABC):
    """Abstract base class for minimum edit-distance aligners.

    Subclasses fix ``num_sequences`` and implement the table fill and the
    backtrace; allocation and result assembly are shared here.
    """

    num_sequences: int = 0

    def __init__(self, costs: EditCosts = DEFAULT_COSTS) -> None:
        self.costs = costs

    @abstractmethod
    def align(self, *sequences: Sequence[Any]) -> AlignmentResult:
        """Align the sequences and return one optimal alignment."""
        raise NotImplementedError

    @abstractmethod
    def _fill_table(self, table: CostTable, sequences: Sequence[Sequence[Any]]) -> None:
        """Populate every cell of ``table`` with its distance and trace code."""
        raise NotImplementedError

    @abstractmethod
    def _traceback(self, table: CostTable) -> Tuple[List[int], ...]:
        """Follow trace codes from the corner to the origin; return forward rows."""
        raise NotImplementedError

    def compute_min_edit(self, *sequences: Sequence[Any]) -> Tuple[List[int], ...]:
        """Align the sequences and return the rows of index-or-gap values."""
        if len(sequences) != self.num_sequences:
            raise ValueError(
                f"{self.__class__.__name__} aligns exactly {self.num_sequences} "
                f"sequences, got {len(sequences)}"
            )
        return self.align(*sequences).rows

    def _run(self, sequences: Sequence[Sequence[Any]]) -> AlignmentResult:
        """Allocate a fresh table, fill it, and trace one optimal alignment."""
        table = CostTable([len(seq) for seq in sequences])
        logger.debug(
            "%s: allocated table of shape %s (%d cells)",
            self.__class__.__name__,
            table.shape,
            table.size,
        )

        self._fill_table(table, sequences)
        distance = table.final_distance()
        rows = self._traceback(table)

        logger.debug(
            "%s: distance %d over %d columns",
            self.__class__.__name__,
            distance,
            len(rows[0]),
        )
        return AlignmentResult(alignment=Alignment(rows=rows), distance=distance)


__all__ = ["EditAligner"]
