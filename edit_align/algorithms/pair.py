"""Minimum edit-distance alignment of two sequences."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, List, Sequence, Tuple

from edit_align.algorithms.base import EditAligner
from edit_align.types import GAP, UNSET, AlignmentResult, CostTable


class PairMove(IntEnum):
    """Trace codes recorded in the pairwise cost table."""

    DELETE = 1  # consumes seq1 only
    INSERT = 2  # consumes seq2 only
    ALIGN = 3  # consumes one element of each


class PairAligner(EditAligner):
    """Levenshtein alignment of two sequences.

    Deletions and insertions cost ``costs.gap``; aligning two elements costs
    nothing when they are equal and ``costs.mismatch`` otherwise. On ties the
    diagonal move wins, then deletion, then insertion.

    Example:
        >>> aligner = PairAligner()
        >>> aligner.align("intention", "execution").distance
        8
    """

    num_sequences = 2

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.align1: List[int] = []
        self.align2: List[int] = []

    def _fill_boundaries(self, table: CostTable, n: int, m: int) -> None:
        """Pure deletions down the first column, pure insertions along the first row."""
        gap = self.costs.gap
        table.set((0, 0), 0, UNSET)
        for i in range(1, n + 1):
            table.set((i, 0), i * gap, PairMove.DELETE)
        for j in range(1, m + 1):
            table.set((0, j), j * gap, PairMove.INSERT)

    def _fill_table(self, table: CostTable, sequences: Sequence[Sequence[Any]]) -> None:
        seq1, seq2 = sequences
        n, m = len(seq1), len(seq2)
        self._fill_boundaries(table, n, m)

        gap = self.costs.gap
        mismatch = self.costs.mismatch
        dist = table.distance
        row = table.strides[0]

        for i in range(1, n + 1):
            x = seq1[i - 1]
            for j in range(1, m + 1):
                here = i * row + j
                d_delete = int(dist[here - row]) + gap
                d_insert = int(dist[here - 1]) + gap
                d_align = int(dist[here - row - 1]) + (0 if x == seq2[j - 1] else mismatch)

                best = min(d_delete, d_insert, d_align)
                if best == d_align:
                    move = PairMove.ALIGN
                elif best == d_delete:
                    move = PairMove.DELETE
                else:
                    move = PairMove.INSERT

                table.set((i, j), best, move)

    def _traceback(self, table: CostTable) -> Tuple[List[int], List[int]]:
        i, j = (extent - 1 for extent in table.shape)
        align1: List[int] = []
        align2: List[int] = []

        while i + j > 0:
            move = table.get(i, j).trace
            if move == PairMove.DELETE and i > 0:
                align1.append(i - 1)
                align2.append(GAP)
                i -= 1
            elif move == PairMove.INSERT and j > 0:
                align1.append(GAP)
                align2.append(j - 1)
                j -= 1
            elif move == PairMove.ALIGN and i > 0 and j > 0:
                align1.append(i - 1)
                align2.append(j - 1)
                i -= 1
                j -= 1
            else:
                raise AssertionError(f"Unrecognized trace code {move} at cell {(i, j)}")

        align1.reverse()
        align2.reverse()
        return align1, align2

    def align(self, seq1: Sequence[Any], seq2: Sequence[Any]) -> AlignmentResult:
        """Compute the minimum edit distance and one optimal alignment."""
        result = self._run((seq1, seq2))
        self.align1, self.align2 = result.rows
        return result


__all__ = ["PairAligner", "PairMove"]
