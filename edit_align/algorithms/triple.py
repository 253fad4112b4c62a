"""Minimum edit-distance alignment of three sequences (e.g. for a 3-way merge).

The lattice is indexed by prefix lengths ``(i, j, k)``. Every column of the
alignment advances a non-empty subset of the three sequences, giving seven
transitions:

    code  advances          cost
    0     seq1              gap
    1     seq2              gap
    2     seq3              gap
    3     seq1+seq2         0 if seq1 == seq2 else mismatch
    4     seq1+seq3         0 if seq1 == seq3 else mismatch
    5     seq2+seq3         0 if seq2 == seq3 else mismatch
    6     seq1+seq2+seq3    0 if all three equal else triple_mismatch

Transitions are scanned in code order and a candidate replaces the current
best when it is less than *or equal to* it, so among equal minima the
highest code is recorded. This differs from the diagonal-first rule of
``PairAligner`` and is observable in the returned alignment.

Cells on a face of the lattice (any prefix length zero) cost the sum of the
remaining prefix lengths times ``gap``.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence, Tuple

from edit_align.algorithms.base import EditAligner
from edit_align.types import GAP, UNSET, AlignmentResult, CostTable

TRIPLE_STEPS: Tuple[Tuple[int, int, int], ...] = (
    (1, 0, 0),
    (0, 1, 0),
    (0, 0, 1),
    (1, 1, 0),
    (1, 0, 1),
    (0, 1, 1),
    (1, 1, 1),
)


def _boundary_trace(i: int, j: int, k: int) -> int:
    """Single-sequence step recorded on a face cell; highest code that can move."""
    if k > 0:
        return 2
    if j > 0:
        return 1
    if i > 0:
        return 0
    return UNSET


class TripleAligner(EditAligner):
    """Levenshtein alignment of three sequences."""

    num_sequences = 3

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.align1: List[int] = []
        self.align2: List[int] = []
        self.align3: List[int] = []

    def _step_costs(self, x: Any, y: Any, z: Any) -> Tuple[int, ...]:
        """Cost of each transition ending on elements ``x``, ``y``, ``z``."""
        gap = self.costs.gap
        mismatch = self.costs.mismatch
        b_xy = x == y
        b_xz = x == z
        b_yz = y == z
        return (
            gap,
            gap,
            gap,
            0 if b_xy else mismatch,
            0 if b_xz else mismatch,
            0 if b_yz else mismatch,
            0 if (b_xy and b_yz) else self.costs.triple_mismatch,
        )

    def _fill_table(self, table: CostTable, sequences: Sequence[Sequence[Any]]) -> None:
        seq1, seq2, seq3 = sequences
        n1, n2, n3 = len(seq1), len(seq2), len(seq3)

        gap = self.costs.gap
        dist = table.distance
        s0, s1, s2 = table.strides
        offsets = [a * s0 + b * s1 + c * s2 for a, b, c in TRIPLE_STEPS]

        for i in range(n1 + 1):
            for j in range(n2 + 1):
                for k in range(n3 + 1):
                    if i == 0 or j == 0 or k == 0:
                        table.set((i, j, k), (i + j + k) * gap, _boundary_trace(i, j, k))
                        continue

                    here = i * s0 + j * s1 + k * s2
                    costs = self._step_costs(seq1[i - 1], seq2[j - 1], seq3[k - 1])

                    best: Optional[int] = None
                    best_code = UNSET
                    for code, (offset, cost) in enumerate(zip(offsets, costs)):
                        candidate = int(dist[here - offset]) + cost
                        if best is None or candidate <= best:
                            best = candidate
                            best_code = code

                    table.set((i, j, k), best, best_code)

    def _traceback(self, table: CostTable) -> Tuple[List[int], List[int], List[int]]:
        position = [extent - 1 for extent in table.shape]
        rows: Tuple[List[int], List[int], List[int]] = ([], [], [])

        while sum(position) > 0:
            code = table.get(*position).trace
            if not 0 <= code < len(TRIPLE_STEPS):
                raise AssertionError(
                    f"Unrecognized trace code {code} at cell {tuple(position)}"
                )
            step = TRIPLE_STEPS[code]
            if any(advance > index for advance, index in zip(step, position)):
                raise AssertionError(
                    f"Trace code {code} steps outside the table at {tuple(position)}"
                )

            for axis, advance in enumerate(step):
                rows[axis].append(position[axis] - 1 if advance else GAP)
                position[axis] -= advance

        for row in rows:
            row.reverse()
        return rows

    def align(
        self, seq1: Sequence[Any], seq2: Sequence[Any], seq3: Sequence[Any]
    ) -> AlignmentResult:
        """Compute the minimum edit distance and one optimal 3-way alignment."""
        result = self._run((seq1, seq2, seq3))
        self.align1, self.align2, self.align3 = result.rows
        return result


__all__ = ["TripleAligner", "TRIPLE_STEPS"]
