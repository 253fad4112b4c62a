"""Alignment types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Optional, Sequence, Tuple

GAP = -1


@dataclass(frozen=True)
class Alignment:
    """Column-by-column correspondence between two or more sequences.

    Each row holds, per column, the index of the element of that sequence
    placed in the column, or ``GAP`` when the sequence does not advance.
    """

    rows: Tuple[Tuple[int, ...], ...]
    name: Optional[str] = None

    def __post_init__(self):
        rows = tuple(tuple(int(value) for value in row) for row in self.rows)
        object.__setattr__(self, "rows", rows)

        # Validate that there are at least 2 rows
        if self.num_sequences < 2:
            raise ValueError("At least 2 sequences are required.")

        # Validate that all rows have the same length
        if any(len(row) != self.columns for row in rows):
            raise ValueError("All alignment rows must have the same length.")

        for column in range(self.columns):
            if all(row[column] == GAP for row in rows):
                raise ValueError(f"Column {column} contains only gaps.")

        for number, row in enumerate(rows):
            indices = [value for value in row if value != GAP]
            if indices != list(range(len(indices))):
                raise ValueError(
                    f"Row {number} must list indices 0..n-1 in order, got {indices}"
                )

    @property
    def num_sequences(self) -> int:
        """Number of sequences in the alignment."""
        return len(self.rows)

    @property
    def columns(self) -> int:
        """Number of columns in the alignment."""
        return len(self.rows[0])

    @property
    def lengths(self) -> Tuple[int, ...]:
        """Length of each aligned input sequence."""
        return tuple(sum(1 for value in row if value != GAP) for row in self.rows)

    def project(self, sequences: Sequence[Sequence[Any]]) -> List[List[Any]]:
        """Map each row onto its sequence's elements; gaps become ``None``."""
        if len(sequences) != self.num_sequences:
            raise ValueError(
                f"Expected {self.num_sequences} sequences, got {len(sequences)}"
            )
        for number, (seq, length) in enumerate(zip(sequences, self.lengths)):
            if len(seq) != length:
                raise ValueError(
                    f"Sequence {number} has length {len(seq)}, alignment expects {length}"
                )
        return [
            [None if value == GAP else seq[value] for value in row]
            for row, seq in zip(self.rows, sequences)
        ]

    def __str__(self) -> str:
        class_name = self.__class__.__name__
        body = "\n".join(
            "      " + " ".join("-" if v == GAP else str(v) for v in row)
            for row in self.rows
        )
        return (
            f"{class_name} (\n"
            f"   name: {self.name}\n"
            f"   rows (columns: {self.columns}):\n{body}\n"
            f")"
        )


@dataclass(frozen=True)
class AlignmentResult:
    """Result of an edit-distance alignment.

    Attributes:
        alignment: One optimal alignment of the input sequences
        distance: The minimum edit cost, equal to the cost of ``alignment``
    """

    alignment: Alignment
    distance: int

    @property
    def rows(self) -> Tuple[List[int], ...]:
        """Alignment rows as fresh, caller-owned lists."""
        return tuple(list(row) for row in self.alignment.rows)


__all__ = ["GAP", "Alignment", "AlignmentResult"]
