"""Functions for displaying an alignment against its input sequences."""

from typing import Any, List, Optional, Sequence

from edit_align.types import Alignment


def render_rows(
    alignment: Alignment, sequences: Sequence[Sequence[Any]], gap: str = "-"
) -> List[str]:
    """Return one string per row: each aligned element, or ``gap`` in gap columns."""
    return [
        "".join(gap if element is None else str(element) for element in row)
        for row in alignment.project(sequences)
    ]


def format_alignment(
    alignment: Alignment,
    sequences: Sequence[Sequence[Any]],
    labels: Optional[Sequence[str]] = None,
    gap: str = "-",
) -> str:
    """Return a human-readable multi-line alignment string."""
    if labels is None:
        labels = [f"seq{number + 1}" for number in range(alignment.num_sequences)]
    if len(labels) != alignment.num_sequences:
        raise ValueError(
            f"Expected {alignment.num_sequences} labels, got {len(labels)}"
        )

    lines = []
    for label, residues in zip(labels, render_rows(alignment, sequences, gap=gap)):
        lines.append(f"{label:>20}: {residues}")
    return "\n".join(lines)


__all__ = ["render_rows", "format_alignment"]
