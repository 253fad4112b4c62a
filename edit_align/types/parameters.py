"""
This module defines the cost parameters of the edit-distance model shared by
the pairwise and three-way aligners. Costs are non-negative integers; the
defaults reproduce the classic model where an insertion or deletion costs 1
and a substitution costs 2 (a deletion plus an insertion).
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Tuple

COST_FIELDS: Tuple[str, str, str] = ("gap", "mismatch", "triple_mismatch")


@dataclass(frozen=True)
class EditCosts:
    """Per-column costs of the edit model.

    Attributes:
        gap: Cost of a column advancing exactly one sequence.
        mismatch: Cost of a column advancing two sequences whose elements differ.
        triple_mismatch: Cost of a column advancing three sequences whose
            elements are not all equal.
    """

    gap: int = 1
    mismatch: int = 2
    triple_mismatch: int = 4

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(
                    f"Cost '{field.name}' must be an integer, got: {value!r}"
                )
            if value < 0:
                raise ValueError(f"Cost '{field.name}' must be non-negative, got {value}")


DEFAULT_COSTS = EditCosts()


__all__ = ["EditCosts", "DEFAULT_COSTS", "COST_FIELDS"]
