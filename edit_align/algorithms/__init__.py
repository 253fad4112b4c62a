"""Algorithms for the project."""

from .base import EditAligner
from .pair import PairAligner, PairMove
from .triple import TripleAligner, TRIPLE_STEPS


__all__ = [
    "EditAligner",
    "PairAligner",
    "PairMove",
    "TripleAligner",
    "TRIPLE_STEPS",
]
