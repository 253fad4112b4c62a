"""Utility functions for the project."""

from .render import render_rows, format_alignment
from .serialization import costs_to_dict, load_edit_costs, alignment_to_dict

__all__ = [
    "render_rows",
    "format_alignment",
    "costs_to_dict",
    "load_edit_costs",
    "alignment_to_dict",
]
