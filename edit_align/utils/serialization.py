"""Serialization utilities for edit costs and alignment results (load and save)."""

from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Optional, Sequence

import yaml

from edit_align.types import AlignmentResult, EditCosts
from edit_align.types.parameters import COST_FIELDS
from .render import render_rows


def costs_to_dict(costs: EditCosts) -> Dict[str, int]:
    """
    Convert an EditCosts dataclass into a plain dictionary suitable for YAML.
    """
    return asdict(costs)


def load_edit_costs(yaml_path: Path) -> EditCosts:
    """Load edit costs from a YAML file.

    The mapping may sit at the top level or under a ``costs`` key. Omitted
    fields keep their default values.
    """
    with Path(yaml_path).open("r", encoding="utf-8") as handle:
        payload = yaml.safe_load(handle) or {}

    if not isinstance(payload, dict):
        raise ValueError(f"Expected a mapping in {yaml_path}, got {type(payload).__name__}")

    costs_dict = payload.get("costs", payload)
    if not isinstance(costs_dict, dict):
        raise ValueError(f"'costs' in {yaml_path} must be a mapping")

    unexpected = [key for key in costs_dict if key not in COST_FIELDS]
    if unexpected:
        raise ValueError(f"edit costs has unexpected keys: {unexpected}")

    return EditCosts(**costs_dict)


def alignment_to_dict(
    result: AlignmentResult, sequences: Optional[Sequence[Sequence[Any]]] = None
) -> Dict[str, Any]:
    """
    Convert an AlignmentResult into plain data, optionally with rendered rows.
    """
    payload: Dict[str, Any] = {
        "distance": result.distance,
        "columns": result.alignment.columns,
        "rows": [list(row) for row in result.alignment.rows],
    }
    if sequences is not None:
        payload["rendered"] = render_rows(result.alignment, sequences)
    return payload


__all__ = ["costs_to_dict", "load_edit_costs", "alignment_to_dict"]
