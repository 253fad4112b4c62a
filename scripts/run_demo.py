#!/usr/bin/env python3
"""Align two or three words by minimum edit distance and print the result."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Sequence

import yaml

from .constants import COSTS_YAML, EXAMPLE_PAIR, EXAMPLE_TRIPLE, GAP_SYMBOL

# Ensure repository modules are importable when invoked as a script
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from edit_align.algorithms import EditAligner, PairAligner, TripleAligner
from edit_align.types import DEFAULT_COSTS, EditCosts
from edit_align.utils import alignment_to_dict, format_alignment, load_edit_costs


def build_aligner(num_sequences: int, costs: EditCosts) -> EditAligner:
    """Pick the aligner matching the number of input words."""
    if num_sequences == 2:
        return PairAligner(costs)
    return TripleAligner(costs)


def run(words: Sequence[str], costs: EditCosts, gap: str, as_yaml: bool) -> None:
    """Align ``words`` and print the alignment."""
    aligner = build_aligner(len(words), costs)
    result = aligner.align(*words)

    if as_yaml:
        payload = alignment_to_dict(result, words)
        payload["words"] = list(words)
        print(yaml.safe_dump(payload, sort_keys=False), end="")
        return

    print(format_alignment(result.alignment, words, labels=words, gap=gap))
    print(f"\nMinimum edit distance: {result.distance}")


def main(argv: List[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Align two or three words by minimum edit distance."
    )
    parser.add_argument(
        "words",
        nargs="*",
        help="Two or three words to align (default: the built-in examples).",
    )
    parser.add_argument(
        "-c",
        "--costs",
        type=Path,
        default=None,
        help=f"YAML file with edit costs (default: {COSTS_YAML} if present).",
    )
    parser.add_argument(
        "-g",
        "--gap",
        type=str,
        default=GAP_SYMBOL,
        help="Symbol printed in gap columns.",
    )
    parser.add_argument(
        "--yaml",
        action="store_true",
        help="Print the result as YAML instead of aligned text.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log table allocation and distances.",
    )
    args = parser.parse_args(argv)

    if args.words and len(args.words) not in (2, 3):
        parser.error(f"expected 2 or 3 words, got {len(args.words)}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    costs_path = args.costs
    if costs_path is None and COSTS_YAML.exists():
        costs_path = COSTS_YAML
    if costs_path is not None:
        if not costs_path.exists():
            raise FileNotFoundError(f"Costs file not found: {costs_path}")
        costs = load_edit_costs(costs_path)
    else:
        costs = DEFAULT_COSTS

    if args.words:
        run(args.words, costs, args.gap, args.yaml)
        return

    print(" ======================== 2-way ========================")
    run(EXAMPLE_PAIR, costs, args.gap, args.yaml)
    print("\n ======================== 3-way ========================")
    run(EXAMPLE_TRIPLE, costs, args.gap, args.yaml)


if __name__ == "__main__":
    main()
