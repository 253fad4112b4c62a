"""Unit tests for PairAligner (2-way minimum edit distance)."""

from __future__ import annotations

import pytest

from edit_align.algorithms.pair import PairAligner, PairMove
from edit_align.types import GAP, UNSET, CostTable, EditCosts
from edit_align.utils import render_rows


def _replay(row, seq):
    """Concatenate the elements a row refers to, skipping gaps."""
    return [seq[index] for index in row if index != GAP]


def test_pair_intention_execution_layout():
    """The classic worked example should reproduce its exact column layout."""
    result = PairAligner().align("intention", "execution")

    assert render_rows(result.alignment, ["intention", "execution"], gap="*") == [
        "inte*ntion",
        "*execution",
    ]
    assert result.rows == (
        [0, 1, 2, 3, GAP, 4, 5, 6, 7, 8],
        [GAP, 0, 1, 2, 3, 4, 5, 6, 7, 8],
    )
    # one deletion, one insertion and three substitutions
    assert result.distance == 8


def test_pair_compute_min_edit_returns_rows_and_sets_attributes():
    aligner = PairAligner()
    align1, align2 = aligner.compute_min_edit("ab", "b")

    assert align1 == [0, 1]
    assert align2 == [GAP, 0]
    assert aligner.align1 == align1
    assert aligner.align2 == align2


def test_pair_prefers_diagonal_on_ties():
    """Substitution, delete and insert all cost 2 here; the diagonal wins."""
    result = PairAligner().align("a", "b")

    assert result.rows == ([0], [0])
    assert result.distance == 2


def test_pair_prefers_delete_over_insert_on_ties():
    """At (2, 2) delete and insert tie below the diagonal; delete wins."""
    result = PairAligner().align("ab", "ba")

    assert result.distance == 2
    assert render_rows(result.alignment, ["ab", "ba"]) == ["-ab", "ba-"]


def test_pair_identical_sequences_are_all_diagonal():
    seq = list("alignment")
    result = PairAligner().align(seq, seq)

    assert result.distance == 0
    assert result.rows == (list(range(len(seq))), list(range(len(seq))))


@pytest.mark.parametrize("seq", ["", "a", "abc", "intention"])
def test_pair_against_empty_is_pure_deletion(seq):
    result = PairAligner().align(seq, "")

    assert result.distance == len(seq)
    assert result.rows == (list(range(len(seq))), [GAP] * len(seq))


def test_pair_empty_against_sequence_is_pure_insertion():
    result = PairAligner().align("", "xyz")

    assert result.distance == 3
    assert result.rows == ([GAP, GAP, GAP], [0, 1, 2])


@pytest.mark.parametrize(
    "seq1, seq2",
    [
        ("intention", "execution"),
        ("kitten", "sitting"),
        ("flaw", "lawn"),
        ("", "abc"),
        ("abcdef", "azced"),
    ],
)
def test_pair_distance_is_symmetric(seq1, seq2):
    forward = PairAligner().align(seq1, seq2)
    backward = PairAligner().align(seq2, seq1)

    assert forward.distance == backward.distance


@pytest.mark.parametrize(
    "seq1, seq2",
    [
        ("intention", "execution"),
        ("kitten", "sitting"),
        ("GATTACA", "GCATGCU"),
        ("", ""),
        ("a", ""),
    ],
)
def test_pair_alignment_replays_inputs(seq1, seq2):
    """Dropping gaps from each row should give back the original sequence."""
    align1, align2 = PairAligner().compute_min_edit(seq1, seq2)

    assert len(align1) == len(align2)
    assert _replay(align1, seq1) == list(seq1)
    assert _replay(align2, seq2) == list(seq2)
    assert all(a != GAP or b != GAP for a, b in zip(align1, align2))


def test_pair_is_deterministic_across_instances():
    first = PairAligner().align("GATTACA", "GCATGCU")
    second = PairAligner().align("GATTACA", "GCATGCU")

    assert first == second


def test_pair_reused_instance_does_not_accumulate():
    """A second call replaces the stored rows of the first."""
    aligner = PairAligner()
    aligner.compute_min_edit("abc", "abd")
    aligner.compute_min_edit("x", "x")

    assert aligner.align1 == [0]
    assert aligner.align2 == [0]


def test_pair_accepts_arbitrary_comparable_elements():
    seq1 = [("a", 1), ("b", 2), ("c", 3)]
    seq2 = [("a", 1), ("c", 3)]
    result = PairAligner().align(seq1, seq2)

    assert result.distance == 1
    assert result.rows == ([0, 1, 2], [0, GAP, 1])


def test_pair_default_and_custom_costs():
    """With unit substitution cost the classic kitten/sitting distance is 3."""
    assert PairAligner().align("kitten", "sitting").distance == 5

    unit = EditCosts(gap=1, mismatch=1)
    assert PairAligner(unit).align("kitten", "sitting").distance == 3


def test_pair_rejects_wrong_number_of_sequences():
    with pytest.raises(ValueError):
        PairAligner().compute_min_edit("a", "b", "c")


def test_pair_traceback_fails_on_unknown_trace_code():
    """A corrupt trace code is an internal defect, not a recoverable state."""
    table = CostTable([1, 1])
    table.set((0, 0), 0, UNSET)
    table.set((1, 0), 1, PairMove.DELETE)
    table.set((0, 1), 1, PairMove.INSERT)
    table.set((1, 1), 0, 7)

    with pytest.raises(AssertionError):
        PairAligner()._traceback(table)


def test_pair_traceback_fails_on_unset_cell():
    table = CostTable([1, 0])
    table.set((0, 0), 0, UNSET)

    with pytest.raises(AssertionError):
        PairAligner()._traceback(table)
