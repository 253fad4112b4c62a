"""Smoke tests for the demo driver."""

from __future__ import annotations

import pytest
import yaml

from scripts.run_demo import main


def test_demo_pair_prints_alignment(capsys):
    main(["intention", "execution"])
    out = capsys.readouterr().out

    assert "inte*ntion" in out
    assert "*execution" in out
    assert "Minimum edit distance: 8" in out


def test_demo_triple_with_custom_gap(capsys):
    main(["intention", "execution", "extinction", "--gap", "-"])
    out = capsys.readouterr().out

    assert "in--t-en--tion" in out
    assert "Minimum edit distance: 4" in out


def test_demo_yaml_output(capsys, tmp_path):
    costs = tmp_path / "costs.yaml"
    costs.write_text("costs:\n  gap: 1\n  mismatch: 1\n", encoding="utf-8")

    main(["kitten", "sitting", "--yaml", "--costs", str(costs)])
    payload = yaml.safe_load(capsys.readouterr().out)

    assert payload["distance"] == 3
    assert payload["words"] == ["kitten", "sitting"]


def test_demo_defaults_run_both_examples(capsys):
    main([])
    out = capsys.readouterr().out

    assert "2-way" in out
    assert "**exti*nc*tion" in out


def test_demo_rejects_wrong_word_count():
    with pytest.raises(SystemExit):
        main(["only"])


def test_demo_missing_costs_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        main(["a", "b", "--costs", str(tmp_path / "missing.yaml")])
