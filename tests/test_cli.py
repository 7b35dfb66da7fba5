"""Tests for the compare_sorts command-line runner."""

from __future__ import annotations

import json

import pytest

import compare_sorts


def test_main_with_explicit_input(capsys):
    assert compare_sorts.main(["--input", "8, 3, x, 5, 1"]) == 0
    out = capsys.readouterr().out
    assert "n = 4, input = user input" in out
    assert "Sorted: 1, 3, 5, 8" in out
    assert "Comparison complete." in out


def test_main_random_data_writes_reports(tmp_path, capsys):
    json_path = tmp_path / "out.json"
    html_path = tmp_path / "out.html"
    code = compare_sorts.main(["--length", "25", "--seed", "4", "-o", str(json_path),
                               "--html", str(html_path), "--quiet"])
    assert code == 0
    assert capsys.readouterr().out == ""

    data = json.loads(json_path.read_text(encoding="utf-8"))
    assert len(data["input"]) == 25
    assert all(1 <= v <= 1000 for v in data["input"])
    assert len(data["results"]) == 5
    assert html_path.exists()


def test_main_default_length_is_ten(tmp_path):
    path = tmp_path / "out.json"
    compare_sorts.main(["-q", "-o", str(path)])
    data = json.loads(path.read_text(encoding="utf-8"))
    assert len(data["input"]) == 10


def test_main_seed_is_reproducible(tmp_path):
    a, b = tmp_path / "a.json", tmp_path / "b.json"
    compare_sorts.main(["-q", "--seed", "11", "-n", "30", "-o", str(a)])
    compare_sorts.main(["-q", "--seed", "11", "-n", "30", "-o", str(b)])
    assert json.loads(a.read_text())["input"] == json.loads(b.read_text())["input"]


def test_main_shape_sorted(tmp_path):
    path = tmp_path / "out.json"
    compare_sorts.main(["-q", "--shape", "sorted", "-n", "40", "--seed", "1", "-o", str(path)])
    cases = {r["name"]: r["case"] for r in json.loads(path.read_text())["results"]}
    assert cases == {
        "Bubble": "Best",
        "Selection": "Average (fixed time)",
        "Insertion": "Best",
        "Merge": "Average (fixed time)",
        "Quick": "Worst",
    }


def test_main_rejects_length_above_maximum(capsys):
    with pytest.raises(SystemExit) as exc:
        compare_sorts.main(["--length", "10001"])
    assert exc.value.code == 2
    assert "exceeds the maximum" in capsys.readouterr().err


def test_main_rejects_input_above_custom_maximum(capsys):
    with pytest.raises(SystemExit) as exc:
        compare_sorts.main(["--input", "1, 2, 3", "--max-length", "2"])
    assert exc.value.code == 2


def test_main_rejects_inverted_bounds():
    with pytest.raises(SystemExit) as exc:
        compare_sorts.main(["--min-value", "10", "--max-value", "1"])
    assert exc.value.code == 2


def test_main_input_and_shape_are_exclusive():
    with pytest.raises(SystemExit):
        compare_sorts.main(["--input", "1,2", "--shape", "sorted"])


def test_main_overview(capsys):
    assert compare_sorts.main(["--overview"]) == 0
    assert "Sorting Algorithms Overview" in capsys.readouterr().out


def test_main_non_positive_length_uses_default(tmp_path):
    path = tmp_path / "out.json"
    compare_sorts.main(["-q", "--length", "0", "-o", str(path)])
    assert len(json.loads(path.read_text())["input"]) == 10


@pytest.mark.parametrize("length", ["", "abc", "-4", "1_0"])
def test_main_textual_length_falls_back_to_default(tmp_path, length):
    path = tmp_path / "out.json"
    assert compare_sorts.main(["-q", "--length", length, "-o", str(path)]) == 0
    assert len(json.loads(path.read_text())["input"]) == 10


def test_main_length_is_read_as_text(tmp_path):
    path = tmp_path / "out.json"
    compare_sorts.main(["-q", "--length", " 15 ", "-o", str(path)])
    assert len(json.loads(path.read_text())["input"]) == 15
