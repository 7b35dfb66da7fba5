"""Tests for input parsing, random generation and the named input shapes."""

from __future__ import annotations

import random

import pytest

from benchmark_core import (
    INPUT_GENERATORS, format_sequence, generate_random_sequence,
    parse_length, parse_sequence,
)
from sorting_algorithms import is_reverse_sorted, is_sorted


# ---------------------------------------------------------------------------
# parse_sequence
# ---------------------------------------------------------------------------


def test_parse_sequence_drops_non_numeric_tokens() -> None:
    assert parse_sequence("3, 1, x, 2") == [3, 1, 2]


def test_parse_sequence_empty() -> None:
    assert parse_sequence("") == []


@pytest.mark.parametrize("text,expected", [
    ("8,3,5,1", [8, 3, 5, 1]),
    ("  8 ,   3,5 ,1  ", [8, 3, 5, 1]),
    ("-4, +7, 0", [-4, 7, 0]),
    ("1,,2, ,3", [1, 2, 3]),
    ("1.5, 2, abc, 3e2, 4", [2, 4]),
    ("x, y", []),
    ("12345678901234567890", [12345678901234567890]),
    ("1_000, 2", [2]),
    ("\u0661\u0662, 2", [2]),
    ("\uff13, 4", [4]),
    ("- 5, +-6, 7", [7]),
])
def test_parse_sequence_variants(text, expected) -> None:
    assert parse_sequence(text) == expected


# ---------------------------------------------------------------------------
# parse_length
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("text,expected", [
    (None, 10),
    ("", 10),
    ("  ", 10),
    ("abc", 10),
    ("0", 10),
    ("-5", 10),
    ("25", 25),
    (" 10000 ", 10000),
    ("1_0", 10),
    ("\u0661\u0662", 10),
])
def test_parse_length(text, expected) -> None:
    assert parse_length(text) == expected


# ---------------------------------------------------------------------------
# generate_random_sequence
# ---------------------------------------------------------------------------


def test_generate_default_length_and_bounds() -> None:
    values = parse_sequence(generate_random_sequence(rng=random.Random(1)))
    assert len(values) == 10
    assert all(1 <= v <= 1000 for v in values)


@pytest.mark.parametrize("length", [None, 0, -3])
def test_generate_non_positive_length_uses_default(length) -> None:
    values = parse_sequence(generate_random_sequence(length, rng=random.Random(2)))
    assert len(values) == 10


def test_generate_respects_custom_bounds() -> None:
    values = parse_sequence(generate_random_sequence(500, 5, 7, rng=random.Random(3)))
    assert len(values) == 500
    assert set(values) <= {5, 6, 7}


def test_generate_does_not_cap_length() -> None:
    text = generate_random_sequence(12_000, rng=random.Random(4))
    assert len(parse_sequence(text)) == 12_000


def test_generate_round_trips_through_parser() -> None:
    text = generate_random_sequence(50, rng=random.Random(5))
    values = parse_sequence(text)
    assert format_sequence(values) == text


def test_generate_is_reproducible_with_seeded_rng() -> None:
    a = generate_random_sequence(20, rng=random.Random(42))
    b = generate_random_sequence(20, rng=random.Random(42))
    assert a == b


def test_generate_uses_module_random_when_no_rng() -> None:
    random.seed(9)
    a = generate_random_sequence(15)
    random.seed(9)
    b = generate_random_sequence(15)
    assert a == b


# ---------------------------------------------------------------------------
# INPUT_GENERATORS
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("name", list(INPUT_GENERATORS))
@pytest.mark.parametrize("n", [0, 1, 2, 300])
def test_shapes_have_requested_length_and_bounds(name, n) -> None:
    values = INPUT_GENERATORS[name].generate(n, random.Random(0))
    assert len(values) == n
    assert all(1 <= v <= 1000 for v in values)


def test_shape_arrangements() -> None:
    rng = random.Random(11)
    assert is_sorted(INPUT_GENERATORS["sorted"].generate(200, rng))
    assert is_reverse_sorted(INPUT_GENERATORS["reversed"].generate(200, rng))
    assert len(set(INPUT_GENERATORS["all_equal"].generate(200, rng))) == 1
    assert len(set(INPUT_GENERATORS["few_unique"].generate(200, rng))) <= 10


def test_shape_custom_bounds() -> None:
    values = INPUT_GENERATORS["random"].generate(100, random.Random(0), -3, 3)
    assert all(-3 <= v <= 3 for v in values)


def test_shape_names_match_registry_keys() -> None:
    for key, gen in INPUT_GENERATORS.items():
        assert gen.name == key
        assert gen.description
