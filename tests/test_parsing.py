"""
Tests for lenient value parsing.
"""

import pytest

from expense_api.utils import is_present, parse_float, parse_int, round_amount


@pytest.mark.parametrize(
    "value, expected",
    [
        ("4.5", 4.5),
        ("  12abc", 12.0),
        (".5", 0.5),
        ("-3", -3.0),
        ("1e2", 100.0),
        (7, 7.0),
        (2.25, 2.25),
    ],
)
def test_parse_float(value, expected):
    assert parse_float(value) == expected


@pytest.mark.parametrize("value", ["abc", "", None, True, "Infinity", float("nan"), [1]])
def test_parse_float_rejects(value):
    assert parse_float(value) is None


@pytest.mark.parametrize("value, expected", [("2", 2), ("42abc", 42), ("4.9", 4), (" -1", -1), (5, 5)])
def test_parse_int(value, expected):
    assert parse_int(value) == expected


@pytest.mark.parametrize("value", ["abc", "", None, False])
def test_parse_int_rejects(value):
    assert parse_int(value) is None


def test_is_present():
    assert is_present("x")
    assert is_present("0")
    assert is_present(3.2)
    assert not is_present("  ")
    assert not is_present(0)
    assert not is_present(None)


@pytest.mark.parametrize(
    "value, expected",
    [(0.1 + 0.2, 0.3), (1.125, 1.13), (0.375, 0.38), (1.005, 1.0), (136.49000000000001, 136.49)],
)
def test_round_amount(value, expected):
    assert round_amount(value) == expected
