"""Tests for the template helper library."""

import pytest

from sanicview.helpers import DEFAULT_HELPERS, money, truncate


def test_default_helpers_expose_truncate_and_money():
    assert DEFAULT_HELPERS['truncate'] is truncate
    assert DEFAULT_HELPERS['money'] is money


@pytest.mark.parametrize(
    "args, expected",
    [
        (("hello world", 5), "hello..."),
        (("hi", 50), "hi"),
        (("hi",), "hi"),
        (("hello", 5), "hello"),
        (("hello world", 6), "hello..."),
        (("  hello world  ", 7), "hello w..."),
        (("abcdefghij", 3), "abc..."),
        (("hello world", 5, " [more]"), "hello [more]"),
    ],
)
def test_truncate(args, expected):
    assert truncate(*args) == expected


def test_truncate_falsy_length_uses_default():
    text = "x" * 60
    assert truncate(text, 0) == "x" * 50 + "..."


@pytest.mark.parametrize(
    "args, expected",
    [
        ((3.5, 2, ',', '.'), "3,50"),
        ((-1234.5, 0, ',', '.'), "-1.235"),
        ((1234.5,), "1,234.50"),
        ((1234567.891,), "1,234,567.89"),
        ((999,), "999.00"),
        ((1000, 0), "1,000"),
        ((1234567, 2, '.', ' '), "1 234 567.00"),
        ((0.5, 0), "1"),
        ((2.5, 0), "3"),
        ((1.005, 2), "1.00"),
        (("-7.25", 1), "-7.3"),
        ((-0.001, 2), "-0.00"),
    ],
)
def test_money(args, expected):
    assert money(*args) == expected


def test_money_non_numeric_input_counts_as_zero():
    assert money("abc") == "0.00"
    assert money(None) == "0.00"


def test_money_decimals_coercion():
    # Negative decimals use their absolute value
    assert money(5, -1) == "5.0"
    # Non-numeric decimals fall back to 2
    assert money(5, "x") == "5.00"
    assert money(5, float("nan")) == "5.00"


def test_money_empty_separators_fall_back_to_defaults():
    assert money(1234.5, 2, '', '') == "1,234.50"


def test_money_handles_very_large_numbers():
    assert money(1e130) == f'{int(1e130):,}.00'
    assert money(-1e300, 0, ',', '.') == '-' + f'{int(1e300):,}'.replace(',', '.')


def test_money_keeps_exact_digits_for_many_decimals():
    assert money(0.1, 30) == '0.100000000000000005551115123126'
