"""
Тесты разбора чисел из консольного ввода.
"""
from decimal import Decimal, InvalidOperation

import pytest

from budget_manager.utils.exceptions import InputParseError
from budget_manager.utils.validation import parse_decimal, parse_int


@pytest.mark.parametrize("text, expected", [
    ("150.5", Decimal("150.5")),
    (" 20 ", Decimal("20")),
    ("1e27", Decimal("1E+27")),
    ("-3", Decimal("-3")),
])
def test_parse_decimal(text, expected):
    assert parse_decimal(text) == expected


def test_parse_decimal_keeps_original_cause():
    with pytest.raises(InputParseError, match="Invalid price") as exc_info:
        parse_decimal("twenty", "price")

    assert isinstance(exc_info.value.__cause__, InvalidOperation)


@pytest.mark.parametrize("text", ["NaN", "Infinity", "-inf"])
def test_parse_decimal_rejects_non_finite(text):
    with pytest.raises(InputParseError, match="not a finite number"):
        parse_decimal(text)


def test_parse_int():
    assert parse_int(" 7\n") == 7


def test_parse_int_keeps_original_cause():
    with pytest.raises(InputParseError, match="not an integer") as exc_info:
        parse_int("abc")

    assert isinstance(exc_info.value.__cause__, ValueError)
