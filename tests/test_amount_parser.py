"""Tests for amount parser."""

import pytest
from pledgebook.utils.amount_parser import parse_amount, parse_leading_amount


@pytest.mark.parametrize(
    "text,expected",
    [
        ("100", 100.0),
        ("2500.50", 2500.5),
        ("-12.25", -12.25),
        ("1,234.56", 1234.56),
        ("KES 5,000", 5000.0),
        ("kes 10", 10.0),
        ("$20", 20.0),
        ("(15.00)", -15.0),
    ],
)
def test_parse_amount(text, expected):
    """Supported formats parse to floats."""
    assert parse_amount(text) == pytest.approx(expected)


@pytest.mark.parametrize("text", ["", "   ", "abc", "nan", "inf"])
def test_parse_amount_invalid(text):
    """Invalid amounts raise ValueError."""
    with pytest.raises(ValueError):
        parse_amount(text)


@pytest.mark.parametrize(
    "text,expected",
    [
        ("42", 42.0),
        ("2500.50", 2500.5),
        ("100 KES pledged", 100.0),
        ("12abc", 12.0),
        ("  -7.5", -7.5),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("1,000", 1.0),
        ("(100)", 0.0),
        ("KES 100", 0.0),
        ("lots", 0.0),
        ("", 0.0),
        ("nan", 0.0),
        ("1e999", 0.0),
    ],
)
def test_parse_leading_amount(text, expected):
    """Only the leading number is read; anything else reads as zero."""
    assert parse_leading_amount(text) == pytest.approx(expected)
