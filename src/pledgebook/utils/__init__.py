"""Utility functions for pledgebook."""

from pledgebook.utils.date_parser import parse_date, parse_timestamp
from pledgebook.utils.amount_parser import parse_amount, parse_leading_amount

__all__ = ["parse_date", "parse_timestamp", "parse_amount", "parse_leading_amount"]
