"""Utility functions for signquote."""

from signquote.utils.date_parser import parse_date
from signquote.utils.amount_parser import parse_amount, parse_number, parse_percent
from signquote.utils.currency import format_guarani

__all__ = ["parse_date", "parse_amount", "parse_number", "parse_percent", "format_guarani"]
