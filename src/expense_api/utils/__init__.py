"""Utility modules for the expense service."""

from .parsing import is_present, parse_float, parse_int, round_amount

__all__ = [
    "is_present",
    "parse_float",
    "parse_int",
    "round_amount",
]
