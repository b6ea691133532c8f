"""
Value Primitives Module

Bounded random value generators, one module per value shape:
- Numeric: arbitrary-precision integers and fixed-scale decimals
- Text: printable ASCII and lorem words, sentences, paragraphs
- Temporal: dates, times and datetimes within a window
- Categorical: enum choice and order-preserving subsets
- Structured: JSON-compatible documents
"""

from .base import RandomSource
from .numeric import int_range, decimal_value
from .text import ascii_text, words, sentences, paragraphs
from .temporal import date_value, time_value, datetime_value
from .categorical import choose_one, choose_subset
from .structured import json_value

__all__ = [
    "RandomSource",

    # Numeric
    "int_range",
    "decimal_value",

    # Text
    "ascii_text",
    "words",
    "sentences",
    "paragraphs",

    # Temporal
    "date_value",
    "time_value",
    "datetime_value",

    # Categorical
    "choose_one",
    "choose_subset",

    # Structured
    "json_value",
]
