"""
Text Value Primitives

Printable ASCII strings and lorem words, sentences and paragraphs from
Faker.
"""

import numpy as np

from .base import RandomSource

# Printable ASCII, space (0x20) through tilde (0x7E)
PRINTABLE_LOW = 0x20
PRINTABLE_HIGH = 0x7E


def ascii_text(source: RandomSource, min_length: int, max_length: int) -> str:
    """
    Printable ASCII text with a length uniform in [min_length, max_length]
    """
    if min_length < 0 or min_length > max_length:
        raise ValueError(f"invalid length range [{min_length}, {max_length}]")

    length = int(source.rng.integers(min_length, max_length, endpoint=True))
    codes = source.rng.integers(PRINTABLE_LOW, PRINTABLE_HIGH, size=length, endpoint=True)
    return codes.astype(np.uint8).tobytes().decode('ascii')


def words(source: RandomSource, num: int) -> str:
    """``num`` space separated words"""
    if num <= 0:
        return ""
    return " ".join(source.faker.words(nb=num))


def sentences(source: RandomSource, num: int) -> str:
    """``num`` sentences joined by single spaces"""
    if num <= 0:
        return ""
    return " ".join(source.faker.sentences(nb=num))


def paragraphs(source: RandomSource, num: int) -> str:
    """``num`` paragraphs separated by newlines"""
    if num <= 0:
        return ""
    return "\n".join(source.faker.paragraphs(nb=num))
