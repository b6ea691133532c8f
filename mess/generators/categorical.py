"""
Categorical Value Primitives

Single choice for enum fields and order-preserving subsets for set
fields.
"""

from typing import List, Sequence

from .base import RandomSource


def choose_one(source: RandomSource, options: Sequence[str]) -> str:
    """Pick exactly one option uniformly"""
    if not options:
        raise ValueError("cannot choose from empty options")
    return options[int(source.rng.integers(len(options)))]


def choose_subset(source: RandomSource, options: Sequence[str]) -> List[str]:
    """
    Random subset of options, keeping their original order

    Every option is kept independently with probability 1/2, so all
    subsets (the empty one and the full one included) are equally likely.
    """
    if not options:
        return []
    keep = source.rng.random(len(options)) < 0.5
    return [option for option, kept in zip(options, keep) if kept]
