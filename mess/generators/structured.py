"""
Structured Value Primitive

JSON-compatible documents for json fields: an object whose top-level key
count is the field's ``num``, holding a mix of scalars, arrays and nested
objects.
"""

from typing import Any, Dict

from .base import RandomSource

SCALAR_KINDS = ("int", "float", "bool", "str", "null")


def json_value(
    source: RandomSource,
    num: int,
    max_depth: int = 2,
    max_items: int = 3,
) -> Dict[str, Any]:
    """
    Random JSON object

    Args:
        source: Random source
        num: Number of top-level keys
        max_depth: Deepest nesting level for arrays and objects
        max_items: Largest size of nested arrays and objects

    Returns:
        Dictionary that ``json.dumps`` accepts as is
    """
    return _object(source, max(num, 0), 1, max_depth, max_items)


def _object(source: RandomSource, size: int, depth: int, max_depth: int, max_items: int) -> Dict[str, Any]:
    obj = {}
    for i, word in enumerate(source.faker.words(nb=size)):
        key = word if word not in obj else f"{word}_{i}"
        obj[key] = _value(source, depth, max_depth, max_items)
    return obj


def _value(source: RandomSource, depth: int, max_depth: int, max_items: int) -> Any:
    if depth >= max_depth or max_items <= 0:
        return _scalar(source)

    roll = source.random()
    if roll < 0.6:
        return _scalar(source)

    size = int(source.rng.integers(0, max_items, endpoint=True))
    if roll < 0.8:
        return [_value(source, depth + 1, max_depth, max_items) for _ in range(size)]
    return _object(source, size, depth + 1, max_depth, max_items)


def _scalar(source: RandomSource) -> Any:
    kind = SCALAR_KINDS[int(source.rng.integers(len(SCALAR_KINDS)))]

    if kind == "int":
        return int(source.rng.integers(-1000, 1000, endpoint=True))
    if kind == "float":
        return round(float(source.rng.uniform(-1000, 1000)), 2)
    if kind == "bool":
        return bool(source.rng.random() < 0.5)
    if kind == "str":
        return source.faker.word()
    return None
