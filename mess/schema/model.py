"""
Schema Model

A validated, canonicalized table schema plus the key lookups derived
from it. Instances are read-only once built, so one Schema can be handed
to any number of generation workers.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from ..errors import SchemaValidationError
from .fields import Field


@dataclass(frozen=True)
class KeyIndex:
    """Sorted field names and primary-key membership, computed once"""
    keys: Tuple[str, ...]
    primary_keys: FrozenSet[str]

    @classmethod
    def build(cls, field_names: Iterable[str], primary_keys: Iterable[str]) -> "KeyIndex":
        return cls(
            keys=tuple(sorted(field_names)),
            primary_keys=frozenset(primary_keys),
        )

    def is_primary_key(self, name: str) -> bool:
        return name in self.primary_keys


def check_keys(
    primary_keys: Sequence[str],
    unique_keys: Sequence[Sequence[str]],
    fields: Mapping[str, Field],
):
    """Key invariants: primary keys non-empty and defined, unique-key members defined"""
    if not primary_keys:
        raise SchemaValidationError("primary keys should not be empty")

    for pk in primary_keys:
        if pk not in fields:
            raise SchemaValidationError(f'primary keys "{pk}" is not defined in fields')

    for group in unique_keys:
        for key in group:
            if key not in fields:
                raise SchemaValidationError(f'unique keys "{key}" is not defined in fields')


class Schema:
    """
    Table schema

    The constructor checks the key invariants, then canonicalizes:
    primary keys are sorted and every unique-key group is sorted in its
    original position. ``load_schema`` and ``schema_from_dict`` also
    check per-field bounds before building one.
    """

    __slots__ = ("_table", "_primary_keys", "_unique_keys", "_fields", "_index")

    def __init__(
        self,
        table: str,
        primary_keys: Sequence[str],
        unique_keys: Sequence[Sequence[str]],
        fields: Mapping[str, Field],
    ):
        check_keys(primary_keys, unique_keys, fields)

        self._table = table
        self._primary_keys = tuple(sorted(primary_keys))
        self._unique_keys = tuple(tuple(sorted(group)) for group in unique_keys)
        self._fields = MappingProxyType(dict(fields))
        self._index = KeyIndex.build(self._fields.keys(), self._primary_keys)

    @property
    def table(self) -> str:
        return self._table

    @property
    def primary_keys(self) -> Tuple[str, ...]:
        return self._primary_keys

    @property
    def unique_keys(self) -> Tuple[Tuple[str, ...], ...]:
        return self._unique_keys

    @property
    def fields(self) -> Mapping[str, Field]:
        return self._fields

    @property
    def index(self) -> KeyIndex:
        return self._index

    def keys(self) -> List[str]:
        """Field names in ascending lexicographic order"""
        return list(self._index.keys)

    def is_primary_key(self, name: str) -> bool:
        return self._index.is_primary_key(name)

    def field(self, name: str) -> Optional[Field]:
        return self._fields.get(name)

    def __len__(self) -> int:
        return len(self._fields)

    def __iter__(self) -> Iterator[str]:
        return iter(self._index.keys)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __repr__(self) -> str:
        return (
            f"Schema(table={self._table!r}, primary_keys={list(self._primary_keys)!r}, "
            f"fields={len(self._fields)})"
        )

    def to_dict(self) -> Dict[str, Any]:
        """Summary dictionary, mostly for display"""
        return {
            "table": self._table,
            "primary_keys": list(self._primary_keys),
            "unique_keys": [list(group) for group in self._unique_keys],
            "fields": {
                name: self._fields[name].describe() for name in self._index.keys
            },
        }
