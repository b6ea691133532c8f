"""
Schema Loader

Reads a schema definition (JSON, or YAML by extension), decodes it into
Field payloads, validates the key and bound invariants and returns a
canonicalized Schema.

Failures are reported in three stages:
- SchemaSourceError: the file could not be opened or read
- SchemaParseError: the content does not decode into the schema shape
- SchemaValidationError: the schema decoded but an invariant fails
"""

import json
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Dict, List, Mapping, Union

import yaml

from ..errors import SchemaParseError, SchemaSourceError, SchemaValidationError
from .fields import (
    AsciiSpec,
    EnumSpec,
    Field,
    FieldType,
    FloatSpec,
    IntSpec,
    JSONSpec,
    ParagraphSpec,
    SentenceSpec,
    SetSpec,
    StringType,
    TemporalSpec,
    WordSpec,
)
from .model import Schema, check_keys

logger = logging.getLogger(__name__)

_REQUIRED = object()

YAML_EXTENSIONS = ('.yaml', '.yml')


class SchemaLoader:
    """Loads and validates schema definitions"""

    def load_from_file(self, filepath: Union[str, Path]) -> Schema:
        """
        Load a schema from a JSON or YAML file

        Args:
            filepath: Path to the schema definition

        Returns:
            Validated Schema
        """
        filepath = Path(filepath)
        logger.debug(f"Reading schema definition: {filepath}")

        try:
            with open(filepath, 'r', encoding='utf-8') as f:
                content = f.read()
        except UnicodeDecodeError as e:
            raise SchemaParseError(f"read schema: {e}") from e
        except OSError as e:
            raise SchemaSourceError(f"open schema definition file: {e}") from e

        try:
            with _unbounded_int_digits():
                if filepath.suffix.lower() in YAML_EXTENSIONS:
                    document = yaml.safe_load(content)
                else:
                    document = json.loads(content)
        except (ValueError, yaml.YAMLError) as e:
            raise SchemaParseError(f"read schema: {e}") from e

        schema = self.load_from_dict(document)
        logger.info(f"Loaded schema '{schema.table}' from {filepath}: {len(schema)} fields")
        return schema

    def load_from_dict(self, document: Any) -> Schema:
        """
        Build a schema from an already decoded document

        Args:
            document: Mapping shaped like the schema definition format

        Returns:
            Validated Schema
        """
        if not isinstance(document, Mapping):
            raise SchemaParseError(
                f"read schema: expected an object, got {type(document).__name__}"
            )

        table = document.get('table') or ''
        if not isinstance(table, str):
            raise SchemaParseError("read schema: table must be a string")

        primary_keys = _string_list(document.get('primary_keys'), 'primary_keys')

        raw_unique = document.get('unique_keys') or []
        if not isinstance(raw_unique, list):
            raise SchemaParseError("read schema: unique_keys must be a list of lists")
        unique_keys = [
            _string_list(group, f'unique_keys[{i}]') for i, group in enumerate(raw_unique)
        ]

        raw_fields = document.get('fields') or {}
        if not isinstance(raw_fields, Mapping):
            raise SchemaParseError("read schema: fields must be an object")
        fields = {
            str(name): parse_field(str(name), definition)
            for name, definition in raw_fields.items()
        }

        validate(primary_keys, unique_keys, fields)

        return Schema(
            table=table,
            primary_keys=primary_keys,
            unique_keys=unique_keys,
            fields=fields,
        )


def load_schema(filepath: Union[str, Path]) -> Schema:
    """Load and validate a schema definition file"""
    return SchemaLoader().load_from_file(filepath)


def schema_from_dict(document: Any) -> Schema:
    """Validate an already decoded schema definition"""
    return SchemaLoader().load_from_dict(document)


def parse_field(name: str, definition: Any) -> Field:
    """
    Decode one field definition

    Only the payload object named by ``type`` is read; payloads for other
    types may be present and are ignored.
    """
    if not isinstance(definition, Mapping):
        raise SchemaParseError(f"read schema: field '{name}' must be an object")

    raw_type = definition.get('type')
    try:
        field_type = FieldType(raw_type)
    except ValueError:
        raise SchemaParseError(
            f"read schema: field '{name}': invalid field type: {raw_type!r}"
        ) from None

    nullable_rate = _integer(definition, 'nullable_rate', name, default=0)
    payload = _payload(definition, field_type.value, name)
    where = f"{name}.{field_type.value}"

    if field_type == FieldType.INT:
        spec = IntSpec(
            min=_integer(payload, 'min', where),
            max=_integer(payload, 'max', where),
        )
    elif field_type == FieldType.FLOAT:
        spec = FloatSpec(
            precision=_integer(payload, 'precision', where),
            scale=_integer(payload, 'scale', where, default=0),
        )
    elif field_type == FieldType.STRING:
        spec = _parse_string(payload, where)
    elif field_type == FieldType.JSON:
        spec = JSONSpec(num=_integer(payload, 'num', where))
    elif field_type == FieldType.ENUM:
        spec = EnumSpec(options=tuple(_string_list(payload.get('options'), f"{where}.options")))
    elif field_type == FieldType.SET:
        spec = SetSpec(options=tuple(_string_list(payload.get('options'), f"{where}.options")))
    else:
        spec = TemporalSpec()

    return Field(name=name, type=field_type, spec=spec, nullable_rate=nullable_rate)


def _parse_string(payload: Mapping[str, Any], where: str):
    raw_type = payload.get('type')
    try:
        string_type = StringType(raw_type)
    except ValueError:
        raise SchemaParseError(
            f"read schema: field '{where}': invalid string type: {raw_type!r}"
        ) from None

    shape = _payload(payload, string_type.value, where)
    where = f"{where}.{string_type.value}"

    if string_type == StringType.ASCII:
        return AsciiSpec(
            min_length=_integer(shape, 'min_length', where, default=0),
            max_length=_integer(shape, 'max_length', where),
        )
    if string_type == StringType.WORD:
        return WordSpec(num=_integer(shape, 'num', where))
    if string_type == StringType.SENTENCE:
        return SentenceSpec(num=_integer(shape, 'num', where))
    return ParagraphSpec(num=_integer(shape, 'num', where))


def validate(
    primary_keys: List[str],
    unique_keys: List[List[str]],
    fields: Dict[str, Field],
):
    """
    Check schema invariants, raising SchemaValidationError on the first failure

    Primary keys are checked first (non-empty, then each defined), then
    unique-key members, then per-field bounds.
    """
    check_keys(primary_keys, unique_keys, fields)

    for field in fields.values():
        _validate_field(field)


def _validate_field(field: Field):
    name = field.name
    spec = field.spec

    if not 0 <= field.nullable_rate <= 100:
        raise SchemaValidationError(
            f"field '{name}': nullable_rate must be between 0 and 100, got {field.nullable_rate}"
        )

    if field.type == FieldType.INT:
        if spec.min > spec.max:
            raise SchemaValidationError(
                f"field '{name}': int.min {spec.min} is greater than int.max {spec.max}"
            )

    elif field.type == FieldType.FLOAT:
        if spec.precision < 1:
            raise SchemaValidationError(f"field '{name}': float.precision must be at least 1")
        if not 0 <= spec.scale <= spec.precision:
            raise SchemaValidationError(
                f"field '{name}': float.scale must be between 0 and precision ({spec.precision})"
            )

    elif field.type == FieldType.STRING:
        if isinstance(spec, AsciiSpec):
            if spec.min_length < 0 or spec.min_length > spec.max_length:
                raise SchemaValidationError(
                    f"field '{name}': ascii lengths must satisfy 0 <= min_length <= max_length"
                )
        elif spec.num < 0:
            raise SchemaValidationError(
                f"field '{name}': {spec.string_type.value}.num must not be negative"
            )

    elif field.type == FieldType.JSON:
        if spec.num < 0:
            raise SchemaValidationError(f"field '{name}': json.num must not be negative")

    elif field.type == FieldType.ENUM:
        if not spec.options:
            raise SchemaValidationError(f"field '{name}': enum.options should not be empty")


def _payload(definition: Mapping[str, Any], key: str, where: str) -> Mapping[str, Any]:
    payload = definition.get(key)
    if payload is None:
        return {}
    if not isinstance(payload, Mapping):
        raise SchemaParseError(f"read schema: field '{where}': {key} must be an object")
    return payload


def _integer(payload: Mapping[str, Any], key: str, where: str, default: Any = _REQUIRED) -> int:
    """Read an integer, accepting decimal strings for values beyond JSON number range"""
    value = payload.get(key)

    if value is None:
        if default is _REQUIRED:
            raise SchemaParseError(f"read schema: field '{where}': {key} is required")
        return default

    if isinstance(value, bool):
        raise SchemaParseError(f"read schema: field '{where}': {key} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            with _unbounded_int_digits():
                return int(value.strip(), 10)
        except ValueError:
            pass

    raise SchemaParseError(
        f"read schema: field '{where}': {key} must be an integer, got {value!r}"
    )


@contextmanager
def _unbounded_int_digits():
    """Lift the int/str conversion digit limit (Python 3.11+) while decoding bounds"""
    get_limit = getattr(sys, 'get_int_max_str_digits', None)
    if get_limit is None:
        yield
        return

    previous = get_limit()
    sys.set_int_max_str_digits(0)
    try:
        yield
    finally:
        sys.set_int_max_str_digits(previous)


def _string_list(value: Any, where: str) -> List[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(item, str) for item in value):
        raise SchemaParseError(f"read schema: {where} must be a list of strings")
    return list(value)
