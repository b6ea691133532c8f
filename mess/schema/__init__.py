"""
Schema Module

Field definitions, the validated table schema and its loader.
"""

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
from .model import KeyIndex, Schema
from .loader import SchemaLoader, load_schema, parse_field, schema_from_dict

__all__ = [
    # Field model
    "Field",
    "FieldType",
    "StringType",
    "IntSpec",
    "FloatSpec",
    "AsciiSpec",
    "WordSpec",
    "SentenceSpec",
    "ParagraphSpec",
    "JSONSpec",
    "TemporalSpec",
    "EnumSpec",
    "SetSpec",

    # Schema
    "Schema",
    "KeyIndex",

    # Loading
    "SchemaLoader",
    "load_schema",
    "schema_from_dict",
    "parse_field",
]
