"""
Mess: Synthetic Table Data Generator

Declarative table schemas and per-field synthetic value generation for
populating test datasets.
"""

__version__ = "1.0.0"

from .config import Config, ConfigLoader, ConfigValidator, get_default_config
from .errors import (
    SchemaError,
    SchemaParseError,
    SchemaSourceError,
    SchemaValidationError,
    UnsupportedFieldTypeError,
)
from .schema import Field, FieldType, Schema, StringType, load_schema, schema_from_dict
from .generators import RandomSource
from .generator import FieldGenerator, generate_value

__all__ = [
    "Config",
    "ConfigLoader",
    "ConfigValidator",
    "get_default_config",
    "SchemaError",
    "SchemaSourceError",
    "SchemaParseError",
    "SchemaValidationError",
    "UnsupportedFieldTypeError",
    "Field",
    "FieldType",
    "StringType",
    "Schema",
    "load_schema",
    "schema_from_dict",
    "RandomSource",
    "FieldGenerator",
    "generate_value",
]
