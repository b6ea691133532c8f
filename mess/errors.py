"""
Error Types

Load-time failures all derive from SchemaError so callers can catch a
single type; the generation-time failure is a TypeError because it means
the field object itself is wrong, not its data.
"""

from typing import Any


class SchemaError(ValueError):
    """Base class for schema loading failures"""


class SchemaSourceError(SchemaError):
    """The schema definition could not be opened or read"""


class SchemaParseError(SchemaError):
    """The schema definition does not decode into the expected shape"""


class SchemaValidationError(SchemaError):
    """The schema decoded but violates an invariant"""


class UnsupportedFieldTypeError(TypeError):
    """A field carries a type tag the generator does not know"""

    def __init__(self, field_type: Any, field_name: str = None):
        self.field_type = field_type
        self.field_name = field_name
        message = f"invalid field type: {field_type}"
        if field_name:
            message = f"{message} (field '{field_name}')"
        super().__init__(message)
