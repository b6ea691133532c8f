"""
Field Definition Model

Each field carries a type tag and exactly one type-specific payload.
The payload classes form a closed union; a Field refuses a payload that
does not belong to its tag, so generation can never read the bounds of
one type while dispatching on another.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

from ..errors import UnsupportedFieldTypeError


class FieldType(Enum):
    """Enumeration of supported field types"""
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    JSON = "json"
    DATE = "date"
    DATETIME = "datetime"
    TIME = "time"
    ENUM = "enum"
    SET = "set"


class StringType(Enum):
    """Enumeration of string sub-shapes"""
    ASCII = "ascii"
    WORD = "word"
    SENTENCE = "sentence"
    PARAGRAPH = "paragraph"


@dataclass(frozen=True)
class IntSpec:
    """Inclusive integer range; Python ints keep arbitrary precision"""
    min: int
    max: int


@dataclass(frozen=True)
class FloatSpec:
    """Fixed-precision decimal: total significant digits and fractional digits"""
    precision: int
    scale: int


@dataclass(frozen=True)
class AsciiSpec:
    """Printable ASCII text with a bounded length"""
    min_length: int
    max_length: int

    string_type = StringType.ASCII


@dataclass(frozen=True)
class WordSpec:
    num: int

    string_type = StringType.WORD


@dataclass(frozen=True)
class SentenceSpec:
    num: int

    string_type = StringType.SENTENCE


@dataclass(frozen=True)
class ParagraphSpec:
    num: int

    string_type = StringType.PARAGRAPH


@dataclass(frozen=True)
class JSONSpec:
    """Size of the generated structured value (number of top-level keys)"""
    num: int


@dataclass(frozen=True)
class TemporalSpec:
    """Dates, times and datetimes take no configuration"""


@dataclass(frozen=True)
class EnumSpec:
    options: Tuple[str, ...] = ()


@dataclass(frozen=True)
class SetSpec:
    options: Tuple[str, ...] = ()


StringSpec = Union[AsciiSpec, WordSpec, SentenceSpec, ParagraphSpec]

FieldSpec = Union[
    IntSpec, FloatSpec, StringSpec, JSONSpec, TemporalSpec, EnumSpec, SetSpec
]

# Payload classes accepted for each type tag
SPEC_TYPES = {
    FieldType.INT: (IntSpec,),
    FieldType.FLOAT: (FloatSpec,),
    FieldType.STRING: (AsciiSpec, WordSpec, SentenceSpec, ParagraphSpec),
    FieldType.JSON: (JSONSpec,),
    FieldType.DATE: (TemporalSpec,),
    FieldType.DATETIME: (TemporalSpec,),
    FieldType.TIME: (TemporalSpec,),
    FieldType.ENUM: (EnumSpec,),
    FieldType.SET: (SetSpec,),
}


@dataclass(frozen=True)
class Field:
    """
    A single field definition

    Attributes:
        name: Field (column) name
        type: Type tag
        spec: Payload matching the type tag
        nullable_rate: Percent chance, 0-100, that a generated value is null
    """
    name: str
    type: FieldType
    spec: FieldSpec
    nullable_rate: int = 0

    def __post_init__(self):
        accepted = SPEC_TYPES.get(self.type)
        if accepted is None:
            raise UnsupportedFieldTypeError(self.type, self.name)
        if not isinstance(self.spec, accepted):
            raise TypeError(
                f"field '{self.name}': {type(self.spec).__name__} "
                f"does not match type '{self.type.value}'"
            )

    @property
    def string_type(self) -> StringType:
        """String sub-shape, only meaningful for string fields"""
        if self.type != FieldType.STRING:
            raise AttributeError(f"field '{self.name}' is not a string field")
        return self.spec.string_type

    def describe(self) -> str:
        """Short human-readable summary, e.g. ``int [1, 10]``"""
        spec = self.spec

        if self.type == FieldType.INT:
            detail = f"[{spec.min}, {spec.max}]"
        elif self.type == FieldType.FLOAT:
            detail = f"({spec.precision},{spec.scale})"
        elif self.type == FieldType.STRING:
            if isinstance(spec, AsciiSpec):
                detail = f"ascii {spec.min_length}..{spec.max_length}"
            else:
                detail = f"{spec.string_type.value} x{spec.num}"
        elif self.type == FieldType.JSON:
            detail = f"{spec.num} keys"
        elif self.type in (FieldType.ENUM, FieldType.SET):
            detail = "{" + ", ".join(spec.options) + "}"
        else:
            detail = ""

        text = f"{self.type.value} {detail}".strip()
        if self.nullable_rate:
            text += f" null {self.nullable_rate}%"
        return text
