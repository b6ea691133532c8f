"""
Field Value Generator

Turns one field definition into one generated value. The nullability
gate runs first; when it fires nothing else is drawn. Otherwise the
field's type tag (and for strings, its sub-shape) selects the primitive
and its bounds.

Return types by field type:
- int: int
- float: decimal.Decimal
- string: str
- json: dict
- date / time / datetime: datetime.date / datetime.time / datetime.datetime
- enum: str
- set: list of str
- any type, when null: None
"""

import logging
from typing import Any, Optional

from .config import Config, get_default_config
from .errors import UnsupportedFieldTypeError
from .generators import (
    RandomSource,
    ascii_text,
    choose_one,
    choose_subset,
    date_value,
    datetime_value,
    decimal_value,
    int_range,
    json_value,
    paragraphs,
    sentences,
    time_value,
    words,
)
from .schema.fields import Field, FieldType, StringType

logger = logging.getLogger(__name__)


class FieldGenerator:
    """
    Generates values for field definitions

    A generator owns one RandomSource and is not thread-safe; concurrent
    workers should each use their own generator (see ``spawn``).

    Args:
        source: Random source (built from config when omitted)
        config: Configuration object
    """

    def __init__(self, source: Optional[RandomSource] = None, config: Optional[Config] = None):
        self.config = config or get_default_config()
        if source is None:
            source = RandomSource(
                seed=self.config.generation.seed,
                locale=self.config.generation.locale,
            )
        self.source = source

        self.temporal_start = self.config.temporal.start_datetime
        self.temporal_end = self.config.temporal.end_datetime
        self.max_depth = self.config.structured.max_depth
        self.max_items = self.config.structured.max_items

    def spawn(self, n: int) -> list:
        """Create ``n`` generators with independent random streams"""
        return [FieldGenerator(source=child, config=self.config) for child in self.source.spawn(n)]

    def is_null(self, nullable_rate: int) -> bool:
        """
        Draw the nullability gate

        True with probability ``nullable_rate`` percent; a rate of 0 is
        never null and a rate of 100 is always null.
        """
        if nullable_rate <= 0:
            return False
        if nullable_rate >= 100:
            return True
        return self.source.random() * 100 < nullable_rate

    def generate(self, field: Field) -> Any:
        """
        Generate a single value for a field

        Args:
            field: Field definition

        Returns:
            Generated value, or None when the nullability gate fires

        Raises:
            UnsupportedFieldTypeError: the field's type tag is unknown
        """
        if self.is_null(field.nullable_rate):
            return None

        spec = field.spec
        field_type = field.type

        if field_type == FieldType.INT:
            return int_range(self.source, spec.min, spec.max)
        if field_type == FieldType.FLOAT:
            return decimal_value(self.source, spec.precision, spec.scale)
        if field_type == FieldType.DATE:
            return date_value(self.source, self.temporal_start, self.temporal_end)
        if field_type == FieldType.DATETIME:
            return datetime_value(self.source, self.temporal_start, self.temporal_end)
        if field_type == FieldType.TIME:
            return time_value(self.source)
        if field_type == FieldType.JSON:
            return json_value(self.source, spec.num, self.max_depth, self.max_items)
        if field_type == FieldType.ENUM:
            return choose_one(self.source, spec.options)
        if field_type == FieldType.SET:
            return choose_subset(self.source, spec.options)
        if field_type == FieldType.STRING:
            return self._generate_string(field)

        logger.error(f"Cannot generate field '{field.name}': invalid field type {field_type!r}")
        raise UnsupportedFieldTypeError(field_type, field.name)

    def _generate_string(self, field: Field) -> str:
        spec = field.spec
        string_type = getattr(spec, 'string_type', None)

        if string_type == StringType.ASCII:
            return ascii_text(self.source, spec.min_length, spec.max_length)
        if string_type == StringType.WORD:
            return words(self.source, spec.num)
        if string_type == StringType.SENTENCE:
            return sentences(self.source, spec.num)
        if string_type == StringType.PARAGRAPH:
            return paragraphs(self.source, spec.num)

        logger.error(f"Cannot generate field '{field.name}': invalid string type {string_type!r}")
        raise UnsupportedFieldTypeError(f"string/{string_type}", field.name)


def generate_value(field: Field, source: Optional[RandomSource] = None) -> Any:
    """Generate one value for a field with a throwaway generator"""
    return FieldGenerator(source=source).generate(field)
