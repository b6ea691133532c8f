"""
Test Suite for Field Value Generation

Tests the dispatcher and the value primitives behind it:
- Nullability gate
- Integer, decimal, string, temporal, json, enum and set values
- Reproducibility and independent worker streams
- Unsupported field types
"""

import json
from datetime import date, datetime, time
from decimal import Decimal
from types import SimpleNamespace

import pytest

from mess.config import get_default_config
from mess.errors import UnsupportedFieldTypeError
from mess.generator import FieldGenerator, generate_value
from mess.generators import (
    RandomSource,
    ascii_text,
    choose_one,
    choose_subset,
    decimal_value,
    int_range,
)
from mess.schema import (
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
    TemporalSpec,
    WordSpec,
    schema_from_dict,
)

SAMPLES = 10_000


@pytest.fixture
def generator():
    return FieldGenerator(source=RandomSource(seed=42))


def draw(generator, field, n=SAMPLES):
    return [generator.generate(field) for _ in range(n)]


class TestNullabilityGate:
    """Test null probability handling"""

    def test_rate_zero_never_null(self, generator):
        field = Field(name="id", type=FieldType.INT, spec=IntSpec(min=0, max=9), nullable_rate=0)
        assert all(value is not None for value in draw(generator, field))

    def test_rate_hundred_always_null(self, generator):
        field = Field(name="id", type=FieldType.INT, spec=IntSpec(min=0, max=9), nullable_rate=100)
        assert all(value is None for value in draw(generator, field))

    def test_rate_is_roughly_respected(self, generator):
        field = Field(name="id", type=FieldType.INT, spec=IntSpec(min=0, max=9), nullable_rate=30)
        nulls = sum(value is None for value in draw(generator, field))

        assert 0.25 < nulls / SAMPLES < 0.35

    def test_null_skips_dispatch(self, generator):
        # An unknown type is never reached when the gate fires
        field = SimpleNamespace(name="x", type="blob", spec=None, nullable_rate=100)
        assert generator.generate(field) is None


class TestIntegerValues:
    """Test integer range generation"""

    def test_bounds_inclusive_and_reachable(self, generator):
        field = Field(name="n", type=FieldType.INT, spec=IntSpec(min=-5, max=5))
        values = draw(generator, field)

        assert all(-5 <= v <= 5 for v in values)
        assert set(values) == set(range(-5, 6))

    def test_single_value_range(self, generator):
        field = Field(name="id", type=FieldType.INT, spec=IntSpec(min=1, max=1))
        assert set(draw(generator, field, 100)) == {1}

    def test_beyond_machine_word(self, generator):
        low, high = 2 ** 64, 2 ** 64 + 3
        field = Field(name="n", type=FieldType.INT, spec=IntSpec(min=low, max=high))
        values = draw(generator, field, 1000)

        assert all(isinstance(v, int) and low <= v <= high for v in values)
        assert set(values) == {low, low + 1, low + 2, low + 3}

    def test_huge_span(self, generator):
        low, high = -(10 ** 40), 10 ** 40
        values = [int_range(generator.source, low, high) for _ in range(1000)]

        assert all(low <= v <= high for v in values)
        assert any(abs(v) > 2 ** 64 for v in values)

    def test_empty_range_rejected(self, generator):
        with pytest.raises(ValueError):
            int_range(generator.source, 3, 2)


class TestDecimalValues:
    """Test fixed-precision decimal generation"""

    @pytest.mark.parametrize("precision,scale", [(5, 2), (1, 0), (4, 4), (40, 10)])
    def test_shape(self, generator, precision, scale):
        field = Field(name="d", type=FieldType.FLOAT, spec=FloatSpec(precision=precision, scale=scale))

        for value in draw(generator, field, 500):
            assert isinstance(value, Decimal)
            sign, digits, exponent = value.as_tuple()
            assert exponent == -scale
            assert len(digits) <= precision

    def test_range(self, generator):
        values = [decimal_value(generator.source, 3, 1) for _ in range(2000)]

        assert all(Decimal("-99.9") <= v <= Decimal("99.9") for v in values)
        assert any(v < 0 for v in values)
        assert any(v > 0 for v in values)

    def test_zero_keeps_scale(self):
        source = SimpleNamespace(below=lambda n: (n - 1) // 2)
        value = decimal_value(source, 4, 2)

        assert value == 0
        assert str(value) == "0.00"


class TestStringValues:
    """Test string sub-shapes"""

    def test_ascii(self, generator):
        field = Field(name="s", type=FieldType.STRING, spec=AsciiSpec(min_length=2, max_length=6))
        values = draw(generator, field, 2000)

        assert all(2 <= len(v) <= 6 for v in values)
        assert all(0x20 <= ord(c) <= 0x7E for v in values for c in v)
        assert {len(v) for v in values} == {2, 3, 4, 5, 6}

    def test_ascii_fixed_length(self, generator):
        assert len(ascii_text(generator.source, 0, 0)) == 0
        assert len(ascii_text(generator.source, 7, 7)) == 7

    def test_words(self, generator):
        field = Field(name="s", type=FieldType.STRING, spec=WordSpec(num=3))
        for value in draw(generator, field, 100):
            assert len(value.split(" ")) == 3

    def test_sentences(self, generator):
        field = Field(name="s", type=FieldType.STRING, spec=SentenceSpec(num=2))
        for value in draw(generator, field, 100):
            assert value.count(".") == 2

    def test_paragraphs(self, generator):
        field = Field(name="s", type=FieldType.STRING, spec=ParagraphSpec(num=3))
        for value in draw(generator, field, 20):
            assert len(value.split("\n")) == 3

    def test_zero_count_is_empty(self, generator):
        field = Field(name="s", type=FieldType.STRING, spec=WordSpec(num=0))
        assert generator.generate(field) == ""


class TestTemporalValues:
    """Test date, time and datetime shapes"""

    def test_date(self, generator):
        value = generator.generate(Field(name="d", type=FieldType.DATE, spec=TemporalSpec()))

        assert type(value) is date
        assert date(1970, 1, 1) <= value <= date(2037, 12, 31)

    def test_datetime(self, generator):
        value = generator.generate(Field(name="d", type=FieldType.DATETIME, spec=TemporalSpec()))

        assert isinstance(value, datetime)
        assert value.microsecond == 0
        assert datetime(1970, 1, 1) <= value <= datetime(2037, 12, 31, 23, 59, 59)

    def test_time(self, generator):
        value = generator.generate(Field(name="t", type=FieldType.TIME, spec=TemporalSpec()))
        assert isinstance(value, time)

    def test_configured_window(self):
        config = get_default_config()
        config.temporal.start = "2024-02-29T00:00:00"
        config.temporal.end = "2024-02-29T23:59:59"
        generator = FieldGenerator(source=RandomSource(seed=1), config=config)

        field = Field(name="d", type=FieldType.DATE, spec=TemporalSpec())
        assert set(draw(generator, field, 50)) == {date(2024, 2, 29)}


class TestStructuredValues:
    """Test json values"""

    def test_key_count_and_serializable(self, generator):
        field = Field(name="j", type=FieldType.JSON, spec=JSONSpec(num=4))

        for value in draw(generator, field, 200):
            assert isinstance(value, dict)
            assert len(value) == 4
            json.dumps(value)

    def test_depth_limit(self):
        config = get_default_config()
        config.structured.max_depth = 1
        generator = FieldGenerator(source=RandomSource(seed=3), config=config)
        field = Field(name="j", type=FieldType.JSON, spec=JSONSpec(num=5))

        for value in draw(generator, field, 100):
            assert not any(isinstance(v, (dict, list)) for v in value.values())


class TestCategoricalValues:
    """Test enum and set values"""

    def test_enum(self, generator):
        field = Field(name="e", type=FieldType.ENUM, spec=EnumSpec(options=("a", "b", "c")))
        values = draw(generator, field, 1000)

        assert set(values) == {"a", "b", "c"}

    def test_enum_empty_options(self, generator):
        with pytest.raises(ValueError):
            choose_one(generator.source, ())

    def test_set_subsets_keep_order(self, generator):
        field = Field(name="s", type=FieldType.SET, spec=SetSpec(options=("x", "y")))
        values = draw(generator, field, 1000)

        assert all(isinstance(v, list) for v in values)
        assert {tuple(v) for v in values} == {(), ("x",), ("y",), ("x", "y")}

    def test_set_empty_options(self, generator):
        assert choose_subset(generator.source, ()) == []


class TestDispatch:
    """Test routing and failure handling"""

    def test_unsupported_type(self, generator):
        field = SimpleNamespace(name="x", type="blob", spec=None, nullable_rate=0)

        with pytest.raises(UnsupportedFieldTypeError) as excinfo:
            generator.generate(field)

        assert excinfo.value.field_type == "blob"
        assert excinfo.value.field_name == "x"

    def test_unsupported_string_shape(self, generator):
        field = SimpleNamespace(name="x", type=FieldType.STRING, spec=object(), nullable_rate=0)

        with pytest.raises(UnsupportedFieldTypeError):
            generator.generate(field)

    def test_generate_value(self):
        field = Field(name="id", type=FieldType.INT, spec=IntSpec(min=7, max=7))
        assert generate_value(field) == 7

    def test_end_to_end(self, generator):
        schema = schema_from_dict({
            "table": "users",
            "primary_keys": ["id"],
            "fields": {
                "id": {"type": "int", "int": {"min": 1, "max": 1}},
                "name": {"type": "string", "string": {"type": "word", "word": {"num": 2}}},
            },
        })

        for _ in range(100):
            row = {name: generator.generate(schema.field(name)) for name in schema.keys()}
            assert row["id"] == 1
            assert len(row["name"].split(" ")) == 2


class TestRandomStreams:
    """Test reproducibility and per-worker streams"""

    @pytest.fixture
    def fields(self):
        return [
            Field(name="i", type=FieldType.INT, spec=IntSpec(min=0, max=10 ** 30)),
            Field(name="w", type=FieldType.STRING, spec=WordSpec(num=3)),
            Field(name="d", type=FieldType.DATETIME, spec=TemporalSpec(), nullable_rate=20),
        ]

    def test_same_seed_same_values(self, fields):
        first = FieldGenerator(source=RandomSource(seed=99))
        second = FieldGenerator(source=RandomSource(seed=99))

        for _ in range(50):
            for field in fields:
                assert first.generate(field) == second.generate(field)

    def test_seed_from_config(self, fields):
        config = get_default_config()
        config.generation.seed = 5

        first = [FieldGenerator(config=config).generate(field) for field in fields]
        second = [FieldGenerator(config=config).generate(field) for field in fields]
        assert first == second

    def test_spawned_workers_differ(self, fields):
        workers = FieldGenerator(source=RandomSource(seed=7)).spawn(3)
        field = fields[0]

        streams = [tuple(w.generate(field) for _ in range(5)) for w in workers]
        assert len(set(streams)) == 3

    def test_spawn_is_reproducible(self, fields):
        first = RandomSource(seed=11).spawn(2)
        second = RandomSource(seed=11).spawn(2)

        for a, b in zip(first, second):
            assert int_range(a, 0, 10 ** 9) == int_range(b, 0, 10 ** 9)
