"""
Tests for engine/type_mapper.py

Validates:
- map_type is total and deterministic over native type names
- Byte values become true/false (non-zero is true)
- String values are quoted and escaped as Java literals
- Other values pass through unquoted
- NULL handling per output kind
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from enumgen.engine.models import OutputKind, OutputType
from enumgen.engine.type_mapper import (
    byte_to_bool,
    format_value,
    map_type,
    quote_java_string,
)


STRING = OutputType(OutputKind.STRING, OutputKind.STRING)
BOOLEAN = OutputType(OutputKind.BOOLEAN, OutputKind.BOOLEAN)


# ---------------------------------------------------------------------------
# map_type
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("native, kind, java_type", [
    ("String", OutputKind.STRING, "String"),
    ("Clob", OutputKind.STRING, "String"),
    ("Byte", OutputKind.BOOLEAN, "boolean"),
    ("Integer", OutputKind.OTHER, "Integer"),
    ("BigDecimal", OutputKind.OTHER, "BigDecimal"),
    ("Timestamp", OutputKind.OTHER, "Timestamp"),
])
def test_map_type_categories(native, kind, java_type):
    """Each native type name maps to its output category and Java type."""
    output_type = map_type(native)
    assert output_type.kind == kind
    assert output_type.java_type == java_type


def test_map_type_is_deterministic():
    """The same native name always yields an equal OutputType."""
    assert map_type("Long") == map_type("Long")
    assert map_type("String") == map_type("Clob")


def test_map_type_unknown_name_passes_through():
    """Unknown names are not an error; they become Other with the name kept."""
    output_type = map_type("SomethingExotic")
    assert output_type.kind == OutputKind.OTHER
    assert output_type.name == "SomethingExotic"


# ---------------------------------------------------------------------------
# Boolean
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("raw, expected", [
    (0, False),
    (1, True),
    (-1, True),
    (7, True),
    ("0", False),
    (" 2 ", True),
    (b"1", True),
    (True, True),
    (False, False),
])
def test_byte_to_bool(raw, expected):
    assert byte_to_bool(raw) is expected


def test_byte_to_bool_rejects_null():
    with pytest.raises(ValueError):
        byte_to_bool(None)


def test_byte_to_bool_rejects_non_numeric_text():
    with pytest.raises(ValueError):
        byte_to_bool("yes")


def test_format_boolean_literals():
    assert format_value(BOOLEAN, 1) == "true"
    assert format_value(BOOLEAN, 0) == "false"


# ---------------------------------------------------------------------------
# String
# ---------------------------------------------------------------------------


def test_format_string_is_quoted():
    assert format_value(STRING, "Active") == '"Active"'


def test_format_string_escapes_quotes_and_backslashes():
    """Embedded quotes and backslashes must not terminate the literal."""
    assert quote_java_string('say "hi"') == '"say \\"hi\\""'
    assert quote_java_string("C:\\temp") == '"C:\\\\temp"'


def test_format_string_escapes_control_characters():
    assert quote_java_string("a\nb\tc") == '"a\\nb\\tc"'
    assert quote_java_string("\x01") == '"\\u0001"'


def test_format_string_keeps_non_ascii():
    assert quote_java_string("Größe") == '"Größe"'


def test_format_string_decodes_bytes():
    assert format_value(STRING, b"abc") == '"abc"'


def test_format_string_null():
    assert format_value(STRING, None) == "null"


# ---------------------------------------------------------------------------
# Other
# ---------------------------------------------------------------------------


def test_format_other_passes_raw_text():
    assert format_value(map_type("Integer"), 42) == "42"
    assert format_value(map_type("Double"), 1.5) == "1.5"


def test_format_other_null():
    assert format_value(map_type("Integer"), None) == "null"
