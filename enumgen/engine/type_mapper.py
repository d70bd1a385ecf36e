#!/usr/bin/env python3
# Design: DESIGN.md
"""
Native Type → Output Type Mapping

Maps the native type name reported for a column to one of three output
categories and renders raw cell values as Java literals:

    Clob, String  → String   quoted literal
    Byte          → Boolean  true / false (value != 0)
    anything else → Other    raw text passed through unquoted

map_type() is a pure, total function: every native type name maps to
something, and the same name always maps to the same OutputType.
"""

from typing import Any

from .models import OutputKind, OutputType


STRING_TYPES = frozenset(["Clob", "String"])
BOOLEAN_TYPES = frozenset(["Byte"])

NULL_LITERAL = "null"

# Escapes that keep a string value a single valid Java string literal
_JAVA_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\b": "\\b",
    "\f": "\\f",
}


def map_type(native_type_name: str) -> OutputType:
    """Map a native type name to its OutputType."""
    if native_type_name in STRING_TYPES:
        return OutputType(OutputKind.STRING, OutputKind.STRING)
    if native_type_name in BOOLEAN_TYPES:
        return OutputType(OutputKind.BOOLEAN, OutputKind.BOOLEAN)
    return OutputType(OutputKind.OTHER, native_type_name)


# ---------------------------------------------------------------------------
# Value formatting
# ---------------------------------------------------------------------------


def _as_text(raw: Any) -> str:
    if isinstance(raw, (bytes, bytearray, memoryview)):
        return bytes(raw).decode("utf-8")
    return str(raw)


def byte_to_bool(raw: Any) -> bool:
    """
    Interpret a Byte cell as a boolean: non-zero is true, zero is false.

    Raises:
        ValueError: if raw is None or not an integer value
    """
    if raw is None:
        raise ValueError("NULL cannot be converted to boolean")
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, int):
        return raw != 0
    return int(_as_text(raw).strip()) != 0


def quote_java_string(text: str) -> str:
    """Render text as a double-quoted Java string literal."""
    out = []
    for ch in text:
        if ch in _JAVA_ESCAPES:
            out.append(_JAVA_ESCAPES[ch])
        elif ord(ch) < 0x20:
            out.append(f"\\u{ord(ch):04x}")
        else:
            out.append(ch)
    return '"' + "".join(out) + '"'


def format_value(output_type: OutputType, raw: Any) -> str:
    """
    Render a raw cell value as a Java literal for the given output type.

    Raises:
        ValueError: if the value cannot be decoded for the output type
    """
    if output_type.kind == OutputKind.BOOLEAN:
        return "true" if byte_to_bool(raw) else "false"
    if raw is None:
        return NULL_LITERAL
    if output_type.kind == OutputKind.STRING:
        return quote_java_string(_as_text(raw))
    return _as_text(raw)
