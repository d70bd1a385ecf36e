#!/usr/bin/env python3
# Design: DESIGN.md
"""
Identifier Sanitizing and Naming

Turns arbitrary database values and labels into Java identifiers:

- sanitize()        — replace invalid characters with '_', prefix '_' if the
                      first character cannot start an identifier
- constant_name()   — primary-key value → enum constant (uppercased, sanitized)
- enum_type_name()  — table name → PascalCase type name + suffix
- field_name()      — column label → lowerCamel field name

Character classes follow Java's Character.isJavaIdentifierStart/Part, expressed
through Unicode general categories. Collisions (two raw values sanitizing to
the same identifier) are not detected here.
"""

import re
import unicodedata


# Character.isJavaIdentifierStart: letters, letter numbers, currency symbols,
# connecting punctuation
_START_CATEGORIES = frozenset(["Lu", "Ll", "Lt", "Lm", "Lo", "Nl", "Sc", "Pc"])

# Character.isJavaIdentifierPart adds digits, combining marks and the
# "identifier ignorable" format characters
_PART_CATEGORIES = _START_CATEGORIES | frozenset(["Nd", "Mn", "Mc", "Cf"])

JAVA_KEYWORDS = frozenset([
    "abstract", "assert", "boolean", "break", "byte", "case", "catch", "char",
    "class", "const", "continue", "default", "do", "double", "else", "enum",
    "extends", "final", "finally", "float", "for", "goto", "if", "implements",
    "import", "instanceof", "int", "interface", "long", "native", "new",
    "package", "private", "protected", "public", "return", "short", "static",
    "strictfp", "super", "switch", "synchronized", "this", "throw", "throws",
    "transient", "try", "void", "volatile", "while", "true", "false", "null",
    "var", "record", "yield",
])

_WORD_SEPARATORS = re.compile(r"[_\s]+")


def _is_ignorable_control(ch: str) -> bool:
    code = ord(ch)
    return 0x00 <= code <= 0x08 or 0x0E <= code <= 0x1B or 0x7F <= code <= 0x9F


def is_identifier_start(ch: str) -> bool:
    return unicodedata.category(ch) in _START_CATEGORIES


def is_identifier_part(ch: str) -> bool:
    return unicodedata.category(ch) in _PART_CATEGORIES or _is_ignorable_control(ch)


def sanitize(raw: str) -> str:
    """
    Make raw a valid identifier without truncating it.

    Example:
        sanitize("1A")  → "_1A"
        sanitize("A-B") → "A_B"
        sanitize("")    → "__"
    """
    if not raw:
        raw = "_"
    if not is_identifier_start(raw[0]):
        raw = "_" + raw
    name = "".join(ch if is_identifier_part(ch) else "_" for ch in raw)
    # a lone underscore is a reserved keyword since Java 9
    return "__" if name == "_" else name


def constant_name(raw: object) -> str:
    """Derive an enum constant name from a primary-key value."""
    if isinstance(raw, (bytes, bytearray)):
        raw = bytes(raw).decode("utf-8")
    return sanitize(str(raw).upper())


# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------


def upper_first(name: str) -> str:
    return name[:1].upper() + name[1:]


def lower_first(name: str) -> str:
    return name[:1].lower() + name[1:]


def _capitalize_word(word: str) -> str:
    # all-caps words are lowered, existing camel humps are kept
    rest = word[1:].lower() if word.isupper() else word[1:]
    return word[:1].upper() + rest


def pascal_case(name: str) -> str:
    """status_stammdaten → StatusStammdaten, displayName → DisplayName"""
    words = [w for w in _WORD_SEPARATORS.split(name) if w]
    return "".join(_capitalize_word(w) for w in words)


def lower_camel(name: str) -> str:
    """user_name → userName"""
    return lower_first(pascal_case(name))


def enum_type_name(table_name: str, suffix: str = "Enum") -> str:
    """Type name of the enum generated for table_name."""
    return sanitize(pascal_case(table_name) + suffix)


def field_name(label: str) -> str:
    """Java field name for a column label."""
    name = sanitize(lower_camel(label))
    if name in JAVA_KEYWORDS:
        name += "_"
    return name
