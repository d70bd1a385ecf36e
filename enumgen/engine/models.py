#!/usr/bin/env python3
# Design: DESIGN.md
"""
Enum Generator Data Models

Typed dataclasses for the objects that flow through one generation run:
table and column descriptors supplied by the schema source, tagged row cells,
the per-table field schema, and the rendered enum members.

Table and column descriptors are read-only inputs. FieldSchema, EnumMember and
EnumDefinition are values built and discarded once per table.
"""

from dataclasses import dataclass, field
from typing import Any, Iterator


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

class OutputKind:
    STRING = "String"
    BOOLEAN = "Boolean"
    OTHER = "Other"

    ALL = frozenset([STRING, BOOLEAN, OTHER])


class TriggerMode:
    SUBSTRING = "substring"
    ALLOW_LIST = "allow_list"

    ALL = frozenset([SUBSTRING, ALLOW_LIST])


# ---------------------------------------------------------------------------
# Schema source descriptors
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ColumnDescriptor:
    """One column of a table as reported by the schema source."""
    name: str
    declared_type: str              # database type as declared, e.g. "VARCHAR(40)"
    is_primary_key: bool = False


@dataclass(frozen=True)
class TableDescriptor:
    """A table as reported by the schema source."""
    name: str
    columns: tuple[ColumnDescriptor, ...] = ()
    primary_key_name: str | None = None     # constraint name, if the database has one

    @property
    def primary_key_columns(self) -> list[ColumnDescriptor]:
        """Columns that participate in the primary key, in table order."""
        return [c for c in self.columns if c.is_primary_key]

    @property
    def primary_key_label(self) -> str:
        """Human-readable key description for diagnostics."""
        if self.primary_key_name:
            return self.primary_key_name
        names = [c.name for c in self.primary_key_columns]
        return f"({', '.join(names)})" if names else "<none>"

    def column(self, label: str) -> ColumnDescriptor | None:
        """Look up a column by label, case-insensitively."""
        wanted = label.lower()
        for col in self.columns:
            if col.name.lower() == wanted:
                return col
        return None


@dataclass(frozen=True)
class Cell:
    """A single raw value tagged with its native type name."""
    label: str
    value: Any                      # str, int, float, bytes or None
    native_type: str                # resolved type name, e.g. "String", "Byte"


@dataclass(frozen=True)
class Row:
    """One result row: cells in result-set column order."""
    cells: tuple[Cell, ...]

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def __len__(self) -> int:
        return len(self.cells)

    @property
    def labels(self) -> list[str]:
        return [c.label for c in self.cells]


# ---------------------------------------------------------------------------
# Output model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class OutputType:
    """Mapped output type of a non-key column."""
    kind: str                       # one of OutputKind.ALL
    name: str                       # native type name for OTHER, else the kind

    @property
    def is_boolean(self) -> bool:
        return self.kind == OutputKind.BOOLEAN

    @property
    def java_type(self) -> str:
        """Java type used in field declarations and constructor parameters."""
        if self.kind == OutputKind.BOOLEAN:
            return "boolean"
        if self.kind == OutputKind.STRING:
            return "String"
        return self.name


class FieldSchema:
    """
    Ordered mapping of field name → OutputType.

    The first occurrence of a field fixes its position. Recording an existing
    field again keeps the position and replaces only the type.
    """

    def __init__(self) -> None:
        self._fields: dict[str, OutputType] = {}

    def record(self, name: str, output_type: OutputType) -> OutputType | None:
        """
        Record a field's output type.

        Returns the previously recorded type when it differed from
        output_type, otherwise None.
        """
        previous = self._fields.get(name)
        self._fields[name] = output_type
        if previous is not None and previous != output_type:
            return previous
        return None

    def names(self) -> list[str]:
        return list(self._fields)

    def items(self) -> list[tuple[str, OutputType]]:
        return list(self._fields.items())

    def get(self, name: str) -> OutputType | None:
        return self._fields.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        inner = ", ".join(f"{n}: {t.java_type}" for n, t in self._fields.items())
        return f"FieldSchema({inner})"


@dataclass
class EnumMember:
    """One enum constant and its rendered constructor arguments."""
    name: str
    values: list[str] = field(default_factory=list)


@dataclass
class EnumDefinition:
    """Everything the emitter needs to render one enum."""
    type_name: str
    schema: FieldSchema
    members: list[EnumMember]
    source_table: str | None = None


# ---------------------------------------------------------------------------
# Selection and validation
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Trigger:
    """Rule selecting which tables are master data candidates."""
    mode: str = TriggerMode.SUBSTRING
    marker: str = "stammdaten"
    tables: frozenset[str] = frozenset()


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of the shape check for one table."""
    ok: bool
    reason: str | None = None

    @classmethod
    def passed(cls) -> "ValidationResult":
        return cls(ok=True)

    @classmethod
    def rejected(cls, reason: str) -> "ValidationResult":
        return cls(ok=False, reason=reason)


# ---------------------------------------------------------------------------
# Runtime configuration and results
# ---------------------------------------------------------------------------


@dataclass
class GeneratorConfig:
    """Runtime configuration loaded from .enumgen/config.yaml."""
    db_path: str = "master_data.db"
    db_schema: str = "main"
    trigger: Trigger = field(default_factory=Trigger)
    output_directory: str = "generated/enums"
    package: str | None = None
    suffix: str = "Enum"
    strict_types: bool = False
    order_by_primary_key: bool = False
    fail_fast: bool = False


@dataclass
class GeneratedEnum:
    """A table that was rendered successfully."""
    table: str
    type_name: str
    path: str
    member_count: int
    written: bool = True            # False in check-only mode


@dataclass
class RunReport:
    """Outcome of one generation run."""
    generated: list[GeneratedEnum] = field(default_factory=list)
    rejected: list[tuple[str, str]] = field(default_factory=list)   # (table, reason)
    failed: list[tuple[str, str]] = field(default_factory=list)     # (table, error)
    stale: list[str] = field(default_factory=list)                  # check-only paths
    excluded: int = 0

    @property
    def ok(self) -> bool:
        return not self.failed and not self.stale
