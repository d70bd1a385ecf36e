#!/usr/bin/env python3
# Design: DESIGN.md
"""
Enum Generator Error Types

Table-scoped failures (row reads, type resolution, malformed rows) derive from
TableProcessingError. The driver catches exactly that base class, records the
failure against the table and moves on to the next table, unless fail-fast is
configured, in which case it raises GenerationAbortedError.

Configuration problems are raised as ConfigError before any table is touched.
"""


class EnumGenError(Exception):
    """Base class for all enum generator errors."""


class ConfigError(EnumGenError, ValueError):
    """Raised when .enumgen/config.yaml contains an invalid setting."""


# ---------------------------------------------------------------------------
# Table-scoped failures
# ---------------------------------------------------------------------------


class TableProcessingError(EnumGenError):
    """A failure that aborts generation for a single table."""

    def __init__(self, message: str, table: str | None = None):
        self.table = table
        table_info = f"[{table}] " if table else ""
        super().__init__(f"{table_info}{message}")


class RowReadError(TableProcessingError):
    """Raised when the row cursor fails mid-iteration or a cell cannot be decoded."""


class UnresolvableTypeError(TableProcessingError):
    """Raised when a declared column type has no native type name."""

    def __init__(self, declared_type: str, column: str, table: str | None = None):
        self.declared_type = declared_type
        self.column = column
        super().__init__(
            f"Cannot resolve declared type '{declared_type}' of column '{column}'",
            table,
        )


class ProjectionError(TableProcessingError):
    """Raised when a row cannot be projected onto an enum member."""


class RowShapeError(ProjectionError):
    """Raised when a row references a different set of columns than the first row."""

    def __init__(
        self,
        expected: list[str],
        actual: list[str],
        row_index: int,
        table: str | None = None,
    ):
        self.expected = expected
        self.actual = actual
        self.row_index = row_index
        super().__init__(
            f"Row {row_index} has columns {actual}, expected {expected}",
            table,
        )


class FieldNameCollisionError(ProjectionError):
    """Raised when two column labels map to the same Java field name."""

    def __init__(self, field: str, first_label: str, second_label: str, table: str | None = None):
        self.field = field
        self.first_label = first_label
        self.second_label = second_label
        super().__init__(
            f"Columns '{first_label}' and '{second_label}' both map to field '{field}'",
            table,
        )


class TypeNameCollisionError(TableProcessingError):
    """Raised when a table's enum type name is already taken by another table."""

    def __init__(self, type_name: str, owner: str, table: str | None = None):
        self.type_name = type_name
        self.owner = owner
        super().__init__(
            f"Type name '{type_name}' is already generated for the table '{owner}'",
            table,
        )


class TypeConflictError(ProjectionError):
    """Raised in strict mode when a field's output type changes between rows."""

    def __init__(self, field: str, old_type: str, new_type: str, table: str | None = None):
        self.field = field
        self.old_type = old_type
        self.new_type = new_type
        super().__init__(
            f"Field '{field}' changed type from '{old_type}' to '{new_type}'",
            table,
        )


# ---------------------------------------------------------------------------
# Batch failures
# ---------------------------------------------------------------------------


class GenerationAbortedError(EnumGenError):
    """Raised by the driver in fail-fast mode after the first table failure."""

    def __init__(self, table: str, cause: Exception):
        self.table = table
        self.cause = cause
        super().__init__(f"Enum generation aborted at table '{table}': {cause}")
