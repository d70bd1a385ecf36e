#!/usr/bin/env python3
# Design: DESIGN.md
"""
Master Data Table Shape Validation

A master data table must have a primary key spanning exactly one column; that
column's values become the enum constant names. Tables with no primary key or
a multi-column key are rejected as a whole. Rejection is reported as a
ValidationResult, never raised: the driver warns and moves on.
"""

from .models import TableDescriptor, ValidationResult


def validate_table(table: TableDescriptor) -> ValidationResult:
    """Check that table has exactly one primary-key column."""
    key_columns = table.primary_key_columns

    if not key_columns:
        return ValidationResult.rejected(
            f"The table '{table.name}' has no primary key, "
            f"but master data requires a single-column primary key."
        )

    if len(key_columns) > 1:
        return ValidationResult.rejected(
            f"The primary key '{table.primary_key_label}' of the table '{table.name}' "
            f"spans over {len(key_columns)} columns, "
            f"but only one column is allowed for master data."
        )

    return ValidationResult.passed()
