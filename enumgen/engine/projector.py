#!/usr/bin/env python3
# Design: DESIGN.md
"""
Row Projection

Consumes a table's rows once, in source order, and builds:
- the FieldSchema: non-key columns in first-occurrence order with their
  mapped output types
- one EnumMember per row: the sanitized primary-key value as constant name
  and the rendered literals of the non-key cells, in FieldSchema order

Row order becomes member order; nothing is re-sorted. Every row must carry the
same set of non-key columns as the first row, so every member has exactly
len(FieldSchema) values.

Type disagreement between rows: a later row reporting a different native type
for a known field replaces the recorded type while keeping the field's
position, and a warning is logged. With strict_types the disagreement raises
TypeConflictError instead.
"""

import logging
from typing import Iterable

from .errors import (
    FieldNameCollisionError,
    ProjectionError,
    RowReadError,
    RowShapeError,
    TypeConflictError,
)
from .models import EnumMember, FieldSchema, Row, TableDescriptor
from .naming import constant_name, field_name
from .type_mapper import format_value, map_type

logger = logging.getLogger(__name__)


def project(
    table: TableDescriptor,
    rows: Iterable[Row],
    strict_types: bool = False,
) -> tuple[FieldSchema, list[EnumMember]]:
    """
    Project rows of a validated single-key table onto enum members.

    Raises:
        RowReadError: a row could not be read or a cell value not decoded
        ProjectionError: a row has no usable primary-key value or an unknown column
        FieldNameCollisionError: two column labels map to the same field name
        RowShapeError: a row's non-key columns differ from the first row's
        TypeConflictError: strict_types and a field changed type between rows
    """
    schema = FieldSchema()
    members: list[EnumMember] = []
    expected_fields: list[str] | None = None
    field_labels: dict[str, str] = {}

    for index, row in enumerate(rows):
        name: str | None = None
        values: dict[str, str] = {}

        for cell in row:
            column = table.column(cell.label)
            if column is None:
                raise ProjectionError(
                    f"Row {index} has column '{cell.label}' which is not part of the table",
                    table.name,
                )

            if column.is_primary_key:
                if name is not None:
                    raise ProjectionError(
                        f"Row {index} has more than one primary-key value", table.name
                    )
                if cell.value is None:
                    raise ProjectionError(
                        f"Row {index} has a NULL primary key in column '{cell.label}'",
                        table.name,
                    )
                name = constant_name(cell.value)
                continue

            fname = field_name(cell.label)
            first_label = field_labels.setdefault(fname, cell.label)
            if first_label != cell.label:
                raise FieldNameCollisionError(fname, first_label, cell.label, table.name)

            output_type = map_type(cell.native_type)
            previous = schema.record(fname, output_type)
            if previous is not None:
                if strict_types:
                    raise TypeConflictError(
                        fname, previous.java_type, output_type.java_type, table.name
                    )
                logger.warning(
                    "Field '%s' of table '%s' changed type from %s to %s at row %d",
                    fname, table.name, previous.java_type, output_type.java_type, index,
                )

            try:
                values[fname] = format_value(output_type, cell.value)
            except ValueError as exc:
                raise RowReadError(
                    f"Row {index}: cannot decode {cell.value!r} of column "
                    f"'{cell.label}' as {output_type.java_type}: {exc}",
                    table.name,
                ) from exc

        if name is None:
            raise ProjectionError(f"Row {index} has no primary-key value", table.name)

        if expected_fields is None:
            expected_fields = list(values)
        elif set(values) != set(expected_fields):
            raise RowShapeError(expected_fields, list(values), index, table.name)

        members.append(EnumMember(name=name, values=[values[f] for f in schema.names()]))

    logger.debug(
        "Projected %d rows of '%s' onto %d fields", len(members), table.name, len(schema)
    )
    return schema, members
