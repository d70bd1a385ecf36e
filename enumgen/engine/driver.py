#!/usr/bin/env python3
# Design: DESIGN.md
"""
Enum Generation Driver

Runs one full, idempotent regeneration:

    list tables → select (trigger) → validate (single-column key)
    → open row cursor → project rows → emit Java → write (or compare)

Each table is processed to completion before the next one starts, and its row
cursor is closed before moving on.

Error policy:
- Shape rejection (no key, multi-column key): WARNING, table skipped, run
  continues. Never aborts, even with fail_fast.
- Table processing failure (row read, unresolvable type, malformed row):
  ERROR, recorded in RunReport.failed, run continues with the next table.
  With fail_fast the run stops with GenerationAbortedError instead.
- The enum text is rendered completely before anything touches the disk and
  is written atomically, so a failed table never leaves a partial artifact.
  An artifact from an earlier successful run is left as it was.
"""

import logging
from typing import Callable

from .emitter import emit
from .errors import GenerationAbortedError, TableProcessingError, TypeNameCollisionError
from .models import GeneratedEnum, GeneratorConfig, RunReport, TableDescriptor
from .naming import enum_type_name
from .projector import project
from .selector import select_tables
from .source import SchemaSource
from .validator import validate_table
from .writer import artifact_path, check_artifact, write_artifact

logger = logging.getLogger(__name__)


def render_table(
    source: SchemaSource,
    table: TableDescriptor,
    config: GeneratorConfig,
) -> tuple[str, str, int]:
    """
    Read one validated table and render its enum.

    Returns:
        (type_name, java_source, member_count)

    Raises:
        TableProcessingError: if the rows cannot be read or projected
    """
    type_name = enum_type_name(table.name, config.suffix)
    with source.open_rows(table, order_by_primary_key=config.order_by_primary_key) as rows:
        schema, members = project(table, rows, strict_types=config.strict_types)
    text = emit(
        type_name,
        schema,
        members,
        package=config.package,
        source_table=table.name,
    )
    return type_name, text, len(members)


def generate_enums(
    source: SchemaSource,
    config: GeneratorConfig,
    check_only: bool = False,
    after_enums: Callable[[SchemaSource, RunReport], None] | None = None,
) -> RunReport:
    """
    Generate one enum per qualifying master data table.

    Args:
        source: Schema source supplying tables and row cursors.
        config: Resolved generator configuration.
        check_only: Compare rendered enums with the files on disk instead of
            writing them; mismatches are reported in RunReport.stale.
        after_enums: Optional follow-up generation pass, called once with the
            source and the finished report.

    Raises:
        GenerationAbortedError: on the first table failure when config.fail_fast
    """
    report = RunReport()
    tables = source.list_tables()
    candidates = select_tables(tables, config.trigger)
    report.excluded = len(tables) - len(candidates)

    logger.info(
        "Generating enums for %d of %d tables (trigger: %s)",
        len(candidates), len(tables), config.trigger.mode,
    )

    type_owners: dict[str, str] = {}

    for table in candidates:
        result = validate_table(table)
        if not result.ok:
            logger.warning("%s Skipping enum generation for the table '%s'.", result.reason, table.name)
            report.rejected.append((table.name, result.reason or ""))
            continue

        try:
            type_name, text, member_count = render_table(source, table, config)
            owner = type_owners.get(type_name.lower())
            if owner is not None:
                raise TypeNameCollisionError(type_name, owner, table.name)
        except TableProcessingError as exc:
            logger.error("Enum generation failed for the table '%s': %s", table.name, exc)
            report.failed.append((table.name, str(exc)))
            if config.fail_fast:
                raise GenerationAbortedError(table.name, exc) from exc
            continue

        type_owners[type_name.lower()] = table.name

        path = artifact_path(config.output_directory, type_name, config.package)

        if check_only:
            if not check_artifact(path, text):
                logger.warning("Enum %s is stale or missing: %s", type_name, path)
                report.stale.append(str(path))
            written = False
        else:
            write_artifact(path, text)
            written = True
            logger.info(
                "Generated enum: %s.java [input=%s, output=%s]",
                type_name, table.name, type_name,
            )

        report.generated.append(GeneratedEnum(
            table=table.name,
            type_name=type_name,
            path=str(path),
            member_count=member_count,
            written=written,
        ))

    if after_enums is not None:
        after_enums(source, report)

    return report
