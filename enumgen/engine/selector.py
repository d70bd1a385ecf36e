#!/usr/bin/env python3
# Design: DESIGN.md
"""
Master Data Table Selection

Filters the schema's tables down to master data candidates using the
configured trigger:

    substring  — table name contains the marker (case-insensitive)
    allow_list — table name equals one of the configured names (case-insensitive)

Tables that match neither are silently excluded; exclusion is not an error and
produces no diagnostics.
"""

from typing import Iterable

from .errors import ConfigError
from .models import TableDescriptor, Trigger, TriggerMode


def matches(table_name: str, trigger: Trigger) -> bool:
    """Return True if table_name is selected by trigger."""
    name = table_name.lower()
    if trigger.mode == TriggerMode.SUBSTRING:
        return trigger.marker.lower() in name
    if trigger.mode == TriggerMode.ALLOW_LIST:
        return name in {t.lower() for t in trigger.tables}
    raise ConfigError(
        f"Unknown trigger mode: '{trigger.mode}'. "
        f"Valid modes: {sorted(TriggerMode.ALL)}"
    )


def select_tables(
    tables: Iterable[TableDescriptor],
    trigger: Trigger,
) -> list[TableDescriptor]:
    """Return the tables selected by trigger, preserving input order."""
    return [t for t in tables if matches(t.name, trigger)]
