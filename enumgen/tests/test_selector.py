"""
Tests for engine/selector.py and engine/validator.py

Validates:
- Substring and allow-list triggers, case-insensitive
- Non-matching tables are excluded silently and in order
- Single-column primary key passes; none / multi-column are rejected
"""

import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from enumgen.engine.errors import ConfigError
from enumgen.engine.models import ColumnDescriptor, TableDescriptor, Trigger, TriggerMode
from enumgen.engine.selector import matches, select_tables
from enumgen.engine.validator import validate_table


def _table(name: str, *keys: str, others: tuple[str, ...] = ("label",)) -> TableDescriptor:
    columns = tuple(ColumnDescriptor(k, "TEXT", is_primary_key=True) for k in keys)
    columns += tuple(ColumnDescriptor(o, "TEXT") for o in others)
    return TableDescriptor(name=name, columns=columns)


# ---------------------------------------------------------------------------
# Trigger matching
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("table_name, expected", [
    ("status_stammdaten", True),
    ("STATUS_STAMMDATEN", True),
    ("stammdaten", True),
    ("orders", False),
    ("stamm_daten", False),
])
def test_substring_trigger(table_name, expected):
    assert matches(table_name, Trigger()) is expected


def test_allow_list_trigger_is_exact_and_case_insensitive():
    trigger = Trigger(mode=TriggerMode.ALLOW_LIST, tables=frozenset(["Country"]))
    assert matches("country", trigger)
    assert matches("COUNTRY", trigger)
    assert not matches("country_stammdaten", trigger)


def test_unknown_trigger_mode_raises():
    with pytest.raises(ConfigError):
        matches("x", Trigger(mode="regex"))


def test_select_tables_preserves_order():
    tables = [_table("b_stammdaten", "id"), _table("orders", "id"), _table("a_stammdaten", "id")]
    selected = select_tables(tables, Trigger())
    assert [t.name for t in selected] == ["b_stammdaten", "a_stammdaten"]


# ---------------------------------------------------------------------------
# Shape validation
# ---------------------------------------------------------------------------


def test_single_column_key_passes():
    result = validate_table(_table("status_stammdaten", "id"))
    assert result.ok
    assert result.reason is None


def test_missing_key_is_rejected():
    result = validate_table(_table("status_stammdaten"))
    assert not result.ok
    assert "status_stammdaten" in result.reason
    assert "no primary key" in result.reason


def test_multi_column_key_is_rejected_with_table_and_key():
    result = validate_table(_table("region_stammdaten", "country", "code"))
    assert not result.ok
    assert "region_stammdaten" in result.reason
    assert "(country, code)" in result.reason
    assert "2 columns" in result.reason


def test_named_key_constraint_is_reported():
    table = TableDescriptor(
        name="region_stammdaten",
        columns=(
            ColumnDescriptor("a", "TEXT", is_primary_key=True),
            ColumnDescriptor("b", "TEXT", is_primary_key=True),
        ),
        primary_key_name="PK_REGION",
    )
    assert "'PK_REGION'" in validate_table(table).reason
