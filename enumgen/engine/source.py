#!/usr/bin/env python3
# Design: DESIGN.md
"""
Schema Sources

A schema source supplies table descriptors and a forward-only row cursor per
table. Every cell a cursor yields is tagged with the native type name of its
column (String, Clob, Byte, Integer, ...), which is what the type mapper
works on. No runtime type lookup happens downstream.

SqliteSchemaSource reads an SQLite database:
- tables from sqlite_master, columns and primary-key flags from
  PRAGMA table_info
- declared SQL types resolved to native type names by resolve_native_type()
- rows from SELECT *, one fetch per row; the cursor is closed when the
  open_rows() context exits, on success and on failure

The connection itself belongs to the caller.
"""

import logging
import re
import sqlite3
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import ContextManager, Iterator

from .errors import RowReadError, UnresolvableTypeError
from .models import Cell, ColumnDescriptor, Row, TableDescriptor

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Declared SQL type → native type name
# ---------------------------------------------------------------------------

NATIVE_TYPE_NAMES: dict[str, str] = {
    # text
    "CLOB": "Clob",
    "TEXT": "String",
    "VARCHAR": "String",
    "CHAR": "String",
    "CHARACTER": "String",
    "NCHAR": "String",
    "NVARCHAR": "String",
    "VARYING CHARACTER": "String",
    "NATIVE CHARACTER": "String",
    # tiny integers and flags
    "TINYINT": "Byte",
    "BOOLEAN": "Byte",
    "BOOL": "Byte",
    "BIT": "Byte",
    # integers
    "SMALLINT": "Short",
    "INT2": "Short",
    "INT": "Integer",
    "INTEGER": "Integer",
    "MEDIUMINT": "Integer",
    "BIGINT": "Long",
    "INT8": "Long",
    "UNSIGNED BIG INT": "Long",
    # floating point and exact numerics
    "REAL": "Double",
    "DOUBLE": "Double",
    "DOUBLE PRECISION": "Double",
    "FLOAT": "Double",
    "NUMERIC": "BigDecimal",
    "DECIMAL": "BigDecimal",
    # temporal
    "DATE": "Date",
    "TIME": "Time",
    "DATETIME": "Timestamp",
    "TIMESTAMP": "Timestamp",
}

# SQLite affinity fallbacks for declared types not listed above, checked in order
_AFFINITY_FALLBACKS: list[tuple[str, str]] = [
    ("INT", "Integer"),
    ("CLOB", "Clob"),
    ("CHAR", "String"),
    ("TEXT", "String"),
    ("REAL", "Double"),
    ("FLOA", "Double"),
    ("DOUB", "Double"),
]

_TYPE_PARAMS = re.compile(r"\(.*\)")


def resolve_native_type(
    declared_type: str,
    column: str = "?",
    table: str | None = None,
) -> str:
    """
    Resolve a declared SQL column type to its native type name.

    Example:
        resolve_native_type("VARCHAR(40)") → "String"
        resolve_native_type("TINYINT")     → "Byte"

    Raises:
        UnresolvableTypeError: for empty, BLOB or unrecognized declared types
    """
    base = " ".join(_TYPE_PARAMS.sub("", declared_type or "").upper().split())
    if base in NATIVE_TYPE_NAMES:
        return NATIVE_TYPE_NAMES[base]
    if base and "BLOB" not in base:
        for needle, native in _AFFINITY_FALLBACKS:
            if needle in base:
                return native
    raise UnresolvableTypeError(declared_type, column, table)


def quote_identifier(name: str) -> str:
    """Quote an SQL identifier, doubling embedded quotes."""
    return '"' + name.replace('"', '""') + '"'


# ---------------------------------------------------------------------------
# Source interface
# ---------------------------------------------------------------------------


class SchemaSource(ABC):
    """Supplies tables and per-table row cursors to the driver."""

    @abstractmethod
    def list_tables(self) -> list[TableDescriptor]:
        """Return every table of the schema, in a stable order."""

    @abstractmethod
    def open_rows(
        self,
        table: TableDescriptor,
        order_by_primary_key: bool = False,
    ) -> ContextManager[Iterator[Row]]:
        """
        Open a forward-only cursor over table's rows.

        The returned context manager yields a single-pass iterator and
        releases the cursor on exit.
        """


# ---------------------------------------------------------------------------
# SQLite
# ---------------------------------------------------------------------------


def open_db(db_path: str | Path, read_only: bool = True) -> sqlite3.Connection:
    """
    Open an SQLite database for enum generation.

    read_only opens the file with mode=ro so a generation run can never
    modify the master data.

    Raises:
        FileNotFoundError: if db_path does not exist
    """
    path = Path(db_path)
    if not path.exists():
        raise FileNotFoundError(f"Database does not exist: {path}")
    if read_only:
        return sqlite3.connect(f"{path.resolve().as_uri()}?mode=ro", uri=True)
    return sqlite3.connect(str(path))


class SqliteSchemaSource(SchemaSource):
    """Schema source backed by an open sqlite3 connection."""

    def __init__(self, conn: sqlite3.Connection, schema: str = "main"):
        self.conn = conn
        self.schema = schema

    def list_tables(self) -> list[TableDescriptor]:
        rows = self.conn.execute(
            f"""
            SELECT name FROM {quote_identifier(self.schema)}.sqlite_master
            WHERE type = 'table' AND name NOT LIKE 'sqlite\\_%' ESCAPE '\\'
            ORDER BY name
            """
        ).fetchall()
        return [self._describe(name) for (name,) in rows]

    def _describe(self, table_name: str) -> TableDescriptor:
        info = self.conn.execute(
            f"PRAGMA {quote_identifier(self.schema)}.table_info({quote_identifier(table_name)})"
        ).fetchall()
        # table_info: cid, name, type, notnull, dflt_value, pk (1-based key position)
        columns = tuple(
            ColumnDescriptor(name=name, declared_type=decl or "", is_primary_key=pk > 0)
            for _cid, name, decl, _notnull, _default, pk in info
        )
        return TableDescriptor(name=table_name, columns=columns)

    @contextmanager
    def open_rows(
        self,
        table: TableDescriptor,
        order_by_primary_key: bool = False,
    ) -> Iterator[Iterator[Row]]:
        query = f"SELECT * FROM {quote_identifier(self.schema)}.{quote_identifier(table.name)}"
        if order_by_primary_key and table.primary_key_columns:
            keys = ", ".join(quote_identifier(c.name) for c in table.primary_key_columns)
            query += f" ORDER BY {keys}"

        try:
            cursor = self.conn.execute(query)
        except sqlite3.Error as exc:
            raise RowReadError(f"Query failed: {exc}", table.name) from exc

        logger.debug("Opened row cursor for '%s'", table.name)
        try:
            yield self._iter_rows(cursor, table)
        finally:
            cursor.close()
            logger.debug("Closed row cursor for '%s'", table.name)

    def _iter_rows(self, cursor: sqlite3.Cursor, table: TableDescriptor) -> Iterator[Row]:
        labels = [d[0] for d in cursor.description]
        native_types = []
        for label in labels:
            column = table.column(label)
            declared = column.declared_type if column else ""
            native_types.append(resolve_native_type(declared, label, table.name))

        while True:
            try:
                record = cursor.fetchone()
            except sqlite3.Error as exc:
                raise RowReadError(f"Row fetch failed: {exc}", table.name) from exc
            if record is None:
                return
            yield Row(tuple(
                Cell(label=label, value=value, native_type=native)
                for label, value, native in zip(labels, record, native_types)
            ))
