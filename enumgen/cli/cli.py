#!/usr/bin/env python3
# Design: DESIGN.md
"""
Enum Generator CLI

Regenerates the Java enums of a consuming repository from its master data
tables.

Usage:
    # All commands auto-detect .enumgen/config.yaml from the current directory
    # or accept --db, --config and --project-root overrides.

    enumgen generate               # regenerate every master data enum
    enumgen generate --check-only  # exit 1 if any enum on disk is stale
    enumgen tables                 # show which tables qualify and why
"""

import argparse
import logging
import sqlite3
import sys
from contextlib import closing
from pathlib import Path

# Allow running as script or module
_HERE = Path(__file__).parent
sys.path.insert(0, str(_HERE.parent.parent))  # repo root

from enumgen.engine.config import CONFIG_DIR, load_generator_config
from enumgen.engine.driver import generate_enums
from enumgen.engine.errors import ConfigError, GenerationAbortedError
from enumgen.engine.models import GeneratorConfig
from enumgen.engine.naming import enum_type_name
from enumgen.engine.selector import matches
from enumgen.engine.source import SqliteSchemaSource, open_db
from enumgen.engine.validator import validate_table


def _find_project_root(start: Path | None = None) -> Path:
    """Walk up from start directory to find .enumgen/ directory."""
    current = start or Path.cwd()
    for candidate in [current] + list(current.parents):
        if (candidate / CONFIG_DIR).exists():
            return candidate
    return current  # fallback to cwd


def _load_config(args: argparse.Namespace) -> GeneratorConfig:
    """Load config from args or auto-discovery, applying the --db override."""
    project_root = Path(args.project_root) if args.project_root else _find_project_root()
    config = load_generator_config(project_root, args.config)
    if args.db:
        config.db_path = args.db
    return config


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------


def cmd_generate(args: argparse.Namespace) -> int:
    """Regenerate (or check) every master data enum."""
    try:
        config = _load_config(args)
        with closing(open_db(config.db_path)) as conn:
            source = SqliteSchemaSource(conn, config.db_schema)
            report = generate_enums(source, config, check_only=args.check_only)
    except (ConfigError, FileNotFoundError, sqlite3.DatabaseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    except GenerationAbortedError as exc:
        print(f"Aborted: {exc}", file=sys.stderr)
        return 1

    verb = "Checked" if args.check_only else "Generated"
    print(f"{verb} {len(report.generated)} enum(s) in {config.output_directory}")
    for item in report.generated:
        print(f"  {item.type_name:<40} {item.member_count:>4} member(s)  [{item.table}]")

    if report.rejected:
        print(f"\nSkipped {len(report.rejected)} table(s):")
        for table, reason in report.rejected:
            print(f"  {table}: {reason}")

    if report.failed:
        print(f"\nFailed {len(report.failed)} table(s):", file=sys.stderr)
        for table, error in report.failed:
            print(f"  {table}: {error}", file=sys.stderr)

    if report.stale:
        print(f"\n{len(report.stale)} enum(s) out of date; run 'enumgen generate':", file=sys.stderr)
        for path in report.stale:
            print(f"  {path}", file=sys.stderr)

    return 0 if report.ok else 1


def cmd_tables(args: argparse.Namespace) -> int:
    """List every table with its trigger and shape verdict."""
    try:
        config = _load_config(args)
        with closing(open_db(config.db_path)) as conn:
            tables = SqliteSchemaSource(conn, config.db_schema).list_tables()
    except (ConfigError, FileNotFoundError, sqlite3.DatabaseError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if not tables:
        print("No tables found.")
        return 0

    print(f"{'TABLE':<40} {'KEY':<30} {'STATUS'}")
    print("-" * 90)
    for table in tables:
        if not matches(table.name, config.trigger):
            status = "not master data"
        else:
            result = validate_table(table)
            if result.ok:
                status = f"→ {enum_type_name(table.name, config.suffix)}"
            else:
                status = "rejected (primary key)"
        print(f"{table.name:<40} {table.primary_key_label:<30} {status}")
    return 0


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="enumgen",
        description="Generate Java enums from master data tables",
    )
    parser.add_argument(
        "--db",
        metavar="PATH",
        help="Path to the master data database (default: read from .enumgen/config.yaml)",
    )
    parser.add_argument(
        "--config",
        metavar="PATH",
        help="Path to config.yaml (default: .enumgen/config.yaml)",
    )
    parser.add_argument(
        "--project-root",
        metavar="PATH",
        help="Path to consuming repo root (default: auto-detect from .enumgen/)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    # generate
    p_generate = subparsers.add_parser("generate", help="Regenerate master data enums")
    p_generate.add_argument(
        "--check-only",
        action="store_true",
        help="Compare with the files on disk instead of writing; exit 1 if stale",
    )
    p_generate.set_defaults(func=cmd_generate)

    # tables
    p_tables = subparsers.add_parser("tables", help="Show which tables qualify for generation")
    p_tables.set_defaults(func=cmd_tables)

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
