#!/usr/bin/env python3
# Design: DESIGN.md
"""
Enum Generator Configuration Reader

Reads project-specific configuration from the consuming repository's
.enumgen/config.yaml:
- database  — SQLite file and schema holding the master data
- trigger   — which tables are master data (name substring or allow-list)
- output    — target directory, Java package and type-name suffix
- generation — strictness, row ordering and error policy

The file is optional; every setting has a default. The ENUMGEN_DB environment
variable overrides database.path.
"""

import os
import re
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError
from .models import GeneratorConfig, Trigger, TriggerMode


CONFIG_DIR = ".enumgen"
CONFIG_FILE = "config.yaml"
DB_ENV_VAR = "ENUMGEN_DB"

# ---------------------------------------------------------------------------
# Default config.yaml (used when no .enumgen/config.yaml exists)
# ---------------------------------------------------------------------------

DEFAULT_CONFIG_YAML = """
database:
  path: "master_data.db"
  schema: "main"

trigger:
  mode: "substring"
  marker: "stammdaten"
  tables: []

output:
  directory: "generated/enums"
  package: null
  suffix: "Enum"

generation:
  strict_types: false
  order_by_primary_key: false
  fail_fast: false
"""

_JAVA_PACKAGE = re.compile(r"^[A-Za-z_$][\w$]*(\.[A-Za-z_$][\w$]*)*$")


# ---------------------------------------------------------------------------
# Section parsers
# ---------------------------------------------------------------------------


def _parse_trigger(section: dict[str, Any]) -> Trigger:
    """Parse the trigger section into a Trigger."""
    mode = section.get("mode", TriggerMode.SUBSTRING)
    if mode not in TriggerMode.ALL:
        raise ConfigError(
            f"Invalid trigger.mode '{mode}'. Valid modes: {sorted(TriggerMode.ALL)}"
        )

    marker = str(section.get("marker", "stammdaten") or "")
    tables = frozenset(str(t) for t in (section.get("tables") or []))

    if mode == TriggerMode.SUBSTRING and not marker:
        raise ConfigError("trigger.marker must be non-empty in substring mode")
    if mode == TriggerMode.ALLOW_LIST and not tables:
        raise ConfigError("trigger.tables must list at least one table in allow_list mode")

    return Trigger(mode=mode, marker=marker, tables=tables)


def _parse_flag(section: dict[str, Any], key: str) -> bool:
    value = section.get(key, False)
    if not isinstance(value, bool):
        raise ConfigError(f"generation.{key} must be true or false, got {value!r}")
    return value


def _parse_package(value: Any) -> str | None:
    if value is None or value == "":
        return None
    package = str(value)
    if not _JAVA_PACKAGE.match(package):
        raise ConfigError(f"output.package '{package}' is not a valid Java package name")
    return package


# ---------------------------------------------------------------------------
# config.yaml loader
# ---------------------------------------------------------------------------


def parse_generator_config(config_doc: dict[str, Any], project_root: str | Path) -> GeneratorConfig:
    """
    Build a GeneratorConfig from a parsed config.yaml document.

    Relative database and output paths resolve against project_root.
    """
    project_root = Path(project_root)

    db_section = config_doc.get("database") or {}
    db_path = os.environ.get(DB_ENV_VAR) or db_section.get("path", "master_data.db")
    if not Path(db_path).is_absolute():
        db_path = str(project_root / db_path)
    db_schema = db_section.get("schema", "main")

    trigger = _parse_trigger(config_doc.get("trigger") or {})

    output_section = config_doc.get("output") or {}
    output_directory = output_section.get("directory", "generated/enums")
    if not Path(output_directory).is_absolute():
        output_directory = str(project_root / output_directory)
    package = _parse_package(output_section.get("package"))
    suffix = str(output_section.get("suffix", "Enum") or "")

    generation_section = config_doc.get("generation") or {}

    return GeneratorConfig(
        db_path=db_path,
        db_schema=db_schema,
        trigger=trigger,
        output_directory=output_directory,
        package=package,
        suffix=suffix,
        strict_types=_parse_flag(generation_section, "strict_types"),
        order_by_primary_key=_parse_flag(generation_section, "order_by_primary_key"),
        fail_fast=_parse_flag(generation_section, "fail_fast"),
    )


def load_generator_config(
    project_root: str | Path,
    config_yaml_path: str | Path | None = None,
) -> GeneratorConfig:
    """
    Load GeneratorConfig from .enumgen/config.yaml.

    Args:
        project_root: Root of the consuming repository.
        config_yaml_path: Override path for config.yaml (default: .enumgen/config.yaml).

    Returns:
        GeneratorConfig with all settings resolved (defaults applied where missing).

    Raises:
        ConfigError: if the file is not valid YAML, not a mapping, or a
            setting is invalid.
    """
    project_root = Path(project_root)
    config_path = (
        Path(config_yaml_path) if config_yaml_path
        else project_root / CONFIG_DIR / CONFIG_FILE
    )

    if config_path.exists():
        try:
            config_doc = yaml.safe_load(config_path.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Cannot parse {config_path}: {exc}") from exc
    else:
        config_doc = yaml.safe_load(DEFAULT_CONFIG_YAML) or {}

    if not isinstance(config_doc, dict):
        raise ConfigError(f"{config_path} must contain a YAML mapping")

    return parse_generator_config(config_doc, project_root)
