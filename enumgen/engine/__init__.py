"""
Enum Generator Engine — master data tables to Java enums.

Design: DESIGN.md

This package is the engine core. It is project-agnostic: which tables qualify,
where the database lives and where enums are written all come from the
consuming repository's .enumgen/ directory.
"""
