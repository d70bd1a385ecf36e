"""
enumgen — Java enum generation from master data tables.

Reads small, static reference tables ("Stammdaten") from a database and emits
one Java enum per qualifying table, so application code can refer to status
codes and categories by constant instead of by raw foreign-key value.
"""

__version__ = "0.1.0"
