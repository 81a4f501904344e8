"""Configuration management for relational_sql.

Usage:
    >>> from relational_sql.config import get_settings
    >>> settings = get_settings()
    >>> settings.default_dialect
    'sqlserver'
"""

from relational_sql.config.settings import DialectName, Settings, get_settings

__all__ = ["DialectName", "Settings", "get_settings"]
