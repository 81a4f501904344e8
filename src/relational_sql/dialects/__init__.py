"""
SQL dialect registry.

Usage:
    >>> from relational_sql.dialects import get_generator
    >>> get_generator("postgresql", quote=False)
    PostgreSQLSqlGenerator(quote=False)
"""

from typing import Dict, Optional, Type

from ..config import get_settings
from ..exceptions import UnsupportedDialectError
from .base import DelimitedSqlGenerator
from .postgresql import PostgreSQLSqlGenerator
from .sqlite import SQLiteSqlGenerator
from .sqlserver import SqlServerSqlGenerator

DIALECTS: Dict[str, Type[DelimitedSqlGenerator]] = {
    SqlServerSqlGenerator.name: SqlServerSqlGenerator,
    PostgreSQLSqlGenerator.name: PostgreSQLSqlGenerator,
    SQLiteSqlGenerator.name: SQLiteSqlGenerator,
}


def get_generator(
    name: Optional[str] = None, quote: Optional[bool] = None
) -> DelimitedSqlGenerator:
    """
    Create the generator for a dialect.

    Args:
        name: Dialect name; defaults to the ``default_dialect`` setting
        quote: Quote identifiers; defaults to the ``quote_identifiers`` setting

    Returns:
        A new generator instance

    Raises:
        UnsupportedDialectError: If no dialect is registered under ``name``
    """
    dialect_name = (name or get_settings().default_dialect).lower()
    try:
        generator_class = DIALECTS[dialect_name]
    except KeyError:
        raise UnsupportedDialectError(dialect_name, sorted(DIALECTS)) from None
    return generator_class(quote=quote)


__all__ = [
    "DIALECTS",
    "DelimitedSqlGenerator",
    "PostgreSQLSqlGenerator",
    "SQLiteSqlGenerator",
    "SqlServerSqlGenerator",
    "get_generator",
]
