"""
SQL identifier handling utilities.

Provides functions for quoting and qualifying SQL identifiers (table names,
column names) in the syntax of each supported dialect.
"""

from typing import Optional

from ..exceptions import UnsupportedDialectError

# Opening and closing delimiters per dialect
_DELIMITERS = {
    "postgresql": ('"', '"'),
    "sqlite": ('"', '"'),
    "sqlserver": ("[", "]"),
}


def quote_identifier(name: str, dialect: str = "postgresql") -> str:
    """
    Quote a SQL identifier (table or column name).

    Args:
        name: The identifier to quote
        dialect: Database dialect ("postgresql", "sqlite", "sqlserver")

    Returns:
        Properly quoted identifier

    Raises:
        UnsupportedDialectError: If the dialect has no delimiter syntax

    Examples:
        >>> quote_identifier("company_id")
        '"company_id"'
        >>> quote_identifier("Order Details", dialect="sqlserver")
        '[Order Details]'
    """
    try:
        opening, closing = _DELIMITERS[dialect]
    except KeyError:
        raise UnsupportedDialectError(dialect, sorted(_DELIMITERS)) from None
    # Escape the closing delimiter by doubling it
    escaped = name.replace(closing, closing * 2)
    return f"{opening}{escaped}{closing}"


def qualify_table(
    table: str, schema: Optional[str] = None, dialect: str = "postgresql"
) -> str:
    """
    Create a fully qualified table name with optional schema prefix.

    Args:
        table: Table name
        schema: Optional schema name
        dialect: Database dialect

    Returns:
        Qualified table name

    Examples:
        >>> qualify_table("users")
        '"users"'
        >>> qualify_table("users", schema="dbo", dialect="sqlserver")
        '[dbo].[users]'
    """
    quoted_table = quote_identifier(table, dialect)
    if schema:
        return f"{quote_identifier(schema, dialect)}.{quoted_table}"
    return quoted_table
