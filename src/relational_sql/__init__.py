"""
Dialect-aware DML command generation.

Renders INSERT, UPDATE, DELETE and SELECT text for a table description and
pre-rendered parameter placeholders, including the follow-up SELECT that
reads back store-generated column values.
"""

from .core.identifier import qualify_table, quote_identifier
from .core.parameters import build_parameter_associations, format_placeholder
from .dialects import (
    PostgreSQLSqlGenerator,
    SQLiteSqlGenerator,
    SqlServerSqlGenerator,
    get_generator,
)
from .exceptions import (
    InvariantViolationError,
    MissingArgumentError,
    SqlGenerationError,
    UnsupportedDialectError,
    UnsupportedGeneratedKeyError,
)
from .generator import SqlGenerator
from .model import Association, Column, PrimaryKey, Table, make_table
from .operations import CommandBatchBuilder, CommandBuilder

__all__ = [
    "Association",
    "Column",
    "PrimaryKey",
    "Table",
    "make_table",
    "SqlGenerator",
    "SqlServerSqlGenerator",
    "PostgreSQLSqlGenerator",
    "SQLiteSqlGenerator",
    "get_generator",
    "CommandBuilder",
    "CommandBatchBuilder",
    "quote_identifier",
    "qualify_table",
    "build_parameter_associations",
    "format_placeholder",
    "SqlGenerationError",
    "InvariantViolationError",
    "MissingArgumentError",
    "UnsupportedDialectError",
    "UnsupportedGeneratedKeyError",
]
