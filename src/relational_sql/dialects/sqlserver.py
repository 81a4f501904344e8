"""SQL Server dialect: bracket-delimited identifiers, ``scope_identity()`` readback."""

from .base import DelimitedSqlGenerator


class SqlServerSqlGenerator(DelimitedSqlGenerator):
    """SQL Server command generator."""

    name = "sqlserver"
    last_generated_key_expression = "scope_identity()"
