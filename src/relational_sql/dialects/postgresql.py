"""
PostgreSQL-specific SQL dialect implementation.

Identifiers are double-quoted. Each generated key column is read back from
its own sequence with ``currval(pg_get_serial_sequence(...))``, which covers
SERIAL and IDENTITY columns and any number of them per key.
"""

from typing import List, Sequence

from ..model import Association, Column, Table
from .base import DelimitedSqlGenerator


def _string_literal(text: str) -> str:
    escaped = text.replace("'", "''")
    return f"'{escaped}'"


class PostgreSQLSqlGenerator(DelimitedSqlGenerator):
    """PostgreSQL command generator."""

    name = "postgresql"

    def create_where_conditions_for_store_generated_keys(
        self, store_generated_key_columns: Sequence[Column], table: Table
    ) -> List[Association]:
        """
        Build one ``currval`` lookup per generated key column.

        The table argument of ``pg_get_serial_sequence`` is parsed as an
        identifier, so it carries the rendered (qualified, quoted) table
        reference. The column argument is taken literally and carries the
        bare column name.

        Example:
            >>> from relational_sql.model import Column, make_table
            >>> t = make_table("T", [Column("id", True)], key=["id"], schema="s")
            >>> PostgreSQLSqlGenerator(quote=False).create_where_conditions_for_store_generated_keys(
            ...     t.primary_key.columns, t
            ... )[0][1]
            "currval(pg_get_serial_sequence('s.T', 'id'))"
        """
        table_reference = _string_literal(self.delimit_table(table))
        return [
            (
                column,
                f"currval(pg_get_serial_sequence({table_reference}, "
                f"{_string_literal(column.name)}))",
            )
            for column in store_generated_key_columns
        ]
