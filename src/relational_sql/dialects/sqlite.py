"""SQLite dialect: double-quoted identifiers, ``last_insert_rowid()`` readback."""

from .base import DelimitedSqlGenerator


class SQLiteSqlGenerator(DelimitedSqlGenerator):
    """SQLite command generator.

    Only an INTEGER PRIMARY KEY (the rowid alias) can be read back as a
    generated key.
    """

    name = "sqlite"
    last_generated_key_expression = "last_insert_rowid()"
