"""
Single-operation command builders.

Thin string-returning wrappers over a dialect generator for callers that
render one operation at a time.
"""

from typing import Iterable

from ..generator import SqlGenerator
from ..model import Association, Column, Table
from .batch import CommandBatchBuilder


class CommandBuilder:
    """
    High-level builder returning the text of one operation's batch.

    Example:
        >>> from relational_sql.dialects import SqlServerSqlGenerator
        >>> from relational_sql.model import Column, make_table
        >>> table = make_table("Orders", [Column("id", True), Column("total")], key=["id"])
        >>> builder = CommandBuilder(SqlServerSqlGenerator())
        >>> print(builder.insert(table, [(table.get_column("total"), "@p0")]))
        INSERT INTO [Orders] ([total]) VALUES (@p0);
        SELECT [id] FROM [Orders] WHERE [id] = scope_identity()
    """

    def __init__(self, generator: SqlGenerator):
        """
        Initialize the CommandBuilder.

        Args:
            generator: Dialect generator to use for statement generation
        """
        self.generator = generator

    def _batch(self) -> CommandBatchBuilder:
        return CommandBatchBuilder(self.generator)

    def insert(self, table: Table, columns_to_parameters: Iterable[Association]) -> str:
        """
        Build an INSERT, followed by a readback SELECT when the table has
        store-generated columns.

        Args:
            table: Target table
            columns_to_parameters: Ordered (column, placeholder) pairs

        Returns:
            Batch text
        """
        return self._batch().add_insert(table, columns_to_parameters).build()

    def update(
        self,
        table: Table,
        column_values: Iterable[Association],
        where_conditions: Iterable[Association],
    ) -> str:
        """
        Build an UPDATE, followed by a readback SELECT of store-generated
        non-key columns when there are any.

        Args:
            table: Target table
            column_values: (column, value) pairs to SET
            where_conditions: (column, value) pairs identifying the row

        Returns:
            Batch text
        """
        return self._batch().add_update(table, column_values, where_conditions).build()

    def delete(self, table: Table, where_conditions: Iterable[Association]) -> str:
        """
        Build a DELETE. Deletes never carry a readback SELECT.

        Args:
            table: Target table
            where_conditions: (column, value) pairs identifying the row

        Returns:
            Batch text
        """
        return self._batch().add_delete(table, where_conditions).build()

    def select(
        self,
        table: Table,
        columns: Iterable[Column],
        where_conditions: Iterable[Association],
    ) -> str:
        """
        Build a plain SELECT over the given columns.

        Args:
            table: Source table
            columns: Columns to select, in output order
            where_conditions: (column, value) equality conditions

        Returns:
            Batch text
        """
        return self._batch().add_select(table, columns, where_conditions).build()
