"""
Batch composition.

Collects several DML operations into the text of one batch: the dialect's
batch header first, then each operation separated by the dialect's command
separator and a newline.
"""

import io
from typing import Any, Callable, Iterable

from ..generator import SqlGenerator
from ..model import Association, Column, Table
from ..utils.logging import get_logger

logger = get_logger(__name__)


class CommandBatchBuilder:
    """
    Accumulates operations into one batch.

    Example:
        >>> from relational_sql.dialects import SqlServerSqlGenerator
        >>> from relational_sql.model import Column, make_table
        >>> table = make_table("T", [Column("id"), Column("name")], key=["id"])
        >>> id_, name = table.columns
        >>> batch = CommandBatchBuilder(SqlServerSqlGenerator(quote=False))
        >>> _ = batch.add_delete(table, [(id_, "@p0")])
        >>> _ = batch.add_insert(table, [(id_, "@p1"), (name, "@p2")])
        >>> print(batch.build())
        DELETE FROM T WHERE id = @p0;
        INSERT INTO T (id, name) VALUES (@p1, @p2)
    """

    def __init__(self, generator: SqlGenerator):
        """
        Initialize the batch.

        Args:
            generator: Dialect generator rendering each operation
        """
        self.generator = generator
        self._command_text = io.StringIO()
        self._command_count = 0

    @property
    def command_count(self) -> int:
        """Number of operations added so far."""
        return self._command_count

    def _add_command(self, append: Callable[..., None], *args: Any) -> None:
        # An operation that fails leaves the batch unchanged
        command_text = io.StringIO()
        append(command_text, *args)

        if self._command_count == 0:
            self.generator.append_batch_header(self._command_text)
        else:
            self._command_text.write(self.generator.batch_command_separator)
            self._command_text.write("\n")
        self._command_text.write(command_text.getvalue())
        self._command_count += 1

    def add_insert(
        self, table: Table, columns_to_parameters: Iterable[Association]
    ) -> "CommandBatchBuilder":
        """Add an insert, with readback of store-generated columns."""
        self._add_command(
            self.generator.append_insert_operation, table, columns_to_parameters
        )
        return self

    def add_update(
        self,
        table: Table,
        column_values: Iterable[Association],
        where_conditions: Iterable[Association],
    ) -> "CommandBatchBuilder":
        """Add an update, with readback of store-generated non-key columns."""
        self._add_command(
            self.generator.append_update_operation, table, column_values, where_conditions
        )
        return self

    def add_delete(
        self, table: Table, where_conditions: Iterable[Association]
    ) -> "CommandBatchBuilder":
        """Add a delete."""
        self._add_command(
            self.generator.append_delete_operation, table, where_conditions
        )
        return self

    def add_select(
        self,
        table: Table,
        columns: Iterable[Column],
        where_conditions: Iterable[Association],
    ) -> "CommandBatchBuilder":
        """Add a plain select."""
        self._add_command(
            self.generator.append_select_command, table, columns, where_conditions
        )
        return self

    def build(self) -> str:
        """Return the batch text."""
        logger.debug(
            "batch_built",
            dialect=self.generator.name,
            commands=self._command_count,
        )
        return self._command_text.getvalue()
