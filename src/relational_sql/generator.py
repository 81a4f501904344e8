"""
Dialect-agnostic DML command generation.

``SqlGenerator`` renders INSERT, UPDATE, DELETE and SELECT text into a
writable text sink. When a table has store-generated columns, insert and
update operations append a follow-up SELECT to the same batch so the values
assigned by the database can be read back.

Concrete dialects subclass ``SqlGenerator`` and supply the generated-key
lookup; every other method has a default that dialects may override.

Example:
    >>> import io
    >>> from relational_sql.dialects import SqlServerSqlGenerator
    >>> from relational_sql.model import Column, make_table
    >>> table = make_table("T", [Column("id", True), Column("name")], key=["id"])
    >>> sink = io.StringIO()
    >>> SqlServerSqlGenerator(quote=False).append_insert_operation(
    ...     sink, table, [(table.get_column("name"), "@p0")]
    ... )
    >>> print(sink.getvalue())
    INSERT INTO T (name) VALUES (@p0);
    SELECT id FROM T WHERE id = scope_identity()
"""

import io
from abc import ABC, abstractmethod
from typing import Iterable, List, NoReturn, Optional, Sequence, TextIO

from .exceptions import InvariantViolationError, check_not_none
from .model import Association, Column, Table
from .utils.logging import get_logger

logger = get_logger(__name__)


class SqlGenerator(ABC):
    """Base class for dialect-specific DML generators."""

    name = "generic"

    # ------------------------------------------------------------------
    # Dialect hooks
    # ------------------------------------------------------------------

    @abstractmethod
    def create_where_conditions_for_store_generated_keys(
        self, store_generated_key_columns: Sequence[Column], table: Table
    ) -> Iterable[Association]:
        """
        Build WHERE conditions locating a just-inserted row by its generated keys.

        Args:
            store_generated_key_columns: Primary key columns whose values the
                database assigned during the insert
            table: Table the row was inserted into

        Returns:
            (column, lookup expression) pairs, e.g. ``(id, "scope_identity()")``
        """

    @property
    def batch_command_separator(self) -> str:
        """Text placed between statements of one batch."""
        return ";"

    def append_batch_header(self, command_text: TextIO) -> None:
        """Write text that must precede the first statement of a batch."""
        check_not_none(command_text, "command_text")

    def quote_identifier(self, name: str) -> str:
        """Render a column or table name. The base generator does not quote."""
        return name

    def delimit_table(self, table: Table) -> str:
        """Render a table reference, qualified by its schema when it has one."""
        if table.schema:
            return f"{self.quote_identifier(table.schema)}.{self.quote_identifier(table.name)}"
        return self.quote_identifier(table.name)

    # ------------------------------------------------------------------
    # Batch operations
    # ------------------------------------------------------------------

    def append_insert_operation(
        self,
        command_text: TextIO,
        table: Table,
        columns_to_parameters: Iterable[Association],
    ) -> None:
        """
        Append an INSERT and, if the table has store-generated columns, the readback SELECT.

        The readback WHERE clause uses the caller-supplied key values first,
        followed by dialect lookups for any key columns the store generated.

        Args:
            command_text: Sink receiving the command text
            table: Target table
            columns_to_parameters: Ordered (column, placeholder) pairs to insert
        """
        check_not_none(command_text, "command_text")
        check_not_none(table, "table")
        check_not_none(columns_to_parameters, "columns_to_parameters")

        columns_to_parameters = list(columns_to_parameters)
        # Rendered locally so a failed check leaves command_text untouched
        operation_text = io.StringIO()
        self.append_insert_command(operation_text, table, columns_to_parameters)

        store_generated_columns = table.get_store_generated_columns()
        store_generated_key_columns: List[Column] = []
        if store_generated_columns:
            primary_key = table.primary_key
            where_conditions: List[Association] = [
                (column, value)
                for column, value in columns_to_parameters
                if column in primary_key
            ]

            store_generated_key_columns = [
                c for c in store_generated_columns if c in primary_key
            ]
            if store_generated_key_columns:
                where_conditions.extend(
                    self.create_where_conditions_for_store_generated_keys(
                        store_generated_key_columns, table
                    )
                )

            self._append_readback(
                operation_text, table, store_generated_columns, where_conditions
            )

        command_text.write(operation_text.getvalue())
        logger.debug(
            "insert_operation_generated",
            table=table.name,
            columns=len(columns_to_parameters),
            readback=bool(store_generated_columns),
            generated_keys=len(store_generated_key_columns),
        )

    def append_update_operation(
        self,
        command_text: TextIO,
        table: Table,
        column_values: Iterable[Association],
        where_conditions: Iterable[Association],
    ) -> None:
        """
        Append an UPDATE and, if needed, a readback of store-generated non-key columns.

        Key columns are never read back after an update; the readback reuses
        the update's WHERE conditions as given.

        Args:
            command_text: Sink receiving the command text
            table: Target table
            column_values: (column, value) pairs for the SET list
            where_conditions: (column, value) pairs identifying the row
        """
        check_not_none(command_text, "command_text")
        check_not_none(table, "table")
        check_not_none(column_values, "column_values")
        check_not_none(where_conditions, "where_conditions")

        column_values = list(column_values)
        where_conditions = list(where_conditions)
        operation_text = io.StringIO()
        self.append_update_command(operation_text, table, column_values, where_conditions)

        primary_key = table.primary_key
        store_generated_non_key_columns = [
            c for c in table.get_store_generated_columns() if c not in primary_key
        ]

        if store_generated_non_key_columns:
            self._append_readback(
                operation_text, table, store_generated_non_key_columns, where_conditions
            )

        command_text.write(operation_text.getvalue())
        logger.debug(
            "update_operation_generated",
            table=table.name,
            columns=len(column_values),
            readback=bool(store_generated_non_key_columns),
        )

    def append_delete_operation(
        self,
        command_text: TextIO,
        table: Table,
        where_conditions: Iterable[Association],
    ) -> None:
        """Append a DELETE. Deletes never need a readback."""
        self.append_delete_command(command_text, table, where_conditions)

    def _append_readback(
        self,
        command_text: TextIO,
        table: Table,
        columns: Sequence[Column],
        where_conditions: Sequence[Association],
    ) -> None:
        select_text = io.StringIO()
        self.append_select_command(select_text, table, columns, where_conditions)

        command_text.write(self.batch_command_separator)
        command_text.write("\n")
        command_text.write(select_text.getvalue())
        logger.debug("readback_appended", table=table.name, columns=len(columns))

    # ------------------------------------------------------------------
    # Statements
    # ------------------------------------------------------------------

    def append_insert_command(
        self,
        command_text: TextIO,
        table: Table,
        columns_to_parameters: Iterable[Association],
    ) -> None:
        check_not_none(command_text, "command_text")
        check_not_none(table, "table")
        check_not_none(columns_to_parameters, "columns_to_parameters")

        columns_to_parameters = list(columns_to_parameters)
        self.append_insert_command_header(
            command_text, table, [column for column, _ in columns_to_parameters]
        )
        command_text.write(" ")
        self.append_values(command_text, [value for _, value in columns_to_parameters])

    def append_delete_command(
        self,
        command_text: TextIO,
        table: Table,
        where_conditions: Iterable[Association],
    ) -> None:
        check_not_none(command_text, "command_text")
        check_not_none(table, "table")
        check_not_none(where_conditions, "where_conditions")

        self.append_delete_command_header(command_text, table)
        command_text.write(" ")
        self.append_where_clause(command_text, where_conditions)

    def append_update_command(
        self,
        command_text: TextIO,
        table: Table,
        column_values: Iterable[Association],
        where_conditions: Iterable[Association],
    ) -> None:
        check_not_none(command_text, "command_text")
        check_not_none(table, "table")
        check_not_none(column_values, "column_values")
        check_not_none(where_conditions, "where_conditions")

        self.append_update_command_header(command_text, table, column_values)
        command_text.write(" ")
        self.append_where_clause(command_text, where_conditions)

    def append_select_command(
        self,
        command_text: TextIO,
        table: Table,
        columns: Iterable[Column],
        where_conditions: Iterable[Association],
    ) -> None:
        check_not_none(command_text, "command_text")
        check_not_none(table, "table")
        check_not_none(columns, "columns")
        check_not_none(where_conditions, "where_conditions")

        self.append_select_command_header(command_text, columns)
        command_text.write(" ")
        self.append_from_clause(command_text, table)
        command_text.write(" ")
        self.append_where_clause(command_text, where_conditions)

    # ------------------------------------------------------------------
    # Clauses
    # ------------------------------------------------------------------

    def append_insert_command_header(
        self, command_text: TextIO, table: Table, columns: Iterable[Column]
    ) -> None:
        check_not_none(command_text, "command_text")
        check_not_none(table, "table")
        check_not_none(columns, "columns")

        column_names = [self.quote_identifier(c.name) for c in columns]
        # TODO: emit the dialect's DEFAULT VALUES form once tables whose columns
        # are all store-generated need to be inserted.
        if not column_names:
            _fail("INSERT requires at least one column", "empty column list", "columns")

        command_text.write(
            f"INSERT INTO {self.delimit_table(table)} ({', '.join(column_names)})"
        )

    def append_delete_command_header(self, command_text: TextIO, table: Table) -> None:
        check_not_none(command_text, "command_text")
        check_not_none(table, "table")

        command_text.write(f"DELETE FROM {self.delimit_table(table)}")

    def append_update_command_header(
        self,
        command_text: TextIO,
        table: Table,
        column_values: Iterable[Association],
    ) -> None:
        check_not_none(command_text, "command_text")
        check_not_none(table, "table")
        check_not_none(column_values, "column_values")

        assignments = [
            f"{self.quote_identifier(column.name)} = {value}"
            for column, value in column_values
        ]
        if not assignments:
            _fail("UPDATE requires at least one assignment", "empty set list", "column_values")

        command_text.write(
            f"UPDATE {self.delimit_table(table)} SET {', '.join(assignments)}"
        )

    def append_select_command_header(
        self, command_text: TextIO, columns: Iterable[Column]
    ) -> None:
        check_not_none(command_text, "command_text")
        check_not_none(columns, "columns")

        column_names = [self.quote_identifier(c.name) for c in columns]
        if not column_names:
            _fail("SELECT requires at least one column", "empty column list", "columns")

        command_text.write(f"SELECT {', '.join(column_names)}")

    def append_from_clause(self, command_text: TextIO, table: Table) -> None:
        check_not_none(command_text, "command_text")
        check_not_none(table, "table")

        command_text.write(f"FROM {self.delimit_table(table)}")

    def append_values(
        self, command_text: TextIO, value_parameter_names: Iterable[str]
    ) -> None:
        check_not_none(command_text, "command_text")
        check_not_none(value_parameter_names, "value_parameter_names")

        values = list(value_parameter_names)
        if not values:
            _fail(
                "VALUES requires at least one value",
                "empty value list",
                "value_parameter_names",
            )

        command_text.write(f"VALUES ({', '.join(values)})")

    def append_where_clause(
        self, command_text: TextIO, where_conditions: Iterable[Association]
    ) -> None:
        """
        Append ``WHERE col = value AND ...``.

        Only equality conditions are supported.
        """
        check_not_none(command_text, "command_text")
        check_not_none(where_conditions, "where_conditions")

        conditions = [
            f"{self.quote_identifier(column.name)} = {value}"
            for column, value in where_conditions
        ]
        if not conditions:
            _fail(
                "WHERE requires at least one condition",
                "empty where conditions",
                "where_conditions",
            )

        command_text.write(f"WHERE {' AND '.join(conditions)}")


def _fail(message: str, invariant: str, argument: Optional[str] = None) -> NoReturn:
    logger.error("invariant_violated", invariant=invariant, argument=argument)
    raise InvariantViolationError(message, invariant=invariant, argument=argument)


__all__ = ["SqlGenerator"]
