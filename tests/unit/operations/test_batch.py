"""
Unit tests for CommandBatchBuilder and CommandBuilder.
"""

import pytest

from relational_sql.dialects import SqlServerSqlGenerator
from relational_sql.exceptions import InvariantViolationError
from relational_sql.model import Column, make_table
from relational_sql.operations import CommandBatchBuilder, CommandBuilder

from conftest import GENERATED_KEY_LOOKUP, LookupSqlGenerator


class HeaderGenerator(LookupSqlGenerator):
    """Generator writing a batch header and a GO separator."""

    def append_batch_header(self, command_text):
        command_text.write("SET NOCOUNT ON;\n")

    @property
    def batch_command_separator(self):
        return "\nGO"


class TestCommandBatchBuilder:
    """Tests for multi-operation batches."""

    def test_empty_batch(self, generator):
        batch = CommandBatchBuilder(generator)
        assert batch.build() == ""
        assert batch.command_count == 0

    def test_operations_are_separated(self, generator, identity_table, plain_table):
        id_, name = plain_table.columns
        batch = (
            CommandBatchBuilder(generator)
            .add_delete(plain_table, [(id_, "@p0")])
            .add_insert(identity_table, [(identity_table.get_column("name"), "@p1")])
            .add_update(plain_table, [(name, "@p2")], [(id_, "@p3")])
        )

        assert batch.command_count == 3
        assert batch.build() == (
            "DELETE FROM T WHERE id = @p0;\n"
            "INSERT INTO T (name) VALUES (@p1);\n"
            f"SELECT id FROM T WHERE id = {GENERATED_KEY_LOOKUP};\n"
            "UPDATE T SET name = @p2 WHERE id = @p3"
        )

    def test_header_written_once(self, plain_table):
        id_, name = plain_table.columns
        batch = (
            CommandBatchBuilder(HeaderGenerator())
            .add_select(plain_table, [name], [(id_, "@p0")])
            .add_select(plain_table, [name], [(id_, "@p1")])
        )

        assert batch.build() == (
            "SET NOCOUNT ON;\n"
            "SELECT name FROM T WHERE id = @p0\nGO\n"
            "SELECT name FROM T WHERE id = @p1"
        )

    def test_invariant_violation_propagates(self, generator, plain_table):
        with pytest.raises(InvariantViolationError):
            CommandBatchBuilder(generator).add_insert(plain_table, [])

    def test_failed_operation_leaves_batch_unchanged(self, generator, plain_table):
        keyless = make_table("K", [Column("x"), Column("ts", is_store_generated=True)])
        batch = CommandBatchBuilder(generator).add_delete(
            plain_table, [(plain_table.get_column("id"), "@p0")]
        )

        with pytest.raises(InvariantViolationError):
            batch.add_insert(keyless, [(keyless.get_column("x"), "@p1")])

        assert batch.build() == "DELETE FROM T WHERE id = @p0"
        assert batch.command_count == 1

    def test_failed_first_operation_writes_no_header(self, plain_table):
        batch = CommandBatchBuilder(HeaderGenerator())

        with pytest.raises(InvariantViolationError):
            batch.add_select(plain_table, [], [(plain_table.get_column("id"), "@p0")])

        assert batch.build() == ""
        assert batch.command_count == 0

        batch.add_delete(plain_table, [(plain_table.get_column("id"), "@p0")])
        assert batch.build() == "SET NOCOUNT ON;\nDELETE FROM T WHERE id = @p0"


class TestCommandBuilder:
    """Tests for single-operation builders."""

    @pytest.fixture
    def builder(self):
        return CommandBuilder(SqlServerSqlGenerator(quote=False))

    @pytest.fixture
    def products(self):
        return make_table(
            "Products",
            [Column("id", True), Column("name"), Column("updated", True)],
            key=["id"],
        )

    def test_insert(self, builder, products):
        sql = builder.insert(products, [(products.get_column("name"), "@p0")])
        assert sql == (
            "INSERT INTO Products (name) VALUES (@p0);\n"
            "SELECT id, updated FROM Products WHERE id = scope_identity()"
        )

    def test_update(self, builder, products):
        id_, name, _ = products.columns
        sql = builder.update(products, [(name, "@p0")], [(id_, "@p1")])
        assert sql == (
            "UPDATE Products SET name = @p0 WHERE id = @p1;\n"
            "SELECT updated FROM Products WHERE id = @p1"
        )

    def test_delete(self, builder, products):
        sql = builder.delete(products, [(products.get_column("id"), "@p0")])
        assert sql == "DELETE FROM Products WHERE id = @p0"

    def test_select(self, builder, products):
        id_, name, _ = products.columns
        sql = builder.select(products, [id_, name], [(id_, "@p0")])
        assert sql == "SELECT id, name FROM Products WHERE id = @p0"

    def test_each_call_is_independent(self, builder, products):
        id_ = products.get_column("id")
        first = builder.delete(products, [(id_, "@p0")])
        second = builder.delete(products, [(id_, "@p0")])
        assert first == second
