"""
Unit tests for SQL identifier quoting and table qualification.
"""

import pytest

from relational_sql.core.identifier import qualify_table, quote_identifier
from relational_sql.exceptions import UnsupportedDialectError


class TestQuoteIdentifier:
    """Tests for quote_identifier function."""

    def test_quote_ascii_column(self):
        """ASCII column names should be double-quoted."""
        assert quote_identifier("company_id") == '"company_id"'

    def test_quote_non_ascii_column(self):
        """Non-ASCII column names should be double-quoted."""
        assert quote_identifier("年金计划号") == '"年金计划号"'

    def test_quote_with_internal_quotes(self):
        """Internal double quotes should be escaped."""
        assert quote_identifier('column"name') == '"column""name"'

    def test_unknown_dialect_rejected(self):
        """Unknown dialects should not fall back to double quotes."""
        with pytest.raises(UnsupportedDialectError) as exc_info:
            quote_identifier("name", dialect="postgres")

        assert exc_info.value.available == ["postgresql", "sqlite", "sqlserver"]

    def test_quote_sqlserver_brackets(self):
        """SQL Server should use brackets."""
        assert quote_identifier("Order Details", dialect="sqlserver") == "[Order Details]"

    def test_quote_sqlserver_with_closing_bracket(self):
        """SQL Server closing brackets should be doubled."""
        assert quote_identifier("a]b", dialect="sqlserver") == "[a]]b]"

    def test_quote_sqlite(self):
        assert quote_identifier("name", dialect="sqlite") == '"name"'


class TestQualifyTable:
    """Tests for qualify_table function."""

    def test_qualify_with_schema(self):
        assert qualify_table("users", schema="public") == '"public"."users"'

    def test_qualify_without_schema(self):
        assert qualify_table("users") == '"users"'

    def test_qualify_sqlserver(self):
        assert qualify_table("Orders", schema="dbo", dialect="sqlserver") == "[dbo].[Orders]"
