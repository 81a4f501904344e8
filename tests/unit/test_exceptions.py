"""Unit tests for the command generation exception hierarchy."""

import pytest

from relational_sql.exceptions import (
    InvariantViolationError,
    MissingArgumentError,
    SqlGenerationError,
    UnsupportedDialectError,
    UnsupportedGeneratedKeyError,
    check_not_none,
)


def test_invariant_violation_message_includes_context():
    error = InvariantViolationError("bad call", invariant="empty value list", argument="values")

    assert str(error) == "bad call (invariant='empty value list', argument='values')"
    assert isinstance(error, SqlGenerationError)


def test_invariant_violation_without_context():
    assert str(InvariantViolationError("bad call")) == "bad call"


def test_check_not_none_passes_value_through():
    assert check_not_none("T", "table") == "T"


def test_check_not_none_raises_missing_argument():
    with pytest.raises(MissingArgumentError) as exc_info:
        check_not_none(None, "table")

    assert exc_info.value.argument == "table"
    assert exc_info.value.invariant == "not none"
    assert isinstance(exc_info.value, InvariantViolationError)


def test_unsupported_dialect_lists_available():
    error = UnsupportedDialectError("oracle", ["postgresql", "sqlserver"])
    assert "oracle" in str(error)
    assert "postgresql, sqlserver" in str(error)


def test_unsupported_generated_key_names_columns():
    error = UnsupportedGeneratedKeyError("sqlite", ["a", "b"])
    assert "sqlite" in str(error)
    assert "a, b" in str(error)
