"""
Exception hierarchy for SQL command generation.

Invariant violations are programming errors raised by a malformed call from
the surrounding pipeline. They carry the violated invariant so the failure is
diagnosable from the message alone.
"""

from typing import Any, Optional


class SqlGenerationError(Exception):
    """Base exception for all command generation errors."""

    pass


class InvariantViolationError(SqlGenerationError):
    """
    Raised when a generation call violates a fail-fast invariant.

    Args:
        message: Error description
        invariant: Short name of the violated invariant (e.g. "empty column list")
        argument: Name of the offending argument (optional)
    """

    def __init__(
        self,
        message: str,
        invariant: Optional[str] = None,
        argument: Optional[str] = None,
    ):
        self.invariant = invariant
        self.argument = argument

        context_parts = []
        if invariant:
            context_parts.append(f"invariant='{invariant}'")
        if argument:
            context_parts.append(f"argument='{argument}'")

        if context_parts:
            full_message = f"{message} ({', '.join(context_parts)})"
        else:
            full_message = message

        super().__init__(full_message)


class MissingArgumentError(InvariantViolationError):
    """Raised when a required argument is None."""

    def __init__(self, argument: str):
        super().__init__(
            "Required argument is missing", invariant="not none", argument=argument
        )


class UnsupportedDialectError(SqlGenerationError):
    """Raised when a dialect name is not registered."""

    def __init__(self, name: str, available: Optional[list] = None):
        self.name = name
        self.available = available or []
        message = f"Unsupported SQL dialect '{name}'"
        if self.available:
            message = f"{message} (available: {', '.join(self.available)})"
        super().__init__(message)


class UnsupportedGeneratedKeyError(SqlGenerationError):
    """
    Raised when a dialect cannot look up the requested store-generated keys.

    Args:
        dialect: Dialect name
        columns: Names of the store-generated key columns
    """

    def __init__(self, dialect: str, columns: list):
        self.dialect = dialect
        self.columns = columns
        super().__init__(
            f"Dialect '{dialect}' can read back at most one store-generated key column, "
            f"got {len(columns)}: {', '.join(columns)}"
        )


def check_not_none(value: Any, argument: str) -> Any:
    """
    Return value unchanged, raising MissingArgumentError when it is None.

    Examples:
        >>> check_not_none("users", "table")
        'users'
    """
    if value is None:
        raise MissingArgumentError(argument)
    return value


__all__ = [
    "SqlGenerationError",
    "InvariantViolationError",
    "MissingArgumentError",
    "UnsupportedDialectError",
    "UnsupportedGeneratedKeyError",
    "check_not_none",
]
