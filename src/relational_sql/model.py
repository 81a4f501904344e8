"""Table and column value types consumed by the command generator.

The generator treats these as already-resolved, immutable descriptions of
the store schema. All types are frozen dataclasses so they can be shared
across concurrent generation calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional, Tuple

from .exceptions import InvariantViolationError


@dataclass(frozen=True)
class Column:
    """A single table column."""

    name: str
    is_store_generated: bool = False


# An ordered pairing of a column with rendered placeholder or value text.
Association = Tuple[Column, str]


@dataclass(frozen=True)
class PrimaryKey:
    """Ordered subset of a table's columns identifying a row."""

    columns: Tuple[Column, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))

    def __contains__(self, column: object) -> bool:
        return column in self.columns

    def __iter__(self) -> Iterator[Column]:
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self.columns)


@dataclass(frozen=True)
class Table:
    """
    A table description.

    Args:
        name: Table name
        columns: Columns in declaration order
        primary_key: Primary key; defaults to an empty key
        schema: Optional schema used to qualify the table name
    """

    name: str
    columns: Tuple[Column, ...]
    primary_key: PrimaryKey = field(default_factory=PrimaryKey)
    schema: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "columns", tuple(self.columns))
        unknown = [c.name for c in self.primary_key if c not in self.columns]
        if unknown:
            raise InvariantViolationError(
                f"Primary key columns {unknown} are not columns of table '{self.name}'",
                invariant="primary key subset of columns",
                argument="primary_key",
            )

    def get_column(self, name: str) -> Column:
        """Return the column with the given name."""
        for column in self.columns:
            if column.name == name:
                return column
        raise KeyError(f"Table '{self.name}' has no column '{name}'")

    def get_store_generated_columns(self) -> Tuple[Column, ...]:
        """Return store-generated columns in declaration order."""
        return tuple(c for c in self.columns if c.is_store_generated)


def make_table(
    name: str,
    columns: Iterable[Column],
    key: Iterable[str] = (),
    schema: Optional[str] = None,
) -> Table:
    """
    Build a Table, resolving primary key columns by name.

    Examples:
        >>> t = make_table("T", [Column("id", True), Column("name")], key=["id"])
        >>> [c.name for c in t.primary_key]
        ['id']
    """
    columns = tuple(columns)
    by_name = {c.name: c for c in columns}
    missing = [k for k in key if k not in by_name]
    if missing:
        raise InvariantViolationError(
            f"Primary key columns {missing} are not columns of table '{name}'",
            invariant="primary key subset of columns",
            argument="key",
        )
    return Table(
        name=name,
        columns=columns,
        primary_key=PrimaryKey(tuple(by_name[k] for k in key)),
        schema=schema,
    )


__all__ = ["Column", "Association", "PrimaryKey", "Table", "make_table"]
