"""
SQL parameter placeholder utilities.

Builds ordered (column, placeholder) associations for the generator from a
column sequence. Binding the actual values is the caller's job.
"""

from typing import Iterable, List

from ..model import Association, Column

PLACEHOLDER_STYLES = ("at", "colon", "dollar", "qmark")


def format_placeholder(index: int, style: str = "at") -> str:
    """
    Render a single positional placeholder.

    Examples:
        >>> format_placeholder(0)
        '@p0'
        >>> format_placeholder(0, style="dollar")
        '$1'
    """
    if style == "at":
        return f"@p{index}"
    if style == "colon":
        return f":p{index}"
    if style == "dollar":
        # PostgreSQL positional parameters are 1-based
        return f"${index + 1}"
    if style == "qmark":
        return "?"
    raise ValueError(
        f"Unknown placeholder style '{style}' (expected one of {', '.join(PLACEHOLDER_STYLES)})"
    )


def build_parameter_associations(
    columns: Iterable[Column], style: str = "at", start: int = 0
) -> List[Association]:
    """
    Pair each column with a positional placeholder.

    Args:
        columns: Columns in the order their values will be bound
        style: Placeholder style ("at", "colon", "dollar", "qmark")
        start: Index of the first placeholder, so several clauses of one
            batch can share a parameter sequence

    Returns:
        List of (column, placeholder) associations

    Examples:
        >>> from relational_sql.model import Column
        >>> build_parameter_associations([Column("id"), Column("name")])
        [(Column(name='id', is_store_generated=False), '@p0'), (Column(name='name', is_store_generated=False), '@p1')]
    """
    return [
        (column, format_placeholder(start + offset, style))
        for offset, column in enumerate(columns)
    ]
