"""
Shared behaviour for concrete SQL dialects.

Concrete dialects quote identifiers in their own syntax. By default a
generated key is read back through a session-scoped "last generated value"
function, which limits the lookup to a single key column.
"""

from typing import List, Optional, Sequence

from ..config import get_settings
from ..core.identifier import qualify_table, quote_identifier
from ..exceptions import UnsupportedGeneratedKeyError
from ..generator import SqlGenerator
from ..model import Association, Column, Table


class DelimitedSqlGenerator(SqlGenerator):
    """
    Generator for a dialect with delimited identifiers.

    Args:
        quote: Quote identifiers; defaults to the ``quote_identifiers`` setting
    """

    # Expression returning the key generated by the last insert on this session
    last_generated_key_expression: str = ""

    def __init__(self, quote: Optional[bool] = None):
        self.quote = get_settings().quote_identifiers if quote is None else quote

    def quote_identifier(self, name: str) -> str:
        if not self.quote:
            return name
        return quote_identifier(name, dialect=self.name)

    def delimit_table(self, table: Table) -> str:
        if not self.quote:
            return super().delimit_table(table)
        return qualify_table(table.name, table.schema, dialect=self.name)

    def create_where_conditions_for_store_generated_keys(
        self, store_generated_key_columns: Sequence[Column], table: Table
    ) -> List[Association]:
        # The session function only reports a single generated value
        if len(store_generated_key_columns) > 1:
            raise UnsupportedGeneratedKeyError(
                self.name, [c.name for c in store_generated_key_columns]
            )
        return [
            (column, self.last_generated_key_expression)
            for column in store_generated_key_columns
        ]

    def __repr__(self) -> str:
        return f"{type(self).__name__}(quote={self.quote!r})"
