"""Shared fixtures for command generation tests."""

from __future__ import annotations

import pytest

from relational_sql.config import get_settings
from relational_sql.generator import SqlGenerator
from relational_sql.model import Column, make_table

GENERATED_KEY_LOOKUP = "lookup_generated()"


class LookupSqlGenerator(SqlGenerator):
    """Generator with a recognisable generated-key lookup and no quoting."""

    name = "lookup"

    def create_where_conditions_for_store_generated_keys(self, store_generated_key_columns, table):
        return [(column, GENERATED_KEY_LOOKUP) for column in store_generated_key_columns]


@pytest.fixture(autouse=True)
def _reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def generator() -> LookupSqlGenerator:
    return LookupSqlGenerator()


@pytest.fixture
def identity_table():
    """T(id PK store-generated, name)."""
    return make_table("T", [Column("id", is_store_generated=True), Column("name")], key=["id"])


@pytest.fixture
def audited_table():
    """T(id PK, name, created_at store-generated)."""
    return make_table(
        "T",
        [Column("id"), Column("name"), Column("created_at", is_store_generated=True)],
        key=["id"],
    )


@pytest.fixture
def plain_table():
    """T(id PK, name) with nothing store-generated."""
    return make_table("T", [Column("id"), Column("name")], key=["id"])


@pytest.fixture
def mixed_key_table():
    """T(a PK store-generated, b PK, v)."""
    return make_table(
        "T",
        [Column("a", is_store_generated=True), Column("b"), Column("v")],
        key=["a", "b"],
    )
