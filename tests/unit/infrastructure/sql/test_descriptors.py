"""
Unit tests for descriptor classification.
"""

from query_pool.infrastructure.sql.core.descriptors import (
    AllColumns,
    ColumnList,
    NoWhere,
    SelectQuery,
    TableList,
    WhereTerms,
    WhereText,
    to_columns,
    to_tables,
    to_where,
)


class TestToColumns:
    def test_none_is_all_columns(self):
        assert to_columns(None) == AllColumns()

    def test_wildcard_is_all_columns(self):
        assert to_columns("*") == AllColumns()

    def test_list_is_column_list(self):
        assert to_columns(["a", "b"]) == ColumnList(("a", "b"))

    def test_single_name_string(self):
        assert to_columns("a") == ColumnList(("a",))


class TestToTables:
    def test_scalar_is_wrapped(self):
        assert to_tables("t") == TableList(("t",))

    def test_list_is_kept(self):
        assert to_tables(["a", "b"]) == TableList(("a", "b"))


class TestToWhere:
    def test_string(self):
        assert to_where("a = 1") == WhereText("a = 1")

    def test_list(self):
        assert to_where(["a = 1", "and b = 2"]) == WhereTerms(("a = 1", "and b = 2"))

    def test_bytes_are_not_a_sequence_of_terms(self):
        assert to_where(b"a = 1") == NoWhere()

    def test_other_types(self):
        assert to_where(None) == NoWhere()
        assert to_where(3.5) == NoWhere()


def test_select_query_from_mapping():
    query = SelectQuery.from_mapping(
        {"columns": ["id"], "from": "users", "where": ["id = 1"]}
    )

    assert query == SelectQuery(
        tables=TableList(("users",)),
        columns=ColumnList(("id",)),
        where=WhereTerms(("id = 1",)),
    )
