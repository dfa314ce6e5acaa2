"""
SQL SELECT statement builder.

Produces ``SELECT <cols> FROM <tables>[ WHERE <predicate>];`` with no
identifier quoting.
"""

from ..core.descriptors import (
    AllColumns,
    ColumnList,
    Columns,
    NoWhere,
    SelectDescriptor,
    TableList,
    Where,
    WhereTerms,
    WhereText,
    as_select_query,
)


def render_columns(columns: Columns) -> str:
    """Render the column list; select-all renders as ``*``."""
    if isinstance(columns, AllColumns):
        return "*"
    if isinstance(columns, ColumnList):
        return ",".join(map(str, columns.names))
    raise TypeError(f"Unsupported columns variant: {columns!r}")


def render_tables(tables: TableList) -> str:
    return ",".join(map(str, tables.names))


def render_where(where: Where) -> str:
    """Render the WHERE clause including its leading space, or ``""``."""
    if isinstance(where, NoWhere):
        return ""
    if isinstance(where, WhereText):
        return f" WHERE {where.text}"
    if isinstance(where, WhereTerms):
        return " WHERE " + " ".join(map(str, where.terms))
    raise TypeError(f"Unsupported where variant: {where!r}")


def build_select(descriptor: SelectDescriptor) -> str:
    """
    Build a SELECT statement.

    Args:
        descriptor: SelectQuery or mapping with ``columns``, ``from``, ``where``

    Returns:
        SELECT SQL statement terminated with ``;``

    Example:
        >>> build_select({"columns": ["a", "b"], "from": ["t"]})
        'SELECT a,b FROM t;'
        >>> build_select({"from": "t", "where": ["a = 1 and", "b = 2"]})
        'SELECT * FROM t WHERE a = 1 and b = 2;'
    """
    query = as_select_query(descriptor)
    return (
        f"SELECT {render_columns(query.columns)}"
        f" FROM {render_tables(query.tables)}"
        f"{render_where(query.where)};"
    )
