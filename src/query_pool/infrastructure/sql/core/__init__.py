"""Core SQL utilities package."""

from .descriptors import (
    WILDCARD,
    AllColumns,
    ColumnList,
    InsertQuery,
    InvalidQueryError,
    NoWhere,
    SelectQuery,
    TableList,
    WhereTerms,
    WhereText,
)
from .parameters import build_placeholders

__all__ = [
    "WILDCARD",
    "AllColumns",
    "ColumnList",
    "InsertQuery",
    "InvalidQueryError",
    "NoWhere",
    "SelectQuery",
    "TableList",
    "WhereTerms",
    "WhereText",
    "build_placeholders",
]
