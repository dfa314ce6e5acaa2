"""
SQL module for query string generation.

Builds SELECT and INSERT statements from declarative descriptors. Column,
table and predicate text is concatenated as given; only INSERT values are
parameterized.
"""

from .core.descriptors import (
    WILDCARD,
    InsertQuery,
    InvalidQueryError,
    SelectQuery,
)
from .core.parameters import build_placeholders
from .operations.insert import build_insert
from .operations.select import build_select

__all__ = [
    "WILDCARD",
    "InsertQuery",
    "InvalidQueryError",
    "SelectQuery",
    "build_insert",
    "build_placeholders",
    "build_select",
]
