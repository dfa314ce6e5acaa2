"""
Declarative query descriptors.

Callers describe a query with a plain mapping (``{"columns": [...], "from": ...}``)
or with the typed models below. Loosely typed values are classified once, in
``from_mapping``, into small tagged variants that the builders match on.

Identifiers are NOT quoted or escaped anywhere: column, table and predicate
text must come from trusted code, never from user input.
"""

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence, Tuple, Union

from query_pool.errors import InvalidQueryError

WILDCARD = "*"


@dataclass(frozen=True)
class AllColumns:
    """Select every column (``*``)."""


@dataclass(frozen=True)
class ColumnList:
    """Explicit, ordered column names."""

    names: Tuple[str, ...]


@dataclass(frozen=True)
class TableList:
    """One or more tables in the FROM clause."""

    names: Tuple[str, ...]


@dataclass(frozen=True)
class NoWhere:
    """No WHERE clause."""


@dataclass(frozen=True)
class WhereText:
    """A predicate inlined verbatim."""

    text: str


@dataclass(frozen=True)
class WhereTerms:
    """Predicate fragments joined with a single space.

    Boolean connectors are not inferred: ``["a = 1 and", "b = 2"]`` is the
    caller's way of writing ``a = 1 and b = 2``.
    """

    terms: Tuple[str, ...]


Columns = Union[AllColumns, ColumnList]
Where = Union[NoWhere, WhereText, WhereTerms]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def to_columns(value: Any) -> Columns:
    """Classify a ``columns`` value; absent, empty string or ``"*"`` selects everything."""
    if value is None or value in ("", WILDCARD):
        return AllColumns()
    return ColumnList(as_tuple(value))


def as_tuple(value: Any) -> Tuple[Any, ...]:
    """A sequence becomes a tuple; a scalar (including str) a one-element tuple."""
    if _is_sequence(value):
        return tuple(value)
    return (value,)


def to_tables(value: Any) -> TableList:
    """Classify a ``from`` value; a scalar becomes a one-element list."""
    return TableList(as_tuple(value))


def to_where(value: Any) -> Where:
    """Classify a ``where`` value; anything but str or a sequence is dropped."""
    if isinstance(value, str):
        return WhereText(value)
    if _is_sequence(value):
        return WhereTerms(tuple(value))
    return NoWhere()


@dataclass(frozen=True)
class SelectQuery:
    """Typed SELECT descriptor."""

    tables: TableList
    columns: Columns = field(default_factory=AllColumns)
    where: Where = field(default_factory=NoWhere)

    @classmethod
    def from_mapping(cls, descriptor: Mapping[str, Any]) -> "SelectQuery":
        """
        Build a SelectQuery from ``{"columns", "from", "where"}``.

        Args:
            descriptor: Mapping with a required ``from`` key

        Returns:
            Normalized SelectQuery

        Raises:
            InvalidQueryError: If ``from`` is missing
        """
        if descriptor.get("from") is None:
            raise InvalidQueryError("SELECT descriptor requires a 'from' key")

        return cls(
            tables=to_tables(descriptor["from"]),
            columns=to_columns(descriptor.get("columns")),
            where=to_where(descriptor.get("where")),
        )


@dataclass(frozen=True)
class InsertQuery:
    """Typed INSERT descriptor.

    ``len(columns) == len(values)`` is the caller's responsibility.
    """

    into: str
    columns: Tuple[str, ...]
    values: Tuple[Any, ...]

    @classmethod
    def from_mapping(cls, descriptor: Mapping[str, Any]) -> "InsertQuery":
        """
        Build an InsertQuery from ``{"into", "columns", "values"}``.

        Raises:
            InvalidQueryError: If any of the three keys is missing
        """
        missing = [key for key in ("into", "columns", "values") if key not in descriptor]
        if missing:
            raise InvalidQueryError(
                f"INSERT descriptor is missing required keys: {missing}"
            )

        return cls(
            into=descriptor["into"],
            columns=as_tuple(descriptor["columns"]),
            values=as_tuple(descriptor["values"]),
        )


SelectDescriptor = Union[SelectQuery, Mapping[str, Any]]
InsertDescriptor = Union[InsertQuery, Mapping[str, Any]]


def as_select_query(descriptor: SelectDescriptor) -> SelectQuery:
    """Accept either a typed SelectQuery or a plain mapping."""
    if isinstance(descriptor, SelectQuery):
        return descriptor
    return SelectQuery.from_mapping(descriptor)


def as_insert_query(descriptor: InsertDescriptor) -> InsertQuery:
    """Accept either a typed InsertQuery or a plain mapping."""
    if isinstance(descriptor, InsertQuery):
        return descriptor
    return InsertQuery.from_mapping(descriptor)

