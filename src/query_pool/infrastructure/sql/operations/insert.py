"""
SQL INSERT statement builder.

Produces ``INSERT INTO <table> (<cols>) VALUES ($1,...,$N);``. Only the
placeholders appear in the text; callers bind ``query.values`` separately.
"""

from ..core.descriptors import InsertDescriptor, as_insert_query
from ..core.parameters import build_placeholders


def build_insert(descriptor: InsertDescriptor) -> str:
    """
    Build a parameterized INSERT statement.

    Args:
        descriptor: InsertQuery or mapping with ``into``, ``columns``, ``values``

    Returns:
        INSERT SQL statement terminated with ``;``

    Example:
        >>> build_insert({"into": "t", "columns": ["a", "b"], "values": [1, 2]})
        'INSERT INTO t (a,b) VALUES ($1,$2);'
    """
    query = as_insert_query(descriptor)
    columns = ",".join(map(str, query.columns))
    placeholders = ",".join(build_placeholders(len(query.values)))
    return f"INSERT INTO {query.into} ({columns}) VALUES ({placeholders});"
