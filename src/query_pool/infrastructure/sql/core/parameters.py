"""
SQL parameter binding utilities.

Values are never interpolated into SQL text. Builders emit positional
markers (``$1``, ``$2``, ...) and the values travel separately to the driver.
"""

from typing import List


def build_placeholders(count: int) -> List[str]:
    """
    Build positional parameter markers for ``count`` bound values.

    Args:
        count: Number of values that will be bound

    Returns:
        List of markers in binding order

    Examples:
        >>> build_placeholders(3)
        ['$1', '$2', '$3']
        >>> build_placeholders(0)
        []
    """
    return [f"${index}" for index in range(1, count + 1)]
