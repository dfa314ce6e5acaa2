"""SQL statement builders."""

from .insert import build_insert
from .select import build_select

__all__ = ["build_insert", "build_select"]
