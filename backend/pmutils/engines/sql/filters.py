"""
Literal rendering for the SQL binder.

Each bound argument becomes a SQL literal: strings are escaped by the
database handle and single-quoted, numbers go through the handle's escape
routine unquoted, None becomes ``NULL``. Other types are refused.
"""

import math
from decimal import Decimal
from typing import Any

from pmutils.engines.sql.handle import DBHandle

SQL_NULL = "NULL"


class UnsupportedLiteral(TypeError):
    """Raised by ``sql_literal`` for a value with no literal form."""

    pass


def is_number(value: Any) -> bool:
    """True for int, float and Decimal. ``bool`` is not a number here."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, Decimal))


def sql_string(handle: DBHandle, value: str) -> str:
    return "'" + handle.escape(value) + "'"


def sql_number(handle: DBHandle, value: int | float | Decimal) -> str:
    """
    Canonical decimal text of *value*, passed through the handle's escape.

    NaN, infinities and ints past the interpreter's digit limit are refused.
    """
    if isinstance(value, float) and not math.isfinite(value):
        raise UnsupportedLiteral(f"Non-finite number: {value!r}")
    if isinstance(value, Decimal) and not value.is_finite():
        raise UnsupportedLiteral(f"Non-finite number: {value!r}")
    try:
        text = str(value)
    except ValueError as e:
        # int -> str digit limit (sys.set_int_max_str_digits)
        raise UnsupportedLiteral(f"Number too large to render: {type(value).__name__}") from e
    return handle.escape(text)


def sql_literal(handle: DBHandle, value: Any) -> str:
    """Render one bound argument as a SQL literal."""
    if value is None:
        return SQL_NULL
    if isinstance(value, str):
        return sql_string(handle, value)
    if is_number(value):
        return sql_number(handle, value)
    raise UnsupportedLiteral(f"Unsupported type: {type(value).__name__}")
