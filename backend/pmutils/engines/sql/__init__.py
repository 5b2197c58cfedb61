"""
SQL parameter binder.

Exports: bind, compose and the binder error types.
"""

from pmutils.engines.sql.binder import bind, compose
from pmutils.engines.sql.errors import (
    ArgumentTypeError,
    BindError,
    TooFewArgumentsError,
    TooManyArgumentsError,
)

__all__ = [
    "bind",
    "compose",
    "BindError",
    "ArgumentTypeError",
    "TooFewArgumentsError",
    "TooManyArgumentsError",
]
