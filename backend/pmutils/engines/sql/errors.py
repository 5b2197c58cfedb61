"""
Binder error types.

Every error carries ``context``: the part of the query assembled before the
failure was detected, so the message points at the offending placeholder.
"""

from __future__ import annotations

from typing import Any


class BindError(ValueError):
    """Raised when a template and its arguments cannot be composed."""

    def __init__(self, message: str, context: str) -> None:
        super().__init__(f'{message} (context: "{context}")')
        self.context = context


class ArgumentTypeError(BindError):
    """Raised when an argument is not a string, number or None."""

    def __init__(self, index: int, value: Any, context: str) -> None:
        super().__init__(
            f"Arg {index} is not of type: string, number, None (got {type(value).__name__})",
            context,
        )
        self.index = index
        self.value = value


class TooFewArgumentsError(BindError):
    """Raised when the template has more placeholders than arguments."""

    def __init__(self, context: str) -> None:
        super().__init__("Too few function arguments", context)


class TooManyArgumentsError(BindError):
    """Raised when more arguments are supplied than placeholders consumed."""

    def __init__(self, context: str) -> None:
        super().__init__("Arg count doesn't equal SQL parameter count", context)
