"""
PreparedStatement-like query helper.

``bind(handle, "INSERT INTO tab VALUES (?, ?)", "Fred", 22)`` composes
``INSERT INTO tab VALUES ('Fred', 22)`` and hands it to ``handle.execute``.

Strings are escaped by the handle and quoted; numbers are escaped and left
unquoted; None becomes NULL. Placeholder/argument count mismatches and
unsupported argument types raise before anything is executed, with the
query assembled so far as debugging context.

A placeholder character inside a string literal of the template cannot be
told apart from a real placeholder. Pass such text as an argument instead:
``bind(handle, "INSERT INTO tab2 VALUES (?)", "lol?")``.
"""

import logging
from typing import Any

from pmutils.core.config import settings
from pmutils.engines.sql.errors import (
    ArgumentTypeError,
    TooFewArgumentsError,
    TooManyArgumentsError,
)
from pmutils.engines.sql.filters import UnsupportedLiteral, sql_literal
from pmutils.engines.sql.handle import DBHandle

_log = logging.getLogger(__name__)


def compose(
    handle: DBHandle,
    template: str,
    *args: Any,
    placeholder: str | None = None,
) -> str:
    """
    Interleave the literal segments of *template* with escaped *args*.

    Returns the composed query; does not execute it.
    """
    marker = settings.PLACEHOLDER if placeholder is None else placeholder
    if len(marker) != 1:
        raise ValueError(f"Placeholder must be a single character, got {marker!r}")
    segments = template.split(marker)
    parts: list[str] = []
    argc = len(args)

    # Every segment but the last is followed by a placeholder.
    for i, segment in enumerate(segments[:-1]):
        parts.append(segment)
        if i >= argc:
            context = "".join(parts)
            _log.warning("Too few arguments for SQL template: %s", context)
            raise TooFewArgumentsError(context)
        try:
            parts.append(sql_literal(handle, args[i]))
        except UnsupportedLiteral as e:
            context = "".join(parts)
            _log.warning("Arg %d rejected (%s): %s", i + 1, e, context)
            raise ArgumentTypeError(i + 1, args[i], context) from e
    parts.append(segments[-1])

    consumed = len(segments) - 1
    if consumed != argc:
        context = "".join(parts)
        _log.warning(
            "SQL template takes %d argument(s), got %d: %s", consumed, argc, context
        )
        raise TooManyArgumentsError(context)

    return "".join(parts)


def bind(
    handle: DBHandle,
    template: str,
    *args: Any,
    placeholder: str | None = None,
) -> Any:
    """
    Compose *template* with *args* and execute it on *handle*.

    Returns whatever ``handle.execute`` returns; its errors propagate as-is.
    """
    sql = compose(handle, template, *args, placeholder=placeholder)
    _log.debug("Bound SQL: %s", sql)
    return handle.execute(sql)
