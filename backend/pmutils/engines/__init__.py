"""
Engines: SQL parameter binder.
"""

from pmutils.engines.sql import bind, compose

__all__ = [
    "bind",
    "compose",
]
