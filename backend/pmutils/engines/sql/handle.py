"""Database handle protocol consumed by the binder."""

from typing import Any, Protocol


class DBHandle(Protocol):
    def escape(self, value: str) -> str: ...

    def execute(self, sql: str) -> Any: ...
