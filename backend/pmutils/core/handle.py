"""
Database handles for the SQL binder.

A handle exposes ``escape(str) -> str`` and ``execute(str) -> Any`` over an
already-open driver connection. psycopg (PostgreSQL), pymysql (MySQL) and
trino (Trino) connections are supported; ``connect_handle`` opens one from a
DataSource. The handle never closes the connection it wraps.
"""

from typing import Any

import psycopg
import pymysql
from psycopg.pq import Escaping
from trino.auth import BasicAuthentication
from trino.dbapi import connect as trino_connect

from pmutils.core.config import settings
from pmutils.engines.sql.handle import DBHandle
from pmutils.models import DataSource, ProductTypeEnum

# Single-quote escape for SQL strings
_SQL_QUOTE_ESCAPE = str.maketrans({"'": "''"})


class PsycopgHandle:
    """Handle over a psycopg 3 connection. ``execute`` returns the cursor."""

    def __init__(self, conn: psycopg.Connection) -> None:
        self.conn = conn

    def escape(self, value: str) -> str:
        encoding = self.conn.info.encoding
        out = Escaping(self.conn.pgconn).escape_string(value.encode(encoding))
        return out.decode(encoding)

    def execute(self, sql: str) -> Any:
        return self.conn.execute(sql)


class PyMySQLHandle:
    """Handle over a pymysql connection. ``execute`` returns the cursor."""

    def __init__(self, conn: pymysql.connections.Connection) -> None:
        self.conn = conn

    def escape(self, value: str) -> str:
        return self.conn.escape_string(value)

    def execute(self, sql: str) -> Any:
        cur = self.conn.cursor()
        cur.execute(sql)
        return cur


class TrinoHandle:
    """
    Handle over a trino DBAPI connection.

    The trino client has no escape routine; single quotes are doubled,
    which is the only escape Trino string literals know.
    """

    def __init__(self, conn: Any) -> None:
        self.conn = conn

    def escape(self, value: str) -> str:
        return value.translate(_SQL_QUOTE_ESCAPE)

    def execute(self, sql: str) -> Any:
        cur = self.conn.cursor()
        cur.execute(sql)
        return cur


def _open_postgres(ds: DataSource, timeout: int) -> DBHandle:
    conn = psycopg.connect(
        host=ds.host,
        port=ds.port,
        dbname=ds.database,
        user=ds.username,
        password=ds.password,
        connect_timeout=timeout,
    )
    return PsycopgHandle(conn)


def _open_mysql(ds: DataSource, timeout: int) -> DBHandle:
    conn = pymysql.connect(
        host=ds.host,
        port=ds.port,
        database=ds.database,
        user=ds.username,
        password=ds.password,
        connect_timeout=timeout,
    )
    return PyMySQLHandle(conn)


def _open_trino(ds: DataSource, timeout: int) -> DBHandle:
    if ds.use_ssl and not ds.password.strip():
        raise ValueError("Password is required for Trino when using SSL/HTTPS.")
    conn = trino_connect(
        host=ds.host,
        port=ds.port,
        user=ds.username,
        auth=BasicAuthentication(ds.username, ds.password),
        catalog=ds.database,
        schema="default",
        source="pmutils",
        http_scheme="https" if ds.use_ssl else "http",
        request_timeout=timeout,
    )
    return TrinoHandle(conn)


_OPENERS = {
    ProductTypeEnum.POSTGRES: _open_postgres,
    ProductTypeEnum.MYSQL: _open_mysql,
    ProductTypeEnum.TRINO: _open_trino,
}


def connect_handle(datasource: DataSource) -> DBHandle:
    """
    Open a driver connection for *datasource* and wrap it in a handle.

    The caller owns the connection: close it through ``handle.conn``.
    """
    opener = _OPENERS.get(datasource.product_type)
    if opener is None:
        raise ValueError(f"Unsupported product_type: {datasource.product_type}")
    return opener(datasource, settings.EXTERNAL_DB_CONNECT_TIMEOUT)
