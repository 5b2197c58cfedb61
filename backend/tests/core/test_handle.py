"""Unit tests for core.handle (drivers are mocked)."""

from unittest.mock import MagicMock, patch

import pytest

from pmutils.core.handle import (
    PsycopgHandle,
    PyMySQLHandle,
    TrinoHandle,
    connect_handle,
)
from pmutils.engines.sql import bind
from pmutils.models import DataSource, ProductTypeEnum


def _make_datasource(product_type: ProductTypeEnum, **kwargs) -> DataSource:
    kwargs.setdefault("port", 5432)
    return DataSource(
        product_type=product_type,
        host="localhost",
        database="db",
        username="u",
        password="p",
        **kwargs,
    )


class TestPsycopgHandle:
    @patch("pmutils.core.handle.Escaping")
    def test_escape(self, mock_escaping: MagicMock) -> None:
        conn = MagicMock()
        conn.info.encoding = "utf-8"
        mock_escaping.return_value.escape_string.return_value = b"o''brien"

        assert PsycopgHandle(conn).escape("o'brien") == "o''brien"
        mock_escaping.assert_called_once_with(conn.pgconn)
        mock_escaping.return_value.escape_string.assert_called_once_with(b"o'brien")

    def test_execute_returns_cursor(self) -> None:
        conn = MagicMock()
        assert PsycopgHandle(conn).execute("SELECT 1") is conn.execute.return_value
        conn.execute.assert_called_once_with("SELECT 1")


class TestPyMySQLHandle:
    def test_escape(self) -> None:
        conn = MagicMock()
        conn.escape_string.return_value = "a\\'b"
        assert PyMySQLHandle(conn).escape("a'b") == "a\\'b"

    def test_bind_through_handle(self) -> None:
        conn = MagicMock()
        conn.escape_string.side_effect = lambda s: s
        cur = conn.cursor.return_value

        out = bind(PyMySQLHandle(conn), "INSERT INTO tab VALUES (?, ?)", "Fred", 22)

        assert out is cur
        cur.execute.assert_called_once_with("INSERT INTO tab VALUES ('Fred', 22)")


class TestTrinoHandle:
    def test_escape_doubles_quotes(self) -> None:
        assert TrinoHandle(MagicMock()).escape("it's") == "it''s"


class TestConnectHandle:
    @patch("pmutils.core.handle.psycopg.connect")
    def test_postgres(self, mock_connect: MagicMock) -> None:
        handle = connect_handle(_make_datasource(ProductTypeEnum.POSTGRES))
        assert isinstance(handle, PsycopgHandle)
        assert handle.conn is mock_connect.return_value
        assert mock_connect.call_args.kwargs["dbname"] == "db"

    @patch("pmutils.core.handle.pymysql.connect")
    def test_mysql(self, mock_connect: MagicMock) -> None:
        ds = _make_datasource(ProductTypeEnum.MYSQL, port=3306)
        handle = connect_handle(ds)
        assert isinstance(handle, PyMySQLHandle)
        assert mock_connect.call_args.kwargs["port"] == 3306
        assert mock_connect.call_args.kwargs["database"] == "db"

    @patch("pmutils.core.handle.trino_connect")
    def test_trino(self, mock_connect: MagicMock) -> None:
        handle = connect_handle(_make_datasource(ProductTypeEnum.TRINO))
        assert isinstance(handle, TrinoHandle)
        assert mock_connect.call_args.kwargs["http_scheme"] == "http"

    def test_trino_ssl_requires_password(self) -> None:
        ds = _make_datasource(ProductTypeEnum.TRINO, use_ssl=True)
        ds.password = ""
        with pytest.raises(ValueError, match="Password is required"):
            connect_handle(ds)

    @patch("pmutils.core.handle.settings")
    @patch("pmutils.core.handle.psycopg.connect")
    def test_connect_timeout_from_settings(
        self, mock_connect: MagicMock, mock_settings: MagicMock
    ) -> None:
        mock_settings.EXTERNAL_DB_CONNECT_TIMEOUT = 3
        connect_handle(_make_datasource(ProductTypeEnum.POSTGRES))
        assert mock_connect.call_args.kwargs["connect_timeout"] == 3
