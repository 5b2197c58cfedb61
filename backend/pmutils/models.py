"""
Connection description for ``connect_handle``.

DataSource is a plain (non-table) model: the mod does not persist it.
"""

from enum import Enum

from sqlmodel import Field, SQLModel


class ProductTypeEnum(str, Enum):
    """Supported database product types (postgres, mysql, trino)."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    TRINO = "trino"


class DataSource(SQLModel):
    product_type: ProductTypeEnum
    host: str = Field(max_length=255)
    port: int = Field(default=5432)
    database: str = Field(max_length=255)
    username: str = Field(max_length=255)
    password: str = Field(default="", max_length=512)
    use_ssl: bool = Field(
        default=False,
        description="For Trino: use HTTPS (http_scheme='https'). When True, password is required.",
    )
