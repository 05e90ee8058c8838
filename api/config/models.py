"""
Pydantic models for validated configuration sections.
"""

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field
from sqlalchemy.engine import URL


class DatabaseConfig(BaseModel):
    """Database connection settings."""

    url: str = Field("sqlite:///./data/fireworks.db", min_length=1, description="SQLAlchemy database URL")
    echo: bool = Field(False, description="Log every SQL statement")

    def resolve_url(self, environ: Optional[Mapping[str, str]] = None) -> str:
        """
        Return the database URL to connect to.

        If POSTGRES_HOST is set, a PostgreSQL URL is built from the
        POSTGRES_USER, POSTGRES_PASSWORD, POSTGRES_HOST, POSTGRES_PORT and
        POSTGRES_DB variables instead of using `url`.
        """
        environ = os.environ if environ is None else environ
        host = environ.get("POSTGRES_HOST")
        if not host:
            return self.url

        return URL.create(
            "postgresql+psycopg2",
            username=environ.get("POSTGRES_USER", "postgres"),
            password=environ.get("POSTGRES_PASSWORD") or None,
            host=host,
            port=int(environ.get("POSTGRES_PORT", "5432")),
            database=environ.get("POSTGRES_DB", "postgres"),
        ).render_as_string(hide_password=False)


class UploadConfig(BaseModel):
    """Limits for uploaded images."""

    max_bytes: int = Field(10485760, ge=1, description="Largest accepted upload in bytes")
