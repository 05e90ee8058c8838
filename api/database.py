"""
Database models and setup for the Fireworks API.

This module defines the SQLAlchemy model for stored fireworks and the
engine/session plumbing used by the routers.
"""

from sqlalchemy import create_engine, Column, Integer, DateTime, LargeBinary, Boolean
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker
from datetime import datetime
import os

from config import get_config, DatabaseConfig


def _create_engine(database_url: str, echo: bool = False):
    """Create an engine, preparing the data directory for SQLite files."""
    url = make_url(database_url)
    connect_args = {}

    if url.get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
        if url.database and url.database != ":memory:":
            os.makedirs(os.path.dirname(os.path.abspath(url.database)), exist_ok=True)

    return create_engine(database_url, echo=echo, connect_args=connect_args)


# Database configuration
database_config = DatabaseConfig(**get_config().get_section("database"))
DATABASE_URL = database_config.resolve_url()

# SQLAlchemy setup
engine = _create_engine(DATABASE_URL, echo=database_config.echo)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


class Firework(Base):
    """
    A stored firework bitmap.

    Attributes:
        id: Primary key
        is_shareable: Whether the firework may be shown to other users
        pixel_data: 54x54 pixels, one byte each (1 = light, 0 = dark)
        created_at: Timestamp of creation
        updated_at: Timestamp of the last change
        deleted_at: Set when the firework is deleted; the row is kept
    """
    __tablename__ = "fireworks"

    id = Column(Integer, primary_key=True, index=True)
    is_shareable = Column(Boolean, default=False, nullable=False)
    pixel_data = Column(LargeBinary)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
    deleted_at = Column(DateTime, nullable=True, index=True)

    def __repr__(self):
        return f"<Firework(id={self.id}, shareable={self.is_shareable})>"


def init_database():
    """
    Initialize the database by creating all tables.
    Should be called at application startup.
    """
    Base.metadata.create_all(bind=engine)


def get_db():
    """
    Dependency function to get database session.
    Use with FastAPI's Depends().
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
