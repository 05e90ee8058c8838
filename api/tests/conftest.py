"""
Test Configuration
==================

Pytest fixtures for the Fireworks API: image bytes, an isolated in-memory
database, and a TestClient wired to it.
"""

import io
import os

# Must be set before `database` is imported so no data directory is created
os.environ["FIREWORKS_DATABASE_URL"] = "sqlite://"

import numpy as np
import pytest
from PIL import Image
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


@pytest.fixture
def make_image():
    """Return a factory producing encoded image bytes."""
    def _make(color=(0, 0, 0), size=(10, 10), format="PNG", mode="RGB"):
        image = Image.new(mode, size, color)
        buffer = io.BytesIO()
        image.save(buffer, format=format)
        return buffer.getvalue()
    return _make


@pytest.fixture
def noisy_png():
    """A 64x64 PNG of random pixels (large enough to truncate meaningfully)."""
    rng = np.random.default_rng(42)
    pixels = rng.integers(0, 256, size=(64, 64, 3), dtype=np.uint8)
    buffer = io.BytesIO()
    Image.fromarray(pixels, mode="RGB").save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def db_session():
    """Provide a session bound to a fresh in-memory database."""
    from database import Base

    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(bind=engine)
    session = sessionmaker(autocommit=False, autoflush=False, bind=engine)()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def client(db_session):
    """Provide a TestClient whose requests use `db_session`."""
    from fastapi.testclient import TestClient
    from database import get_db
    from main import app

    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
