"""
Firework Service Tests
======================
"""

from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from bitmap import PIXEL_COUNT
from database import Firework
from errors import DecodeError, NotFoundError, PersistenceError
from services import FireworkService


FROZEN_NOW = datetime(2030, 1, 1, 12, 0, 0)


class _FrozenDatetime(datetime):
    @classmethod
    def utcnow(cls):
        return FROZEN_NOW


def _raise_operational_error(*args, **kwargs):
    raise OperationalError("SELECT", {}, Exception("connection lost"))


@pytest.fixture
def service(db_session):
    return FireworkService(db_session)


class TestCreateFirework:
    """Tests for ingesting uploads."""

    def test_black_image_creates_dark_shareable_firework(self, service, make_image):
        firework = service.create_firework(make_image(color=(0, 0, 0), size=(10, 10)), is_shareable=True)

        assert firework.id is not None
        assert firework.is_shareable is True
        assert len(firework.pixel_data) == PIXEL_COUNT
        assert not any(firework.pixel_data)
        assert firework.created_at is not None
        assert firework.updated_at is not None

    def test_stored_bytes_are_one_per_pixel(self, service, db_session, make_image):
        created = service.create_firework(make_image(color=(255, 255, 255), size=(200, 100)))

        record = db_session.get(Firework, created.id)
        assert record.pixel_data == b"\x01" * PIXEL_COUNT
        assert record.is_shareable is False

    def test_decode_error_writes_nothing(self, service, db_session):
        with pytest.raises(DecodeError):
            service.create_firework(b"not an image", is_shareable=True)

        assert db_session.query(Firework).count() == 0

    def test_commit_failure_raises_persistence_error(self, service, db_session, make_image, monkeypatch):
        def failing_commit():
            raise OperationalError("INSERT", {}, Exception("disk full"))

        monkeypatch.setattr(db_session, "commit", failing_commit)

        with pytest.raises(PersistenceError):
            service.create_firework(make_image())

        monkeypatch.undo()
        assert db_session.query(Firework).count() == 0


class TestReadFireworks:
    """Tests for retrieval and listing."""

    def test_get_returns_stored_firework(self, service, make_image):
        created = service.create_firework(make_image(color=(255, 255, 255)), is_shareable=True)

        fetched = service.get_firework(created.id)

        assert fetched.id == created.id
        assert fetched.is_shareable is True
        assert all(fetched.pixel_data)

    def test_get_missing_raises_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.get_firework(999)

    def test_list_orders_by_id(self, service, make_image):
        first = service.create_firework(make_image(color=(0, 0, 0)))
        second = service.create_firework(make_image(color=(255, 255, 255)))

        fireworks = service.list_fireworks()

        assert [f.id for f in fireworks] == [first.id, second.id]
        assert service.count_fireworks() == 2

    def test_list_empty(self, service):
        assert service.list_fireworks() == []

    def test_legacy_record_is_returned_as_stored(self, service, db_session):
        record = Firework(is_shareable=True, pixel_data=bytes([1, 0, 1, 0, 2]))
        db_session.add(record)
        db_session.commit()

        fetched = service.get_firework(record.id)

        assert fetched.pixel_data == [True, False, True, False, True]


class TestUpdateFirework:
    """Tests for changing the shareability flag."""

    def test_update_changes_only_flag(self, service, db_session, make_image):
        created = service.create_firework(make_image(color=(255, 255, 255)), is_shareable=False)
        before = db_session.get(Firework, created.id).pixel_data

        updated = service.update_firework(created.id, True)

        assert updated.is_shareable is True
        assert updated.pixel_data == created.pixel_data
        assert db_session.get(Firework, created.id).pixel_data == before

    def test_update_missing_raises_not_found(self, service):
        with pytest.raises(NotFoundError):
            service.update_firework(42, True)


class TestDeleteFirework:
    """Tests for deletion."""

    def test_deleted_firework_is_hidden(self, service, db_session, make_image):
        created = service.create_firework(make_image())

        service.delete_firework(created.id)

        with pytest.raises(NotFoundError):
            service.get_firework(created.id)
        assert service.list_fireworks() == []
        assert service.count_fireworks() == 0
        # Row is kept, marked deleted
        assert db_session.get(Firework, created.id).deleted_at is not None

    def test_second_delete_raises_not_found(self, service, make_image):
        created = service.create_firework(make_image())
        service.delete_firework(created.id)

        with pytest.raises(NotFoundError):
            service.delete_firework(created.id)

    def test_update_after_delete_raises_not_found(self, service, make_image):
        created = service.create_firework(make_image())
        service.delete_firework(created.id)

        with pytest.raises(NotFoundError):
            service.update_firework(created.id, True)


class TestUpdatedAt:
    """Tests for the update timestamp."""

    def test_update_refreshes_updated_at(self, service, make_image, monkeypatch):
        created = service.create_firework(make_image(), is_shareable=False)
        monkeypatch.setattr("services.firework_service.datetime", _FrozenDatetime)

        updated = service.update_firework(created.id, True)

        assert updated.updated_at == FROZEN_NOW
        assert updated.created_at == created.created_at

    def test_update_with_same_flag_refreshes_updated_at(self, service, make_image, monkeypatch):
        created = service.create_firework(make_image(), is_shareable=True)
        monkeypatch.setattr("services.firework_service.datetime", _FrozenDatetime)

        updated = service.update_firework(created.id, True)

        assert updated.updated_at == FROZEN_NOW
        assert updated.updated_at > created.updated_at


class TestReadFailures:
    """Database errors on reads surface as PersistenceError."""

    def test_list_failure(self, service, db_session, monkeypatch):
        monkeypatch.setattr(db_session, "query", _raise_operational_error)
        with pytest.raises(PersistenceError):
            service.list_fireworks()

    def test_get_failure(self, service, db_session, monkeypatch):
        monkeypatch.setattr(db_session, "query", _raise_operational_error)
        with pytest.raises(PersistenceError):
            service.get_firework(1)

    def test_count_failure(self, service, db_session, monkeypatch):
        monkeypatch.setattr(db_session, "query", _raise_operational_error)
        with pytest.raises(PersistenceError):
            service.count_fireworks()

    def test_update_commit_failure_keeps_stored_flag(self, service, db_session, make_image, monkeypatch):
        created = service.create_firework(make_image(), is_shareable=False)
        monkeypatch.setattr(db_session, "commit", _raise_operational_error)

        with pytest.raises(PersistenceError):
            service.update_firework(created.id, True)

        monkeypatch.undo()
        assert service.get_firework(created.id).is_shareable is False
