"""
Firework management service.

This module runs uploaded images through the bitmap pipeline, stores the
resulting pixel data, and serves stored fireworks back as boolean matrices.
"""

from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from bitmap import BitmapPipeline
from database import Firework
from errors import NotFoundError, PersistenceError
from models import FireworkResponse
from utils.logger import get_logger

logger = get_logger(__name__)


class FireworkService:
    """
    Service for creating, reading, updating and deleting fireworks.

    Pixel data is written once at creation; updates only touch the
    shareability flag.
    """

    def __init__(self, db: Session, pipeline: Optional[BitmapPipeline] = None):
        """
        Initialize the firework service.

        Args:
            db: SQLAlchemy database session
            pipeline: Bitmap pipeline (a default one is created if omitted)
        """
        self.db = db
        self.pipeline = pipeline or BitmapPipeline()

    def create_firework(
        self,
        image_bytes: bytes,
        is_shareable: bool = False,
        filename: Optional[str] = None
    ) -> FireworkResponse:
        """
        Convert an uploaded image and store it as a new firework.

        Args:
            image_bytes: Encoded JPEG or PNG data
            is_shareable: Shareability flag for the new firework
            filename: Original filename, for logging only

        Returns:
            The stored firework

        Raises:
            DecodeError: If the image cannot be decoded (nothing is stored)
            PersistenceError: If the database rejects the insert
        """
        logger.info(f"Received image {filename or '<unnamed>'} ({len(image_bytes)} bytes)")

        pixel_data = self.pipeline.ingest(image_bytes)

        firework = Firework(is_shareable=is_shareable, pixel_data=pixel_data)
        self._commit(firework, "create firework")

        logger.info(f"Created firework {firework.id} (shareable={firework.is_shareable})")
        return self._to_response(firework)

    def list_fireworks(self) -> List[FireworkResponse]:
        """
        List all fireworks that have not been deleted.

        Returns:
            Fireworks ordered by ID
        """
        try:
            fireworks = self._active_query().order_by(Firework.id).all()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to retrieve fireworks: {e}") from e

        return [self._to_response(f) for f in fireworks]

    def get_firework(self, firework_id: int) -> FireworkResponse:
        """
        Retrieve a firework by ID.

        Raises:
            NotFoundError: If no such firework exists
        """
        return self._to_response(self._get_record(firework_id))

    def update_firework(self, firework_id: int, is_shareable: bool) -> FireworkResponse:
        """
        Replace a firework's shareability flag.

        Args:
            firework_id: ID of the firework
            is_shareable: New shareability flag

        Returns:
            The updated firework

        Raises:
            NotFoundError: If no such firework exists
            PersistenceError: If the database rejects the update
        """
        firework = self._get_record(firework_id)
        firework.is_shareable = is_shareable
        # Set explicitly: an unchanged flag would otherwise issue no UPDATE
        firework.updated_at = datetime.utcnow()
        self._commit(firework, f"update firework {firework_id}")

        logger.info(f"Updated firework {firework_id} (shareable={is_shareable})")
        return self._to_response(firework)

    def delete_firework(self, firework_id: int) -> None:
        """
        Delete a firework. The row is kept with `deleted_at` set.

        Raises:
            NotFoundError: If no such firework exists
            PersistenceError: If the database rejects the update
        """
        firework = self._get_record(firework_id)
        firework.deleted_at = datetime.utcnow()
        self._commit(firework, f"delete firework {firework_id}")

        logger.info(f"Deleted firework {firework_id}")

    def count_fireworks(self) -> int:
        """Number of fireworks that have not been deleted."""
        try:
            return self._active_query().count()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to count fireworks: {e}") from e

    def _active_query(self):
        return self.db.query(Firework).filter(Firework.deleted_at.is_(None))

    def _get_record(self, firework_id: int) -> Firework:
        try:
            firework = self._active_query().filter(Firework.id == firework_id).first()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to retrieve firework with id {firework_id}: {e}") from e

        if firework is None:
            raise NotFoundError(firework_id)
        return firework

    def _commit(self, firework: Firework, action: str):
        """Add, commit and refresh `firework`; roll back on failure."""
        try:
            self.db.add(firework)
            self.db.commit()
            self.db.refresh(firework)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Failed to {action}: {e}")
            raise PersistenceError(f"Failed to {action}") from e

    def _to_response(self, firework: Firework) -> FireworkResponse:
        return FireworkResponse(
            id=firework.id,
            is_shareable=firework.is_shareable,
            pixel_data=self.pipeline.retrieve(firework.pixel_data),
            created_at=firework.created_at,
            updated_at=firework.updated_at
        )
