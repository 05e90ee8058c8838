"""
Exception types for the Fireworks API.

Routers translate these into HTTP status codes; the service layer raises them.
"""


class FireworkError(Exception):
    """Base class for all application errors."""


class DecodeError(FireworkError):
    """Uploaded bytes are not a decodable JPEG or PNG image."""


class NotFoundError(FireworkError):
    """Requested firework does not exist (or was deleted)."""

    def __init__(self, firework_id: int):
        self.firework_id = firework_id
        super().__init__(f"Firework {firework_id} not found")


class PersistenceError(FireworkError):
    """The database rejected an operation."""
