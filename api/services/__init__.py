"""
Services layer for the Fireworks API.

This package provides high-level business logic services.
"""

from .firework_service import FireworkService

__all__ = ['FireworkService']
