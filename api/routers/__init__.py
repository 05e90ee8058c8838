"""
Fireworks API Routers

This package contains the FastAPI routers:
- fireworks: Firework upload, listing, update and deletion endpoints
"""

from .fireworks import router as fireworks_router

__all__ = [
    "fireworks_router"
]
