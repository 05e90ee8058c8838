"""
Pydantic models for request/response validation.

These models define the API contracts for the Fireworks endpoints. JSON
keys are camelCase, as the web clients expect.
"""

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel
from datetime import datetime
from typing import Optional, List


class FireworkResponse(BaseModel):
    """Response model for a firework."""

    id: int
    is_shareable: bool
    pixel_data: List[bool] = Field(..., description="54x54 pixels, row-major; true = light")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class FireworkUpdateRequest(BaseModel):
    """Request model for changing a firework's shareability."""

    is_shareable: bool

    class Config:
        alias_generator = to_camel
        populate_by_name = True


class HealthResponse(BaseModel):
    """Response model for health check."""

    status: str
    database_initialized: bool
    fireworks_count: int

    class Config:
        alias_generator = to_camel
        populate_by_name = True
