"""
Fireworks API - Monochrome bitmap storage for user-drawn fireworks

This FastAPI application provides endpoints for:
- Uploading JPEG/PNG images, stored as 54x54 one-bit bitmaps
- Listing and fetching stored fireworks
- Changing a firework's shareability
- Deleting fireworks
"""

from fastapi import FastAPI, Depends
from sqlalchemy.orm import Session

from config import get_config
from database import init_database, get_db
from models import HealthResponse
from routers import fireworks_router
from services import FireworkService
from utils.logger import get_logger, setup_from_config

logger = get_logger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Fireworks API",
    description="Stores uploaded images as 54x54 monochrome firework bitmaps",
    version="1.0.0"
)

# Include routers
app.include_router(fireworks_router)


@app.on_event("startup")
async def startup_event():
    """
    Configure logging and create database tables on startup.
    """
    setup_from_config(get_config())
    init_database()
    logger.info("Database initialized")


@app.get("/health", response_model=HealthResponse)
def health_check(db: Session = Depends(get_db)):
    """
    Health check endpoint.

    Returns:
        System health status and number of stored fireworks
    """
    return HealthResponse(
        status="healthy",
        database_initialized=True,
        fireworks_count=FireworkService(db).count_fireworks()
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8080)
