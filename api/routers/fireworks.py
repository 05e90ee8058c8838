"""
Fireworks Router - Firework endpoints for the Fireworks API

Contains endpoints for:
- Listing fireworks
- Getting a single firework
- Creating a firework from an uploaded JPEG/PNG image
- Updating a firework's shareability
- Deleting a firework
"""

from fastapi import APIRouter, UploadFile, File, Form, Depends, HTTPException, Response
from sqlalchemy.orm import Session
from typing import List

from config import get_config, UploadConfig
from database import get_db
from errors import DecodeError, NotFoundError, PersistenceError
from models import FireworkResponse, FireworkUpdateRequest
from services import FireworkService

router = APIRouter(prefix="/fireworks", tags=["fireworks"])


@router.get("", response_model=List[FireworkResponse])
def list_fireworks(db: Session = Depends(get_db)):
    """
    List all fireworks.

    Args:
        db: Database session

    Returns:
        List of fireworks with their pixel data
    """
    try:
        return FireworkService(db).list_fireworks()
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to retrieve fireworks")


@router.get("/{firework_id}", response_model=FireworkResponse)
def get_firework(firework_id: int, db: Session = Depends(get_db)):
    """
    Get a firework by ID.

    Args:
        firework_id: Firework ID
        db: Database session

    Returns:
        The firework
    """
    try:
        return FireworkService(db).get_firework(firework_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Firework not found")
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to retrieve firework")


@router.post("", response_model=FireworkResponse, status_code=201)
def create_firework(
    image: UploadFile = File(...),
    is_shareable: str = Form("false"),
    db: Session = Depends(get_db)
):
    """
    Create a firework from an uploaded image (multipart/form-data).

    Args:
        image: JPEG or PNG image file
        is_shareable: "true" makes the firework shareable; any other value does not
        db: Database session

    Returns:
        The created firework
    """
    upload_config = UploadConfig(**get_config().get_section("upload"))

    content = image.file.read(upload_config.max_bytes + 1)
    if len(content) > upload_config.max_bytes:
        raise HTTPException(
            status_code=413,
            detail=f"Image exceeds the {upload_config.max_bytes} byte upload limit"
        )

    try:
        return FireworkService(db).create_firework(content, is_shareable == "true", filename=image.filename)
    except DecodeError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to create firework")


@router.put("/{firework_id}", response_model=FireworkResponse)
def update_firework(
    firework_id: int,
    request: FireworkUpdateRequest,
    db: Session = Depends(get_db)
):
    """
    Update a firework's shareability. Pixel data cannot be changed.

    Args:
        firework_id: Firework ID
        request: New shareability flag
        db: Database session

    Returns:
        The updated firework
    """
    try:
        return FireworkService(db).update_firework(firework_id, request.is_shareable)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Firework not found")
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to update firework")


@router.delete("/{firework_id}", status_code=204)
def delete_firework(firework_id: int, db: Session = Depends(get_db)):
    """
    Delete a firework.

    Args:
        firework_id: Firework ID
        db: Database session
    """
    try:
        FireworkService(db).delete_firework(firework_id)
    except NotFoundError:
        raise HTTPException(status_code=404, detail="Firework not found")
    except PersistenceError:
        raise HTTPException(status_code=500, detail="Failed to delete firework")

    return Response(status_code=204)
