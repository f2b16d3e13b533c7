import logging
from typing import Optional

import httpx

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..crud import crud_location
from ..database import get_db
from .. import schemas
from ..services import geocode
from ..utils.errors import api_error

router = APIRouter(tags=["locations"])
logger = logging.getLogger(__name__)


def _fill_coordinates(payload: schemas.LocationCreate) -> None:
    """Geocode the address when the form sent no coordinates."""
    if payload.latitude is not None and payload.longitude is not None:
        return
    parts = [payload.address, payload.city, payload.state, payload.postal_code]
    query = ", ".join(p for p in parts if p)
    if not query:
        return
    result = geocode.geocode_address(query)
    if result is not None:
        payload.latitude = result.lat
        payload.longitude = result.lng


@router.get("/")
def list_locations(
    business_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    if not business_id:
        raise api_error("Business ID is required")
    rows = crud_location.get_locations(db, business_id)
    return {"locations": [schemas.LocationRead.model_validate(loc) for loc in rows]}


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_location(payload: schemas.LocationCreate, db: Session = Depends(get_db)):
    errors = []
    if not (payload.name or "").strip():
        errors.append({"path": ["name"], "message": "Name is required"})
    if not payload.business_id:
        errors.append({"path": ["business_id"], "message": "Business ID is required"})
    if errors:
        raise api_error("Validation error", details=errors)
    _fill_coordinates(payload)
    try:
        location = crud_location.create_location(db, payload)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Location insert failed: %s", exc)
        raise api_error("Failed to create location", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"location": schemas.LocationRead.model_validate(location)}


@router.put("/")
def update_location(payload: schemas.LocationUpdate, db: Session = Depends(get_db)):
    if not payload.id:
        raise api_error("Location ID is required")
    if not payload.business_id:
        raise api_error("Business ID is required")
    location = crud_location.get_location(db, payload.business_id, payload.id)
    if location is None:
        raise api_error("Location not found", status.HTTP_404_NOT_FOUND)
    if "name" in payload.model_fields_set and not (payload.name or "").strip():
        raise api_error("Validation error", details=[{"path": ["name"], "message": "Name is required"}])
    try:
        location = crud_location.update_location(db, location, payload)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Location %s update failed: %s", payload.id, exc)
        raise api_error("Failed to update location", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"location": schemas.LocationRead.model_validate(location)}


@router.delete("/")
def delete_location(
    location_id: Optional[str] = Query(None, alias="id"),
    business_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    if not location_id or not business_id:
        raise api_error("Location ID and Business ID are required")
    location = crud_location.get_location(db, business_id, location_id)
    if location is None:
        raise api_error("Location not found", status.HTTP_404_NOT_FOUND)
    crud_location.delete_location(db, location)
    return {"message": "Location deleted successfully"}


@router.post("/map/zipcodes-in-area", response_model=schemas.ServiceAreaResponse)
async def zipcodes_in_area(payload: schemas.ServiceAreaRequest):
    shape = payload.shape
    if not shape or not shape.get("type"):
        raise api_error("Request body must include shape: { type, coordinates, properties? }")
    try:
        zipcodes = await geocode.zipcodes_in_area(shape)
    except geocode.InvalidShape as exc:
        raise api_error(str(exc))
    except geocode.GeocodingUnavailable as exc:
        raise api_error(str(exc), status.HTTP_503_SERVICE_UNAVAILABLE)
    except httpx.HTTPError as exc:
        raise api_error(
            "Failed to get zipcodes for area",
            status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=str(exc),
        )
    return {"zipcodes": zipcodes, "count": len(zipcodes)}
