import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..crud import crud_extra, crud_frequency, crud_location, crud_service_provider
from ..database import get_db
from .. import schemas
from ..services.option_sets import find_duplicate_name
from ..utils.errors import api_error
from .forms import reject_unknown

router = APIRouter(tags=["frequencies"])
logger = logging.getLogger(__name__)

DUPLICATE_MESSAGE = "Frequency with this name already exists"


def _check_dependencies(db: Session, business_id: str, industry_id: str, data: schemas.FrequencyBase) -> None:
    if data.excluded_providers:
        providers = crud_service_provider.get_providers_for_business(db, business_id)
        reject_unknown("excluded_providers", data.excluded_providers, [p.id for p in providers])
    if data.location_ids:
        locations = crud_location.get_locations(db, business_id)
        reject_unknown("location_ids", data.location_ids, [loc.id for loc in locations])
    if data.extras:
        extras = crud_extra.get_active_extras(db, industry_id)
        reject_unknown("extras", data.extras, [e.id for e in extras])


@router.get("/")
def list_frequencies(
    industry_id: Optional[str] = Query(None, alias="industryId"),
    business_id: Optional[str] = Query(None, alias="businessId"),
    db: Session = Depends(get_db),
):
    if not industry_id and not business_id:
        raise api_error("Industry ID or Business ID is required")
    rows = crud_frequency.get_active_frequencies(db, industry_id=industry_id, business_id=business_id)
    return {"frequencies": [schemas.FrequencyRead.model_validate(f) for f in rows]}


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_frequency(payload: schemas.FrequencyCreate, db: Session = Depends(get_db)):
    if not (
        payload.business_id
        and payload.industry_id
        and (payload.name or "").strip()
        and payload.occurrence_time
    ):
        raise api_error("Business ID, Industry ID, Name, and Occurrence Time are required")
    siblings = crud_frequency.get_active_frequencies(db, industry_id=payload.industry_id)
    if find_duplicate_name(payload.name, None, siblings):
        raise api_error(DUPLICATE_MESSAGE, status.HTTP_409_CONFLICT)
    _check_dependencies(db, payload.business_id, payload.industry_id, payload)
    try:
        frequency = crud_frequency.create_frequency(db, payload)
    except IntegrityError:
        db.rollback()
        raise api_error(DUPLICATE_MESSAGE, status.HTTP_409_CONFLICT)
    except SQLAlchemyError as exc:
        db.rollback()
        raise api_error(f"Failed to create frequency: {exc}", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"frequency": schemas.FrequencyRead.model_validate(frequency)}


@router.put("/")
def update_frequency(payload: schemas.FrequencyUpdate, db: Session = Depends(get_db)):
    if not payload.id:
        raise api_error("Frequency ID is required")
    frequency = crud_frequency.get_frequency(db, payload.id)
    if frequency is None:
        raise api_error("Frequency not found", status.HTTP_404_NOT_FOUND)
    if payload.name is not None:
        siblings = crud_frequency.get_active_frequencies(db, industry_id=frequency.industry_id)
        if find_duplicate_name(payload.name, None, siblings, exclude_id=frequency.id):
            raise api_error(DUPLICATE_MESSAGE, status.HTTP_409_CONFLICT)
    _check_dependencies(db, frequency.business_id, frequency.industry_id, payload)
    try:
        frequency = crud_frequency.update_frequency(db, frequency, payload)
    except IntegrityError:
        db.rollback()
        raise api_error(DUPLICATE_MESSAGE, status.HTTP_409_CONFLICT)
    except SQLAlchemyError as exc:
        db.rollback()
        raise api_error(f"Failed to update frequency: {exc}", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"frequency": schemas.FrequencyRead.model_validate(frequency)}


@router.delete("/")
def delete_frequency(
    frequency_id: Optional[str] = Query(None, alias="id"),
    permanent: bool = Query(False),
    db: Session = Depends(get_db),
):
    if not frequency_id:
        raise api_error("Frequency ID is required")
    frequency = crud_frequency.get_frequency(db, frequency_id)
    if frequency is None:
        raise api_error("Frequency not found", status.HTTP_404_NOT_FOUND)
    try:
        if permanent:
            crud_frequency.delete_frequency(db, frequency)
        else:
            crud_frequency.deactivate_frequency(db, frequency)
    except SQLAlchemyError as exc:
        db.rollback()
        raise api_error(f"Failed to delete frequency: {exc}", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"success": True}
