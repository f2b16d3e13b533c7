import logging
import re
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..crud import crud_extra, crud_industry, crud_service_provider
from ..database import get_db
from .. import schemas
from ..utils.errors import api_error
from .forms import parse_sort_updates, reject_unknown

router = APIRouter(tags=["extras"])
logger = logging.getLogger(__name__)

UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)


@router.get("/")
def list_extras(
    industry_id: Optional[str] = Query(None, alias="industryId"),
    db: Session = Depends(get_db),
):
    if not industry_id:
        raise api_error("Industry ID is required")
    rows = crud_extra.get_active_extras(db, industry_id)
    return {"extras": [schemas.ExtraRead.model_validate(e) for e in rows]}


@router.post("/reorder")
def reorder_extras(payload: Any = Body(None), db: Session = Depends(get_db)):
    updates = parse_sort_updates(payload, "Updates array is required")
    crud_extra.reorder_extras(db, updates)
    return {"success": True}


@router.get("/{extra_id}")
def get_extra(extra_id: str, db: Session = Depends(get_db)):
    if not UUID_RE.match(extra_id):
        raise api_error("Invalid Extra ID format")
    extra = crud_extra.get_extra(db, extra_id)
    if extra is None:
        raise api_error("Extra not found", status.HTTP_404_NOT_FOUND)
    return {"extra": schemas.ExtraRead.model_validate(extra)}


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_extra(payload: schemas.ExtraCreate, db: Session = Depends(get_db)):
    if not payload.industry_id:
        raise api_error("Industry ID is required")
    if not (payload.name or "").strip():
        raise api_error("Name is required")
    if not payload.business_id:
        # The form only knows the industry; the tenant comes from it.
        industry = crud_industry.get_industry(db, payload.industry_id)
        if industry is None:
            raise api_error("Industry not found", status.HTTP_404_NOT_FOUND)
        payload.business_id = industry.business_id
    if payload.excluded_providers:
        providers = crud_service_provider.get_providers_for_business(db, payload.business_id)
        reject_unknown("excluded_providers", payload.excluded_providers, [p.id for p in providers])
    try:
        extra = crud_extra.create_extra(db, payload)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Extra insert failed: %s", exc)
        raise api_error("Failed to create extra", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"extra": schemas.ExtraRead.model_validate(extra)}


@router.put("/")
def update_extra(payload: schemas.ExtraUpdate, db: Session = Depends(get_db)):
    if not payload.id:
        raise api_error("Extra ID is required")
    extra = crud_extra.get_extra(db, payload.id)
    if extra is None:
        raise api_error("Extra not found", status.HTTP_404_NOT_FOUND)
    if payload.excluded_providers:
        providers = crud_service_provider.get_providers_for_business(db, extra.business_id)
        reject_unknown("excluded_providers", payload.excluded_providers, [p.id for p in providers])
    try:
        extra = crud_extra.update_extra(db, extra, payload)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Extra %s update failed: %s", payload.id, exc)
        raise api_error("Failed to update extra", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"extra": schemas.ExtraRead.model_validate(extra)}


@router.delete("/")
def delete_extra(
    extra_id: Optional[str] = Query(None, alias="id"),
    permanent: bool = Query(False),
    db: Session = Depends(get_db),
):
    if not extra_id:
        raise api_error("Extra ID is required")
    extra = crud_extra.get_extra(db, extra_id)
    if extra is None:
        raise api_error("Extra not found", status.HTTP_404_NOT_FOUND)
    if permanent:
        crud_extra.delete_extra(db, extra)
    else:
        crud_extra.deactivate_extra(db, extra)
    return {"success": True}
