import logging
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..crud import (
    crud_extra,
    crud_frequency,
    crud_industry,
    crud_location,
    crud_pricing_parameter,
    crud_service_provider,
)
from ..database import get_db
from .. import schemas
from ..services.booking_board import provider_to_read
from ..utils.errors import api_error
from .dependencies import get_business_id

router = APIRouter(tags=["industries"])
categories_router = APIRouter(tags=["service-categories"])
logger = logging.getLogger(__name__)


@router.get("/")
def list_industries(
    business_id: Optional[str] = Query(None),
    db: Session = Depends(get_db),
):
    if not business_id:
        raise api_error("Business ID is required")
    rows = crud_industry.get_industries(db, business_id)
    return {"industries": [schemas.IndustryRead.model_validate(i) for i in rows]}


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_industry(payload: schemas.IndustryCreate, db: Session = Depends(get_db)):
    if not (payload.name or "").strip() or not payload.business_id:
        raise api_error("Name and business_id are required")
    try:
        industry = crud_industry.create_industry(db, payload)
    except IntegrityError:
        db.rollback()
        raise api_error("Industry already exists for this business", status.HTTP_409_CONFLICT)
    return {"industry": schemas.IndustryRead.model_validate(industry)}


@router.get("/{industry_id}/form-options")
def get_form_options(
    industry_id: str,
    business_id: Optional[str] = Depends(get_business_id),
    db: Session = Depends(get_db),
):
    """Sibling lists the pricing, extra and frequency forms select from."""
    industry = crud_industry.get_industry(db, industry_id)
    if industry is None:
        raise api_error("Industry not found", status.HTTP_404_NOT_FOUND)
    business_id = business_id or industry.business_id
    other_industries = [
        schemas.IndustryRead.model_validate(i)
        for i in crud_industry.get_industries(db, business_id)
        if i.id != industry_id
    ]
    return {
        "serviceCategories": [
            schemas.ServiceCategoryRead.model_validate(c)
            for c in crud_industry.get_service_categories(db, industry_id=industry_id)
        ],
        "frequencies": [
            schemas.FrequencyRead.model_validate(f)
            for f in crud_frequency.get_active_frequencies(db, industry_id=industry_id)
        ],
        "industries": other_industries,
        "pricingParameters": [
            schemas.PricingParameterRead.model_validate(p)
            for p in crud_pricing_parameter.get_parameters_for_industry(db, industry_id)
        ],
        "extras": [schemas.ExtraRead.model_validate(e) for e in crud_extra.get_active_extras(db, industry_id)],
        "providers": [
            provider_to_read(p) for p in crud_service_provider.get_providers_for_business(db, business_id)
        ],
        "locations": [
            schemas.LocationRead.model_validate(loc) for loc in crud_location.get_locations(db, business_id)
        ],
    }


@categories_router.get("/")
def list_service_categories(
    industry_id: Optional[str] = Query(None, alias="industryId"),
    business_id: Optional[str] = Query(None, alias="businessId"),
    db: Session = Depends(get_db),
):
    if not industry_id and not business_id:
        raise api_error("Industry ID or Business ID is required")
    rows = crud_industry.get_service_categories(db, industry_id=industry_id, business_id=business_id)
    return {"serviceCategories": [schemas.ServiceCategoryRead.model_validate(c) for c in rows]}


@categories_router.post("/", status_code=status.HTTP_201_CREATED)
def create_service_category(payload: schemas.ServiceCategoryCreate, db: Session = Depends(get_db)):
    if not (payload.name or "").strip() or not payload.business_id or not payload.industry_id:
        raise api_error("Name, business_id and industry_id are required")
    category = crud_industry.create_service_category(db, payload)
    return {"serviceCategory": schemas.ServiceCategoryRead.model_validate(category)}
