import logging
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..crud import crud_extra, crud_pricing_parameter, crud_service_provider
from ..database import get_db
from .. import models, schemas
from ..services.option_sets import find_duplicate_name
from ..utils.errors import api_error
from .forms import parse_sort_updates, reject_unknown

router = APIRouter(tags=["pricing-parameters"])
logger = logging.getLogger(__name__)


def _read(parameter: models.PricingParameter) -> schemas.PricingParameterRead:
    return schemas.PricingParameterRead.model_validate(parameter)


def _check_dependencies(
    db: Session,
    business_id: str,
    industry_id: str,
    data: schemas.PricingParameterBase,
) -> None:
    if data.excluded_extras:
        extras = crud_extra.get_active_extras(db, industry_id)
        reject_unknown("excluded_extras", data.excluded_extras, [e.id for e in extras])
    if data.excluded_providers:
        providers = crud_service_provider.get_providers_for_business(db, business_id)
        reject_unknown("excluded_providers", data.excluded_providers, [p.id for p in providers])


def _check_duplicate(
    db: Session,
    industry_id: str,
    name: Optional[str],
    category: Optional[str],
    exclude_id: Optional[str] = None,
) -> None:
    siblings = crud_pricing_parameter.get_parameters_for_industry(db, industry_id)
    if find_duplicate_name(name, category, siblings, exclude_id=exclude_id):
        raise api_error(
            f'A pricing parameter named "{(name or "").strip()}" already exists in this category',
            status.HTTP_409_CONFLICT,
        )


@router.get("/")
def list_pricing_parameters(
    industry_id: Optional[str] = Query(None, alias="industryId"),
    db: Session = Depends(get_db),
):
    if not industry_id:
        raise api_error("Industry ID is required")
    rows = crud_pricing_parameter.get_parameters_for_industry(db, industry_id)
    return {"pricingParameters": [_read(p) for p in rows]}


@router.post("/", status_code=status.HTTP_201_CREATED)
def create_pricing_parameter(payload: schemas.PricingParameterCreate, db: Session = Depends(get_db)):
    if not payload.industry_id:
        raise api_error("Industry ID is required")
    if not payload.business_id:
        raise api_error("Business ID is required")
    if not payload.variable_category:
        raise api_error("Variable category is required")
    if not (payload.name or "").strip():
        raise api_error("Name is required")
    _check_duplicate(db, payload.industry_id, payload.name, payload.variable_category)
    _check_dependencies(db, payload.business_id, payload.industry_id, payload)
    try:
        parameter = crud_pricing_parameter.create_parameter(db, payload)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Pricing parameter insert failed: %s", exc)
        raise api_error(f"Failed to create pricing parameter: {exc}", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"pricingParameter": _read(parameter)}


@router.put("/")
def update_pricing_parameter(payload: schemas.PricingParameterUpdate, db: Session = Depends(get_db)):
    if not payload.id:
        raise api_error("Pricing parameter ID is required")
    parameter = crud_pricing_parameter.get_parameter(db, payload.id)
    if parameter is None:
        raise api_error("Pricing parameter not found", status.HTTP_404_NOT_FOUND)
    if "name" in payload.model_fields_set or "variable_category" in payload.model_fields_set:
        _check_duplicate(
            db,
            parameter.industry_id,
            payload.name if payload.name is not None else parameter.name,
            payload.variable_category or parameter.variable_category,
            exclude_id=parameter.id,
        )
    _check_dependencies(db, parameter.business_id, parameter.industry_id, payload)
    try:
        parameter = crud_pricing_parameter.update_parameter(db, parameter, payload)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Pricing parameter %s update failed: %s", payload.id, exc)
        raise api_error(f"Failed to update pricing parameter: {exc}", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"pricingParameter": _read(parameter)}


@router.delete("/")
def delete_pricing_parameter(
    parameter_id: Optional[str] = Query(None, alias="id"),
    db: Session = Depends(get_db),
):
    if not parameter_id:
        raise api_error("Pricing parameter ID is required")
    parameter = crud_pricing_parameter.get_parameter(db, parameter_id)
    if parameter is None:
        raise api_error("Pricing parameter not found", status.HTTP_404_NOT_FOUND)
    crud_pricing_parameter.delete_parameter(db, parameter)
    return {"success": True}


@router.post("/reorder")
def reorder_pricing_parameters(payload: Any = Body(None), db: Session = Depends(get_db)):
    updates = parse_sort_updates(payload)
    crud_pricing_parameter.reorder_parameters(db, updates)
    return {"success": True}
