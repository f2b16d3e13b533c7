from __future__ import annotations

from datetime import date
from typing import Optional
import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from ..crud import crud_customer, crud_notification, crud_service_provider
from ..database import get_db
from .. import models, schemas
from ..services.booking_board import provider_to_read
from ..utils.errors import api_error
from .dependencies import get_business_id, get_today

router = APIRouter(prefix="/admin", tags=["admin"])
logger = logging.getLogger(__name__)


# ────────────────────────────────────────────────────────────────────────────────
# Providers


@router.get("/providers")
def list_providers(
    business_id: Optional[str] = Depends(get_business_id),
    db: Session = Depends(get_db),
):
    if not business_id:
        raise api_error("Business ID is required")
    rows = crud_service_provider.get_providers_for_business(db, business_id)
    return {"providers": [provider_to_read(p) for p in rows]}


@router.post("/providers", status_code=status.HTTP_201_CREATED)
def create_provider(payload: schemas.ProviderCreate, db: Session = Depends(get_db)):
    if payload.missing_required():
        raise api_error("Missing required fields")
    if crud_service_provider.get_provider_by_email(db, payload.business_id, payload.email):
        raise api_error("A user with this email already exists", status.HTTP_409_CONFLICT)
    try:
        provider = crud_service_provider.create_provider(db, payload)
    except IntegrityError:
        db.rollback()
        raise api_error("A user with this email already exists", status.HTTP_409_CONFLICT)
    logger.info("Provider %s created for business %s", provider.id, provider.business_id)
    return {"success": True, "provider": provider_to_read(provider)}


# ────────────────────────────────────────────────────────────────────────────────
# Customers


def customer_to_read(customer: models.Customer) -> schemas.CustomerRead:
    spent = customer.total_spent if customer.total_spent is not None else 0
    return schemas.CustomerRead(
        id=customer.id,
        business_id=customer.business_id,
        name=customer.name,
        email=customer.email,
        phone=customer.phone,
        address=customer.address,
        status=customer.status,
        tags=customer.tags or [],
        access_blocked=customer.access_blocked,
        booking_blocked=customer.booking_blocked,
        email_notifications=customer.email_notifications,
        join_date=customer.join_date,
        total_bookings=customer.total_bookings or 0,
        total_spent=f"${float(spent):.2f}",
        last_booking=customer.last_booking,
        created_at=customer.created_at,
        updated_at=customer.updated_at,
    )


@router.get("/customers")
def list_customers(
    search: Optional[str] = Query(None),
    business_id: Optional[str] = Depends(get_business_id),
    db: Session = Depends(get_db),
):
    if not business_id:
        raise api_error("Business ID is required")
    rows = crud_customer.get_customers(db, business_id, search)
    return {"customers": [customer_to_read(c) for c in rows]}


@router.post("/customers", status_code=status.HTTP_201_CREATED)
def create_customer(
    payload: schemas.CustomerCreate,
    db: Session = Depends(get_db),
    today: date = Depends(get_today),
):
    if not payload.business_id or not (payload.name or "").strip():
        raise api_error("Business ID and name are required")
    if payload.id and crud_customer.get_customer(db, payload.id):
        raise api_error("Customer already exists", status.HTTP_409_CONFLICT)
    try:
        customer = crud_customer.create_customer(db, payload, today)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Customer insert failed: %s", exc)
        raise api_error("Failed to create customer", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"success": True, "customer": customer_to_read(customer)}


@router.get("/customers/{customer_id}")
def get_customer(
    customer_id: str,
    business_id: Optional[str] = Depends(get_business_id),
    db: Session = Depends(get_db),
):
    customer = crud_customer.get_customer(db, customer_id, business_id)
    if customer is None:
        raise api_error("Customer not found", status.HTTP_404_NOT_FOUND)
    return {"success": True, "customer": customer_to_read(customer)}


@router.put("/customers/{customer_id}")
def update_customer(
    customer_id: str,
    payload: schemas.CustomerUpdate,
    business_id: Optional[str] = Depends(get_business_id),
    db: Session = Depends(get_db),
):
    customer = crud_customer.get_customer(db, customer_id, business_id)
    if customer is None:
        raise api_error("Customer not found", status.HTTP_404_NOT_FOUND)
    try:
        customer = crud_customer.update_customer(db, customer, payload)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Customer %s update failed: %s", customer_id, exc)
        raise api_error("Failed to update customer", status.HTTP_500_INTERNAL_SERVER_ERROR)
    return {"success": True, "customer": customer_to_read(customer)}


@router.delete("/customers/{customer_id}")
def delete_customer(
    customer_id: str,
    business_id: Optional[str] = Depends(get_business_id),
    db: Session = Depends(get_db),
):
    customer = crud_customer.get_customer(db, customer_id, business_id)
    if customer is None:
        raise api_error("Customer not found", status.HTTP_404_NOT_FOUND)
    crud_customer.delete_customer(db, customer)
    return {"success": True}


# ────────────────────────────────────────────────────────────────────────────────
# Notifications


@router.get("/notifications")
def list_notifications(
    business_id: Optional[str] = Depends(get_business_id),
    db: Session = Depends(get_db),
):
    if not business_id:
        raise api_error("Business not found", status.HTTP_404_NOT_FOUND)
    rows = crud_notification.get_admin_notifications(db, business_id)
    return {"notifications": [schemas.AdminNotificationRead.model_validate(n) for n in rows]}


@router.patch("/notifications")
def mark_all_notifications_read(
    business_id: Optional[str] = Depends(get_business_id),
    db: Session = Depends(get_db),
):
    if not business_id:
        raise api_error("Business not found", status.HTTP_404_NOT_FOUND)
    crud_notification.mark_all_read(db, business_id)
    return {"ok": True}


@router.patch("/notifications/{notification_id}")
def mark_notification_read(
    notification_id: int,
    business_id: Optional[str] = Depends(get_business_id),
    db: Session = Depends(get_db),
):
    if not business_id:
        raise api_error("Business not found", status.HTTP_404_NOT_FOUND)
    if not crud_notification.mark_read(db, business_id, notification_id):
        raise api_error("Notification not found", status.HTTP_404_NOT_FOUND)
    return {"ok": True}
