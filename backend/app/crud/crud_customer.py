import time
from datetime import date
from typing import List, Optional

from sqlalchemy import func, or_
from sqlalchemy.orm import Session

from .. import models, schemas
from ..models.base import utcnow


def get_customers(db: Session, business_id: str, search: Optional[str] = None) -> List[models.Customer]:
    query = db.query(models.Customer).filter(models.Customer.business_id == business_id)
    term = (search or "").strip()
    if term:
        like = f"%{term.lower()}%"
        query = query.filter(
            or_(
                func.lower(models.Customer.id).like(like),
                func.lower(models.Customer.name).like(like),
                func.lower(models.Customer.email).like(like),
                models.Customer.phone.like(f"%{term}%"),
            )
        )
    return query.order_by(models.Customer.join_date.desc(), models.Customer.created_at.desc()).all()


def get_customer(db: Session, customer_id: str, business_id: Optional[str] = None) -> Optional[models.Customer]:
    query = db.query(models.Customer).filter(models.Customer.id == customer_id)
    if business_id:
        query = query.filter(models.Customer.business_id == business_id)
    return query.first()


def create_customer(db: Session, customer_in: schemas.CustomerCreate, today: date) -> models.Customer:
    db_customer = models.Customer(
        id=customer_in.id or f"CUST{int(time.time() * 1000)}",
        business_id=customer_in.business_id,
        name=customer_in.name.strip(),
        email=customer_in.email,
        phone=customer_in.phone,
        address=customer_in.address,
        tags=list(customer_in.tags),
        status="active",
        join_date=today,
        total_bookings=0,
        total_spent=0,
    )
    db.add(db_customer)
    db.commit()
    db.refresh(db_customer)
    return db_customer


def update_customer(db: Session, db_customer: models.Customer, customer_in: schemas.CustomerUpdate) -> models.Customer:
    for key, value in customer_in.model_dump(exclude_unset=True).items():
        setattr(db_customer, key, value)
    db_customer.updated_at = utcnow()
    db.commit()
    db.refresh(db_customer)
    return db_customer


def delete_customer(db: Session, db_customer: models.Customer) -> None:
    db.delete(db_customer)
    db.commit()
