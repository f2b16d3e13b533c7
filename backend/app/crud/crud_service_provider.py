from typing import Iterable, List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from .. import models, schemas


def get_providers_for_business(db: Session, business_id: str) -> List[models.ServiceProvider]:
    return (
        db.query(models.ServiceProvider)
        .filter(models.ServiceProvider.business_id == business_id)
        .order_by(models.ServiceProvider.created_at.asc())
        .all()
    )


def get_providers_by_ids(db: Session, provider_ids: Iterable[str]) -> List[models.ServiceProvider]:
    ids = list(provider_ids)
    if not ids:
        return []
    return db.query(models.ServiceProvider).filter(models.ServiceProvider.id.in_(ids)).all()


def get_provider(db: Session, business_id: str, provider_id: str) -> Optional[models.ServiceProvider]:
    return (
        db.query(models.ServiceProvider)
        .filter(
            models.ServiceProvider.id == provider_id,
            models.ServiceProvider.business_id == business_id,
        )
        .first()
    )


def get_provider_by_email(db: Session, business_id: str, email: str) -> Optional[models.ServiceProvider]:
    return (
        db.query(models.ServiceProvider)
        .filter(
            models.ServiceProvider.business_id == business_id,
            func.lower(models.ServiceProvider.email) == email.strip().lower(),
        )
        .first()
    )


def create_provider(db: Session, provider_in: schemas.ProviderCreate) -> models.ServiceProvider:
    first = provider_in.first_name.strip()
    last = provider_in.last_name.strip()
    db_provider = models.ServiceProvider(
        business_id=provider_in.business_id,
        first_name=first,
        last_name=last,
        name=f"{first} {last}".strip(),
        email=provider_in.email.strip().lower(),
        phone=provider_in.phone,
        address=provider_in.address,
        provider_type=provider_in.provider_type,
        send_email_notification=provider_in.send_email_notification,
    )
    db.add(db_provider)
    db.commit()
    db.refresh(db_provider)
    return db_provider
