from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models, schemas
from ..models.base import utcnow

# Column defaults applied on create when the form leaves a field out.
FREQUENCY_DEFAULTS = {
    "display": "Both",
    "discount": 0,
    "discount_type": "%",
    "is_default": False,
    "different_on_customer_end": False,
    "show_explanation": False,
    "enable_popup": False,
    "excluded_providers": [],
    "shorter_job_length": "no",
    "exclude_first_appointment": False,
    "frequency_discount": "all",
    "charge_one_time_price": False,
    "add_to_other_industries": False,
    "enabled_industries": [],
    "show_based_on_location": False,
    "location_ids": [],
    "service_categories": [],
    "bathroom_variables": [],
    "sqft_variables": [],
    "bedroom_variables": [],
    "exclude_parameters": [],
    "extras": [],
}


def get_active_frequencies(
    db: Session, industry_id: Optional[str] = None, business_id: Optional[str] = None
) -> List[models.IndustryFrequency]:
    query = db.query(models.IndustryFrequency).filter(models.IndustryFrequency.is_active.is_(True))
    if industry_id:
        query = query.filter(models.IndustryFrequency.industry_id == industry_id)
    if business_id:
        query = query.filter(models.IndustryFrequency.business_id == business_id)
    return query.order_by(models.IndustryFrequency.created_at.asc()).all()


def get_frequency(db: Session, frequency_id: str) -> Optional[models.IndustryFrequency]:
    return db.query(models.IndustryFrequency).filter(models.IndustryFrequency.id == frequency_id).first()


def create_frequency(db: Session, frequency_in: schemas.FrequencyCreate) -> models.IndustryFrequency:
    data = {**FREQUENCY_DEFAULTS, **frequency_in.model_dump(exclude_none=True)}
    data["name"] = data["name"].strip()
    if data.get("description") is not None:
        data["description"] = data["description"].strip()
    db_frequency = models.IndustryFrequency(is_active=True, **data)
    db.add(db_frequency)
    db.commit()
    db.refresh(db_frequency)
    return db_frequency


def update_frequency(
    db: Session, db_frequency: models.IndustryFrequency, frequency_in: schemas.FrequencyUpdate
) -> models.IndustryFrequency:
    update_data = frequency_in.model_dump(exclude_unset=True, exclude={"id"})
    for key in ("name", "description"):
        if isinstance(update_data.get(key), str):
            update_data[key] = update_data[key].strip()
    for key, value in update_data.items():
        setattr(db_frequency, key, value)
    db_frequency.updated_at = utcnow()
    db.commit()
    db.refresh(db_frequency)
    return db_frequency


def deactivate_frequency(db: Session, db_frequency: models.IndustryFrequency) -> None:
    db_frequency.is_active = False
    db_frequency.updated_at = utcnow()
    db.commit()


def delete_frequency(db: Session, db_frequency: models.IndustryFrequency) -> None:
    db.delete(db_frequency)
    db.commit()
