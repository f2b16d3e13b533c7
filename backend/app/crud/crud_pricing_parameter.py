from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models, schemas


def get_parameters_for_industry(db: Session, industry_id: str) -> List[models.PricingParameter]:
    return (
        db.query(models.PricingParameter)
        .filter(models.PricingParameter.industry_id == industry_id)
        .order_by(
            models.PricingParameter.variable_category.asc(),
            models.PricingParameter.sort_order.asc(),
            models.PricingParameter.created_at.asc(),
        )
        .all()
    )


def get_parameter(db: Session, parameter_id: str) -> Optional[models.PricingParameter]:
    return db.query(models.PricingParameter).filter(models.PricingParameter.id == parameter_id).first()


def create_parameter(db: Session, parameter_in: schemas.PricingParameterCreate) -> models.PricingParameter:
    data = parameter_in.model_dump(exclude_none=True)
    data["name"] = (data.get("name") or "").strip()
    db_parameter = models.PricingParameter(**data)
    db.add(db_parameter)
    db.commit()
    db.refresh(db_parameter)
    return db_parameter


def update_parameter(
    db: Session, db_parameter: models.PricingParameter, parameter_in: schemas.PricingParameterUpdate
) -> models.PricingParameter:
    update_data = parameter_in.model_dump(exclude_unset=True, exclude={"id"})
    if "name" in update_data and update_data["name"] is not None:
        update_data["name"] = update_data["name"].strip()
    for key, value in update_data.items():
        setattr(db_parameter, key, value)
    db.commit()
    db.refresh(db_parameter)
    return db_parameter


def delete_parameter(db: Session, db_parameter: models.PricingParameter) -> None:
    db.delete(db_parameter)
    db.commit()


def reorder_parameters(db: Session, updates: List[schemas.SortUpdate]) -> int:
    """Apply every ``sort_order`` in one transaction; returns rows touched."""
    touched = 0
    for update in updates:
        touched += (
            db.query(models.PricingParameter)
            .filter(models.PricingParameter.id == update.id)
            .update({models.PricingParameter.sort_order: update.sort_order}, synchronize_session=False)
        )
    db.commit()
    return touched
