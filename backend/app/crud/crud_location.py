from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models, schemas


def get_locations(db: Session, business_id: str) -> List[models.Location]:
    return (
        db.query(models.Location)
        .filter(models.Location.business_id == business_id)
        .order_by(models.Location.created_at.desc())
        .all()
    )


def get_location(db: Session, business_id: str, location_id: str) -> Optional[models.Location]:
    return (
        db.query(models.Location)
        .filter(models.Location.id == location_id, models.Location.business_id == business_id)
        .first()
    )


def create_location(db: Session, location_in: schemas.LocationCreate) -> models.Location:
    data = location_in.model_dump(exclude_none=True)
    data.setdefault("active", True)
    db_location = models.Location(**data)
    db.add(db_location)
    db.commit()
    db.refresh(db_location)
    return db_location


def update_location(db: Session, db_location: models.Location, location_in: schemas.LocationUpdate) -> models.Location:
    for key, value in location_in.model_dump(exclude_unset=True, exclude={"id", "business_id"}).items():
        setattr(db_location, key, value)
    db.commit()
    db.refresh(db_location)
    return db_location


def delete_location(db: Session, db_location: models.Location) -> None:
    db.delete(db_location)
    db.commit()
