from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models, schemas


def get_active_extras(db: Session, industry_id: str) -> List[models.Extra]:
    return (
        db.query(models.Extra)
        .filter(models.Extra.industry_id == industry_id, models.Extra.is_active.is_(True))
        .order_by(models.Extra.sort_order.asc(), models.Extra.created_at.asc())
        .all()
    )


def get_extra(db: Session, extra_id: str) -> Optional[models.Extra]:
    return db.query(models.Extra).filter(models.Extra.id == extra_id).first()


def create_extra(db: Session, extra_in: schemas.ExtraCreate) -> models.Extra:
    db_extra = models.Extra(**extra_in.model_dump(exclude_none=True))
    db.add(db_extra)
    db.commit()
    db.refresh(db_extra)
    return db_extra


def update_extra(db: Session, db_extra: models.Extra, extra_in: schemas.ExtraUpdate) -> models.Extra:
    for key, value in extra_in.model_dump(exclude_unset=True, exclude={"id"}).items():
        setattr(db_extra, key, value)
    db.commit()
    db.refresh(db_extra)
    return db_extra


def deactivate_extra(db: Session, db_extra: models.Extra) -> models.Extra:
    db_extra.is_active = False
    db.commit()
    db.refresh(db_extra)
    return db_extra


def delete_extra(db: Session, db_extra: models.Extra) -> None:
    db.delete(db_extra)
    db.commit()


def reorder_extras(db: Session, updates: List[schemas.SortUpdate]) -> int:
    touched = 0
    for update in updates:
        touched += (
            db.query(models.Extra)
            .filter(models.Extra.id == update.id)
            .update({models.Extra.sort_order: update.sort_order}, synchronize_session=False)
        )
    db.commit()
    return touched
