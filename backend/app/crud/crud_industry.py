from typing import List, Optional

from sqlalchemy.orm import Session

from .. import models, schemas


def get_industries(db: Session, business_id: str) -> List[models.Industry]:
    return (
        db.query(models.Industry)
        .filter(models.Industry.business_id == business_id)
        .order_by(models.Industry.created_at.asc())
        .all()
    )


def get_industry(db: Session, industry_id: str) -> Optional[models.Industry]:
    return db.query(models.Industry).filter(models.Industry.id == industry_id).first()


def create_industry(db: Session, industry_in: schemas.IndustryCreate) -> models.Industry:
    db_industry = models.Industry(
        name=industry_in.name.strip(),
        description=(industry_in.description or "").strip() or None,
        business_id=industry_in.business_id,
        is_custom=industry_in.is_custom,
    )
    db.add(db_industry)
    db.commit()
    db.refresh(db_industry)
    return db_industry


def get_service_categories(
    db: Session, industry_id: Optional[str] = None, business_id: Optional[str] = None
) -> List[models.ServiceCategory]:
    query = db.query(models.ServiceCategory)
    if industry_id:
        query = query.filter(models.ServiceCategory.industry_id == industry_id)
    if business_id:
        query = query.filter(models.ServiceCategory.business_id == business_id)
    return query.order_by(models.ServiceCategory.sort_order.asc(), models.ServiceCategory.created_at.asc()).all()


def create_service_category(db: Session, category_in: schemas.ServiceCategoryCreate) -> models.ServiceCategory:
    db_category = models.ServiceCategory(
        name=category_in.name.strip(),
        description=category_in.description,
        business_id=category_in.business_id,
        industry_id=category_in.industry_id,
        sort_order=category_in.sort_order,
    )
    db.add(db_category)
    db.commit()
    db.refresh(db_category)
    return db_category
