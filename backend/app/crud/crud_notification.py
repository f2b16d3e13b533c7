from typing import List

from sqlalchemy.orm import Session

from .. import models


def create_admin_notification(
    db: Session, business_id: str, title: str, description: str, link: str | None = None
) -> models.AdminNotification:
    notification = models.AdminNotification(
        business_id=business_id,
        title=title,
        description=description,
        link=link,
    )
    db.add(notification)
    db.commit()
    db.refresh(notification)
    return notification


def get_admin_notifications(db: Session, business_id: str) -> List[models.AdminNotification]:
    return (
        db.query(models.AdminNotification)
        .filter(models.AdminNotification.business_id == business_id)
        .order_by(models.AdminNotification.created_at.desc(), models.AdminNotification.id.desc())
        .all()
    )


def mark_read(db: Session, business_id: str, notification_id: int) -> bool:
    updated = (
        db.query(models.AdminNotification)
        .filter(
            models.AdminNotification.id == notification_id,
            models.AdminNotification.business_id == business_id,
        )
        .update({models.AdminNotification.read: True}, synchronize_session=False)
    )
    db.commit()
    return bool(updated)


def mark_all_read(db: Session, business_id: str) -> int:
    updated = (
        db.query(models.AdminNotification)
        .filter(models.AdminNotification.business_id == business_id)
        .update({models.AdminNotification.read: True}, synchronize_session=False)
    )
    db.commit()
    return updated
