from typing import List

from sqlalchemy.orm import Session

from .. import models

AUTOMATIC_COMPLETION = "automatic"


def get_automatic_completion_business_ids(db: Session) -> List[str]:
    rows = (
        db.query(models.BusinessStoreOptions.business_id)
        .filter(models.BusinessStoreOptions.booking_completion_mode == AUTOMATIC_COMPLETION)
        .all()
    )
    return [row[0] for row in rows]
