from sqlalchemy.orm import Session

from .base import CRUDBase
from norwedfilm.constants.statuses import SubscriberStatus
from norwedfilm.models.subscriber import Subscriber
from norwedfilm.schemas.subscriber import SubscriberCreate, SubscriberUpdate


class CRUDSubscriber(CRUDBase[Subscriber, SubscriberCreate, SubscriberUpdate]):
    resource_name = "Subscriber"
    status_enum = SubscriberStatus

    def update(
        self, db: Session, *, db_obj: Subscriber, obj_in: SubscriberUpdate
    ) -> Subscriber:
        update_data = obj_in.model_dump(exclude_unset=True)
        status = update_data.pop("status", None)
        if update_data:
            db_obj = super().update(db, db_obj=db_obj, obj_in=update_data)
        if status is not None:
            db_obj = self.set_status(db, db_obj=db_obj, status=status)
        return db_obj


subscriber = CRUDSubscriber(Subscriber)
