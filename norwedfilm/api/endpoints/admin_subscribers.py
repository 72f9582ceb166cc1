# norwedfilm/api/endpoints/admin_subscribers.py
import logging
from datetime import date
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.crud import crud_subscriber
from norwedfilm.db.session import get_db
from norwedfilm.schemas.subscriber import Subscriber, SubscriberCreate, SubscriberUpdate
from norwedfilm.services.query_cache import QueryCache, resources_for
from norwedfilm.services.subscriber_export import subscribers_to_csv

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/subscribers", tags=["Admin: Subscribers"])


@router.get("", response_model=List[Subscriber])
def list_subscribers(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    return crud_subscriber.subscriber.get_multi(db)


# Declared before the "/{subscriber_id}" routes so "export.csv" is not taken for an id.
@router.get("/export.csv", response_class=Response)
def export_subscribers(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    Downloads the newsletter list as CSV. Returns 204 when there are no
    subscribers.
    """
    subscribers = crud_subscriber.subscriber.get_multi(db)
    csv_content = subscribers_to_csv(subscribers)
    if csv_content is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    filename = f"subscribers-{date.today().isoformat()}.csv"
    logger.info(f"Exported {len(subscribers)} subscribers")
    return Response(
        content=csv_content,
        media_type="text/csv; charset=utf-8",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.post("", response_model=Subscriber, status_code=status.HTTP_201_CREATED)
def create_subscriber(
    subscriber_in: SubscriberCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    subscriber = crud_subscriber.subscriber.create(db, obj_in=subscriber_in)
    cache.invalidate(*resources_for("subscribers"))
    return subscriber


@router.patch("/{subscriber_id}", response_model=Subscriber)
def update_subscriber(
    subscriber_id: str,
    subscriber_in: SubscriberUpdate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    subscriber = crud_subscriber.subscriber.get_or_raise(db, id=subscriber_id)
    subscriber = crud_subscriber.subscriber.update(
        db, db_obj=subscriber, obj_in=subscriber_in
    )
    cache.invalidate(*resources_for("subscribers"))
    return subscriber


@router.delete("/{subscriber_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_subscriber(
    subscriber_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_subscriber.subscriber.remove(db, id=subscriber_id)
    cache.invalidate(*resources_for("subscribers"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
