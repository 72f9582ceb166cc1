# norwedfilm/api/endpoints/admin_reviews.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.crud import crud_review
from norwedfilm.db.session import get_db
from norwedfilm.schemas.review import Review, ReviewCreate, ReviewUpdate
from norwedfilm.services.query_cache import QueryCache, resources_for

router = APIRouter(prefix="/admin/reviews", tags=["Admin: Reviews"])


@router.get("", response_model=List[Review])
def list_reviews(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    return crud_review.review.get_multi(db)


@router.post("", response_model=Review, status_code=status.HTTP_201_CREATED)
def create_review(
    review_in: ReviewCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    Add a client review. Rating is 1 to 5 and defaults to 5.
    """
    review = crud_review.review.create(db, obj_in=review_in)
    cache.invalidate(*resources_for("reviews"))
    return review


@router.patch("/{review_id}", response_model=Review)
def update_review(
    review_id: str,
    review_in: ReviewUpdate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    review = crud_review.review.get_or_raise(db, id=review_id)
    review = crud_review.review.update(db, db_obj=review, obj_in=review_in)
    cache.invalidate(*resources_for("reviews"))
    return review


@router.delete("/{review_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_review(
    review_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_review.review.remove(db, id=review_id)
    cache.invalidate(*resources_for("reviews"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
