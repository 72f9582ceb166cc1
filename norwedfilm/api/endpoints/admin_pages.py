# norwedfilm/api/endpoints/admin_pages.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.crud import crud_page
from norwedfilm.db.session import get_db
from norwedfilm.schemas.page import Page, PageCreate, PageUpdate
from norwedfilm.services.query_cache import QueryCache, resources_for

router = APIRouter(prefix="/admin/pages", tags=["Admin: Pages"])


@router.get("", response_model=List[Page])
def list_pages(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    return crud_page.page.get_multi(db)


@router.post("", response_model=Page, status_code=status.HTTP_201_CREATED)
def create_page(
    page_in: PageCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    page = crud_page.page.create(db, obj_in=page_in)
    cache.invalidate(*resources_for("pages"))
    return page


@router.patch("/{page_id}", response_model=Page)
def update_page(
    page_id: str,
    page_in: PageUpdate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    page = crud_page.page.get_or_raise(db, id=page_id)
    page = crud_page.page.update(db, db_obj=page, obj_in=page_in)
    cache.invalidate(*resources_for("pages"))
    return page


@router.delete("/{page_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_page(
    page_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_page.page.remove(db, id=page_id)
    cache.invalidate(*resources_for("pages"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
