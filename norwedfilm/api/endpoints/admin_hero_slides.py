# norwedfilm/api/endpoints/admin_hero_slides.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.crud import crud_hero_slide
from norwedfilm.db.session import get_db
from norwedfilm.schemas.hero_slide import HeroSlide, HeroSlideCreate, HeroSlideUpdate
from norwedfilm.services.query_cache import QueryCache, resources_for

router = APIRouter(prefix="/admin/hero-slides", tags=["Admin: Hero slides"])


@router.get("", response_model=List[HeroSlide])
def list_hero_slides(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    Every slide, active or not, in display order.
    """
    return crud_hero_slide.hero_slide.get_multi(db)


@router.post("", response_model=HeroSlide, status_code=status.HTTP_201_CREATED)
def create_hero_slide(
    slide_in: HeroSlideCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    slide = crud_hero_slide.hero_slide.create(db, obj_in=slide_in)
    cache.invalidate(*resources_for("hero-slides"))
    return slide


@router.patch("/{slide_id}", response_model=HeroSlide)
def update_hero_slide(
    slide_id: str,
    slide_in: HeroSlideUpdate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    slide = crud_hero_slide.hero_slide.get_or_raise(db, id=slide_id)
    slide = crud_hero_slide.hero_slide.update(db, db_obj=slide, obj_in=slide_in)
    cache.invalidate(*resources_for("hero-slides"))
    return slide


@router.delete("/{slide_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_hero_slide(
    slide_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_hero_slide.hero_slide.remove(db, id=slide_id)
    cache.invalidate(*resources_for("hero-slides"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
