# norwedfilm/api/endpoints/admin_projects.py
import logging
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.crud import crud_project
from norwedfilm.db.session import get_db
from norwedfilm.schemas.project import Project, ProjectCreate, ProjectUpdate
from norwedfilm.services.query_cache import QueryCache, resources_for

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin/projects", tags=["Admin: Projects"])


@router.get("", response_model=List[Project])
def list_projects(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    All projects, published or not, newest first.
    """
    return crud_project.project.get_multi(db)


@router.post("", response_model=Project, status_code=status.HTTP_201_CREATED)
def create_project(
    project_in: ProjectCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    Create a new portfolio project. The slug must be unused.
    """
    project = crud_project.project.create(db, obj_in=project_in)
    cache.invalidate(*resources_for("projects"))
    return project


@router.patch("/{project_id}", response_model=Project)
def update_project(
    project_id: str,
    project_in: ProjectUpdate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    project = crud_project.project.get_or_raise(db, id=project_id)
    project = crud_project.project.update(db, db_obj=project, obj_in=project_in)
    cache.invalidate(*resources_for("projects"))
    return project


@router.delete("/{project_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_project(
    project_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    Delete a project together with its media and client galleries.
    """
    crud_project.project.remove(db, id=project_id)
    cache.invalidate(*resources_for("projects"))
    logger.info(f"Project {project_id} deleted")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
