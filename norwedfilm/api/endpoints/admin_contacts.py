# norwedfilm/api/endpoints/admin_contacts.py
from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from norwedfilm.api import deps
from norwedfilm.crud import crud_contact
from norwedfilm.db.session import get_db
from norwedfilm.schemas.contact import Contact, ContactCreate
from norwedfilm.schemas.status import StatusUpdate
from norwedfilm.services.query_cache import QueryCache, resources_for

router = APIRouter(prefix="/admin/contacts", tags=["Admin: Contacts"])


@router.get("", response_model=List[Contact])
def list_contacts(
    db: Session = Depends(get_db),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """Contact enquiries, newest first."""
    return crud_contact.contact.get_multi(db)


@router.post("", response_model=Contact, status_code=status.HTTP_201_CREATED)
def create_contact(
    contact_in: ContactCreate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    contact = crud_contact.contact.create(db, obj_in=contact_in)
    cache.invalidate(*resources_for("contacts"))
    return contact


@router.patch("/{contact_id}", response_model=Contact)
def update_contact_status(
    contact_id: str,
    status_in: StatusUpdate,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    """
    Moves an enquiry through new, read, replied and archived.
    """
    contact = crud_contact.contact.get_or_raise(db, id=contact_id)
    contact = crud_contact.contact.set_status(db, db_obj=contact, status=status_in.status)
    cache.invalidate(*resources_for("contacts"))
    return contact


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_contact(
    contact_id: str,
    db: Session = Depends(get_db),
    cache: QueryCache = Depends(deps.get_query_cache),
    current_admin: deps.AdminPrincipal = Depends(deps.get_current_admin),
):
    crud_contact.contact.remove(db, id=contact_id)
    cache.invalidate(*resources_for("contacts"))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
