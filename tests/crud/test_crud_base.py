# tests/crud/test_crud_base.py

from unittest.mock import MagicMock

import pytest
from sqlalchemy.exc import IntegrityError

from norwedfilm.core.exceptions import ConflictError, NotFoundError, ValidationError
from norwedfilm.crud.crud_contact import CRUDContact
from norwedfilm.crud.crud_project import CRUDProject
from norwedfilm.models.contact import Contact
from norwedfilm.models.project import Project
from norwedfilm.schemas.project import ProjectCreate, ProjectUpdate

# Instantiate the classes to test their inherited methods
project_crud = CRUDProject(Project)
contact_crud = CRUDContact(Contact)


def _project_in():
    return ProjectCreate(title="Emma & Lars", slug="emma-lars", category="wedding-photo")


def test_create_project():
    """
    Tests the inherited create method.
    """
    db_session = MagicMock()

    project = project_crud.create(db=db_session, obj_in=_project_in())

    # Assert that the database session was used to add, commit, and refresh
    db_session.add.assert_called_once()
    db_session.commit.assert_called_once()
    db_session.refresh.assert_called_once()
    assert project.slug == "emma-lars"
    assert project.category == "wedding-photo"


def test_create_duplicate_rolls_back_and_raises_conflict():
    db_session = MagicMock()
    db_session.commit.side_effect = IntegrityError("INSERT", {}, Exception("duplicate key"))

    with pytest.raises(ConflictError):
        project_crud.create(db=db_session, obj_in=_project_in())

    db_session.rollback.assert_called_once()
    db_session.refresh.assert_not_called()


def test_update_only_touches_sent_fields():
    db_session = MagicMock()
    db_obj = Project(title="Old title", slug="old", category="wedding-photo", location="Bergen")

    project_crud.update(db=db_session, db_obj=db_obj, obj_in=ProjectUpdate(title="New title"))

    assert db_obj.title == "New title"
    assert db_obj.location == "Bergen"
    db_session.commit.assert_called_once()


def test_update_rejects_null_on_required_column():
    db_session = MagicMock()
    db_obj = Project(title="Old title", slug="old", category="wedding-photo", sort_order=3)

    with pytest.raises(ValidationError) as exc_info:
        project_crud.update(db=db_session, db_obj=db_obj, obj_in={"sort_order": None})

    assert exc_info.value.status_code == 400
    assert exc_info.value.details == {"field": "sortOrder"}
    assert db_obj.sort_order == 3
    db_session.commit.assert_not_called()


def test_get_or_raise_unknown_id():
    db_session = MagicMock()
    db_session.query.return_value.filter.return_value.first.return_value = None

    with pytest.raises(NotFoundError) as exc_info:
        project_crud.get_or_raise(db=db_session, id="prj_missing")

    assert exc_info.value.status_code == 404


def test_remove_unknown_id_does_not_delete():
    db_session = MagicMock()
    db_session.query.return_value.filter.return_value.first.return_value = None

    with pytest.raises(NotFoundError):
        project_crud.remove(db=db_session, id="prj_missing")

    db_session.delete.assert_not_called()


def test_set_status_rejects_value_outside_enum():
    db_session = MagicMock()
    contact = Contact(name="Ingrid", email="ingrid@example.no", message="Hei", status="new")

    with pytest.raises(ValidationError) as exc_info:
        contact_crud.set_status(db=db_session, db_obj=contact, status="deleted")

    assert exc_info.value.details == {"field": "status"}
    assert contact.status == "new"
    db_session.commit.assert_not_called()


def test_set_status_moves_between_any_known_values():
    db_session = MagicMock()
    contact = Contact(name="Ingrid", email="ingrid@example.no", message="Hei", status="archived")

    contact_crud.set_status(db=db_session, db_obj=contact, status="new")

    assert contact.status == "new"
    db_session.commit.assert_called_once()


def test_set_status_on_resource_without_lifecycle():
    db_session = MagicMock()

    with pytest.raises(ValidationError):
        project_crud.set_status(db=db_session, db_obj=Project(), status="new")
