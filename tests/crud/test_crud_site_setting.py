# tests/crud/test_crud_site_setting.py

import pytest
from sqlalchemy.orm import Session

from norwedfilm.core.exceptions import ConflictError, NotFoundError
from norwedfilm.crud import crud_site_setting
from norwedfilm.crud.crud_site_setting import parse_setting_value
from norwedfilm.schemas.site_setting import SiteSettingCreate

setting = crud_site_setting.site_setting


def test_upsert_creates_then_overwrites(db_session: Session):
    created = setting.upsert(db_session, key="siteName", value="Norwed Film")
    updated = setting.upsert(db_session, key="siteName", value="Norwed Film AS")

    assert created.id == updated.id
    assert updated.value == "Norwed Film AS"
    assert updated.type == "text"


def test_upsert_keeps_type_unless_given(db_session: Session):
    setting.upsert(db_session, key="showBanner", value="true", type="boolean")
    row = setting.upsert(db_session, key="showBanner", value="false")

    assert row.type == "boolean"


def test_upsert_many_stores_non_strings_as_json(db_session: Session):
    rows = setting.upsert_many(
        db_session, values={"contactEmail": "hello@norwedfilm.no", "prices": {"photo": 25000}}
    )

    assert len(rows) == 2
    assert setting.get_by_key(db_session, key="prices").value == '{"photo": 25000}'
    assert setting.get_json(db_session, key="prices", default=None) == {"photo": 25000}


def test_create_duplicate_key_conflicts(db_session: Session):
    setting.create(db_session, obj_in=SiteSettingCreate(key="siteName", value="A"))

    with pytest.raises(ConflictError):
        setting.create(db_session, obj_in=SiteSettingCreate(key="siteName", value="B"))


def test_get_json_falls_back_on_bad_data(db_session: Session):
    setting.upsert(db_session, key="cms_landing_features", value="{not json")

    assert setting.get_json(db_session, key="cms_landing_features", default=[]) == []
    assert setting.get_json(db_session, key="missing", default={"a": 1}) == {"a": 1}


def test_remove_by_key(db_session: Session):
    setting.upsert(db_session, key="old", value="x")
    setting.remove_by_key(db_session, key="old")

    assert setting.get_by_key(db_session, key="old") is None
    with pytest.raises(NotFoundError):
        setting.remove_by_key(db_session, key="old")


def test_parse_setting_value_by_type(db_session: Session):
    flag = setting.upsert(db_session, key="maintenance", value="Yes", type="boolean")
    doc = setting.upsert(db_session, key="doc", value='[1, 2]', type="json")
    text = setting.upsert(db_session, key="tagline", value="Love stories")

    assert parse_setting_value(flag) is True
    assert parse_setting_value(doc) == [1, 2]
    assert parse_setting_value(text) == "Love stories"
