# tests/services/test_api_keys.py

import pytest
from sqlalchemy.orm import Session

from norwedfilm.core.config import settings
from norwedfilm.core.exceptions import ValidationError
from norwedfilm.crud import crud_site_setting
from norwedfilm.services import api_keys


def test_environment_key_is_used_without_stored_key(db_session: Session):
    assert api_keys.configured_api_key(db_session) == (settings.ADMIN_API_KEY, "environment")
    assert api_keys.is_valid_api_key(db_session, settings.ADMIN_API_KEY)
    assert not api_keys.is_valid_api_key(db_session, "wrong")
    assert not api_keys.is_valid_api_key(db_session, None)


def test_stored_key_takes_precedence(db_session: Session):
    crud_site_setting.site_setting.upsert(
        db_session, key=api_keys.API_KEY_SETTING, value="  nwf_" + "d" * 40 + "  "
    )

    key, source = api_keys.configured_api_key(db_session)

    assert source == "database"
    assert key == "nwf_" + "d" * 40
    assert not api_keys.is_valid_api_key(db_session, settings.ADMIN_API_KEY)


def test_no_key_configured(db_session: Session, monkeypatch):
    monkeypatch.setattr(settings, "ADMIN_API_KEY", None)

    assert api_keys.configured_api_key(db_session) == (None, "none")
    assert api_keys.get_status(db_session)["enabled"] is False
    assert not api_keys.is_valid_api_key(db_session, "anything")


def test_rotate_records_who_and_where(db_session: Session):
    result = api_keys.rotate(db_session, new_key=None, actor="admin@norwedfilm.no", source_ip="10.0.0.5")

    assert result["api_key"].startswith(api_keys.KEY_PREFIX)
    assert len(result["api_key"]) >= api_keys.MIN_KEY_LENGTH
    status = api_keys.get_status(db_session)
    assert status == {
        "enabled": True,
        "source": "database",
        "rotated_at": result["rotated_at"],
        "rotated_by": "admin@norwedfilm.no",
        "rotated_ip": "10.0.0.5",
    }


def test_rotate_rejects_short_key(db_session: Session):
    with pytest.raises(ValidationError):
        api_keys.rotate(db_session, new_key="too-short", actor="x", source_ip="y")
