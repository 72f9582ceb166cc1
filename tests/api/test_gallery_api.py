# tests/api/test_gallery_api.py

from datetime import datetime, timedelta, timezone

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from tests.utils.project import (
    create_random_gallery,
    create_random_media,
    create_random_project,
)


def test_gallery_details_hide_password(anon_client: TestClient, db_session: Session):
    gallery = create_random_gallery(db_session)

    response = anon_client.get(f"/api/galleries/{gallery.slug}")

    assert response.status_code == 200
    assert "password" not in response.json()
    assert response.json()["viewCount"] == 0


def test_access_with_password(anon_client: TestClient, db_session: Session):
    project = create_random_project(db_session)
    photo = create_random_media(db_session, project.id)
    gallery = create_random_gallery(db_session, project.id, password="forever")

    first = anon_client.post(f"/api/galleries/{gallery.slug}/access", json={"password": "forever"})
    second = anon_client.post(f"/api/galleries/{gallery.slug}/access", json={"password": "forever"})

    assert first.status_code == 200
    assert first.json()["gallery"]["viewCount"] == 1
    assert [m["id"] for m in first.json()["media"]] == [photo.id]
    assert "password" not in first.json()["gallery"]
    assert second.json()["gallery"]["viewCount"] == 2


def test_access_wrong_password(anon_client: TestClient, db_session: Session):
    gallery = create_random_gallery(db_session, password="forever")

    response = anon_client.post(f"/api/galleries/{gallery.slug}/access", json={"password": "never"})

    assert response.status_code == 401
    assert anon_client.get(f"/api/galleries/{gallery.slug}").json()["viewCount"] == 0


def test_access_expired_gallery(anon_client: TestClient, db_session: Session):
    gallery = create_random_gallery(
        db_session, expires_at=datetime.now(timezone.utc) - timedelta(hours=1)
    )

    response = anon_client.post(f"/api/galleries/{gallery.slug}/access", json={"password": "forever"})

    assert response.status_code == 410


def test_unknown_gallery(anon_client: TestClient):
    assert anon_client.get("/api/galleries/nope").status_code == 404
    assert (
        anon_client.post("/api/galleries/nope/access", json={"password": "x"}).status_code
        == 404
    )
