# tests/api/test_blog_api.py

from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from norwedfilm.crud import crud_blog_comment
from norwedfilm.schemas.blog import BlogCommentModeration

from tests.utils.blog import create_random_post


def test_list_posts_paginated(anon_client: TestClient, db_session: Session):
    for _ in range(3):
        create_random_post(db_session)
    create_random_post(db_session, published=False)

    response = anon_client.get("/api/blog", params={"page": 1, "limit": 2})

    assert response.status_code == 200
    data = response.json()
    assert len(data["posts"]) == 2
    assert data["pagination"] == {"page": 1, "limit": 2, "total": 3, "totalPages": 2}


def test_list_posts_limit_is_capped(anon_client: TestClient, db_session: Session):
    create_random_post(db_session)

    data = anon_client.get("/api/blog", params={"limit": 500}).json()

    assert data["pagination"]["limit"] == 50


def test_list_posts_search_and_category(anon_client: TestClient, db_session: Session):
    match = create_random_post(db_session, title="Fjord elopement", category="stories")
    create_random_post(db_session, title="Fjord planning", category="tips")
    create_random_post(db_session, title="Winter light", category="stories")

    data = anon_client.get("/api/blog", params={"q": "fjord", "category": "stories"}).json()

    assert [p["id"] for p in data["posts"]] == [match.id]


def test_draft_post_not_found(anon_client: TestClient, db_session: Session):
    draft = create_random_post(db_session, published=False)

    assert anon_client.get(f"/api/blog/{draft.slug}").status_code == 404


def test_related_posts(anon_client: TestClient, db_session: Session):
    post = create_random_post(db_session, category="tips")
    other = create_random_post(db_session, category="tips")
    create_random_post(db_session, category="stories")

    related = anon_client.get(f"/api/blog/{post.slug}/related").json()

    assert [p["id"] for p in related] == [other.id]
    assert anon_client.get("/api/blog/unknown/related").json() == []


def test_comment_flow(anon_client: TestClient, db_session: Session):
    post = create_random_post(db_session)

    created = anon_client.post(
        f"/api/blog/{post.slug}/comments",
        json={"authorName": "Kari", "authorEmail": "kari@example.no", "content": "Lovely!"},
    )

    assert created.status_code == 201
    data = created.json()
    assert "authorEmail" not in data
    assert "status" not in data
    assert anon_client.get(f"/api/blog/{post.slug}/comments").json() == []

    comment = crud_blog_comment.blog_comment.get(db_session, id=data["id"])
    crud_blog_comment.blog_comment.moderate(
        db_session, db_obj=comment, obj_in=BlogCommentModeration(status="approved")
    )

    comments = anon_client.get(f"/api/blog/{post.slug}/comments").json()
    assert [c["id"] for c in comments] == [data["id"]]


def test_comment_on_draft_is_rejected(anon_client: TestClient, db_session: Session):
    draft = create_random_post(db_session, published=False)

    response = anon_client.post(
        f"/api/blog/{draft.slug}/comments", json={"authorName": "Kari", "content": "Hi"}
    )

    assert response.status_code == 404


def test_rss_feed(anon_client: TestClient, db_session: Session):
    post = create_random_post(db_session, title="Fjord & friends")
    create_random_post(db_session, title="Secret draft", published=False)

    response = anon_client.get("/feed.xml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/rss+xml")
    assert f"/blog/{post.slug}</link>" in response.text
    assert "Fjord &amp; friends" in response.text
    assert "Secret draft" not in response.text
