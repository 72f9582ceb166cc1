# tests/crud/test_crud_blog.py

import pytest
from sqlalchemy.orm import Session

from norwedfilm.core.exceptions import ValidationError
from norwedfilm.crud import crud_blog_comment, crud_blog_post
from norwedfilm.schemas.blog import (
    BlogCommentCreate,
    BlogCommentModeration,
    BlogPostUpdate,
)

from tests.utils.blog import create_random_post


def test_draft_has_no_published_at(db_session: Session):
    post = create_random_post(db_session, published=False)
    assert post.published_at is None


def test_create_published_stamps_published_at(db_session: Session):
    post = create_random_post(db_session, published=True)
    assert post.published_at is not None


def test_first_publish_stamps_and_unpublish_keeps_date(db_session: Session):
    post = create_random_post(db_session, published=False)

    post = crud_blog_post.blog_post.update(
        db_session, db_obj=post, obj_in=BlogPostUpdate(published=True)
    )
    first_published_at = post.published_at
    assert first_published_at is not None

    post = crud_blog_post.blog_post.update(
        db_session, db_obj=post, obj_in=BlogPostUpdate(published=False)
    )
    assert post.published is False
    assert post.published_at == first_published_at

    post = crud_blog_post.blog_post.update(
        db_session, db_obj=post, obj_in=BlogPostUpdate(published=True)
    )
    assert post.published_at == first_published_at


def test_search_matches_title_excerpt_and_content(db_session: Session):
    create_random_post(db_session, title="Northern lights elopement")
    create_random_post(db_session, title="Spring flowers", content="<p>Peonies in Bergen</p>")
    create_random_post(db_session, title="Hidden draft about Bergen", published=False)

    posts, total = crud_blog_post.blog_post.search_published(db_session, q="bergen")
    assert total == 1
    assert posts[0].title == "Spring flowers"

    posts, total = crud_blog_post.blog_post.search_published(db_session, q="NORTHERN")
    assert total == 1


def test_search_paginates(db_session: Session):
    for _ in range(5):
        create_random_post(db_session)

    posts, total = crud_blog_post.blog_post.search_published(db_session, page=2, limit=2)

    assert total == 5
    assert len(posts) == 2


def test_related_posts_share_category(db_session: Session):
    post = create_random_post(db_session, category="tips")
    same = create_random_post(db_session, category="tips")
    create_random_post(db_session, category="stories")
    create_random_post(db_session, category="tips", published=False)

    related = crud_blog_post.blog_post.get_related(db_session, post=post, limit=3)

    assert [p.id for p in related] == [same.id]


def test_related_posts_of_uncategorised_post(db_session: Session):
    post = create_random_post(db_session, category=None)
    create_random_post(db_session, category="tips")
    create_random_post(db_session, category="stories")

    related = crud_blog_post.blog_post.get_related(db_session, post=post, limit=10)

    assert len(related) == 2


def test_new_comment_waits_for_moderation(db_session: Session):
    post = create_random_post(db_session)
    comment = crud_blog_comment.blog_comment.create_for_post(
        db_session,
        obj_in=BlogCommentCreate(author_name="Kari", content="Beautiful!"),
        post=post,
        ip_address="10.0.0.1",
    )

    assert comment.status == "pending"
    assert comment.ip_address == "10.0.0.1"
    assert crud_blog_comment.blog_comment.get_approved_for_post(db_session, post_id=post.id) == []

    crud_blog_comment.blog_comment.moderate(
        db_session, db_obj=comment, obj_in=BlogCommentModeration(status="approved")
    )
    approved = crud_blog_comment.blog_comment.get_approved_for_post(db_session, post_id=post.id)
    assert [c.id for c in approved] == [comment.id]


def test_reply_parent_must_belong_to_same_post(db_session: Session):
    post = create_random_post(db_session)
    other = create_random_post(db_session)
    parent = crud_blog_comment.blog_comment.create_for_post(
        db_session, obj_in=BlogCommentCreate(author_name="Kari", content="First"), post=other
    )

    with pytest.raises(ValidationError):
        crud_blog_comment.blog_comment.create_for_post(
            db_session,
            obj_in=BlogCommentCreate(author_name="Ola", content="Reply", parent_id=parent.id),
            post=post,
        )


def test_moderation_can_edit_text_only(db_session: Session):
    post = create_random_post(db_session)
    comment = crud_blog_comment.blog_comment.create_for_post(
        db_session, obj_in=BlogCommentCreate(author_name="Kari", content="Tpyo"), post=post
    )

    comment = crud_blog_comment.blog_comment.moderate(
        db_session, db_obj=comment, obj_in=BlogCommentModeration(content="Typo")
    )

    assert comment.content == "Typo"
    assert comment.status == "pending"
