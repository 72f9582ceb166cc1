"""Initial Norwed Film schema

Revision ID: n001_initial_schema
Revises:
Create Date: 2026-10-19

Creates the portfolio (projects, media, client galleries), site content
(pages, reviews, hero slides, settings), blog, and enquiry (contacts,
subscribers, bookings, blocked dates) tables.
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

# revision identifiers, used by Alembic.
revision = 'n001_initial_schema'
down_revision = None
branch_labels = None
depends_on = None


def _timestamps(updated: bool = True):
    columns = [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()')),
    ]
    if updated:
        columns.append(
            sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('NOW()'))
        )
    return columns


def upgrade() -> None:
    # Portfolio
    op.create_table(
        'projects',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('cover_image', sa.String(), nullable=True),
        sa.Column('video_url', sa.String(), nullable=True),
        sa.Column('date', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('featured', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('published', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(),
    )
    op.create_index('ix_projects_slug', 'projects', ['slug'], unique=True)
    op.create_index('ix_projects_category', 'projects', ['category'])

    op.create_table(
        'media',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('project_id', sa.String(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=True),
        sa.Column('type', sa.String(), nullable=False),
        sa.Column('url', sa.String(), nullable=False),
        sa.Column('thumbnail_url', sa.String(), nullable=True),
        sa.Column('title', sa.String(), nullable=True),
        sa.Column('alt', sa.String(), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(updated=False),
    )
    op.create_index('ix_media_project_id', 'media', ['project_id'])

    op.create_table(
        'client_galleries',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('project_id', sa.String(), sa.ForeignKey('projects.id', ondelete='CASCADE'), nullable=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('password', sa.String(), nullable=False),
        sa.Column('client_name', sa.String(), nullable=True),
        sa.Column('client_email', sa.String(), nullable=True),
        sa.Column('expires_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('download_enabled', sa.Boolean(), nullable=False, server_default='true'),
        sa.Column('view_count', sa.Integer(), nullable=False, server_default='0'),
        *_timestamps(updated=False),
    )
    op.create_index('ix_client_galleries_slug', 'client_galleries', ['slug'], unique=True)
    op.create_index('ix_client_galleries_project_id', 'client_galleries', ['project_id'])

    # Site content
    op.create_table(
        'pages',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('meta_title', sa.String(), nullable=True),
        sa.Column('meta_description', sa.String(), nullable=True),
        sa.Column('published', sa.Boolean(), nullable=False, server_default='true'),
        *_timestamps(),
    )
    op.create_index('ix_pages_slug', 'pages', ['slug'], unique=True)

    op.create_table(
        'reviews',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('event_type', sa.String(), nullable=True),
        sa.Column('event_date', sa.String(), nullable=True),
        sa.Column('rating', sa.Integer(), nullable=False, server_default='5'),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('photo', sa.String(), nullable=True),
        sa.Column('featured', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('published', sa.Boolean(), nullable=False, server_default='true'),
        *_timestamps(updated=False),
        sa.CheckConstraint('rating BETWEEN 1 AND 5', name='check_review_rating'),
    )

    op.create_table(
        'hero_slides',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('image_url', sa.String(), nullable=False),
        sa.Column('title', sa.String(), nullable=True),
        sa.Column('subtitle', sa.String(), nullable=True),
        sa.Column('cta_text', sa.String(), nullable=True),
        sa.Column('cta_link', sa.String(), nullable=True),
        sa.Column('sort_order', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('active', sa.Boolean(), nullable=False, server_default='true'),
        *_timestamps(updated=False),
    )

    op.create_table(
        'site_settings',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('key', sa.String(), nullable=False),
        sa.Column('value', sa.Text(), nullable=True),
        sa.Column('type', sa.String(), nullable=False, server_default='text'),
        *_timestamps(),
    )
    op.create_index('ix_site_settings_key', 'site_settings', ['key'], unique=True)

    # Blog
    op.create_table(
        'blog_posts',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('slug', sa.String(), nullable=False),
        sa.Column('excerpt', sa.Text(), nullable=True),
        sa.Column('content', sa.Text(), nullable=True),
        sa.Column('cover_image', sa.String(), nullable=True),
        sa.Column('category', sa.String(), nullable=True),
        sa.Column('tags', JSONB(), nullable=True),
        sa.Column('author', sa.String(), nullable=True),
        sa.Column('published', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('featured', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('published_at', sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_blog_posts_slug', 'blog_posts', ['slug'], unique=True)
    op.create_index('ix_blog_posts_category', 'blog_posts', ['category'])

    op.create_table(
        'blog_comments',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('post_id', sa.String(), sa.ForeignKey('blog_posts.id', ondelete='CASCADE'), nullable=False),
        sa.Column('parent_id', sa.String(), sa.ForeignKey('blog_comments.id', ondelete='CASCADE'), nullable=True),
        sa.Column('author_name', sa.String(), nullable=False),
        sa.Column('author_email', sa.String(), nullable=True),
        sa.Column('author_url', sa.String(), nullable=True),
        sa.Column('content', sa.Text(), nullable=False),
        sa.Column('status', sa.String(), nullable=False, server_default='pending'),
        sa.Column('ip_address', sa.String(), nullable=True),
        sa.Column('user_agent', sa.String(), nullable=True),
        *_timestamps(),
    )
    op.create_index('ix_blog_comments_post_id', 'blog_comments', ['post_id'])
    op.create_index('ix_blog_comments_parent_id', 'blog_comments', ['parent_id'])
    op.create_index('ix_blog_comments_status', 'blog_comments', ['status'])

    # Enquiries
    op.create_table(
        'contacts',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('phone', sa.String(), nullable=True),
        sa.Column('event_date', sa.String(), nullable=True),
        sa.Column('event_type', sa.String(), nullable=True),
        sa.Column('message', sa.Text(), nullable=False),
        sa.Column('status', sa.String(), nullable=False, server_default='new'),
        *_timestamps(updated=False),
    )

    op.create_table(
        'subscribers',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('status', sa.String(), nullable=False, server_default='active'),
        sa.Column('source', sa.String(), nullable=True),
        *_timestamps(updated=False),
    )
    op.create_index('ix_subscribers_email', 'subscribers', ['email'], unique=True)

    op.create_table(
        'bookings',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('client_name', sa.String(), nullable=False),
        sa.Column('client_email', sa.String(), nullable=False),
        sa.Column('client_phone', sa.String(), nullable=True),
        sa.Column('event_type', sa.String(), nullable=True),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('status', sa.String(), nullable=False, server_default='pending'),
        *_timestamps(updated=False),
    )
    op.create_index('ix_bookings_date', 'bookings', ['date'])
    op.create_index('ix_bookings_status', 'bookings', ['status'])

    op.create_table(
        'blocked_dates',
        sa.Column('id', sa.String(), primary_key=True),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('reason', sa.String(), nullable=True),
        *_timestamps(updated=False),
    )
    op.create_index('ix_blocked_dates_date', 'blocked_dates', ['date'])


def downgrade() -> None:
    op.drop_table('blocked_dates')
    op.drop_table('bookings')
    op.drop_table('subscribers')
    op.drop_table('contacts')
    op.drop_table('blog_comments')
    op.drop_table('blog_posts')
    op.drop_table('site_settings')
    op.drop_table('hero_slides')
    op.drop_table('reviews')
    op.drop_table('pages')
    op.drop_table('client_galleries')
    op.drop_table('media')
    op.drop_table('projects')
