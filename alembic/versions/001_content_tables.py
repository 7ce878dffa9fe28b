"""Create content tables

Creates the tables behind the public site and the admin panel:
- products, recipes, distributors: catalog
- blog_posts, faq_items, facts_items, farm_info_items: editorial content
- hero_carousel_items, banner_content: home page
- site_settings: header/footer details
- discounts: floating flyer

Revision ID: 001_content_tables
Revises:
Create Date: 2026-10-19
"""

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, UUID

# revision identifiers, used by Alembic.
revision = "001_content_tables"
down_revision = None
branch_labels = None
depends_on = None


def _id():
    return sa.Column("id", UUID(as_uuid=True), primary_key=True, server_default=sa.text("gen_random_uuid()"))


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _localized(name, type_=sa.Text, required=True, default=None):
    """``name_en`` (NOT NULL when required) plus nullable ``name_ar`` / ``name_fr``."""
    return [
        sa.Column(f"{name}_en", type_(), nullable=not required, server_default=default),
        sa.Column(f"{name}_ar", type_(), nullable=True),
        sa.Column(f"{name}_fr", type_(), nullable=True),
    ]


def _text_array():
    return ARRAY(sa.Text())


def upgrade() -> None:
    # =========================================================================
    # Catalog
    # =========================================================================
    op.create_table(
        "products",
        _id(),
        *_localized("name"),
        *_localized("description", default=""),
        sa.Column("price", sa.String(50), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("show_in_gallery", sa.Boolean(), server_default="false", nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_products_show_in_gallery", "products", ["show_in_gallery"])

    op.create_table(
        "recipes",
        _id(),
        *_localized("title"),
        *_localized("description", default=""),
        *_localized("ingredients", type_=_text_array, default="{}"),
        *_localized("preparation_steps", type_=_text_array, default="{}"),
        sa.Column("image_url", sa.Text(), nullable=True),
        *_timestamps(),
    )

    op.create_table(
        "distributors",
        _id(),
        *_localized("name"),
        *_localized("location", default=""),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("phone", sa.String(40), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),  # logo or map embed
        *_timestamps(),
    )

    # =========================================================================
    # Editorial content
    # =========================================================================
    op.create_table(
        "blog_posts",
        _id(),
        *_localized("title"),
        *_localized("content", default=""),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("published", sa.Boolean(), server_default="false", nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_blog_posts_published_created", "blog_posts", ["published", "created_at"])

    op.create_table(
        "faq_items",
        _id(),
        *_localized("question"),
        *_localized("answer", default=""),
        sa.Column("order_index", sa.Integer(), server_default="0", nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "facts_items",
        _id(),
        sa.Column("icon_name", sa.String(50), nullable=False),
        *_localized("text_content"),
        sa.Column("order_index", sa.Integer(), server_default="0", nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "farm_info_items",
        _id(),
        sa.Column("icon_name", sa.String(50), nullable=False),
        *_localized("title"),
        *_localized("description", default=""),
        sa.Column("order_index", sa.Integer(), server_default="0", nullable=False),
        *_timestamps(),
    )

    # =========================================================================
    # Home page
    # =========================================================================
    op.create_table(
        "hero_carousel_items",
        _id(),
        *_localized("title"),
        *_localized("subtitle", default=""),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("order_index", sa.Integer(), server_default="0", nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "banner_content",
        _id(),
        sa.Column("banner_image_url", sa.Text(), nullable=True),
        *_localized("main_title"),
        *_localized("main_paragraph", default=""),
        sa.Column("feature_items", JSONB, server_default="[]", nullable=False),
        *_timestamps(),
    )

    op.create_table(
        "site_settings",
        _id(),
        sa.Column("site_name", sa.String(100), nullable=False),
        *_localized("tagline", required=False),
        *_localized("about", required=False),
        *_localized("address", required=False),
        sa.Column("contact_email", sa.String(255), nullable=True),
        sa.Column("contact_phone", sa.String(40), nullable=True),
        sa.Column("facebook_url", sa.Text(), nullable=True),
        sa.Column("instagram_url", sa.Text(), nullable=True),
        sa.Column("logo_url", sa.Text(), nullable=True),
        *_timestamps(),
    )

    # =========================================================================
    # Promotions
    # =========================================================================
    op.create_table(
        "discounts",
        _id(),
        *_localized("title"),
        *_localized("subtitle", default=""),
        *_localized("price_text", default=""),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("link_url", sa.Text(), nullable=True),
        sa.Column("is_active", sa.Boolean(), server_default="false", nullable=False),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("discounts")
    op.drop_table("site_settings")
    op.drop_table("banner_content")
    op.drop_table("hero_carousel_items")
    op.drop_table("farm_info_items")
    op.drop_table("facts_items")
    op.drop_table("faq_items")
    op.drop_index("ix_blog_posts_published_created", table_name="blog_posts")
    op.drop_table("blog_posts")
    op.drop_table("distributors")
    op.drop_table("recipes")
    op.drop_index("ix_products_show_in_gallery", table_name="products")
    op.drop_table("products")
