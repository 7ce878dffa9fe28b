"""
Editorial content: blog, FAQ, facts, farm info, hero carousel, home banner
and site settings.
"""

from typing import Any, List, Optional

from sqlalchemy import Boolean, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from dairy_site.models.base import ContentBase


class BlogPost(ContentBase):
    __tablename__ = "blog_posts"

    title_en: Mapped[str] = mapped_column(Text, nullable=False)
    title_ar: Mapped[Optional[str]] = mapped_column(Text)
    title_fr: Mapped[Optional[str]] = mapped_column(Text)
    content_en: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    content_ar: Mapped[Optional[str]] = mapped_column(Text)
    content_fr: Mapped[Optional[str]] = mapped_column(Text)

    image_url: Mapped[Optional[str]] = mapped_column(Text)
    published: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default="false")

    __table_args__ = (
        Index("ix_blog_posts_published_created", "published", "created_at"),
    )


class FaqItem(ContentBase):
    __tablename__ = "faq_items"

    question_en: Mapped[str] = mapped_column(Text, nullable=False)
    question_ar: Mapped[Optional[str]] = mapped_column(Text)
    question_fr: Mapped[Optional[str]] = mapped_column(Text)
    answer_en: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    answer_ar: Mapped[Optional[str]] = mapped_column(Text)
    answer_fr: Mapped[Optional[str]] = mapped_column(Text)

    # Not unique; ties keep fetch order
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")


class FactItem(ContentBase):
    __tablename__ = "facts_items"

    icon_name: Mapped[str] = mapped_column(String(50), nullable=False)
    text_content_en: Mapped[str] = mapped_column(Text, nullable=False)
    text_content_ar: Mapped[Optional[str]] = mapped_column(Text)
    text_content_fr: Mapped[Optional[str]] = mapped_column(Text)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")


class FarmInfoItem(ContentBase):
    __tablename__ = "farm_info_items"

    icon_name: Mapped[str] = mapped_column(String(50), nullable=False)
    title_en: Mapped[str] = mapped_column(Text, nullable=False)
    title_ar: Mapped[Optional[str]] = mapped_column(Text)
    title_fr: Mapped[Optional[str]] = mapped_column(Text)
    description_en: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    description_ar: Mapped[Optional[str]] = mapped_column(Text)
    description_fr: Mapped[Optional[str]] = mapped_column(Text)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")


class HeroCarouselItem(ContentBase):
    __tablename__ = "hero_carousel_items"

    title_en: Mapped[str] = mapped_column(Text, nullable=False)
    title_ar: Mapped[Optional[str]] = mapped_column(Text)
    title_fr: Mapped[Optional[str]] = mapped_column(Text)
    subtitle_en: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    subtitle_ar: Mapped[Optional[str]] = mapped_column(Text)
    subtitle_fr: Mapped[Optional[str]] = mapped_column(Text)

    image_url: Mapped[str] = mapped_column(Text, nullable=False)
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, server_default="0")


class BannerContent(ContentBase):
    """Singleton: the site reads the first row only."""

    __tablename__ = "banner_content"

    banner_image_url: Mapped[Optional[str]] = mapped_column(Text)
    main_title_en: Mapped[str] = mapped_column(Text, nullable=False)
    main_title_ar: Mapped[Optional[str]] = mapped_column(Text)
    main_title_fr: Mapped[Optional[str]] = mapped_column(Text)
    main_paragraph_en: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    main_paragraph_ar: Mapped[Optional[str]] = mapped_column(Text)
    main_paragraph_fr: Mapped[Optional[str]] = mapped_column(Text)

    # Up to 4 items: {"icon_name", "title_en", ..., "description_fr"}
    feature_items: Mapped[List[Any]] = mapped_column(JSONB, nullable=False, server_default="[]")


class SiteSettings(ContentBase):
    """Singleton: header, footer and contact details."""

    __tablename__ = "site_settings"

    site_name: Mapped[str] = mapped_column(String(100), nullable=False)
    tagline_en: Mapped[Optional[str]] = mapped_column(Text)
    tagline_ar: Mapped[Optional[str]] = mapped_column(Text)
    tagline_fr: Mapped[Optional[str]] = mapped_column(Text)
    about_en: Mapped[Optional[str]] = mapped_column(Text)
    about_ar: Mapped[Optional[str]] = mapped_column(Text)
    about_fr: Mapped[Optional[str]] = mapped_column(Text)
    address_en: Mapped[Optional[str]] = mapped_column(Text)
    address_ar: Mapped[Optional[str]] = mapped_column(Text)
    address_fr: Mapped[Optional[str]] = mapped_column(Text)

    contact_email: Mapped[Optional[str]] = mapped_column(String(255))
    contact_phone: Mapped[Optional[str]] = mapped_column(String(40))
    facebook_url: Mapped[Optional[str]] = mapped_column(Text)
    instagram_url: Mapped[Optional[str]] = mapped_column(Text)
    logo_url: Mapped[Optional[str]] = mapped_column(Text)
