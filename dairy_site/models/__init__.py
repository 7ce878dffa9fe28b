"""
SQLAlchemy models of the site's content tables (schema for Alembic).
"""

from dairy_site.models.base import Base, ContentBase, TimestampMixin
from dairy_site.models.catalog import Distributor, Product, Recipe
from dairy_site.models.content import (
    BannerContent,
    BlogPost,
    FactItem,
    FaqItem,
    FarmInfoItem,
    HeroCarouselItem,
    SiteSettings,
)
from dairy_site.models.promotion import Discount

__all__ = [
    "Base",
    "ContentBase",
    "TimestampMixin",
    "Product",
    "Recipe",
    "Distributor",
    "BlogPost",
    "FaqItem",
    "FactItem",
    "FarmInfoItem",
    "HeroCarouselItem",
    "BannerContent",
    "SiteSettings",
    "Discount",
]
