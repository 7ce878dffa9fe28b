"""
Products, recipes and distributors.

Every user-facing string has ``_en`` / ``_ar`` / ``_fr`` columns; English
is required, the other languages fall back to it on display.
"""

from typing import List, Optional

from sqlalchemy import Boolean, String, Text
from sqlalchemy.dialects.postgresql import ARRAY
from sqlalchemy.orm import Mapped, mapped_column

from dairy_site.models.base import ContentBase


class Product(ContentBase):
    __tablename__ = "products"

    name_en: Mapped[str] = mapped_column(Text, nullable=False)
    name_ar: Mapped[Optional[str]] = mapped_column(Text)
    name_fr: Mapped[Optional[str]] = mapped_column(Text)
    description_en: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    description_ar: Mapped[Optional[str]] = mapped_column(Text)
    description_fr: Mapped[Optional[str]] = mapped_column(Text)

    # Free text ("12 DH", "from 4.50 €/L")
    price: Mapped[Optional[str]] = mapped_column(String(50))
    image_url: Mapped[Optional[str]] = mapped_column(Text)
    show_in_gallery: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default="false")


class Recipe(ContentBase):
    __tablename__ = "recipes"

    title_en: Mapped[str] = mapped_column(Text, nullable=False)
    title_ar: Mapped[Optional[str]] = mapped_column(Text)
    title_fr: Mapped[Optional[str]] = mapped_column(Text)
    description_en: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    description_ar: Mapped[Optional[str]] = mapped_column(Text)
    description_fr: Mapped[Optional[str]] = mapped_column(Text)

    ingredients_en: Mapped[List[str]] = mapped_column(ARRAY(Text), nullable=False, server_default="{}")
    ingredients_ar: Mapped[Optional[List[str]]] = mapped_column(ARRAY(Text))
    ingredients_fr: Mapped[Optional[List[str]]] = mapped_column(ARRAY(Text))
    preparation_steps_en: Mapped[List[str]] = mapped_column(ARRAY(Text), nullable=False, server_default="{}")
    preparation_steps_ar: Mapped[Optional[List[str]]] = mapped_column(ARRAY(Text))
    preparation_steps_fr: Mapped[Optional[List[str]]] = mapped_column(ARRAY(Text))

    image_url: Mapped[Optional[str]] = mapped_column(Text)


class Distributor(ContentBase):
    __tablename__ = "distributors"

    name_en: Mapped[str] = mapped_column(Text, nullable=False)
    name_ar: Mapped[Optional[str]] = mapped_column(Text)
    name_fr: Mapped[Optional[str]] = mapped_column(Text)
    location_en: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    location_ar: Mapped[Optional[str]] = mapped_column(Text)
    location_fr: Mapped[Optional[str]] = mapped_column(Text)

    email: Mapped[Optional[str]] = mapped_column(String(255))
    phone: Mapped[Optional[str]] = mapped_column(String(40))
    # Logo URL or a Google Maps embed URL
    image_url: Mapped[Optional[str]] = mapped_column(Text)
