"""
Discounts shown as the floating flyer of the public site.

At most one row may be active. The partial unique index below rejects a
second active row; ``set_active_row()`` (see migration 002) switches the
active row inside one transaction.
"""

from typing import Optional

from sqlalchemy import Boolean, Index, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from dairy_site.models.base import ContentBase


class Discount(ContentBase):
    __tablename__ = "discounts"

    title_en: Mapped[str] = mapped_column(Text, nullable=False)
    title_ar: Mapped[Optional[str]] = mapped_column(Text)
    title_fr: Mapped[Optional[str]] = mapped_column(Text)
    subtitle_en: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    subtitle_ar: Mapped[Optional[str]] = mapped_column(Text)
    subtitle_fr: Mapped[Optional[str]] = mapped_column(Text)
    price_text_en: Mapped[str] = mapped_column(Text, nullable=False, server_default="")
    price_text_ar: Mapped[Optional[str]] = mapped_column(Text)
    price_text_fr: Mapped[Optional[str]] = mapped_column(Text)

    image_url: Mapped[Optional[str]] = mapped_column(Text)
    link_url: Mapped[Optional[str]] = mapped_column(Text)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, server_default="false")

    __table_args__ = (
        Index(
            "uq_discounts_single_active",
            "is_active",
            unique=True,
            postgresql_where=text("is_active"),
        ),
    )
