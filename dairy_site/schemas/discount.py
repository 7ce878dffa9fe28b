"""Discount (promotional flyer) form schema."""

from typing import ClassVar, FrozenSet, Optional

from pydantic import Field

from dairy_site.schemas.base import EntityForm


class DiscountForm(EntityForm):
    """
    ``is_active`` is not written with the row: activation goes through the
    single-active-row helper so at most one discount is shown.
    """

    url_fields: ClassVar[FrozenSet[str]] = frozenset({"image_url", "link_url"})

    title_en: str = Field(..., min_length=1)
    title_ar: str = Field(..., min_length=1)
    title_fr: str = Field(..., min_length=1)
    subtitle_en: str = Field(..., min_length=1)
    subtitle_ar: str = Field(..., min_length=1)
    subtitle_fr: str = Field(..., min_length=1)
    price_text_en: str = Field(..., min_length=1)
    price_text_ar: str = Field(..., min_length=1)
    price_text_fr: str = Field(..., min_length=1)
    image_url: Optional[str] = None
    link_url: Optional[str] = None
    is_active: bool = False
