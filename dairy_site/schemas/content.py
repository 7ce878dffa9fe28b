"""Form schemas for the editorial content: blog, FAQ, facts, farm info, hero, banner, settings."""

from typing import ClassVar, FrozenSet, List, Optional

from pydantic import BaseModel, EmailStr, Field, field_validator

from dairy_site.schemas.base import EntityForm, check_url

MAX_FEATURE_ITEMS = 4


class BlogPostForm(EntityForm):
    url_fields: ClassVar[FrozenSet[str]] = frozenset({"image_url"})

    title_en: str = Field(..., min_length=2)
    title_ar: str = Field(..., min_length=2)
    title_fr: str = Field(..., min_length=2)
    content_en: str = Field(..., min_length=10)
    content_ar: str = Field(..., min_length=10)
    content_fr: str = Field(..., min_length=10)
    image_url: Optional[str] = None
    published: bool = False


class FaqItemForm(EntityForm):
    question_en: str = Field(..., min_length=5)
    question_ar: str = Field(..., min_length=5)
    question_fr: str = Field(..., min_length=5)
    answer_en: str = Field(..., min_length=10)
    answer_ar: str = Field(..., min_length=10)
    answer_fr: str = Field(..., min_length=10)
    order_index: Optional[int] = Field(None, ge=0)


class FactItemForm(EntityForm):
    icon_name: str = Field(..., min_length=1)
    text_content_en: str = Field(..., min_length=1)
    text_content_ar: str = Field(..., min_length=1)
    text_content_fr: str = Field(..., min_length=1)
    order_index: Optional[int] = Field(None, ge=0)


class FarmInfoItemForm(EntityForm):
    icon_name: str = Field(..., min_length=1)
    title_en: str = Field(..., min_length=1)
    title_ar: str = Field(..., min_length=1)
    title_fr: str = Field(..., min_length=1)
    description_en: str = Field(..., min_length=1)
    description_ar: str = Field(..., min_length=1)
    description_fr: str = Field(..., min_length=1)
    order_index: Optional[int] = Field(None, ge=0)


class HeroItemForm(EntityForm):
    """Hero slides always need an image; the URL is required here."""

    title_en: str = Field(..., min_length=1)
    title_ar: str = Field(..., min_length=1)
    title_fr: str = Field(..., min_length=1)
    subtitle_en: str = Field(..., min_length=1)
    subtitle_ar: str = Field(..., min_length=1)
    subtitle_fr: str = Field(..., min_length=1)
    image_url: str
    order_index: Optional[int] = Field(None, ge=0)

    @field_validator("image_url", mode="before")
    @classmethod
    def require_url(cls, v):
        url = check_url(v)
        if url is None:
            raise ValueError("An image is required.")
        return url


class FeatureItem(BaseModel):
    icon_name: str = Field(..., min_length=1)
    title_en: str = Field(..., min_length=1)
    title_ar: str = Field(..., min_length=1)
    title_fr: str = Field(..., min_length=1)
    description_en: str = Field(..., min_length=1)
    description_ar: str = Field(..., min_length=1)
    description_fr: str = Field(..., min_length=1)


class BannerContentForm(EntityForm):
    url_fields: ClassVar[FrozenSet[str]] = frozenset({"banner_image_url"})

    banner_image_url: Optional[str] = None
    main_title_en: str = Field(..., min_length=1)
    main_title_ar: str = Field(..., min_length=1)
    main_title_fr: str = Field(..., min_length=1)
    main_paragraph_en: str = Field(..., min_length=1)
    main_paragraph_ar: str = Field(..., min_length=1)
    main_paragraph_fr: str = Field(..., min_length=1)
    feature_items: List[FeatureItem] = Field(default_factory=list, max_length=MAX_FEATURE_ITEMS)


class SiteSettingsForm(EntityForm):
    url_fields: ClassVar[FrozenSet[str]] = frozenset({"logo_url", "facebook_url", "instagram_url"})

    site_name: str = Field(..., min_length=2)
    tagline_en: str = Field(..., min_length=1)
    tagline_ar: str = Field(..., min_length=1)
    tagline_fr: str = Field(..., min_length=1)
    about_en: str = Field(..., min_length=10)
    about_ar: str = Field(..., min_length=10)
    about_fr: str = Field(..., min_length=10)
    address_en: str = Field(..., min_length=1)
    address_ar: str = Field(..., min_length=1)
    address_fr: str = Field(..., min_length=1)
    contact_email: EmailStr
    contact_phone: str = Field(..., min_length=4, max_length=40)
    facebook_url: Optional[str] = None
    instagram_url: Optional[str] = None
    logo_url: Optional[str] = None
