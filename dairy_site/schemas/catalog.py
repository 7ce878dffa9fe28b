"""Form schemas for products, recipes and distributors."""

from typing import ClassVar, FrozenSet, List, Optional

from pydantic import EmailStr, Field, field_validator

from dairy_site.schemas.base import EntityForm


class ProductForm(EntityForm):
    url_fields: ClassVar[FrozenSet[str]] = frozenset({"image_url"})

    name_en: str = Field(..., min_length=2)
    name_ar: str = Field(..., min_length=2)
    name_fr: str = Field(..., min_length=2)
    description_en: str = Field(..., min_length=10)
    description_ar: str = Field(..., min_length=10)
    description_fr: str = Field(..., min_length=10)
    price: str = Field(..., min_length=1, max_length=50)
    image_url: Optional[str] = None
    show_in_gallery: bool = False


class RecipeForm(EntityForm):
    """Ingredients and preparation steps are edited one item per line."""

    url_fields: ClassVar[FrozenSet[str]] = frozenset({"image_url"})
    lines_fields: ClassVar[FrozenSet[str]] = frozenset({
        "ingredients_en", "ingredients_ar", "ingredients_fr",
        "preparation_steps_en", "preparation_steps_ar", "preparation_steps_fr",
    })

    title_en: str = Field(..., min_length=2)
    title_ar: str = Field(..., min_length=2)
    title_fr: str = Field(..., min_length=2)
    description_en: str = Field(..., min_length=10)
    description_ar: str = Field(..., min_length=10)
    description_fr: str = Field(..., min_length=10)
    ingredients_en: List[str] = Field(..., min_length=1)
    ingredients_ar: List[str] = Field(..., min_length=1)
    ingredients_fr: List[str] = Field(..., min_length=1)
    preparation_steps_en: List[str] = Field(..., min_length=1)
    preparation_steps_ar: List[str] = Field(..., min_length=1)
    preparation_steps_fr: List[str] = Field(..., min_length=1)
    image_url: Optional[str] = None


class DistributorForm(EntityForm):
    """``image_url`` is either a logo or a Google Maps embed URL."""

    url_fields: ClassVar[FrozenSet[str]] = frozenset({"image_url"})

    name_en: str = Field(..., min_length=2)
    name_ar: str = Field(..., min_length=2)
    name_fr: str = Field(..., min_length=2)
    location_en: str = Field(..., min_length=2)
    location_ar: str = Field(..., min_length=2)
    location_fr: str = Field(..., min_length=2)
    email: Optional[EmailStr] = None
    phone: str = Field("", max_length=40)
    image_url: Optional[str] = None

    @field_validator("email", mode="before")
    @classmethod
    def empty_email(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v
