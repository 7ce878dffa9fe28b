"""
Entity form schemas (pydantic), shared by the add and edit dialogs.
"""

from dairy_site.schemas.base import EntityForm, ValidationResult, join_lines, split_lines, validate
from dairy_site.schemas.catalog import DistributorForm, ProductForm, RecipeForm
from dairy_site.schemas.content import (
    BannerContentForm,
    BlogPostForm,
    FactItemForm,
    FaqItemForm,
    FarmInfoItemForm,
    FeatureItem,
    HeroItemForm,
    SiteSettingsForm,
)
from dairy_site.schemas.discount import DiscountForm
from dairy_site.schemas.auth import LoginForm
from dairy_site.schemas.contact import ContactForm

__all__ = [
    "EntityForm",
    "ValidationResult",
    "validate",
    "split_lines",
    "join_lines",
    "ProductForm",
    "RecipeForm",
    "DistributorForm",
    "BlogPostForm",
    "FaqItemForm",
    "FactItemForm",
    "FarmInfoItemForm",
    "HeroItemForm",
    "FeatureItem",
    "BannerContentForm",
    "SiteSettingsForm",
    "DiscountForm",
    "LoginForm",
    "ContactForm",
]
