"""
Entity registry.

One ``EntityConfig`` per content table: where it lives, how it is ordered,
which schema validates its form, which fields the admin dialog shows and
which columns the admin table lists. The admin pages and the public pages
are configurations of these entries.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple, Type

from dairy_site.schemas import (
    BannerContentForm,
    BlogPostForm,
    DiscountForm,
    DistributorForm,
    EntityForm,
    FactItemForm,
    FaqItemForm,
    FarmInfoItemForm,
    HeroItemForm,
    ProductForm,
    RecipeForm,
    SiteSettingsForm,
)
from dairy_site.schemas.content import MAX_FEATURE_ITEMS
from dairy_site.services.image_processor import SIZES
from dairy_site.services.localization import localized_columns

FEATURE_ITEM_KEYS = ("icon_name",) + tuple(localized_columns("title")) + tuple(localized_columns("description"))


@dataclass(frozen=True)
class FieldSpec:
    name: str
    label: str
    kind: str = "text"
    localized: bool = False
    help: Optional[str] = None

    @property
    def input_names(self) -> List[str]:
        if self.localized:
            return localized_columns(self.name)
        return [self.name]


@dataclass(frozen=True)
class ListColumn:
    """A column of the admin table. Localized columns show the English value."""

    name: str
    label: str
    localized: bool = False
    kind: str = "text"


@dataclass(frozen=True)
class EntityConfig:
    key: str
    table: str
    label: str
    label_plural: str
    schema: Type[EntityForm]
    fields: Tuple[FieldSpec, ...]
    admin_path: str
    list_columns: Tuple[ListColumn, ...] = ()
    order_by: Optional[str] = None
    ascending: bool = True
    ordered: bool = False
    image_field: Optional[str] = None
    storage_folder: Optional[str] = None
    max_width: Optional[int] = None
    allow_map_embed: bool = False
    singleton: bool = False
    active_field: Optional[str] = None
    empty_message: str = "Nothing here yet."
    description: str = ""

    @property
    def lines_fields(self) -> frozenset:
        return self.schema.lines_fields

    def field_names(self) -> List[str]:
        """Every form input name, localized fields expanded per language."""
        names: List[str] = []
        for spec in self.fields:
            if spec.kind == "feature_items":
                continue
            names.extend(spec.input_names)
        return names

    def fields_of_kind(self, kind: str) -> List[str]:
        names: List[str] = []
        for spec in self.fields:
            if spec.kind == kind:
                names.extend(spec.input_names)
        return names

    @property
    def has_feature_items(self) -> bool:
        return any(spec.kind == "feature_items" for spec in self.fields)


def _localized(name: str, label: str, kind: str = "text") -> FieldSpec:
    return FieldSpec(name=name, label=label, kind=kind, localized=True)


# ============================================================================
# Catalog
# ============================================================================

PRODUCTS = EntityConfig(
    key="products",
    table="products",
    label="Product",
    label_plural="Products",
    schema=ProductForm,
    admin_path="/admin/products",
    fields=(
        _localized("name", "Name"),
        _localized("description", "Description", "textarea"),
        FieldSpec("price", "Price"),
        FieldSpec("image_url", "Image", "image"),
        FieldSpec("show_in_gallery", "Show in gallery", "bool"),
    ),
    list_columns=(
        ListColumn("image_url", "Image", kind="image"),
        ListColumn("name", "Name", localized=True),
        ListColumn("price", "Price"),
        ListColumn("show_in_gallery", "Gallery", kind="bool"),
    ),
    order_by="created_at",
    ascending=False,
    image_field="image_url",
    storage_folder="products",
    max_width=SIZES["card"],
    empty_message="No products yet. Add your first product.",
)

RECIPES = EntityConfig(
    key="recipes",
    table="recipes",
    label="Recipe",
    label_plural="Recipes",
    schema=RecipeForm,
    admin_path="/admin/recipes",
    fields=(
        _localized("title", "Title"),
        _localized("description", "Description", "textarea"),
        FieldSpec("ingredients", "Ingredients", "lines", localized=True, help="One ingredient per line"),
        FieldSpec("preparation_steps", "Preparation steps", "lines", localized=True, help="One step per line"),
        FieldSpec("image_url", "Image", "image"),
    ),
    list_columns=(
        ListColumn("image_url", "Image", kind="image"),
        ListColumn("title", "Title", localized=True),
        ListColumn("ingredients", "Ingredients", localized=True, kind="count"),
    ),
    order_by="title_en",
    image_field="image_url",
    storage_folder="recipes",
    max_width=SIZES["card"],
    empty_message="No recipes yet. Add your first recipe.",
)

DISTRIBUTORS = EntityConfig(
    key="distributors",
    table="distributors",
    label="Distributor",
    label_plural="Distributors",
    schema=DistributorForm,
    admin_path="/admin/distributors",
    fields=(
        _localized("name", "Name"),
        _localized("location", "Location"),
        FieldSpec("email", "Email", "email"),
        FieldSpec("phone", "Phone"),
        FieldSpec("image_url", "Logo or map embed URL", "image"),
    ),
    list_columns=(
        ListColumn("image_url", "Logo", kind="image"),
        ListColumn("name", "Name", localized=True),
        ListColumn("location", "Location", localized=True),
        ListColumn("phone", "Phone"),
    ),
    order_by="name_en",
    image_field="image_url",
    storage_folder="distributors",
    max_width=SIZES["logo"],
    allow_map_embed=True,
    empty_message="No distributors yet.",
)

# ============================================================================
# Content
# ============================================================================

BLOG_POSTS = EntityConfig(
    key="blog",
    table="blog_posts",
    label="Blog post",
    label_plural="Blog posts",
    schema=BlogPostForm,
    admin_path="/admin/blog",
    fields=(
        _localized("title", "Title"),
        _localized("content", "Content", "textarea"),
        FieldSpec("image_url", "Cover image", "image"),
        FieldSpec("published", "Published", "bool"),
    ),
    list_columns=(
        ListColumn("image_url", "Image", kind="image"),
        ListColumn("title", "Title", localized=True),
        ListColumn("published", "Published", kind="bool"),
        ListColumn("created_at", "Created", kind="date"),
    ),
    order_by="created_at",
    ascending=False,
    image_field="image_url",
    storage_folder="blog",
    max_width=SIZES["hero"],
    empty_message="No blog posts yet.",
)

FAQ_ITEMS = EntityConfig(
    key="faq",
    table="faq_items",
    label="FAQ item",
    label_plural="FAQ items",
    schema=FaqItemForm,
    admin_path="/admin/faq",
    fields=(
        _localized("question", "Question"),
        _localized("answer", "Answer", "textarea"),
        FieldSpec("order_index", "Order", "int"),
    ),
    list_columns=(
        ListColumn("order_index", "#"),
        ListColumn("question", "Question", localized=True),
    ),
    order_by="order_index",
    ordered=True,
    empty_message="No FAQ items yet.",
)

FACTS_ITEMS = EntityConfig(
    key="facts",
    table="facts_items",
    label="Fact",
    label_plural="Facts",
    schema=FactItemForm,
    admin_path="/admin/facts",
    fields=(
        FieldSpec("icon_name", "Icon", "icon"),
        _localized("text_content", "Text", "textarea"),
        FieldSpec("order_index", "Order", "int"),
    ),
    list_columns=(
        ListColumn("order_index", "#"),
        ListColumn("icon_name", "Icon", kind="icon"),
        ListColumn("text_content", "Text", localized=True),
    ),
    order_by="order_index",
    ordered=True,
    empty_message="No facts yet.",
)

FARM_INFO_ITEMS = EntityConfig(
    key="farm-info",
    table="farm_info_items",
    label="Farm info item",
    label_plural="Farm info items",
    schema=FarmInfoItemForm,
    admin_path="/admin/content/farm-info",
    fields=(
        FieldSpec("icon_name", "Icon", "icon"),
        _localized("title", "Title"),
        _localized("description", "Description", "textarea"),
        FieldSpec("order_index", "Order", "int"),
    ),
    list_columns=(
        ListColumn("order_index", "#"),
        ListColumn("icon_name", "Icon", kind="icon"),
        ListColumn("title", "Title", localized=True),
    ),
    order_by="order_index",
    ordered=True,
    empty_message="No farm info items yet.",
    description="The 'from our farm' section of the home page.",
)

HERO_ITEMS = EntityConfig(
    key="hero",
    table="hero_carousel_items",
    label="Hero slide",
    label_plural="Hero slides",
    schema=HeroItemForm,
    admin_path="/admin/content/hero",
    fields=(
        _localized("title", "Title"),
        _localized("subtitle", "Subtitle"),
        FieldSpec("image_url", "Image", "image"),
        FieldSpec("order_index", "Order", "int"),
    ),
    list_columns=(
        ListColumn("order_index", "#"),
        ListColumn("image_url", "Image", kind="image"),
        ListColumn("title", "Title", localized=True),
    ),
    order_by="order_index",
    ordered=True,
    image_field="image_url",
    storage_folder="hero",
    max_width=SIZES["hero"],
    empty_message="No hero slides yet.",
    description="Slides of the home page carousel.",
)

BANNER_CONTENT = EntityConfig(
    key="banner",
    table="banner_content",
    label="Banner",
    label_plural="Banner",
    schema=BannerContentForm,
    admin_path="/admin/content/banner",
    fields=(
        FieldSpec("banner_image_url", "Banner image", "image"),
        _localized("main_title", "Main title"),
        _localized("main_paragraph", "Main paragraph", "textarea"),
        FieldSpec("feature_items", "Feature items", "feature_items", help=f"Up to {MAX_FEATURE_ITEMS} items"),
    ),
    image_field="banner_image_url",
    storage_folder="banner",
    max_width=SIZES["hero"],
    singleton=True,
    description="The banner section under the hero carousel.",
)

SITE_SETTINGS = EntityConfig(
    key="settings",
    table="site_settings",
    label="Site settings",
    label_plural="Site settings",
    schema=SiteSettingsForm,
    admin_path="/admin/settings",
    fields=(
        FieldSpec("site_name", "Site name"),
        FieldSpec("logo_url", "Logo", "image"),
        _localized("tagline", "Tagline"),
        _localized("about", "About", "textarea"),
        _localized("address", "Address"),
        FieldSpec("contact_email", "Contact email", "email"),
        FieldSpec("contact_phone", "Contact phone"),
        FieldSpec("facebook_url", "Facebook URL", "url"),
        FieldSpec("instagram_url", "Instagram URL", "url"),
    ),
    image_field="logo_url",
    storage_folder="logos",
    max_width=SIZES["logo"],
    singleton=True,
)

# ============================================================================
# Promotion
# ============================================================================

DISCOUNTS = EntityConfig(
    key="discounts",
    table="discounts",
    label="Discount",
    label_plural="Discounts",
    schema=DiscountForm,
    admin_path="/admin/discounts",
    fields=(
        _localized("title", "Title"),
        _localized("subtitle", "Subtitle"),
        _localized("price_text", "Price text"),
        FieldSpec("image_url", "Flyer image", "image"),
        FieldSpec("link_url", "Link URL", "url"),
        FieldSpec("is_active", "Active (shown as the site flyer)", "bool"),
    ),
    list_columns=(
        ListColumn("image_url", "Image", kind="image"),
        ListColumn("title", "Title", localized=True),
        ListColumn("price_text", "Price", localized=True),
        ListColumn("is_active", "Active", kind="bool"),
    ),
    order_by="created_at",
    ascending=False,
    image_field="image_url",
    storage_folder="discounts",
    max_width=SIZES["card"],
    active_field="is_active",
    empty_message="No discounts yet.",
    description="Only one discount can be active at a time.",
)

ENTITIES: Dict[str, EntityConfig] = {
    entity.key: entity
    for entity in (
        PRODUCTS,
        RECIPES,
        DISTRIBUTORS,
        BLOG_POSTS,
        FAQ_ITEMS,
        FACTS_ITEMS,
        FARM_INFO_ITEMS,
        HERO_ITEMS,
        BANNER_CONTENT,
        SITE_SETTINGS,
        DISCOUNTS,
    )
}

# Collections listed on the admin dashboard, in display order
DASHBOARD_ENTITIES = (PRODUCTS, RECIPES, BLOG_POSTS, DISTRIBUTORS, FAQ_ITEMS, DISCOUNTS)
