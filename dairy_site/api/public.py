"""
Public site pages.

Each page fetches its rows through the collection client and renders them
with the visitor's language. A failed fetch shows an error toast and the
page falls back to its empty or not-found state.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Query, Request, status
from fastapi.responses import RedirectResponse

from dairy_site.api.deps import Collections, Language, Notify
from dairy_site.entities import (
    BANNER_CONTENT,
    BLOG_POSTS,
    DISCOUNTS,
    DISTRIBUTORS,
    FACTS_ITEMS,
    FAQ_ITEMS,
    FARM_INFO_ITEMS,
    HERO_ITEMS,
    PRODUCTS,
    RECIPES,
    SITE_SETTINGS,
    EntityConfig,
)
from dairy_site.i18n import translate
from dairy_site.schemas import ContactForm, validate
from dairy_site.services.collections import CollectionClient, CollectionError, NotFoundError
from dairy_site.services.localization import resolve
from dairy_site.services.notifications import Notifier
from dairy_site.web.templating import render

logger = logging.getLogger(__name__)

router = APIRouter()

FLYER_COOKIE = "flyer_dismissed"

HOME_RECIPES = 3
HOME_POSTS = 3


# ============================================================================
# Helpers
# ============================================================================

async def fetch_list(
    client: CollectionClient,
    notifier: Notifier,
    entity: EntityConfig,
    filters: Optional[Dict[str, Any]] = None,
    order_by: Optional[str] = None,
    ascending: Optional[bool] = None,
    limit: Optional[int] = None,
) -> List[Dict[str, Any]]:
    try:
        return await client.list(
            entity.table,
            order_by=order_by or entity.order_by,
            ascending=entity.ascending if ascending is None else ascending,
            filters=filters,
            limit=limit,
        )
    except CollectionError as e:
        notifier.notify("error", f"Failed to load {entity.label_plural.lower()}", e.message)
        return []


async def fetch_single(
    client: CollectionClient,
    notifier: Notifier,
    entity: EntityConfig,
    filters: Optional[Dict[str, Any]] = None,
) -> Optional[Dict[str, Any]]:
    try:
        return await client.get_single(entity.table, filters=filters)
    except CollectionError as e:
        notifier.notify("error", f"Failed to load {entity.label.lower()}", e.message)
        return None


async def fetch_detail(
    client: CollectionClient,
    notifier: Notifier,
    entity: EntityConfig,
    row_id: str,
) -> Optional[Dict[str, Any]]:
    try:
        return await client.get_one(entity.table, row_id)
    except NotFoundError:
        return None
    except CollectionError as e:
        notifier.notify("error", f"Failed to load {entity.label.lower()}", e.message)
        return None


async def layout_context(request: Request, client: CollectionClient, notifier: Notifier) -> Dict[str, Any]:
    """Site settings for header and footer, plus the flyer unless dismissed."""
    site = await fetch_single(client, notifier, SITE_SETTINGS)
    flyer = await fetch_single(client, notifier, DISCOUNTS, filters={DISCOUNTS.active_field: True})
    if flyer and request.cookies.get(FLYER_COOKIE) == str(flyer.get("id")):
        flyer = None
    return {"site": site, "flyer": flyer}


def not_found_page(request: Request, context: Dict[str, Any], title_key: str, message_key: str, back_url: str, back_key: str):
    context = {
        **context,
        "title_key": title_key,
        "message_key": message_key,
        "back_url": back_url,
        "back_key": back_key,
    }
    return render(request, "public/not_found.html", context, status_code=404)


def matches_search(row: Dict[str, Any], query: str, language: str) -> bool:
    needle = query.strip().lower()
    if not needle:
        return True
    haystack = " ".join(
        str(resolve(row, field, language) or "") for field in ("name", "location")
    )
    return needle in haystack.lower()


# ============================================================================
# Pages
# ============================================================================

@router.get("/")
async def home(request: Request, client: Collections, notifier: Notify):
    context = await layout_context(request, client, notifier)
    context.update({
        "hero_items": await fetch_list(client, notifier, HERO_ITEMS),
        "banner": await fetch_single(client, notifier, BANNER_CONTENT),
        "gallery": await fetch_list(
            client, notifier, PRODUCTS,
            filters={"show_in_gallery": True}, order_by="name_en", ascending=True,
        ),
        "farm_info": await fetch_list(client, notifier, FARM_INFO_ITEMS),
        "facts": await fetch_list(client, notifier, FACTS_ITEMS),
        "recipes": await fetch_list(client, notifier, RECIPES, limit=HOME_RECIPES),
        "posts": await fetch_list(client, notifier, BLOG_POSTS, filters={"published": True}, limit=HOME_POSTS),
        "faq": await fetch_list(client, notifier, FAQ_ITEMS),
    })
    return render(request, "public/home.html", context)


@router.get("/products")
async def products(request: Request, client: Collections, notifier: Notify):
    context = await layout_context(request, client, notifier)
    context["products"] = await fetch_list(client, notifier, PRODUCTS)
    return render(request, "public/products.html", context)


@router.get("/products/{product_id}")
async def product_detail(product_id: str, request: Request, client: Collections, notifier: Notify):
    context = await layout_context(request, client, notifier)
    product = await fetch_detail(client, notifier, PRODUCTS, product_id)
    if product is None:
        return not_found_page(
            request, context, "product_not_found", "product_not_found_desc", "/products", "back_to_products"
        )
    context["product"] = product
    return render(request, "public/product_detail.html", context)


@router.get("/distributors")
async def distributors(
    request: Request,
    client: Collections,
    notifier: Notify,
    lang: Language,
    q: str = Query("", max_length=100),
):
    context = await layout_context(request, client, notifier)
    rows = await fetch_list(client, notifier, DISTRIBUTORS)
    context.update({
        "distributors": [row for row in rows if matches_search(row, q, lang)],
        "query": q,
    })
    return render(request, "public/distributors.html", context)


@router.get("/recipes")
async def recipes(request: Request, client: Collections, notifier: Notify):
    context = await layout_context(request, client, notifier)
    context["recipes"] = await fetch_list(client, notifier, RECIPES)
    return render(request, "public/recipes.html", context)


@router.get("/recipes/{recipe_id}")
async def recipe_detail(recipe_id: str, request: Request, client: Collections, notifier: Notify):
    context = await layout_context(request, client, notifier)
    recipe = await fetch_detail(client, notifier, RECIPES, recipe_id)
    if recipe is None:
        return not_found_page(
            request, context, "recipe_not_found", "recipe_not_found_desc", "/recipes", "back_to_recipes"
        )
    context["recipe"] = recipe
    return render(request, "public/recipe_detail.html", context)


@router.get("/blog")
async def blog(request: Request, client: Collections, notifier: Notify):
    context = await layout_context(request, client, notifier)
    context["posts"] = await fetch_list(client, notifier, BLOG_POSTS, filters={"published": True})
    return render(request, "public/blog.html", context)


@router.get("/blog/{post_id}")
async def blog_post(post_id: str, request: Request, client: Collections, notifier: Notify):
    context = await layout_context(request, client, notifier)
    post = await fetch_detail(client, notifier, BLOG_POSTS, post_id)
    # Drafts are only visible in the back office
    if post is None or not post.get("published"):
        return not_found_page(request, context, "post_not_found", "post_not_found_desc", "/blog", "back_to_blog")
    context["post"] = post
    return render(request, "public/blog_post.html", context)


@router.get("/about")
async def about(request: Request, client: Collections, notifier: Notify):
    context = await layout_context(request, client, notifier)
    context.update({
        "farm_info": await fetch_list(client, notifier, FARM_INFO_ITEMS),
        "facts": await fetch_list(client, notifier, FACTS_ITEMS),
    })
    return render(request, "public/about.html", context)


async def contact_page(
    request: Request,
    client: CollectionClient,
    notifier: Notifier,
    values: Optional[Dict[str, str]] = None,
    errors: Optional[Dict[str, str]] = None,
    status_code: int = 200,
):
    context = await layout_context(request, client, notifier)
    context.update({
        "faq": await fetch_list(client, notifier, FAQ_ITEMS),
        "values": values or {},
        "errors": errors or {},
    })
    return render(request, "public/contact.html", context, status_code=status_code)


@router.get("/contact")
async def contact(request: Request, client: Collections, notifier: Notify):
    return await contact_page(request, client, notifier)


@router.post("/contact")
async def send_message(request: Request, client: Collections, notifier: Notify, lang: Language):
    """Validate a visitor message. There is no inbox table: accepted messages are logged."""
    form = await request.form()
    values = {key: str(form.get(key, "")).strip() for key in ("name", "email", "message")}

    result = validate(ContactForm, values)
    if not result.valid:
        return await contact_page(
            request, client, notifier, values, result.errors,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        )

    logger.info(f"Contact message from {result.value['name']} <{result.value['email']}>")
    notifier.notify("success", translate("contact_sent", lang), translate("contact_sent_desc", lang))
    return RedirectResponse("/contact", status_code=status.HTTP_303_SEE_OTHER)


@router.get("/{path:path}", include_in_schema=False)
async def page_not_found(path: str, request: Request, client: Collections, notifier: Notify):
    """Catch-all for unknown paths. Registered last."""
    context = await layout_context(request, client, notifier)
    logger.debug(f"404 /{path}")
    return not_found_page(request, context, "page_not_found", "page_not_found_desc", "/", "back_home")
