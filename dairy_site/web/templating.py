"""
Jinja2 environment and the page render helper.

Templates never touch the network: routes fetch rows and hand them over,
templates only pick the localized text and lay it out.
"""

from datetime import datetime
from typing import Any, Dict, Optional

from fastapi.templating import Jinja2Templates
from jinja2 import pass_context
from markupsafe import Markup, escape
from starlette.requests import Request
from starlette.responses import Response

from dairy_site.config import PACKAGE_DIR, get_settings
from dairy_site.i18n import translate
from dairy_site.services.localization import (
    DEFAULT_LANGUAGE,
    LANGUAGE_COOKIE,
    LANGUAGE_LABELS,
    SUPPORTED_LANGUAGES,
    negotiate_language,
    normalize_language,
    resolve,
    text_direction,
)
from dairy_site.services.notifications import pop_toasts
from dairy_site.services.storage import is_map_embed
from dairy_site.web.icons import ICON_CHOICES, render_icon

templates = Jinja2Templates(directory=str(PACKAGE_DIR / "templates"))

LANGUAGE_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


def request_language(request: Request) -> str:
    """``?lang=`` wins, then the language cookie, then Accept-Language."""
    return negotiate_language(
        request.query_params.get("lang"),
        request.cookies.get(LANGUAGE_COOKIE),
        request.headers.get("accept-language"),
        default=get_settings().default_language or DEFAULT_LANGUAGE,
    )


# ============================================================================
# Filters & globals
# ============================================================================

@pass_context
def localize(context, entity: Optional[Dict[str, Any]], field: str, default: Any = "") -> Any:
    return resolve(entity, field, context.get("lang", DEFAULT_LANGUAGE), default)


@pass_context
def t(context, key: str, **params) -> str:
    return translate(key, context.get("lang", DEFAULT_LANGUAGE), **params)


@pass_context
def icon(context, name: Optional[str], size: int = 24, css_class: str = "") -> Markup:
    label = translate("invalid_icon", context.get("lang", DEFAULT_LANGUAGE))
    return render_icon(name, size=size, css_class=css_class, invalid_label=label)


def image_or_map(url: Optional[str], alt: str = "", css_class: str = "") -> Markup:
    """A map iframe for Google Maps embed URLs, an <img> otherwise, nothing for no URL."""
    if not url:
        return Markup("")
    if is_map_embed(url):
        return Markup(
            f'<iframe class="map-embed {escape(css_class)}" src="{escape(url)}" loading="lazy" '
            f'referrerpolicy="no-referrer-when-downgrade" title="{escape(alt)}" allowfullscreen></iframe>'
        )
    return Markup(f'<img class="{escape(css_class)}" src="{escape(url)}" alt="{escape(alt)}" loading="lazy">')


def excerpt(text: Optional[str], length: int = 160) -> str:
    if not text:
        return ""
    text = " ".join(text.split())
    if len(text) <= length:
        return text
    return text[:length].rsplit(" ", 1)[0] + "…"


def format_date(value: Any, fmt: str = "%d %b %Y") -> str:
    if not value:
        return ""
    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value
    return value.strftime(fmt)


templates.env.filters["localize"] = localize
templates.env.filters["excerpt"] = excerpt
templates.env.filters["date"] = format_date
templates.env.globals["t"] = t
templates.env.globals["icon"] = icon
templates.env.globals["image_or_map"] = image_or_map
templates.env.globals["icon_choices"] = ICON_CHOICES
templates.env.globals["languages"] = LANGUAGE_LABELS
templates.env.globals["supported_languages"] = SUPPORTED_LANGUAGES


# ============================================================================
# Render
# ============================================================================

def render(
    request: Request,
    template: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
) -> Response:
    """
    Render a page with the language, text direction and pending toasts.

    A ``?lang=`` choice is remembered in the language cookie.
    """
    lang = request_language(request)
    page = {
        "request": request,
        "lang": lang,
        "dir": text_direction(lang),
        "toasts": pop_toasts(request),
        "app_name": get_settings().app_name,
    }
    page.update(context or {})

    response = templates.TemplateResponse(request, template, page, status_code=status_code)
    chosen = normalize_language(request.query_params.get("lang"))
    if chosen and chosen != request.cookies.get(LANGUAGE_COOKIE):
        response.set_cookie(LANGUAGE_COOKIE, chosen, max_age=LANGUAGE_COOKIE_MAX_AGE, samesite="lax")
    return response
