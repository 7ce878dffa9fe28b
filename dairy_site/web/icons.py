"""
Inline SVG icons (Lucide outlines) referenced by name from the content tables.

``icon_name`` columns hold the Lucide component name ("Droplet",
"FlaskConical"); kebab-case slugs ("flask-conical") are accepted too.
Unknown names render a visible placeholder instead of failing the page.
"""

import re
from typing import Optional

from markupsafe import Markup, escape

ICON_PATHS = {
    "droplet": '<path d="M12 22a7 7 0 0 0 7-7c0-2-1-3.9-3-5.5s-3.5-4-4-6.5c-.5 2.5-2 4.9-4 6.5C6 11.1 5 13 5 15a7 7 0 0 0 7 7z"/>',
    "truck": (
        '<path d="M14 18V6a2 2 0 0 0-2-2H4a2 2 0 0 0-2 2v11a1 1 0 0 0 1 1h2"/><path d="M15 18H9"/>'
        '<path d="M19 18h2a1 1 0 0 0 1-1v-3.65a1 1 0 0 0-.22-.624l-3.48-4.35A1 1 0 0 0 17.52 8H14"/>'
        '<circle cx="17" cy="18" r="2"/><circle cx="7" cy="18" r="2"/>'
    ),
    "flask-conical": (
        '<path d="M10 2v7.527a2 2 0 0 1-.211.896L4.72 20.55a1 1 0 0 0 .9 1.45h12.76a1 1 0 0 0 .9-1.45'
        'l-5.069-10.127A2 2 0 0 1 14 9.527V2"/><path d="M8.5 2h7"/><path d="M7 16h10"/>'
    ),
    "store": (
        '<path d="m2 7 4.41-4.41A2 2 0 0 1 7.83 2h8.34a2 2 0 0 1 1.42.59L22 7"/>'
        '<path d="M4 12v8a2 2 0 0 0 2 2h12a2 2 0 0 0 2-2v-8"/>'
        '<path d="M15 22v-4a2 2 0 0 0-2-2h-2a2 2 0 0 0-2 2v4"/><path d="M2 7h20"/>'
    ),
    "leaf": (
        '<path d="M11 20A7 7 0 0 1 9.8 6.1C15.5 5 17 4.48 19 2c1 2 2 4.18 2 8 0 5.5-4.78 10-10 10Z"/>'
        '<path d="M2 21c0-3 1.85-5.36 5.08-6C9.5 14.52 12 13 13 12"/>'
    ),
    "award": '<circle cx="12" cy="8" r="6"/><path d="M15.477 12.89 17 22l-5-3-5 3 1.523-9.11"/>',
    "heart": (
        '<path d="M19 14c1.49-1.46 3-3.21 3-5.5A5.5 5.5 0 0 0 16.5 3c-1.76 0-3 .5-4.5 2-1.5-1.5-2.74-2-4.5-2'
        'A5.5 5.5 0 0 0 2 8.5c0 2.3 1.5 4.05 3 5.5l7 7Z"/>'
    ),
    "apple": (
        '<path d="M12 20.94c1.5 0 2.75 1.06 4 1.06 3 0 6-8 6-12.22A4.91 4.91 0 0 0 17 5c-2.22 0-4 1.44-5 2'
        '-1-.56-2.78-2-5-2a4.78 4.78 0 0 0-5 4.78C2 14 5 22 8 22c1.25 0 2.5-1.06 4-1.06Z"/>'
        '<path d="M10 2c1 .5 2 2 2 5"/>'
    ),
    "image": (
        '<rect width="18" height="18" x="3" y="3" rx="2" ry="2"/><circle cx="9" cy="9" r="2"/>'
        '<path d="m21 15-3.086-3.086a2 2 0 0 0-2.828 0L6 21"/>'
    ),
}

# Names offered in the admin icon picker
ICON_CHOICES = ("Droplet", "Truck", "FlaskConical", "Store", "Leaf", "Award", "Heart", "Apple", "Image")

_PLACEHOLDER_PATH = (
    '<circle cx="12" cy="12" r="10"/><line x1="12" x2="12" y1="8" y2="12"/>'
    '<line x1="12" x2="12.01" y1="16" y2="16"/>'
)

_SVG = (
    '<svg xmlns="http://www.w3.org/2000/svg" class="icon {css_class}" width="{size}" height="{size}" '
    'viewBox="0 0 24 24" fill="none" stroke="currentColor" stroke-width="2" '
    'stroke-linecap="round" stroke-linejoin="round"{label}>{paths}</svg>'
)


def icon_slug(name: Optional[str]) -> str:
    """``FlaskConical`` / ``flask_conical`` / ``flask-conical`` -> ``flask-conical``."""
    if not name:
        return ""
    slug = re.sub(r"(?<=[a-z0-9])([A-Z])", r"-\1", name.strip())
    return slug.replace("_", "-").replace(" ", "-").lower()


def is_known_icon(name: Optional[str]) -> bool:
    return icon_slug(name) in ICON_PATHS


def render_icon(name: Optional[str], size: int = 24, css_class: str = "", invalid_label: str = "Invalid icon") -> Markup:
    slug = icon_slug(name)
    if not is_known_icon(name):
        svg = _SVG.format(
            css_class=f"icon-invalid {css_class}".strip(),
            size=size,
            label=f' role="img" aria-label="{escape(invalid_label)}"',
            paths=_PLACEHOLDER_PATH,
        )
        return Markup(f'<span class="icon-placeholder" title="{escape(invalid_label)}: {escape(name or "")}">{svg}</span>')
    return Markup(_SVG.format(css_class=f"icon-{slug} {css_class}".strip(), size=size, label=' aria-hidden="true"', paths=ICON_PATHS[slug]))
