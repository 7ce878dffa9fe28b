from datetime import datetime

from dairy_site.entities import ENTITIES
from dairy_site.i18n import MESSAGES, translate
from dairy_site.web.icons import icon_slug, is_known_icon, render_icon
from dairy_site.web.templating import excerpt, format_date, image_or_map


def test_icon_slug():
    assert icon_slug("FlaskConical") == "flask-conical"
    assert icon_slug("flask_conical") == "flask-conical"
    assert icon_slug("Droplet") == "droplet"
    assert icon_slug(None) == ""


def test_known_icons():
    assert is_known_icon("Truck")
    assert not is_known_icon("Spaceship")


def test_render_known_icon():
    svg = str(render_icon("Leaf", size=16))
    assert svg.startswith("<svg")
    assert 'width="16"' in svg
    assert "icon-leaf" in svg


def test_unknown_icon_renders_placeholder():
    html = str(render_icon("<Spaceship>", invalid_label="Icône invalide"))
    assert 'class="icon-placeholder"' in html
    assert "Icône invalide" in html
    assert "<Spaceship>" not in html


def test_image_or_map():
    assert str(image_or_map(None)) == ""
    assert str(image_or_map("https://www.google.com/maps/embed?pb=1")).startswith("<iframe")
    img = str(image_or_map('https://cdn.example/a.png"onload="x', alt="Milk"))
    assert img.startswith("<img")
    assert '"onload="' not in img


def test_excerpt():
    assert excerpt("short") == "short"
    text = "word " * 100
    result = excerpt(text, length=20)
    assert len(result) <= 21
    assert result.endswith("…")


def test_format_date():
    assert format_date("2026-03-01T10:00:00Z") == "01 Mar 2026"
    assert format_date(datetime(2026, 1, 5)) == "05 Jan 2026"
    assert format_date(None) == ""
    assert format_date("soon") == "soon"


def test_translate_falls_back_to_english():
    assert translate("nav_home", "fr") == MESSAGES["fr"]["nav_home"]
    assert translate("nav_home", "de") == "Home"
    assert translate("no.such.key", "ar") == "no.such.key"


def test_every_language_has_every_key():
    english = set(MESSAGES["en"])
    for language in ("ar", "fr"):
        assert set(MESSAGES[language]) == english


def test_entity_registry_is_consistent():
    paths = [entity.admin_path for entity in ENTITIES.values()]
    assert len(paths) == len(set(paths))
    for entity in ENTITIES.values():
        schema_fields = set(entity.schema.model_fields)
        assert set(entity.field_names()) <= schema_fields, entity.key
        if entity.image_field:
            assert entity.image_field in schema_fields
        if entity.ordered:
            assert entity.order_by == "order_index"
