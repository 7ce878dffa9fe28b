import httpx
import pytest

from conftest import localized_row, make_query_client
from dairy_site.api import deps
from dairy_site.config import Settings
from dairy_site.main import app
from dairy_site.services import backend as backend_module
from dairy_site.services.backend import BackendNotConfigured


@pytest.fixture
def catalog(collections):
    collections.tables.update({
        "products": [
            {"id": "p1", **localized_row(name={"en": "Fresh milk", "ar": "حليب طازج", "fr": ""}, description="Whole milk"),
             "price": "9 DH", "image_url": None, "show_in_gallery": True, "created_at": "2026-01-02T00:00:00+00:00"},
            {"id": "p2", **localized_row(name="Yogurt", description="Natural yogurt"),
             "price": "4 DH", "image_url": None, "show_in_gallery": False, "created_at": "2026-01-01T00:00:00+00:00"},
        ],
        "distributors": [
            {"id": "d1", **localized_row(name="Corner shop", location={"en": "Meknes", "ar": "مكناس", "fr": "Meknès"}),
             "image_url": "https://www.google.com/maps/embed?pb=abc"},
            {"id": "d2", **localized_row(name="Big market", location="Fes"), "image_url": None},
        ],
        "blog_posts": [
            {"id": "b1", **localized_row(title="Spring news", content="The cows are out."), "published": True,
             "created_at": "2026-03-01T00:00:00+00:00"},
            {"id": "b2", **localized_row(title="Secret draft", content="Not yet."), "published": False,
             "created_at": "2026-03-02T00:00:00+00:00"},
        ],
    })
    return collections


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_home_renders_with_empty_tables(client):
    response = client.get("/")
    assert response.status_code == 200
    assert '<html lang="en" dir="ltr">' in response.text


def test_products_empty_state(client):
    response = client.get("/products")
    assert response.status_code == 200
    assert "No products available yet." in response.text


def test_products_list(client, catalog):
    response = client.get("/products")
    assert "Fresh milk" in response.text
    assert "Yogurt" in response.text


def test_french_falls_back_to_english(client, catalog):
    response = client.get("/products/p1?lang=fr")
    assert response.status_code == 200
    assert "Fresh milk" in response.text
    assert '<html lang="fr" dir="ltr">' in response.text


def test_arabic_is_rtl_and_remembered(client, catalog):
    response = client.get("/products?lang=ar")
    assert '<html lang="ar" dir="rtl">' in response.text
    assert "حليب طازج" in response.text
    assert response.cookies.get("lang") == "ar"

    response = client.get("/products")
    assert '<html lang="ar" dir="rtl">' in response.text


def test_accept_language_header(client):
    response = client.get("/products", headers={"Accept-Language": "fr-FR,fr;q=0.9"})
    assert "Aucun produit pour le moment." in response.text


def test_missing_product_is_404(client, catalog):
    response = client.get("/products/missing")
    assert response.status_code == 404
    assert "Product not found" in response.text
    assert 'href="/products"' in response.text


def test_unknown_page_is_404(client):
    response = client.get("/no/such/page")
    assert response.status_code == 404
    assert "Page not found" in response.text


def test_distributor_search(client, catalog):
    response = client.get("/distributors?q=meknes")
    assert "Corner shop" in response.text
    assert "Big market" not in response.text


def test_distributor_search_uses_visitor_language(client, catalog):
    response = client.get("/distributors?q=مكناس&lang=ar")
    assert "Corner shop" in response.text
    assert "Big market" not in response.text


def test_distributor_map_embed(client, catalog):
    response = client.get("/distributors")
    assert '<iframe class="map-embed' in response.text


def test_blog_hides_drafts(client, catalog):
    response = client.get("/blog")
    assert "Spring news" in response.text
    assert "Secret draft" not in response.text
    assert client.get("/blog/b2").status_code == 404
    assert client.get("/blog/b1").status_code == 200


def test_fetch_failure_shows_toast_and_empty_state(client, collections):
    collections.failing.add("products")
    response = client.get("/products")
    assert response.status_code == 200
    assert "Failed to load products" in response.text
    assert "No products available yet." in response.text


def test_unreachable_backend_shows_toast_and_empty_state(client):
    unreachable, _, _ = make_query_client(error=httpx.ConnectError("connection refused"))
    app.dependency_overrides[deps.get_collection_client] = lambda: unreachable

    response = client.get("/products")

    assert response.status_code == 200
    assert "Failed to load products" in response.text
    assert "No products available yet." in response.text


def test_unconfigured_backend_answers_503(client):
    def unconfigured():
        raise BackendNotConfigured("no key")

    app.dependency_overrides[deps.get_collection_client] = unconfigured

    response = client.get("/products")

    assert response.status_code == 503
    assert "Service temporarily unavailable" in response.text


def test_client_factory_requires_a_key(monkeypatch):
    monkeypatch.setattr(backend_module, "get_settings", lambda: Settings(supabase_key="", supabase_service_role_key=""))
    backend_module.get_supabase_client.cache_clear()
    try:
        with pytest.raises(BackendNotConfigured):
            backend_module.get_supabase_client()
    finally:
        backend_module.get_supabase_client.cache_clear()


# --- Flyer ---

@pytest.fixture
def active_discount(collections):
    collections.tables["discounts"] = [
        {"id": "promo1", **localized_row(title="Summer offer", subtitle="Two for one", price_text="-50%"),
         "is_active": True, "image_url": None, "link_url": None},
    ]
    return collections


def test_flyer_shown_until_dismissed(client, active_discount):
    assert "Summer offer" in client.get("/products").text

    response = client.post(
        "/flyer/dismiss",
        data={"discount_id": "promo1"},
        headers={"referer": "http://testserver/products"},
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/products"

    assert "Summer offer" not in client.get("/products").text


def test_new_discount_reappears_after_dismissal(client, active_discount):
    client.post("/flyer/dismiss", data={"discount_id": "promo1"})
    active_discount.tables["discounts"][0]["is_active"] = False
    active_discount.tables["discounts"].append(
        {"id": "promo2", **localized_row(title="Winter offer", subtitle="Hot milk", price_text="-20%"),
         "is_active": True, "image_url": None, "link_url": None}
    )
    assert "Winter offer" in client.get("/products").text


def test_flyer_dismiss_ignores_foreign_referer(client):
    response = client.post(
        "/flyer/dismiss",
        data={"discount_id": "promo1"},
        headers={"referer": "https://evil.example/phish"},
        follow_redirects=False,
    )
    assert response.headers["location"] == "/"


def test_flyer_dismiss_ignores_protocol_relative_path(client):
    response = client.post(
        "/flyer/dismiss",
        data={"discount_id": "promo1"},
        headers={"referer": "http://testserver//evil.example/x"},
        follow_redirects=False,
    )
    assert response.headers["location"] == "/"


def test_flyer_dismiss_keeps_query_string(client):
    response = client.post(
        "/flyer/dismiss",
        data={"discount_id": "promo1"},
        headers={"referer": "http://testserver/distributors?q=fes"},
        follow_redirects=False,
    )
    assert response.headers["location"] == "/distributors?q=fes"


# --- Contact ---

def test_contact_page_has_form(client):
    response = client.get("/contact")
    assert response.status_code == 200
    assert 'action="/contact"' in response.text
    assert 'name="message"' in response.text


def test_contact_message_sent(client):
    response = client.post(
        "/contact",
        data={"name": "Amina", "email": "amina@example.com", "message": "Do you deliver to Ifrane?"},
        follow_redirects=False,
    )
    assert response.status_code == 303
    assert response.headers["location"] == "/contact"

    page = client.get("/contact")
    assert "Your message has been sent!" in page.text


def test_contact_message_toast_in_visitor_language(client):
    client.post(
        "/contact?lang=fr",
        data={"name": "Amina", "email": "amina@example.com", "message": "Livrez-vous à Ifrane ?"},
    )
    assert "Votre message a été envoyé !" in client.get("/contact").text


def test_contact_invalid_message_keeps_values(client):
    response = client.post("/contact", data={"name": "A", "email": "not-an-email", "message": "Hi"})
    assert response.status_code == 422
    assert 'value="not-an-email"' in response.text
    assert 'class="field-error"' in response.text
    assert "Your message has been sent!" not in response.text
