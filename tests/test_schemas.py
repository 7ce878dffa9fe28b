from dairy_site.schemas import (
    BannerContentForm,
    ContactForm,
    DistributorForm,
    HeroItemForm,
    LoginForm,
    ProductForm,
    RecipeForm,
    SiteSettingsForm,
    join_lines,
    split_lines,
    validate,
)
from dairy_site.schemas.base import URL_ERROR


def product_values(**overrides):
    values = {
        "name_en": "Fresh milk",
        "name_ar": "حليب طازج",
        "name_fr": "Lait frais",
        "description_en": "Whole milk from our cows.",
        "description_ar": "حليب كامل من أبقارنا الطازجة.",
        "description_fr": "Lait entier de nos vaches.",
        "price": "9 DH",
        "image_url": "",
        "show_in_gallery": False,
    }
    values.update(overrides)
    return values


def test_split_lines_drops_blank_lines():
    assert split_lines("Milk\n\n   \nSugar\n\n") == ["Milk", "Sugar"]
    assert split_lines("Milk\r\n\r\nSugar") == ["Milk", "Sugar"]
    assert split_lines("") == []
    assert split_lines(None) == []


def test_split_lines_keeps_indentation():
    text = "Mix:\n  - milk\n  - sugar"
    assert split_lines(text) == ["Mix:", "  - milk", "  - sugar"]
    assert join_lines(split_lines(text)) == text


def test_join_lines():
    assert join_lines(["Milk", "Sugar"]) == "Milk\nSugar"
    assert join_lines(None) == ""


def test_valid_product():
    result = validate(ProductForm, product_values())
    assert result.valid
    assert result.value["image_url"] is None
    assert result.value["price"] == "9 DH"


def test_every_language_is_required_in_forms():
    result = validate(ProductForm, product_values(name_fr="", description_ar="court"))
    assert not result.valid
    assert set(result.errors) == {"name_fr", "description_ar"}


def test_invalid_url_message():
    result = validate(ProductForm, product_values(image_url="not a url"))
    assert result.errors == {"image_url": URL_ERROR}


def test_url_kept_verbatim():
    url = "https://cdn.example/a.png?v=2"
    result = validate(ProductForm, product_values(image_url=url))
    assert result.value["image_url"] == url


def test_recipe_lines_become_lists():
    values = {
        "title_en": "Rice pudding",
        "title_ar": "أرز بالحليب",
        "title_fr": "Riz au lait",
        "description_en": "A creamy dessert for the family.",
        "description_ar": "حلوى كريمية لكل العائلة.",
        "description_fr": "Un dessert crémeux pour la famille.",
        "ingredients_en": "Milk\nRice\n\nSugar",
        "ingredients_ar": "حليب\nأرز",
        "ingredients_fr": "Lait\nRiz",
        "preparation_steps_en": "Boil\nStir",
        "preparation_steps_ar": "اغلي",
        "preparation_steps_fr": "Bouillir",
    }
    result = validate(RecipeForm, values)
    assert result.valid, result.errors
    assert result.value["ingredients_en"] == ["Milk", "Rice", "Sugar"]

    values["ingredients_fr"] = "\n \n"
    assert "ingredients_fr" in validate(RecipeForm, values).errors


def test_distributor_email_optional():
    values = {
        "name_en": "Corner shop",
        "name_ar": "متجر",
        "name_fr": "Épicerie",
        "location_en": "Meknes",
        "location_ar": "مكناس",
        "location_fr": "Meknès",
        "email": "",
        "phone": "",
        "image_url": "https://www.google.com/maps/embed?pb=abc",
    }
    result = validate(DistributorForm, values)
    assert result.valid
    assert result.value["email"] is None

    values["email"] = "not-an-email"
    assert "email" in validate(DistributorForm, values).errors


def test_hero_requires_image():
    values = {
        "title_en": "Welcome", "title_ar": "مرحبا", "title_fr": "Bienvenue",
        "subtitle_en": "Fresh", "subtitle_ar": "طازج", "subtitle_fr": "Frais",
        "image_url": "",
        "order_index": "",
    }
    result = validate(HeroItemForm, values)
    assert result.errors == {"image_url": "An image is required."}

    values["image_url"] = "https://cdn.example/hero.jpg"
    result = validate(HeroItemForm, values)
    assert result.valid
    assert result.value["order_index"] is None


def test_banner_feature_items_limit():
    item = {
        "icon_name": "Droplet",
        "title_en": "Pure", "title_ar": "نقي", "title_fr": "Pur",
        "description_en": "Nothing added", "description_ar": "بدون إضافات", "description_fr": "Rien d'ajouté",
    }
    values = {
        "banner_image_url": "",
        "main_title_en": "Why us", "main_title_ar": "لماذا نحن", "main_title_fr": "Pourquoi nous",
        "main_paragraph_en": "Because", "main_paragraph_ar": "لأن", "main_paragraph_fr": "Parce que",
        "feature_items": [item] * 4,
    }
    assert validate(BannerContentForm, values).valid

    values["feature_items"] = [item] * 5
    result = validate(BannerContentForm, values)
    assert "feature_items" in result.errors

    values["feature_items"] = [{**item, "title_fr": ""}]
    result = validate(BannerContentForm, values)
    assert "feature_items.0.title_fr" in result.errors


def test_site_settings_contact_email():
    values = {
        "site_name": "ARIB",
        "tagline_en": "Fresh", "tagline_ar": "طازج", "tagline_fr": "Frais",
        "about_en": "A family farm since 1998.",
        "about_ar": "مزرعة عائلية منذ 1998.",
        "about_fr": "Une ferme familiale depuis 1998.",
        "address_en": "Meknes", "address_ar": "مكناس", "address_fr": "Meknès",
        "contact_email": "contact@arib.example",
        "contact_phone": "+212 5 35",
        "facebook_url": "",
        "instagram_url": "https://instagram.com/arib",
        "logo_url": "",
    }
    result = validate(SiteSettingsForm, values)
    assert result.valid, result.errors
    assert result.value["facebook_url"] is None

    values["contact_email"] = "nope"
    assert "contact_email" in validate(SiteSettingsForm, values).errors


def test_login_form():
    assert validate(LoginForm, {"email": "admin@arib.example", "password": "secret1"}).valid
    errors = validate(LoginForm, {"email": "admin", "password": "123"}).errors
    assert set(errors) == {"email", "password"}


def test_contact_form():
    assert validate(ContactForm, {"name": "Amina", "email": "amina@example.com", "message": "Ten chars!"}).valid
    result = validate(ContactForm, {"name": "A", "email": "amina", "message": "short"})
    assert set(result.errors) == {"name", "email", "message"}
