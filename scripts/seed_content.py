"""
Seed script - Creates starter content for development.

Run with: python -m scripts.seed_content

Tables that already hold rows are left untouched, so the script can be
re-run safely after migrations.
"""

import asyncio

from dairy_site.services.active_row import set_active
from dairy_site.services.backend import get_supabase_client
from dairy_site.services.collections import CollectionClient


SITE_SETTINGS = {
    "site_name": "ARIB Dairy",
    "tagline_en": "Fresh milk from our farm to your table",
    "tagline_ar": "حليب طازج من مزرعتنا إلى مائدتكم",
    "tagline_fr": "Du lait frais de notre ferme à votre table",
    "about_en": "A family farm producing milk, yogurt and cheese since 1998.",
    "about_ar": "مزرعة عائلية تنتج الحليب والزبادي والجبن منذ 1998.",
    "about_fr": "Une ferme familiale qui produit lait, yaourts et fromages depuis 1998.",
    "address_en": "Route de Fès, Meknès",
    "address_ar": "طريق فاس، مكناس",
    "address_fr": "Route de Fès, Meknès",
    "contact_email": "contact@arib-dairy.example",
    "contact_phone": "+212 5 35 00 00 00",
}

BANNER = {
    "main_title_en": "Why our milk tastes better",
    "main_title_ar": "لماذا حليبنا ألذ",
    "main_title_fr": "Pourquoi notre lait a meilleur goût",
    "main_paragraph_en": "Grass-fed cows, daily collection and short distribution.",
    "main_paragraph_ar": "أبقار تتغذى على العشب وجمع يومي وتوزيع قصير.",
    "main_paragraph_fr": "Des vaches nourries à l'herbe, une collecte quotidienne et un circuit court.",
    "feature_items": [
        {
            "icon_name": "Droplet",
            "title_en": "Pure", "title_ar": "نقي", "title_fr": "Pur",
            "description_en": "Nothing added.",
            "description_ar": "بدون إضافات.",
            "description_fr": "Rien d'ajouté.",
        },
        {
            "icon_name": "Truck",
            "title_en": "Fast delivery", "title_ar": "توصيل سريع", "title_fr": "Livraison rapide",
            "description_en": "From milking to shelf in 24 hours.",
            "description_ar": "من الحلب إلى الرف في 24 ساعة.",
            "description_fr": "De la traite au rayon en 24 heures.",
        },
    ],
}

PRODUCTS = [
    ("Fresh milk", "حليب طازج", "Lait frais", "Whole milk, pasteurized the same day.", "9 DH", True),
    ("Natural yogurt", "زبادي طبيعي", "Yaourt nature", "Set yogurt made with our own cultures.", "4 DH", True),
    ("Fresh cheese", "جبن طري", "Fromage frais", "Soft cheese, lightly salted, to eat within the week.", "25 DH", False),
]

FACTS = [
    ("Leaf", "Our cows graze outdoors all year long.", "أبقارنا ترعى في الهواء الطلق طوال السنة.", "Nos vaches pâturent dehors toute l'année."),
    ("Award", "Regional quality award 2023.", "جائزة الجودة الجهوية 2023.", "Prix régional de qualité 2023."),
]

FAQ = [
    (
        "Is your milk pasteurized?", "هل حليبكم مبستر؟", "Votre lait est-il pasteurisé ?",
        "Yes, gently pasteurized at low temperature.", "نعم، مبستر بلطف على حرارة منخفضة.",
        "Oui, pasteurisé en douceur à basse température.",
    ),
]

DISCOUNT = {
    "title_en": "Summer offer",
    "title_ar": "عرض الصيف",
    "title_fr": "Offre d'été",
    "subtitle_en": "Two yogurt packs for the price of one",
    "subtitle_ar": "علبتان من الزبادي بثمن واحدة",
    "subtitle_fr": "Deux packs de yaourts pour le prix d'un",
    "price_text_en": "-50%",
    "price_text_ar": "-50%",
    "price_text_fr": "-50%",
    "is_active": False,
}


async def seed_table(client: CollectionClient, table: str, rows: list) -> list:
    """Insert rows into an empty table. Returns the created rows."""
    if await client.count(table) > 0:
        print(f"✓ {table} already has content, skipped")
        return []
    created = [await client.insert(table, row) for row in rows]
    print(f"✅ Created {len(created)} row(s) in {table}")
    return created


async def seed_all() -> None:
    client = CollectionClient(get_supabase_client())

    await seed_table(client, "site_settings", [SITE_SETTINGS])
    await seed_table(client, "banner_content", [BANNER])

    await seed_table(client, "products", [
        {
            "name_en": en, "name_ar": ar, "name_fr": fr,
            "description_en": description,
            "description_ar": description,
            "description_fr": description,
            "price": price,
            "show_in_gallery": gallery,
        }
        for en, ar, fr, description, price, gallery in PRODUCTS
    ])

    await seed_table(client, "facts_items", [
        {"icon_name": icon, "text_content_en": en, "text_content_ar": ar, "text_content_fr": fr, "order_index": index}
        for index, (icon, en, ar, fr) in enumerate(FACTS)
    ])

    await seed_table(client, "faq_items", [
        {
            "question_en": q_en, "question_ar": q_ar, "question_fr": q_fr,
            "answer_en": a_en, "answer_ar": a_ar, "answer_fr": a_fr,
            "order_index": index,
        }
        for index, (q_en, q_ar, q_fr, a_en, a_ar, a_fr) in enumerate(FAQ)
    ])

    discounts = await seed_table(client, "discounts", [DISCOUNT])
    if discounts:
        await set_active(client, "discounts", discounts[0]["id"])
        print("✅ Activated the seeded discount")

    print("\n🎉 Seed complete")


if __name__ == "__main__":
    asyncio.run(seed_all())
