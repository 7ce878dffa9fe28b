"""
Static interface strings (navigation, buttons, empty states) per language.

Content strings live in the database; this catalog only covers the chrome
around them. Lookups fall back to English, then to the key itself.
"""

from typing import Dict

MESSAGES: Dict[str, Dict[str, str]] = {
    "en": {
        "nav_home": "Home",
        "nav_products": "Products",
        "nav_distributors": "Distributors",
        "nav_recipes": "Recipes",
        "nav_blog": "Blog",
        "nav_about": "About Us",
        "nav_contact": "Contact",
        "language": "Language",
        "hero_cta": "Discover our products",
        "our_products": "Our Products",
        "our_recipes": "Delicious Recipes",
        "latest_posts": "Latest from our Blog",
        "faq_title": "Frequently Asked Questions",
        "facts_title": "Did you know?",
        "farm_info_title": "From our farm",
        "no_products": "No products available yet.",
        "no_recipes": "No recipes available yet.",
        "no_posts": "No blog posts published yet.",
        "no_distributors": "No distributors found.",
        "no_faq": "No questions yet.",
        "product_not_found": "Product not found",
        "product_not_found_desc": "The product you are looking for does not exist.",
        "recipe_not_found": "Recipe not found",
        "recipe_not_found_desc": "The recipe you are looking for does not exist.",
        "post_not_found": "Blog post not found",
        "post_not_found_desc": "The article you are looking for does not exist.",
        "page_not_found": "Oops! Page not found",
        "page_not_found_desc": "The page you are looking for does not exist or has been moved.",
        "back_home": "Return to Home",
        "back_to_products": "Back to products",
        "back_to_recipes": "Back to recipes",
        "back_to_blog": "Back to blog",
        "read_more": "Read more",
        "view_recipe": "View recipe",
        "ingredients": "Ingredients",
        "preparation": "Preparation",
        "price": "Price",
        "search_distributors": "Search distributors...",
        "contact_us": "Contact Us",
        "email": "Email",
        "phone": "Phone",
        "address": "Address",
        "send_us_message": "Send us a message",
        "your_name": "Your name",
        "your_email": "Your email",
        "your_message": "Your message",
        "send_message": "Send message",
        "contact_sent": "Your message has been sent!",
        "contact_sent_desc": "We will get back to you shortly.",
        "about_title": "About ARIB Dairy",
        "close": "Close",
        "shop_now": "Shop now",
        "invalid_icon": "Invalid icon",
        "no_logo": "No Logo",
        "all_rights_reserved": "All rights reserved.",
    },
    "ar": {
        "nav_home": "الرئيسية",
        "nav_products": "المنتجات",
        "nav_distributors": "الموزعون",
        "nav_recipes": "الوصفات",
        "nav_blog": "المدونة",
        "nav_about": "من نحن",
        "nav_contact": "اتصل بنا",
        "language": "اللغة",
        "hero_cta": "اكتشف منتجاتنا",
        "our_products": "منتجاتنا",
        "our_recipes": "وصفات لذيذة",
        "latest_posts": "أحدث المقالات",
        "faq_title": "الأسئلة الشائعة",
        "facts_title": "هل تعلم؟",
        "farm_info_title": "من مزرعتنا",
        "no_products": "لا توجد منتجات بعد.",
        "no_recipes": "لا توجد وصفات بعد.",
        "no_posts": "لا توجد مقالات منشورة بعد.",
        "no_distributors": "لم يتم العثور على موزعين.",
        "no_faq": "لا توجد أسئلة بعد.",
        "product_not_found": "المنتج غير موجود",
        "product_not_found_desc": "المنتج الذي تبحث عنه غير موجود.",
        "recipe_not_found": "الوصفة غير موجودة",
        "recipe_not_found_desc": "الوصفة التي تبحث عنها غير موجودة.",
        "post_not_found": "المقال غير موجود",
        "post_not_found_desc": "المقال الذي تبحث عنه غير موجود.",
        "page_not_found": "عذرًا! الصفحة غير موجودة",
        "page_not_found_desc": "الصفحة التي تبحث عنها غير موجودة أو تم نقلها.",
        "back_home": "العودة إلى الرئيسية",
        "back_to_products": "العودة إلى المنتجات",
        "back_to_recipes": "العودة إلى الوصفات",
        "back_to_blog": "العودة إلى المدونة",
        "read_more": "اقرأ المزيد",
        "view_recipe": "عرض الوصفة",
        "ingredients": "المكونات",
        "preparation": "طريقة التحضير",
        "price": "السعر",
        "search_distributors": "ابحث عن موزع...",
        "contact_us": "اتصل بنا",
        "email": "البريد الإلكتروني",
        "phone": "الهاتف",
        "address": "العنوان",
        "send_us_message": "أرسل لنا رسالة",
        "your_name": "اسمك",
        "your_email": "بريدك الإلكتروني",
        "your_message": "رسالتك",
        "send_message": "إرسال",
        "contact_sent": "تم إرسال رسالتك!",
        "contact_sent_desc": "سنتواصل معك قريبًا.",
        "about_title": "عن ألبان عريب",
        "close": "إغلاق",
        "shop_now": "تسوق الآن",
        "invalid_icon": "أيقونة غير صالحة",
        "no_logo": "لا يوجد شعار",
        "all_rights_reserved": "جميع الحقوق محفوظة.",
    },
    "fr": {
        "nav_home": "Accueil",
        "nav_products": "Produits",
        "nav_distributors": "Distributeurs",
        "nav_recipes": "Recettes",
        "nav_blog": "Blog",
        "nav_about": "À propos",
        "nav_contact": "Contact",
        "language": "Langue",
        "hero_cta": "Découvrez nos produits",
        "our_products": "Nos produits",
        "our_recipes": "Recettes délicieuses",
        "latest_posts": "Derniers articles",
        "faq_title": "Questions fréquentes",
        "facts_title": "Le saviez-vous ?",
        "farm_info_title": "De notre ferme",
        "no_products": "Aucun produit pour le moment.",
        "no_recipes": "Aucune recette pour le moment.",
        "no_posts": "Aucun article publié pour le moment.",
        "no_distributors": "Aucun distributeur trouvé.",
        "no_faq": "Aucune question pour le moment.",
        "product_not_found": "Produit introuvable",
        "product_not_found_desc": "Le produit que vous cherchez n'existe pas.",
        "recipe_not_found": "Recette introuvable",
        "recipe_not_found_desc": "La recette que vous cherchez n'existe pas.",
        "post_not_found": "Article introuvable",
        "post_not_found_desc": "L'article que vous cherchez n'existe pas.",
        "page_not_found": "Oups ! Page introuvable",
        "page_not_found_desc": "La page que vous cherchez n'existe pas ou a été déplacée.",
        "back_home": "Retour à l'accueil",
        "back_to_products": "Retour aux produits",
        "back_to_recipes": "Retour aux recettes",
        "back_to_blog": "Retour au blog",
        "read_more": "Lire la suite",
        "view_recipe": "Voir la recette",
        "ingredients": "Ingrédients",
        "preparation": "Préparation",
        "price": "Prix",
        "search_distributors": "Rechercher un distributeur...",
        "contact_us": "Contactez-nous",
        "email": "E-mail",
        "phone": "Téléphone",
        "address": "Adresse",
        "send_us_message": "Envoyez-nous un message",
        "your_name": "Votre nom",
        "your_email": "Votre e-mail",
        "your_message": "Votre message",
        "send_message": "Envoyer",
        "contact_sent": "Votre message a été envoyé !",
        "contact_sent_desc": "Nous vous répondrons rapidement.",
        "about_title": "À propos d'ARIB Dairy",
        "close": "Fermer",
        "shop_now": "Acheter",
        "invalid_icon": "Icône invalide",
        "no_logo": "Pas de logo",
        "all_rights_reserved": "Tous droits réservés.",
    },
}


def translate(key: str, language: str, **params) -> str:
    message = MESSAGES.get(language, {}).get(key) or MESSAGES["en"].get(key) or key
    if params:
        return message.format(**params)
    return message
