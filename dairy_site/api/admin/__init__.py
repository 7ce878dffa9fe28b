"""
Back office routes, all behind the admin guard.
"""

from fastapi import APIRouter, Depends

from dairy_site.api.admin import dashboard, users
from dairy_site.api.admin.crud import build_collection_router, build_singleton_router
from dairy_site.api.deps import get_current_admin
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
)

router = APIRouter(dependencies=[Depends(get_current_admin)])

router.include_router(dashboard.router)
router.include_router(users.router)

for entity in (PRODUCTS, RECIPES, DISTRIBUTORS, BLOG_POSTS, FAQ_ITEMS, FACTS_ITEMS, DISCOUNTS, HERO_ITEMS, FARM_INFO_ITEMS):
    router.include_router(build_collection_router(entity), prefix=entity.admin_path)

for entity in (BANNER_CONTENT, SITE_SETTINGS):
    router.include_router(build_singleton_router(entity), prefix=entity.admin_path)
