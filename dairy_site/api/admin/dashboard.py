"""
Back office landing pages: the dashboard and the home-page content hub.
"""

import logging

from fastapi import APIRouter, Request

from dairy_site.api.admin.crud import render_admin
from dairy_site.api.deps import Collections, Notify
from dairy_site.entities import BANNER_CONTENT, DASHBOARD_ENTITIES, DISCOUNTS, FARM_INFO_ITEMS, HERO_ITEMS
from dairy_site.services.collections import CollectionError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")

CONTENT_SECTIONS = (BANNER_CONTENT, HERO_ITEMS, FARM_INFO_ITEMS)


@router.get("")
async def dashboard(request: Request, client: Collections, notifier: Notify):
    """Row counts per collection plus the currently active discount."""
    stats = []
    failed = []
    for entity in DASHBOARD_ENTITIES:
        try:
            count = await client.count(entity.table)
        except CollectionError as e:
            logger.warning(f"Count of {entity.table} failed: {e}")
            failed.append(entity.label_plural)
            count = None
        stats.append({"entity": entity, "count": count})

    try:
        active_discount = await client.get_single(DISCOUNTS.table, filters={DISCOUNTS.active_field: True})
    except CollectionError as e:
        failed.append(DISCOUNTS.label_plural)
        logger.warning(f"Active discount lookup failed: {e}")
        active_discount = None

    if failed:
        notifier.notify("error", "Failed to load dashboard statistics", ", ".join(failed))

    return render_admin(request, "admin/dashboard.html", {"stats": stats, "active_discount": active_discount})


@router.get("/content")
async def content_hub(request: Request):
    return render_admin(request, "admin/content.html", {"sections": CONTENT_SECTIONS})
