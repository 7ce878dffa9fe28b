"""
Registered back office users (read-only; accounts are managed in Supabase).
"""

import logging

from fastapi import APIRouter, Request

from dairy_site.api.admin.crud import render_admin
from dairy_site.api.deps import Backend, Notify
from dairy_site.services.auth import list_users

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin")


@router.get("/users")
async def users_page(request: Request, backend: Backend, notifier: Notify):
    try:
        users = await list_users(backend)
    except Exception as e:
        # gotrue admin errors have no stable import path across versions
        logger.error(f"Listing users failed: {e}")
        notifier.notify("error", "Failed to load users", str(e))
        users = []
    return render_admin(request, "admin/users.html", {"users": users})
