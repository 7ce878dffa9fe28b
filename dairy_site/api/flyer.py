"""
Floating discount flyer.

Dismissing the flyer stores the discount id in a cookie; the flyer stays
hidden until a different discount becomes active.
"""

from urllib.parse import urlparse

from fastapi import APIRouter, Form, Request, status
from fastapi.responses import RedirectResponse

from dairy_site.api.public import FLYER_COOKIE

router = APIRouter()

FLYER_COOKIE_MAX_AGE = 60 * 60 * 24 * 365


def _back_to(request: Request) -> str:
    """Same-site referer path, or the home page."""
    referer = request.headers.get("referer")
    if not referer:
        return "/"
    parsed = urlparse(referer)
    if parsed.netloc and parsed.netloc != request.url.netloc:
        return "/"
    path = parsed.path or "/"
    if not path.startswith("/") or path.startswith("//") or "\\" in path:
        return "/"
    return f"{path}?{parsed.query}" if parsed.query else path


@router.post("/dismiss")
async def dismiss_flyer(request: Request, discount_id: str = Form(...)):
    response = RedirectResponse(_back_to(request), status_code=status.HTTP_303_SEE_OTHER)
    response.set_cookie(FLYER_COOKIE, discount_id, max_age=FLYER_COOKIE_MAX_AGE, samesite="lax")
    return response
