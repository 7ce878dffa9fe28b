"""
Admin login and logout.
"""

from fastapi import APIRouter, Request, status
from fastapi.responses import RedirectResponse

from dairy_site.api.deps import Backend, Notify
from dairy_site.schemas import LoginForm, validate
from dairy_site.services import auth
from dairy_site.web.templating import render

router = APIRouter()


def _safe_next(next_path: str) -> str:
    """Only local admin paths are followed after login."""
    if next_path.startswith("/admin") and not next_path.startswith("//"):
        return next_path
    return "/admin"


@router.get("/login")
async def login_page(request: Request, next: str = "/admin"):
    if await auth.current_admin(request):
        return RedirectResponse(_safe_next(next), status_code=status.HTTP_303_SEE_OTHER)
    return render(request, "admin/login.html", {"values": {}, "errors": {}, "next": _safe_next(next)})


@router.post("/login")
async def login(request: Request, notifier: Notify):
    form = await request.form()
    values = {"email": str(form.get("email", "")).strip(), "password": str(form.get("password", ""))}
    next_path = _safe_next(str(form.get("next", "/admin")))

    result = validate(LoginForm, values)
    if not result.valid:
        context = {"values": {"email": values["email"]}, "errors": result.errors, "next": next_path}
        return render(request, "admin/login.html", context, status_code=status.HTTP_422_UNPROCESSABLE_ENTITY)

    try:
        session = await auth.sign_in(result.value["email"], result.value["password"])
    except auth.AuthenticationError as e:
        notifier.notify("error", "Login failed", str(e))
        context = {"values": {"email": values["email"]}, "errors": {}, "next": next_path}
        return render(request, "admin/login.html", context, status_code=status.HTTP_401_UNAUTHORIZED)

    auth.store_session(request, session)
    notifier.notify("success", "Welcome back", session.get("email"))
    return RedirectResponse(next_path, status_code=status.HTTP_303_SEE_OTHER)


@router.post("/logout")
async def logout(request: Request, backend: Backend, notifier: Notify):
    session = request.session.get(auth.SESSION_KEY) or {}
    await auth.sign_out(backend, session.get("access_token"))
    auth.clear_session(request)
    notifier.notify("info", "Signed out")
    return RedirectResponse("/admin/login", status_code=status.HTTP_303_SEE_OTHER)
