"""
ARIB Dairy website - Main application entry point.

Public multilingual site (English / Arabic / French) and the content back
office, rendered server-side over the Supabase tables.
"""

import logging
from contextlib import asynccontextmanager
from urllib.parse import quote

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.sessions import SessionMiddleware

from dairy_site.api import admin, auth, flyer, public
from dairy_site.api.deps import LoginRequired
from dairy_site.config import PACKAGE_DIR, get_settings
from dairy_site.services.backend import BackendNotConfigured
from dairy_site.web.templating import render

settings = get_settings()

logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info(f"Starting {settings.app_name}...")
    if not settings.supabase_key and not settings.supabase_service_role_key:
        logger.warning("No Supabase key configured; pages that need the backend will answer 503")
    yield
    logger.info(f"Shutting down {settings.app_name}...")


app = FastAPI(
    title=settings.app_name,
    description="ARIB Dairy public website and content back office.",
    version="1.0.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url=None,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Signed cookie session: admin tokens + pending toasts
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.session_secret,
    max_age=settings.session_max_age,
    same_site="lax",
    https_only=settings.session_https_only,
)

app.mount("/static", StaticFiles(directory=str(PACKAGE_DIR / "static")), name="static")


@app.exception_handler(LoginRequired)
async def login_required_handler(request: Request, exc: LoginRequired):
    return RedirectResponse(f"/admin/login?next={quote(exc.next_path)}", status_code=status.HTTP_303_SEE_OTHER)


@app.exception_handler(BackendNotConfigured)
async def backend_not_configured_handler(request: Request, exc: BackendNotConfigured):
    logger.error(f"{request.method} {request.url.path}: {exc}")
    return render(
        request,
        "public/error.html",
        {"status_code": 503, "detail": "Service temporarily unavailable"},
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == status.HTTP_404_NOT_FOUND:
        context = {
            "title_key": "page_not_found",
            "message_key": "page_not_found_desc",
            "back_url": "/",
            "back_key": "back_home",
        }
        return render(request, "public/not_found.html", context, status_code=404)
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.detail}")
    return render(
        request,
        "public/error.html",
        {"status_code": exc.status_code, "detail": exc.detail},
        status_code=exc.status_code,
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "supabase": "configured" if settings.supabase_key or settings.supabase_service_role_key else "not_configured",
    }


# Include routers (the public catch-all 404 route goes last)
app.include_router(auth.router, prefix="/admin", tags=["Authentication"])
app.include_router(admin.router, tags=["Back office"])
app.include_router(flyer.router, prefix="/flyer", tags=["Flyer"])
app.include_router(public.router, tags=["Public site"])
