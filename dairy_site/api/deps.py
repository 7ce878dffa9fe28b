"""
FastAPI dependencies: backend clients, notifier, language and the admin guard.
Tests replace these through ``app.dependency_overrides``.
"""

from typing import Annotated

from fastapi import Depends, Request
from supabase import Client

from dairy_site.services.auth import AdminUser, current_admin
from dairy_site.services.backend import get_supabase_client
from dairy_site.services.collections import CollectionClient
from dairy_site.services.notifications import Notifier, SessionNotifier
from dairy_site.services.storage import StorageClient
from dairy_site.web.templating import request_language


class LoginRequired(Exception):
    """Raised by the admin guard; turned into a redirect to the login page."""

    def __init__(self, next_path: str = "/admin"):
        super().__init__(next_path)
        self.next_path = next_path


def get_backend() -> Client:
    return get_supabase_client()


def get_collection_client(backend: Annotated[Client, Depends(get_backend)]) -> CollectionClient:
    return CollectionClient(backend)


def get_storage(backend: Annotated[Client, Depends(get_backend)]) -> StorageClient:
    return StorageClient(backend)


def get_notifier(request: Request) -> Notifier:
    return SessionNotifier(request)


def get_language(request: Request) -> str:
    return request_language(request)


async def get_current_admin(request: Request) -> AdminUser:
    """
    Dependency for every admin page: the signed-in user, or a redirect to
    the login page.
    """
    user = await current_admin(request)
    if user is None:
        raise LoginRequired(request.url.path)
    request.state.admin = user
    return user


# Type aliases for cleaner dependency injection
Backend = Annotated[Client, Depends(get_backend)]
Collections = Annotated[CollectionClient, Depends(get_collection_client)]
Storage = Annotated[StorageClient, Depends(get_storage)]
Notify = Annotated[Notifier, Depends(get_notifier)]
Language = Annotated[str, Depends(get_language)]
CurrentAdmin = Annotated[AdminUser, Depends(get_current_admin)]
