"""
Toast notifications.

Handlers publish through the ``Notifier`` interface they are given; the
production implementation queues toasts in the signed session cookie and the
next rendered page shows them (Post/Redirect/Get).
"""

from typing import Dict, List, Optional, Protocol

from starlette.requests import Request

TOASTS_SESSION_KEY = "toasts"

LEVELS = ("success", "error", "info", "warning")


class Notifier(Protocol):
    def notify(self, level: str, message: str, description: Optional[str] = None) -> None:
        ...


class SessionNotifier:
    """Queues toasts in ``request.session`` until the next render pops them."""

    def __init__(self, request: Request):
        self.request = request

    def notify(self, level: str, message: str, description: Optional[str] = None) -> None:
        if level not in LEVELS:
            level = "info"
        toasts = list(self.request.session.get(TOASTS_SESSION_KEY, []))
        toasts.append({"level": level, "message": message, "description": description})
        self.request.session[TOASTS_SESSION_KEY] = toasts


def pop_toasts(request: Request) -> List[Dict[str, Optional[str]]]:
    if "session" not in request.scope:
        return []
    return request.session.pop(TOASTS_SESSION_KEY, [])
