"""
Admin authentication against Supabase Auth.

The access and refresh tokens returned by ``sign_in_with_password`` are kept
in the signed session cookie. Every admin request verifies the access token
locally (ES256 through the project JWKS, or HS256 with the legacy JWT
secret) and refreshes it once when it has expired.
"""

import base64
import json
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import httpx
from jose import ExpiredSignatureError, JWTError, jwk, jwt
from starlette.concurrency import run_in_threadpool
from starlette.requests import Request
from supabase import Client

from dairy_site.config import Settings, get_settings
from dairy_site.services.backend import get_anon_client

logger = logging.getLogger(__name__)

SESSION_KEY = "admin_session"

# Cache for JWKS keys
_jwks_cache: dict = {}


class AuthenticationError(Exception):
    """Sign-in rejected or the stored session can no longer be used."""


@dataclass
class AdminUser:
    id: str
    email: Optional[str] = None


# ============================================================================
# Token verification
# ============================================================================

def get_jwks_keys(supabase_url: str) -> dict:
    """
    Fetch JWKS keys from Supabase.
    Keys are cached to avoid repeated HTTP requests.
    """
    global _jwks_cache

    if not _jwks_cache:
        try:
            jwks_url = f"{supabase_url}/auth/v1/.well-known/jwks.json"
            response = httpx.get(jwks_url, timeout=10.0)
            response.raise_for_status()
            _jwks_cache = response.json()
        except httpx.HTTPError as e:
            logger.error(f"[JWKS] Error fetching keys: {e}")
            return {}

    return _jwks_cache


def _token_header(token: str) -> dict:
    header_segment = token.split(".")[0]
    # Add padding if necessary
    padding = 4 - len(header_segment) % 4
    if padding != 4:
        header_segment += "=" * padding
    return json.loads(base64.urlsafe_b64decode(header_segment))


def decode_token(token: str, settings: Optional[Settings] = None) -> Optional[dict]:
    """
    Verify a Supabase access token and return its claims, or None.

    Raises ExpiredSignatureError for a well-signed but expired token so the
    caller can try a refresh.
    """
    settings = settings or get_settings()

    try:
        header = _token_header(token)
    except (ValueError, IndexError) as e:
        logger.debug(f"[JWT] Error parsing header: {e}")
        return None
    alg = header.get("alg", "HS256")
    kid = header.get("kid")

    if alg == "ES256":
        jwks = get_jwks_keys(settings.supabase_url)
        keys = jwks.get("keys", [])
        key_data = next((k for k in keys if kid and k.get("kid") == kid), None)
        if not key_data and keys:
            key_data = keys[0]
        if key_data:
            try:
                public_key = jwk.construct(key_data)
                return jwt.decode(token, public_key, algorithms=["ES256"], options={"verify_aud": False})
            except ExpiredSignatureError:
                raise
            except JWTError as e:
                logger.debug(f"[JWT] ES256 decode error: {e}")
        return None

    if settings.supabase_jwt_secret:
        try:
            return jwt.decode(
                token,
                settings.supabase_jwt_secret,
                algorithms=["HS256"],
                options={"verify_aud": False},
            )
        except ExpiredSignatureError:
            raise
        except JWTError as e:
            logger.debug(f"[JWT] HS256 decode error: {e}")

    return None


# ============================================================================
# Session handling
# ============================================================================

def _session_from_response(response: Any) -> Dict[str, Optional[str]]:
    session = response.session
    user = response.user or session.user
    return {
        "access_token": session.access_token,
        "refresh_token": session.refresh_token,
        "user_id": str(user.id),
        "email": user.email,
    }


async def sign_in(email: str, password: str) -> Dict[str, Optional[str]]:
    """Password sign-in. Raises AuthenticationError on any rejection."""
    client = get_anon_client()
    try:
        response = await run_in_threadpool(
            client.auth.sign_in_with_password,
            {"email": email, "password": password},
        )
    except Exception as e:
        # gotrue raises its own error types depending on the installed version
        logger.info(f"Sign-in failed for {email}: {e}")
        raise AuthenticationError("Invalid email or password") from e

    if not response or not response.session:
        raise AuthenticationError("Invalid email or password")

    logger.info(f"Admin signed in: {email}")
    return _session_from_response(response)


async def refresh(refresh_token: str) -> Dict[str, Optional[str]]:
    client = get_anon_client()
    try:
        response = await run_in_threadpool(client.auth.refresh_session, refresh_token)
    except Exception as e:
        raise AuthenticationError("Session expired") from e
    if not response or not response.session:
        raise AuthenticationError("Session expired")
    return _session_from_response(response)


async def sign_out(client: Client, access_token: Optional[str]) -> None:
    """Revoke the refresh tokens of the session. The cookie is cleared by the caller."""
    if not access_token:
        return
    try:
        await run_in_threadpool(client.auth.admin.sign_out, access_token)
    except Exception as e:
        logger.warning(f"Sign-out call failed: {e}")


def store_session(request: Request, session: Dict[str, Optional[str]]) -> None:
    request.session[SESSION_KEY] = session


def clear_session(request: Request) -> None:
    request.session.pop(SESSION_KEY, None)


async def current_admin(request: Request) -> Optional[AdminUser]:
    """The signed-in admin of this request, refreshing an expired token once."""
    session = request.session.get(SESSION_KEY)
    if not session or not session.get("access_token"):
        return None

    try:
        claims = decode_token(session["access_token"])
    except ExpiredSignatureError:
        try:
            session = await refresh(session.get("refresh_token") or "")
        except AuthenticationError:
            clear_session(request)
            return None
        store_session(request, session)
        return AdminUser(id=session["user_id"], email=session.get("email"))

    if not claims or not claims.get("sub"):
        clear_session(request)
        return None
    return AdminUser(id=claims["sub"], email=claims.get("email"))


# ============================================================================
# Users
# ============================================================================

async def list_users(client: Client) -> List[Dict[str, Any]]:
    """Admin API: every registered user, newest first."""
    users = await run_in_threadpool(client.auth.admin.list_users)
    rows = [
        {
            "id": str(user.id),
            "email": user.email,
            "created_at": user.created_at,
            "last_sign_in_at": user.last_sign_in_at,
        }
        for user in users
    ]
    rows.sort(key=lambda row: str(row["created_at"] or ""), reverse=True)
    return rows
