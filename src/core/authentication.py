"""Request authentication gate for protected handlers.

Protected views call :func:`authenticate_request` first. It reads the bearer
token, verifies it, and attaches the resulting :class:`Principal` to the
request. It performs no resource-specific checks; ownership is enforced by the
services.
"""

import logging
from dataclasses import dataclass
from typing import Any, Optional, Protocol

from .exceptions import TokenRejected

logger = logging.getLogger(__name__)


class TokenVerifier(Protocol):
    def verify(self, token: str) -> dict[str, Any]: ...


@dataclass(frozen=True)
class Principal:
    """Authenticated identity for the lifetime of one request."""

    user_id: int


def get_bearer_token(request) -> Optional[str]:
    """Extract the Bearer token from the Authorization header if present."""
    auth_header = request.META.get("HTTP_AUTHORIZATION", "")
    scheme, _, token = auth_header.partition(" ")
    if scheme != "Bearer" or not token.strip():
        return None
    return token.strip()


def authenticate_request(request, tokens: Optional[TokenVerifier] = None) -> Principal:
    """Verify the request's bearer token and attach the principal.

    Sets ``request.principal`` and ``request.user_id``. Raises
    :class:`TokenRejected` (401) when the header is missing, the token fails
    verification, or the payload carries no user id.
    """

    token = get_bearer_token(request)
    if token is None:
        raise TokenRejected("Missing bearer token")

    if tokens is None:
        from authentication.services import get_token_service

        tokens = get_token_service()

    try:
        payload = tokens.verify(token)
    except TokenRejected:
        logger.info("Rejected bearer token on %s", getattr(request, "path", ""))
        raise
    except Exception as exc:
        logger.info("Token verification failed on %s", getattr(request, "path", ""))
        raise TokenRejected("Invalid token") from exc

    user_id = payload.get("id")
    if isinstance(user_id, bool) or not isinstance(user_id, int):
        raise TokenRejected("Token payload has no user id")

    principal = Principal(user_id=user_id)
    request.principal = principal
    request.user_id = user_id
    # DRF's Request proxies attribute reads to the wrapped HttpRequest; keep
    # both in sync so either object exposes the principal.
    django_request = getattr(request, "_request", None)
    if django_request is not None:
        django_request.principal = principal
        django_request.user_id = user_id
    return principal


__all__ = ["Principal", "authenticate_request", "get_bearer_token"]
