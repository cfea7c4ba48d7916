"""Error taxonomy and the exception handler enforcing the API error envelope."""

from typing import Any

from django.conf import settings
from rest_framework import status
from rest_framework.exceptions import APIException, AuthenticationFailed, NotAuthenticated
from rest_framework.response import Response
from rest_framework.views import exception_handler as drf_exception_handler


class BadRequest(APIException):
    """Malformed input such as an invalid date filter or bad credentials."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Bad request."
    default_code = "bad_request"


class Unauthorized(APIException):
    """Missing/invalid bearer token, or the caller does not own the resource."""

    status_code = status.HTTP_401_UNAUTHORIZED
    default_detail = "Unauthorized."
    default_code = "unauthorized"


class TokenRejected(Unauthorized):
    """Raised by the request gate when a bearer token is missing or invalid."""

    default_detail = "Invalid or missing bearer token."


class NotFound(APIException):
    """The referenced resource does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Not found."
    default_code = "not_found"


class Conflict(APIException):
    """The resource collides with an existing one (e.g. email in use)."""

    status_code = status.HTTP_409_CONFLICT
    default_detail = "Conflict."
    default_code = "conflict"


# Token-gate failures share one generic message unless DEBUG_AUTH_ERRORS is on;
# ownership failures keep their specific message.
GENERIC_AUTH_ERROR = "Authentication credentials were not provided or are invalid."


def _normalize_errors(payload: Any) -> list[Any]:
    """Convert DRF's response.data into a list for the envelope."""

    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict) and "detail" in payload:
        # Common DRF pattern: {"detail": "..."}
        return [payload["detail"]]
    return [payload]


def _error_code(exc: Exception, status_code: int) -> str:
    """Return a stable, machine-readable code for the error."""

    default_code = getattr(exc, "default_code", None)
    if isinstance(default_code, str):
        if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
            return Unauthorized.default_code
        return default_code
    if status_code == status.HTTP_404_NOT_FOUND:
        return NotFound.default_code
    return "error"


def custom_exception_handler(exc: Exception, context: dict[str, Any]) -> Response | None:
    """Wrap DRF errors in `{ "data": null, "errors": [...], "code": ... }` shape.

    - Uses DRF's default handler to produce the base response.
    - Normalizes DRF's own auth failures to 401 and the ``unauthorized`` code.
    - Anything DRF does not recognize (database or Redis outages) is left
      untouched and propagates.
    """

    response = drf_exception_handler(exc, context)

    if response is None:
        return response

    if isinstance(exc, (AuthenticationFailed, NotAuthenticated)):
        response.status_code = status.HTTP_401_UNAUTHORIZED

    if response.status_code >= 400:
        errors = _normalize_errors(response.data)
        if (
            isinstance(exc, (AuthenticationFailed, NotAuthenticated, TokenRejected))
            and not getattr(settings, "DEBUG_AUTH_ERRORS", False)
        ):
            errors = [GENERIC_AUTH_ERROR]

        response.data = {
            "data": None,
            "errors": errors,
            "code": _error_code(exc, response.status_code),
        }

    return response


__all__ = [
    "BadRequest",
    "Conflict",
    "NotFound",
    "TokenRejected",
    "Unauthorized",
    "custom_exception_handler",
]
