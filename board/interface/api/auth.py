"""Request authentication helpers shared by the routes.

Authenticated routes run their checks in a fixed order: configuration,
then the ``Authorization`` header, then the request body, and only then
the remote session lookup.
"""

import json
import math
from typing import Any, Optional

import logfire
from fastapi import HTTPException, Request, status

from board.domain.error import AuthenticationError
from board.domain.model import SessionContext
from board.domain.service import SessionService, parse_bearer
from board.interface.error import InvalidBodyError
from board.util.error import ConfigurationError

SERVER_NOT_CONFIGURED = "Server is not configured correctly."
INVALID_JSON_BODY = "Invalid JSON body."


def require_store(session_service: SessionService, service_role: bool = False) -> None:
    """Fail with 500 when the store cannot be reached.

    Raises:
        HTTPException: 500 with a generic message; the detail is logged
    """
    try:
        session_service.require_configured(service_role=service_role)
    except ConfigurationError as e:
        logfire.error("Store is not configured", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=SERVER_NOT_CONFIGURED,
        )


def _unauthorized(e: AuthenticationError) -> HTTPException:
    logfire.warn("Authentication failed", error=str(e))
    return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))


def bearer_token(authorization: Optional[str]) -> str:
    """Extract the access token without contacting the store.

    Raises:
        HTTPException: 401 if the header is missing or malformed
    """
    try:
        return parse_bearer(authorization)
    except AuthenticationError as e:
        raise _unauthorized(e)


async def resolve_session(
    session_service: SessionService, access_token: str
) -> SessionContext:
    """Ask the store who the token belongs to.

    Raises:
        HTTPException: 401 if the token is expired or rejected
    """
    try:
        return await session_service.resolve(access_token)
    except AuthenticationError as e:
        raise _unauthorized(e)


async def require_session(
    session_service: SessionService, authorization: Optional[str]
) -> SessionContext:
    """Header check and session lookup, for routes with no body to validate."""
    return await resolve_session(session_service, bearer_token(authorization))


async def optional_session(
    session_service: SessionService, authorization: Optional[str]
) -> Optional[SessionContext]:
    """Resolve the session if the caller sent one; anonymous otherwise."""
    if not authorization:
        return None
    return await require_session(session_service, authorization)


async def read_json_object(request: Request) -> dict[str, Any]:
    """Read the request body as JSON.

    A body that parses to something other than an object is read as an
    empty object, so field checks report the missing field.

    Raises:
        InvalidBodyError: If the body is not JSON, or is ``null``
    """
    try:
        payload = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidBodyError(INVALID_JSON_BODY)
    if payload is None:
        raise InvalidBodyError(INVALID_JSON_BODY)
    if not isinstance(payload, dict):
        return {}
    return payload


def parse_numeric_id(value: Any) -> Optional[int]:
    """Read an id sent as a JSON number or a numeric string.

    Returns:
        The id, or None when missing, zero, non-numeric or fractional
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, str):
        try:
            value = float(value.strip() or "0")
        except ValueError:
            return None
    if not isinstance(value, (int, float)):
        return None
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            return None
        value = int(value)
    return value or None
