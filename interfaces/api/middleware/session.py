"""Bind the caller forwarded by the authentication gateway to the request context."""

from collections.abc import Awaitable, Callable

import structlog
from fastapi import Request, Response
from pydantic import ValidationError

from domain.value_objects.identity import Identity
from infrastructure.session.context_session_resolver import bind_session, reset_session

logger = structlog.get_logger()

USER_ID_HEADER = "X-User-Id"
USER_EMAIL_HEADER = "X-User-Email"
USER_ROLE_HEADER = "X-User-Role"


def identity_from_headers(request: Request) -> Identity | None:
    user_id = request.headers.get(USER_ID_HEADER)
    if not user_id:
        return None
    try:
        return Identity(user_id=user_id, email=request.headers.get(USER_EMAIL_HEADER))
    except ValidationError:
        logger.warning("session_identity_invalid", path=request.url.path)
        return None


async def session_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    identity = identity_from_headers(request)
    role = request.headers.get(USER_ROLE_HEADER) or None

    token = bind_session(identity, role)
    structlog.contextvars.bind_contextvars(user_id=identity.user_id if identity else None)
    try:
        return await call_next(request)
    finally:
        structlog.contextvars.unbind_contextvars("user_id")
        reset_session(token)
