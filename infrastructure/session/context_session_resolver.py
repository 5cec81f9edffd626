from __future__ import annotations

from contextvars import ContextVar, Token
from dataclasses import dataclass

from application.ports.session_resolver import SessionResolver
from domain.value_objects.identity import Identity


@dataclass(frozen=True)
class SessionContext:
    identity: Identity | None = None
    role: str | None = None


_current_session: ContextVar[SessionContext] = ContextVar(
    "current_session",
    default=SessionContext(),
)


def bind_session(identity: Identity | None, role: str | None) -> Token[SessionContext]:
    """Bind the caller of the current request; returns the token for ``reset_session``."""
    return _current_session.set(SessionContext(identity=identity, role=role))


def reset_session(token: Token[SessionContext]) -> None:
    _current_session.reset(token)


class ContextSessionResolver(SessionResolver):
    """Resolve the caller from the session bound to the current context."""

    async def current_identity(self) -> Identity | None:
        return _current_session.get().identity

    async def current_role(self) -> str | None:
        return _current_session.get().role
