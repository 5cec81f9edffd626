from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import structlog
from returns.result import Failure, Result, Success

from application.dtos.errors import AppError
from application.dtos.title_dtos import TITLE_NOT_ALLOWED, TITLE_UNAUTHORIZED
from domain.value_objects.severity import Severity
from domain.value_objects.user_role import UserRole

if TYPE_CHECKING:
    from collections.abc import Mapping

    from application.ports.lifecycle_logger import LifecycleLogger
    from application.ports.session_resolver import SessionResolver
    from domain.value_objects.identity import Identity

logger = structlog.get_logger()


@dataclass(frozen=True)
class AccessGrant:
    identity: Identity
    role: str

    @property
    def user_id(self) -> str:
        return self.identity.user_id


class AdminAccessPolicy:
    """Allow an operation only for an authenticated administrator.

    The identity is checked first, then the role. The role is read from the
    session even when no identity is present. A rejection emits exactly one
    ``<action>_unauthorized`` or ``<action>_not_allowed`` lifecycle event.
    """

    def __init__(
        self,
        session_resolver: SessionResolver,
        lifecycle_logger: LifecycleLogger,
    ) -> None:
        self._session_resolver = session_resolver
        self._lifecycle_logger = lifecycle_logger

    async def authorize(
        self,
        action: str,
        target: Mapping[str, Any],
    ) -> Result[AccessGrant, AppError]:
        identity = await self._session_resolver.current_identity()
        role = await self._session_resolver.current_role()

        if identity is None:
            self._lifecycle_logger.log(f"{action}_unauthorized", dict(target), Severity.ERROR)
            return Failure(AppError("unauthorized", TITLE_UNAUTHORIZED))

        if role != UserRole.ADMIN.value:
            self._lifecycle_logger.log(
                f"{action}_not_allowed",
                {"user_id": identity.user_id, "role": role, **target},
                Severity.ERROR,
            )
            return Failure(AppError("forbidden", TITLE_NOT_ALLOWED))

        logger.debug("admin_access_granted", action=action, user_id=identity.user_id)
        return Success(AccessGrant(identity=identity, role=role))
