"""
Shared FastAPI dependencies: container and caller identity.
"""

import logging
from uuid import UUID

from fastapi import Depends, Header, Request
from sqlalchemy.ext.asyncio import AsyncSession

from backoffice.core.container import DependencyContainer
from backoffice.core.domain import AuthorizationException
from backoffice.database.async_db import get_async_db
from backoffice.domains.orders.domain.value_objects import CurrentUser

logger = logging.getLogger(__name__)


def get_container(request: Request) -> DependencyContainer:
    """Get the application's dependency container."""
    return request.app.state.container


async def get_current_user(
    x_user_id: str | None = Header(default=None),
    db: AsyncSession = Depends(get_async_db),
    container: DependencyContainer = Depends(get_container),
) -> CurrentUser:
    """
    Resolve the caller from the X-User-Id header set by the auth layer.

    Raises:
        AuthorizationException: header missing, malformed or unknown user
    """
    if not x_user_id:
        raise AuthorizationException("authenticate")
    try:
        user_id = UUID(x_user_id.strip())
    except ValueError as e:
        raise AuthorizationException("authenticate") from e

    user = await container.orders.create_user_repository(db).get_current_user(user_id)
    if user is None:
        logger.warning(f"Unknown user id in request header: {user_id}")
        raise AuthorizationException("authenticate", user_id=str(user_id))
    return user


async def require_admin(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    if not user.is_admin:
        raise AuthorizationException("admin_access", user_id=str(user.id))
    return user


__all__ = ["get_container", "get_current_user", "require_admin"]
