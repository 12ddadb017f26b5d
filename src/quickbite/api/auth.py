"""Caller resolution for the HTTP API.

The caller names themselves with the ``X-User-Id`` header. There are no
sessions or tokens; resolving the header to a stored user is all the
authentication this service does.
"""

from fastapi import Depends, Header
from protean.exceptions import ObjectNotFoundError

from quickbite.exceptions import Forbidden, Unauthorized
from quickbite.identity.registration import get_user
from quickbite.identity.user import User


def _resolve(x_user_id: str | None) -> User | None:
    if x_user_id is None or not x_user_id.strip():
        return None
    try:
        return get_user(int(x_user_id))
    except (ValueError, ObjectNotFoundError):
        raise Unauthorized("Unknown user") from None


async def optional_user(x_user_id: str | None = Header(default=None)) -> User | None:
    return _resolve(x_user_id)


async def current_user(x_user_id: str | None = Header(default=None)) -> User:
    user = _resolve(x_user_id)
    if user is None:
        raise Unauthorized("Not authenticated")
    return user


async def require_admin(user: User = Depends(current_user)) -> User:
    if not user.is_admin:
        raise Forbidden("Admin access required")
    return user
