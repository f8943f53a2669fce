"""
Caller identity resolution and role gating.

Credentials are verified upstream. The authenticating gateway forwards the
username and role in request headers (names set by ``AuthSettings``), and
these dependencies turn them into a ``CallerIdentity``.
"""

from collections.abc import Callable

from fastapi import Depends, Request

from stockroom.config import get_logger, get_settings
from stockroom.core.entities.caller import CallerIdentity, Role
from stockroom.core.exceptions import AuthenticationRequiredError, ForbiddenError

logger = get_logger(__name__)


def get_caller_identity(request: Request) -> CallerIdentity | None:
    """Identity forwarded with the request, or None when absent."""
    auth = get_settings().auth
    username = (request.headers.get(auth.user_header) or "").strip()
    if not username:
        return None

    role_value = (request.headers.get(auth.role_header) or Role.STAFF.value).strip().upper()
    try:
        role = Role(role_value)
    except ValueError:
        logger.warning("unknown_caller_role", username=username, role=role_value)
        raise ForbiddenError(f"Unknown role: {role_value}", username=username)
    return CallerIdentity(username=username, role=role)


def require_caller(
    caller: CallerIdentity | None = Depends(get_caller_identity),
) -> CallerIdentity:
    """Reject anonymous requests."""
    if caller is None:
        raise AuthenticationRequiredError()
    return caller


def require_roles(*roles: Role) -> Callable[..., CallerIdentity]:
    """Build a dependency admitting only callers holding one of ``roles``."""
    allowed = ", ".join(r.value for r in roles)

    def dependency(caller: CallerIdentity = Depends(require_caller)) -> CallerIdentity:
        if not caller.has_role(*roles):
            raise ForbiddenError(
                f"Access denied. Required role: {allowed}",
                username=caller.username,
            )
        return caller

    return dependency


require_admin = require_roles(Role.ADMIN)
require_manager = require_roles(Role.ADMIN, Role.MANAGER)
