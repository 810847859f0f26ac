"""
Demo callbacks backed by an in-memory table.

Authentication is out of scope: the current user is simply read from the
``X-User`` header. A real application would resolve it from its session or a
validated token.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import Request

logger = logging.getLogger(__name__)

USER_HEADER = "X-User"

USER_ROLES: dict[str, str] = {
    "alice": "ADMIN",
    "bob": "MEMBER",
}

ROLE_PRIVILEGES: dict[str, tuple[str, ...]] = {
    "ADMIN": ("delete_all", "view_all", "read_only"),
    "MEMBER": ("read_only",),
}


def _current_user(request: Request) -> str | None:
    return request.headers.get(USER_HEADER)


def _role_of(user: str | None) -> str | None:
    if user is None:
        return None
    return USER_ROLES.get(user)


def has_priv(request: Request, privilege: str, extra: Any = None) -> bool:
    role = _role_of(_current_user(request))
    allowed = privilege in ROLE_PRIVILEGES.get(role or "", ())
    logger.debug("has_priv user=%s privilege=%s allowed=%s", _current_user(request), privilege, allowed)
    return allowed


def is_role(request: Request, role: str, extra: Any = None) -> bool:
    return _role_of(_current_user(request)) == role


def user_privs(request: Request, subject: Any = None, extra: Any = None) -> list[str]:
    role = _role_of(subject or _current_user(request))
    return list(ROLE_PRIVILEGES.get(role or "", ()))


def user_role(request: Request, subject: Any = None, extra: Any = None) -> str | None:
    return _role_of(subject or _current_user(request))


def owns_captured(route: Any, request: Request, captures: dict[str, Any], argument: str) -> bool:
    """Route condition: the captured path parameter ``argument`` is the current user."""
    return captures.get(argument) is not None and captures.get(argument) == _current_user(request)
