from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI, Request
from fastapi.routing import APIRoute

from fastapi_authorization.callbacks import AuthorizationCallbacks
from fastapi_authorization.conditions import get_condition_registry
from fastapi_authorization.helpers import get_helper_registry

logger = logging.getLogger(__name__)


def _split_argument(argument: Any) -> tuple[Any, tuple[Any, ...]]:
    # over(has="x") or over(has=("x", extra))
    if isinstance(argument, tuple) and len(argument) == 2:
        return argument[0], (argument[1],)
    return argument, ()


class AuthorizationPlugin:
    """
    Wires the four callbacks into route conditions and request helpers.

    Route conditions ``has``/``is`` are the only place where callback results
    are coerced to bool; the helpers return whatever the callback returns.
    Exceptions raised by callbacks are never caught here.
    """

    def __init__(self, callbacks: AuthorizationCallbacks) -> None:
        self.callbacks = callbacks

    # ---- Route conditions ---------------------------------------------------------------

    def has_condition(self, route: APIRoute, request: Request, captures: dict[str, Any], argument: Any) -> bool:
        privilege, extra = _split_argument(argument)
        if not privilege:
            return False
        return bool(self.callbacks.has_priv(request, privilege, *extra))

    def is_condition(self, route: APIRoute, request: Request, captures: dict[str, Any], argument: Any) -> bool:
        role, extra = _split_argument(argument)
        if not role:
            return False
        return bool(self.callbacks.is_role(request, role, *extra))

    # ---- Helpers ------------------------------------------------------------------------

    def has(self, request: Request, privilege: str, extra: Any = None) -> Any:
        return self.callbacks.has_priv(request, privilege, extra)

    def is_(self, request: Request, role: str, extra: Any = None) -> Any:
        return self.callbacks.is_role(request, role, extra)

    def privileges(self, request: Request, subject: Any = None, extra: Any = None) -> Any:
        return self.callbacks.user_privs(request, subject, extra)

    def role(self, request: Request, subject: Any = None, extra: Any = None) -> Any:
        return self.callbacks.user_role(request, subject, extra)


def register(app: FastAPI, config: Mapping[str, Any] | None) -> AuthorizationPlugin:
    """
    Validate ``config`` and register the ``has``/``is`` route conditions and the
    ``has``/``is``/``privileges``/``role`` helpers on ``app``.

    Raises ConfigurationError before touching ``app`` if any of ``has_priv``,
    ``is_role``, ``user_privs`` or ``user_role`` is missing or not callable.
    Treat that as fatal at startup.
    """

    plugin = AuthorizationPlugin(AuthorizationCallbacks.from_mapping(config))

    conditions = get_condition_registry(app)
    conditions.add("has", plugin.has_condition)
    conditions.add("is", plugin.is_condition)

    helpers = get_helper_registry(app)
    helpers.add("has", plugin.has)
    helpers.add("is", plugin.is_)
    helpers.add("privileges", plugin.privileges)
    helpers.add("role", plugin.role)

    app.state.authorization = plugin
    logger.info(
        "Authorization registered conditions=%s helpers=%s",
        conditions.names(),
        helpers.names(),
    )
    return plugin
