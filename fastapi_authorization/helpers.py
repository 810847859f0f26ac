from __future__ import annotations

import logging
from collections.abc import Callable
from functools import partial
from typing import Any

from fastapi import Request

logger = logging.getLogger(__name__)

# (request, subject, extra=None) -> Any
Helper = Callable[..., Any]

# "is" is a keyword, so it is reached as authz.is_()
HELPER_ALIASES = {"is_": "is"}


class HelperRegistry:
    """Named request-scope helpers (stored on ``app.state.authorization_helpers``)."""

    def __init__(self) -> None:
        self._helpers: dict[str, Helper] = {}

    def add(self, name: str, helper: Helper) -> None:
        if name in self._helpers:
            logger.info("Replacing helper %r", name)
        self._helpers[name] = helper

    def get(self, name: str) -> Helper:
        try:
            return self._helpers[name]
        except KeyError:
            raise LookupError(f"No helper registered under {name!r}") from None

    def names(self) -> list[str]:
        return sorted(self._helpers)

    def __contains__(self, name: object) -> bool:
        return name in self._helpers


def get_helper_registry(app: Any) -> HelperRegistry:
    registry = getattr(app.state, "authorization_helpers", None)
    if registry is None:
        registry = HelperRegistry()
        app.state.authorization_helpers = registry
    return registry


class RequestHelpers:
    """
    Registered helpers bound to the current request.

        authz.has("delete_all")
        authz.is_("ADMIN")        # "is" is a keyword
        authz.privileges()
        authz.call("role", user)
    """

    def __init__(self, request: Request, registry: HelperRegistry) -> None:
        self.request = request
        self._registry = registry

    def call(self, name: str, *args: Any, **kwargs: Any) -> Any:
        return self._registry.get(name)(self.request, *args, **kwargs)

    def __getattr__(self, attr: str) -> Callable[..., Any]:
        if attr.startswith("_"):
            raise AttributeError(attr)
        name = HELPER_ALIASES.get(attr, attr)
        if name not in self._registry:
            raise AttributeError(f"No helper registered under {name!r}")
        return partial(self._registry.get(name), self.request)


def get_authorization(request: Request) -> RequestHelpers:
    registry = getattr(request.app.state, "authorization_helpers", None)
    if registry is None:
        raise RuntimeError("Authorization helpers not registered. Did app startup run?")
    return RequestHelpers(request, registry)
