from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from fastapi import Request
from fastapi.routing import APIRoute
from starlette.routing import Match
from starlette.types import Scope

logger = logging.getLogger(__name__)

# (route, request, captures, argument) -> bool
Condition = Callable[[APIRoute, Request, dict[str, Any], Any], bool]

CONDITIONS_ATTR = "__route_conditions__"
RESULTS_SCOPE_KEY = "fastapi_authorization.condition_results"


class ConditionRegistry:
    """
    Named route conditions, looked up by ConditionalRoute at match time.

    One registry per application (stored on ``app.state.route_conditions``).
    """

    def __init__(self) -> None:
        self._conditions: dict[str, Condition] = {}

    def add(self, name: str, condition: Condition) -> None:
        if name in self._conditions:
            logger.info("Replacing route condition %r", name)
        self._conditions[name] = condition

    def get(self, name: str) -> Condition:
        try:
            return self._conditions[name]
        except KeyError:
            raise LookupError(f"No route condition registered under {name!r}") from None

    def names(self) -> list[str]:
        return sorted(self._conditions)

    def __contains__(self, name: object) -> bool:
        return name in self._conditions


def over(**conditions: Any) -> Callable:
    """
    Attach route conditions to an endpoint.

        @router.get("/delete_all")
        @over(has="delete_all")
        def delete_all(): ...

    ``is`` is a keyword, so pass it as ``over(**{"is": "ADMIN"})``.

    Like the security decorators, this only attaches metadata; the check runs in
    ConditionalRoute.matches(), so the decorator must sit below the route
    decorator.
    """

    def decorator(fn: Callable) -> Callable:
        existing = dict(getattr(fn, CONDITIONS_ATTR, {}))
        existing.update(conditions)
        setattr(fn, CONDITIONS_ATTR, existing)
        return fn

    return decorator


def get_condition_registry(app: Any) -> ConditionRegistry:
    registry = getattr(app.state, "route_conditions", None)
    if registry is None:
        registry = ConditionRegistry()
        app.state.route_conditions = registry
    return registry


class ConditionalRoute(APIRoute):
    """
    APIRoute that only matches when all of its endpoint's conditions pass.

    A failed condition makes the route invisible to the router (Match.NONE), so
    unless another route matches, the client gets a plain 404.
    """

    @property
    def conditions(self) -> dict[str, Any]:
        return getattr(self.endpoint, CONDITIONS_ATTR, {})

    def matches(self, scope: Scope) -> tuple[Match, Scope]:
        match, child_scope = super().matches(scope)
        if not self.conditions:
            return match, child_scope
        if match != Match.FULL:
            # Wrong method: not a candidate, and a 405 would reveal the route.
            return Match.NONE, {}

        app = scope.get("app")
        if app is None:
            raise RuntimeError("Route conditions need scope['app']; is this route mounted on a FastAPI app?")
        registry = get_condition_registry(app)

        # Routers may match the same route more than once per request.
        results: dict[tuple[Any, str], bool] = scope.setdefault(RESULTS_SCOPE_KEY, {})
        request = Request({**scope, **child_scope})
        captures = dict(child_scope.get("path_params", {}))
        for name, argument in self.conditions.items():
            key = (self.endpoint, name)
            if key not in results:
                results[key] = bool(registry.get(name)(self, request, captures, argument))
                logger.debug("Condition %r passed=%s path=%s", name, results[key], self.path)
            if not results[key]:
                return Match.NONE, {}

        return match, child_scope
