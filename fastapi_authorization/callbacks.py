"""Caller-supplied authorization callbacks and their validation."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Protocol

from fastapi import Request


class ConfigurationError(ValueError):
    """Raised at startup when a required callback is missing or not callable."""

    def __init__(self, key: str, message: str | None = None) -> None:
        self.key = key
        super().__init__(message or f"fastapi_authorization: missing '{key}' callable in parameters")


class PrivilegeChecker(Protocol):
    def __call__(self, request: Request, privilege: str, extra: Any = None) -> Any: ...


class RoleChecker(Protocol):
    def __call__(self, request: Request, role: str, extra: Any = None) -> Any: ...


class PrivilegeLister(Protocol):
    def __call__(self, request: Request, subject: Any = None, extra: Any = None) -> Any: ...


class RoleGetter(Protocol):
    def __call__(self, request: Request, subject: Any = None, extra: Any = None) -> Any: ...


# Validation order; the first failing key is the one reported.
REQUIRED_KEYS: tuple[str, ...] = ("has_priv", "is_role", "user_privs", "user_role")


@dataclass(frozen=True)
class AuthorizationCallbacks:
    """
    The four callbacks the plugin forwards to.

    Built once at startup and never mutated afterwards, so it is safe to share
    between concurrent requests as long as the callbacks themselves are.

    - has_priv:   (request, privilege, extra?) -> truthy/falsy
    - is_role:    (request, role, extra?) -> truthy/falsy
    - user_privs: (request, subject?, extra?) -> anything
    - user_role:  (request, subject?, extra?) -> anything
    """

    has_priv: PrivilegeChecker
    is_role: RoleChecker
    user_privs: PrivilegeLister
    user_role: RoleGetter

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> AuthorizationCallbacks:
        mapping = mapping or {}
        for key in REQUIRED_KEYS:
            value = mapping.get(key)
            if value is None or not callable(value):
                raise ConfigurationError(key)
        return cls(**{key: mapping[key] for key in REQUIRED_KEYS})
