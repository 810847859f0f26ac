"""
Role/privilege authorization adapter for FastAPI.

The plugin has no policy of its own. ``register(app, config)`` takes four
callbacks (``has_priv``, ``is_role``, ``user_privs``, ``user_role``) and exposes
them as:

- route conditions ``has`` and ``is`` (see ``over`` and ``ConditionalRoute``),
  which make a route non-matching (404) when the callback returns falsy;
- request helpers ``has``, ``is``, ``privileges`` and ``role`` (see
  ``get_authorization``), which return the callback result unchanged.
"""

from .callbacks import (
    AuthorizationCallbacks,
    ConfigurationError,
    PrivilegeChecker,
    PrivilegeLister,
    RoleChecker,
    RoleGetter,
)
from .conditions import ConditionalRoute, ConditionRegistry, over
from .config import load_callbacks_config
from .helpers import HelperRegistry, RequestHelpers, get_authorization
from .plugin import AuthorizationPlugin, register

__all__ = [
    "AuthorizationCallbacks",
    "AuthorizationPlugin",
    "ConditionRegistry",
    "ConditionalRoute",
    "ConfigurationError",
    "HelperRegistry",
    "PrivilegeChecker",
    "PrivilegeLister",
    "RequestHelpers",
    "RoleChecker",
    "RoleGetter",
    "get_authorization",
    "load_callbacks_config",
    "over",
    "register",
]
