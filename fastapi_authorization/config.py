from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict

from fastapi_authorization.callbacks import ConfigurationError


class CallbacksConfigModel(BaseModel):
    """
    Dotted import paths of the four callbacks.

    Either ``package.module:attribute`` or ``package.module.attribute``.
    """

    model_config = ConfigDict(extra="forbid")

    has_priv: str
    is_role: str
    user_privs: str
    user_role: str


def import_string(dotted_path: str) -> Any:
    if ":" in dotted_path:
        module_path, _, attr_path = dotted_path.partition(":")
    else:
        module_path, _, attr_path = dotted_path.rpartition(".")
    if not module_path or not attr_path:
        raise ImportError(f"{dotted_path!r} is not a valid import path")

    target: Any = importlib.import_module(module_path)
    for attr in attr_path.split("."):
        target = getattr(target, attr)
    return target


def load_callbacks_config(path: Path) -> dict[str, Any]:
    """
    Load the callbacks named in a YAML file, ready to pass to ``register()``.

        authorization:
          has_priv: myapp.authz:has_priv
          is_role: myapp.authz:is_role
          user_privs: myapp.authz:user_privs
          user_role: myapp.authz:user_role
    """

    raw_text = path.read_text(encoding="utf-8")
    raw: dict[str, Any] = yaml.safe_load(raw_text) or {}

    if "authorization" not in raw:
        raise ValueError(f"Missing top-level 'authorization' key in config: {path}")

    model = CallbacksConfigModel.model_validate(raw["authorization"])

    resolved: dict[str, Any] = {}
    for key, dotted_path in model.model_dump().items():
        try:
            resolved[key] = import_string(dotted_path)
        except (ImportError, AttributeError) as exc:
            raise ConfigurationError(key, f"fastapi_authorization: cannot import '{key}' from {dotted_path!r}") from exc
    return resolved
