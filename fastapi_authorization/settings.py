from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Plugin settings.

    Notes:
    - Override via env vars, e.g. ``AUTHZ_CALLBACKS_CONFIG_PATH=/etc/myapp/authz.yaml``.
    - Callbacks themselves are code; the config file only names where to import them from.
    """

    model_config = SettingsConfigDict(env_prefix="AUTHZ_", extra="ignore")

    callbacks_config_path: str | None = None
    log_level: str = "INFO"

    def resolved_callbacks_config_path(self) -> Path:
        if self.callbacks_config_path:
            return Path(self.callbacks_config_path)

        repo_root = Path(__file__).resolve().parents[1]
        return repo_root / "config" / "authorization.yaml"


@lru_cache
def get_settings() -> Settings:
    return Settings()
