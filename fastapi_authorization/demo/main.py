from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from fastapi import FastAPI

from fastapi_authorization.conditions import get_condition_registry
from fastapi_authorization.config import load_callbacks_config
from fastapi_authorization.demo import callbacks, routers
from fastapi_authorization.logging_config import configure_app_logging
from fastapi_authorization.plugin import register
from fastapi_authorization.settings import get_settings

logger = logging.getLogger(__name__)


def create_app(callbacks_config: Mapping[str, Any] | None = None) -> FastAPI:
    """
    Build the demo app.

    Registration happens here rather than in a lifespan handler so that a bad
    callbacks config stops the process before it serves anything.
    """

    settings = get_settings()
    configure_app_logging(settings.log_level)

    if callbacks_config is None:
        path = settings.resolved_callbacks_config_path()
        callbacks_config = load_callbacks_config(path)
        logger.info("Loaded callbacks config: %s", path)

    app = FastAPI()
    register(app, callbacks_config)
    # Application-specific condition alongside the plugin's has/is.
    get_condition_registry(app).add("owner", callbacks.owns_captured)

    app.include_router(routers.router)
    return app
