from __future__ import annotations

import logging


def configure_app_logging(level: str = "INFO") -> None:
    """
    Set the level of the ``fastapi_authorization`` loggers.

    Uvicorn (or the host application) owns the handlers; this only sets levels.
    ``AUTHZ_LOG_LEVEL=DEBUG`` logs every failed route condition.
    """

    normalized = level.upper()
    logging.getLogger("fastapi_authorization").setLevel(normalized)
    logging.getLogger("fastapi_authorization").propagate = True
