"""
Pytest fixtures for the test suite.

Callbacks are MagicMocks so tests can assert exactly what the plugin forwarded.
The app fixtures build a fresh FastAPI app per test; nothing is shared.
"""
from __future__ import annotations

from unittest.mock import MagicMock

import pytest
from fastapi import APIRouter, Depends, FastAPI
from fastapi.testclient import TestClient

from fastapi_authorization import ConditionalRoute, RequestHelpers, get_authorization, over, register


@pytest.fixture
def callbacks_config():
    """Four recording callbacks; tests override return_value / side_effect as needed."""
    return {
        "has_priv": MagicMock(name="has_priv", return_value=True),
        "is_role": MagicMock(name="is_role", return_value=True),
        "user_privs": MagicMock(name="user_privs", return_value=["read_only"]),
        "user_role": MagicMock(name="user_role", return_value="MEMBER"),
    }


@pytest.fixture
def app(callbacks_config):
    app = FastAPI()
    register(app, callbacks_config)

    router = APIRouter(route_class=ConditionalRoute)

    @router.get("/open")
    def open_route():
        return {"route": "open"}

    @router.get("/delete_all")
    @over(has="delete_all")
    def delete_all():
        return {"route": "delete_all"}

    @router.get("/admin")
    @over(**{"is": "ADMIN"})
    def admin():
        return {"route": "admin"}

    @router.get("/scoped")
    @over(has=("edit", {"scope": "projects"}))
    def scoped():
        return {"route": "scoped"}

    @router.get("/both")
    @over(has="delete_all")
    @over(**{"is": "ADMIN"})
    def both():
        return {"route": "both"}

    @router.get("/items/{item_id}")
    @over(has="read_only")
    def item(item_id: int):
        return {"item_id": item_id}

    @router.get("/helpers/role")
    def helper_role(authz: RequestHelpers = Depends(get_authorization)):
        return {"role": authz.role()}

    @router.get("/helpers/has/{privilege}")
    def helper_has(privilege: str, authz: RequestHelpers = Depends(get_authorization)):
        return {"result": authz.has(privilege)}

    app.include_router(router)
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
