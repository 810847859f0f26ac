from __future__ import annotations

from fastapi import APIRouter, Depends

from fastapi_authorization.conditions import ConditionalRoute, over
from fastapi_authorization.helpers import RequestHelpers, get_authorization

router = APIRouter(route_class=ConditionalRoute, tags=["demo"])


@router.get("/")
def index() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/delete_all")
@over(has="delete_all")
def delete_all() -> dict[str, bool]:
    # Unauthorized callers never reach this; the route simply does not match (404).
    return {"deleted": True}


@router.get("/view_all")
@over(**{"is": "ADMIN"})
def view_all() -> dict[str, bool]:
    return {"viewed": True}


@router.get("/members/{name}")
@over(has="read_only", owner="name")
def member_profile(name: str) -> dict[str, str]:
    return {"name": name}


@router.get("/me/privileges")
def my_privileges(authz: RequestHelpers = Depends(get_authorization)):
    return {"privileges": authz.privileges()}


@router.get("/me/role")
def my_role(authz: RequestHelpers = Depends(get_authorization)):
    return {"role": authz.role()}


@router.get("/me/can/{privilege}")
def can(privilege: str, authz: RequestHelpers = Depends(get_authorization)):
    return {"privilege": privilege, "allowed": authz.has(privilege)}
