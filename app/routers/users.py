from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Body, Depends, HTTPException

from app.deps import get_registry, get_settings_dep
from app.errors import RegistryError
from app.models import CreateUserResponse, ErrorResponse, UserCreateRequest, UserListResponse, UserResponse
from app.settings import Settings
from app.user_registry import UserRegistry

logger = logging.getLogger("user_registry")

router = APIRouter(prefix="/api/users", tags=["users"])

CREATED_MESSAGE = "User created successfully"

# Every path also answers with a trailing slash, and reads answer HEAD too.
_READ_METHODS = ["GET", "HEAD"]


def _to_http(e: RegistryError) -> HTTPException:
    logger.debug("Rejected request: %s (%s)", type(e).__name__, e)
    return HTTPException(status_code=e.status_code, detail=str(e))


@router.post(
    "",
    status_code=201,
    response_model=CreateUserResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
@router.post("/", status_code=201, response_model=CreateUserResponse, include_in_schema=False)
def create_user(
    payload: Optional[UserCreateRequest] = Body(default=None),
    registry: UserRegistry = Depends(get_registry),
) -> CreateUserResponse:
    # A missing body is treated like {} so it fails on the required fields.
    payload = payload or UserCreateRequest()
    # "age": null is a supplied (invalid) age; leaving it out is fine.
    extra = {"age": payload.age} if "age" in payload.model_fields_set else {}
    try:
        user = registry.create(name=payload.name, email=payload.email, **extra)
    except RegistryError as e:
        raise _to_http(e)
    return CreateUserResponse(message=CREATED_MESSAGE, user=user)


@router.api_route(
    "/{user_id}",
    methods=_READ_METHODS,
    response_model=UserResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
@router.api_route("/{user_id}/", methods=_READ_METHODS, response_model=UserResponse, include_in_schema=False)
def get_user(
    user_id: str,
    registry: UserRegistry = Depends(get_registry),
    settings: Settings = Depends(get_settings_dep),
) -> UserResponse:
    try:
        user = registry.get_by_id(user_id, strict=settings.strict_id_parsing)
    except RegistryError as e:
        raise _to_http(e)
    return UserResponse(user=user)


@router.api_route("", methods=_READ_METHODS, response_model=UserListResponse)
@router.api_route("/", methods=_READ_METHODS, response_model=UserListResponse, include_in_schema=False)
def list_users(registry: UserRegistry = Depends(get_registry)) -> UserListResponse:
    users, total = registry.list_all()
    return UserListResponse(users=users, total=total)
