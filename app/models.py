from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """Raw POST /api/users body.

    Fields are deliberately untyped: the registry owns the validation rules and
    reports them with its own error messages instead of pydantic's.
    """

    model_config = ConfigDict(extra="ignore")

    name: Any = None
    email: Any = None
    age: Any = None


class NewUser(BaseModel):
    """Validated, normalized input ready to be admitted into the registry."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=3)
    age: Optional[int] = Field(default=None, ge=0, le=120)


class User(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int = Field(ge=1)
    name: str
    email: str
    age: Optional[int] = None
    created_at: datetime = Field(alias="createdAt")


class CreateUserResponse(BaseModel):
    message: str
    user: User


class UserResponse(BaseModel):
    user: User


class UserListResponse(BaseModel):
    users: list[User]
    total: int


class ErrorResponse(BaseModel):
    error: str
