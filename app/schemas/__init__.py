"""Pydantic request/response schemas."""

from app.schemas.health import HealthResponse
from app.schemas.role import RoleCreateRequest, RoleResponse, RolesListResponse
from app.schemas.user import (
    UserCreateRequest,
    UserResponse,
    UsersListResponse,
    UserUpdateRequest,
)

__all__ = [
    "HealthResponse",
    "RoleCreateRequest",
    "RoleResponse",
    "RolesListResponse",
    "UserCreateRequest",
    "UserResponse",
    "UsersListResponse",
    "UserUpdateRequest",
]
