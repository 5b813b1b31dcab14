"""Request/response schemas for role endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class RoleCreateRequest(BaseModel):
    name: str | None = Field(default=None, description="Unique role name (max 50 chars)")


class RoleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str


class RolesListResponse(BaseModel):
    roles: list[RoleResponse]
