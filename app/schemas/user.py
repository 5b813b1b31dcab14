"""Request/response schemas for user endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class UserCreateRequest(BaseModel):
    """
    Fields for a new user.

    Every field is declared optional so a missing value reaches the store and
    is reported as a null-constraint violation rather than a generic 422.
    """

    model_config = ConfigDict(extra="forbid")

    email: str | None = Field(default=None, description="Unique email (max 100 chars)")
    password: str | None = Field(default=None, description="Plain password; stored hashed")
    fullname: str | None = Field(default=None, description="Display name (max 100 chars)")
    role_id: int | None = Field(default=None, description="Id of an existing role")


class UserUpdateRequest(BaseModel):
    """Partial update: only fields present in the body are changed. id cannot be changed."""

    model_config = ConfigDict(extra="forbid")

    email: str | None = None
    password: str | None = None
    fullname: str | None = None
    role_id: int | None = None


class UserResponse(BaseModel):
    """User record as returned by the API (no password)."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    fullname: str
    role_id: int


class UsersListResponse(BaseModel):
    users: list[UserResponse]
    limit: int
    offset: int
