"""Role endpoints: the registry that users' role_id must point into."""

from typing import Annotated

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.v1.errors import to_http_exception
from app.core.database import get_db
from app.schemas.role import RoleCreateRequest, RoleResponse, RolesListResponse
from app.services import roles as role_registry
from app.services.errors import UserStoreError

router = APIRouter()


@router.post("", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
def create_role(
    body: RoleCreateRequest,
    db: Annotated[Session, Depends(get_db)],
) -> RoleResponse:
    try:
        role = role_registry.create_role(db, body.name)
    except UserStoreError as e:
        raise to_http_exception(e) from e
    return RoleResponse.model_validate(role)


@router.get("", response_model=RolesListResponse)
def list_roles(db: Annotated[Session, Depends(get_db)]) -> RolesListResponse:
    roles = role_registry.list_roles(db)
    return RolesListResponse(roles=[RoleResponse.model_validate(r) for r in roles])


@router.get("/{role_id}", response_model=RoleResponse)
def read_role(
    role_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> RoleResponse:
    try:
        role = role_registry.get_role(db, role_id)
    except UserStoreError as e:
        raise to_http_exception(e) from e
    return RoleResponse.model_validate(role)


@router.delete("/{role_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_role(
    role_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> None:
    """Delete a role. Returns 409 while any user still holds it."""
    try:
        role_registry.delete_role(db, role_id)
    except UserStoreError as e:
        raise to_http_exception(e) from e
