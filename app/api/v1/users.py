"""User endpoints: create, read, update and delete user records."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from app.api.v1.errors import to_http_exception
from app.core.config import get_settings
from app.core.database import get_db
from app.models import MAX_ID
from app.schemas.user import (
    UserCreateRequest,
    UserResponse,
    UsersListResponse,
    UserUpdateRequest,
)
from app.services import users as user_store
from app.services.errors import UserStoreError

router = APIRouter()


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreateRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """
    Register a user. The id is assigned by the database.

    Returns 409 if the email is taken and 422 if a field is missing, too long,
    or role_id names no existing role.
    """
    try:
        user = user_store.create_user(
            db,
            email=body.email,
            password=body.password,
            fullname=body.fullname,
            role_id=body.role_id,
        )
    except UserStoreError as e:
        raise to_http_exception(e) from e
    return UserResponse.model_validate(user)


@router.get("", response_model=UsersListResponse)
def list_users(
    db: Annotated[Session, Depends(get_db)],
    role_id: int | None = None,
    limit: Annotated[int, Query(ge=1)] = 100,
    offset: Annotated[int, Query(ge=0, le=MAX_ID)] = 0,
) -> UsersListResponse:
    """List users ordered by id, optionally filtered by role."""
    page_max = get_settings().LIST_PAGE_MAX
    if limit > page_max:
        raise HTTPException(
            status_code=422,
            detail=f"limit must be at most {page_max}.",
        )
    users = user_store.list_users(db, role_id=role_id, limit=limit, offset=offset)
    return UsersListResponse(
        users=[UserResponse.model_validate(u) for u in users],
        limit=limit,
        offset=offset,
    )


@router.get("/lookup", response_model=UserResponse)
def lookup_user_by_email(
    email: Annotated[str, Query(min_length=1)],
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """Find a user by exact email."""
    try:
        user = user_store.get_user_by_email(db, email)
    except UserStoreError as e:
        raise to_http_exception(e) from e
    return UserResponse.model_validate(user)


@router.get("/{user_id}", response_model=UserResponse)
def read_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    try:
        user = user_store.get_user(db, user_id)
    except UserStoreError as e:
        raise to_http_exception(e) from e
    return UserResponse.model_validate(user)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: int,
    body: UserUpdateRequest,
    db: Annotated[Session, Depends(get_db)],
) -> UserResponse:
    """
    Change any of email, password, fullname or role_id.

    Only fields present in the body are touched; sending a field as null is a
    null-constraint violation.
    """
    try:
        user = user_store.update_user(db, user_id, body.model_dump(exclude_unset=True))
    except UserStoreError as e:
        raise to_http_exception(e) from e
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> None:
    try:
        user_store.delete_user(db, user_id)
    except UserStoreError as e:
        raise to_http_exception(e) from e
