"""Mapping from store errors to HTTP responses."""

from fastapi import HTTPException, status

from app.services.errors import (
    DuplicateEmail,
    DuplicateRoleName,
    NotFound,
    RoleInUse,
    UserStoreError,
)

_STATUS_BY_ERROR: dict[type[UserStoreError], int] = {
    NotFound: status.HTTP_404_NOT_FOUND,
    DuplicateEmail: status.HTTP_409_CONFLICT,
    DuplicateRoleName: status.HTTP_409_CONFLICT,
    RoleInUse: status.HTTP_409_CONFLICT,
}


def to_http_exception(error: UserStoreError) -> HTTPException:
    """404 for missing records, 409 for conflicts, 422 for every other constraint violation."""
    status_code = _STATUS_BY_ERROR.get(type(error), 422)
    return HTTPException(status_code=status_code, detail=error.message)
