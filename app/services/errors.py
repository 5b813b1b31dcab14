"""Errors raised by the user store and role registry."""

from __future__ import annotations


class UserStoreError(Exception):
    """Base class for constraint and lookup failures reported to the caller."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NullConstraintViolation(UserStoreError):
    """Raised when a required field is absent, None or blank."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Field '{field}' is required.")


class FieldLengthViolation(UserStoreError):
    """Raised when a string value exceeds its column length."""

    def __init__(self, field: str, max_length: int) -> None:
        self.field = field
        self.max_length = max_length
        super().__init__(f"Field '{field}' must be at most {max_length} characters.")


class DuplicateEmail(UserStoreError):
    """Raised when another user already has the email."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(f"A user with email '{email}' already exists.")


class ForeignKeyViolation(UserStoreError):
    """Raised when role_id does not reference an existing role."""

    def __init__(self, role_id: object) -> None:
        self.role_id = role_id
        super().__init__(f"Role {role_id} does not exist.")


class NotFound(UserStoreError):
    """Raised when no user or role matches the given id or email."""

    def __init__(self, entity: str, key: object) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} {key} not found.")


class ImmutableFieldViolation(UserStoreError):
    """Raised when an update names id or an attribute the user record does not have."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Field '{field}' cannot be updated.")


class RoleInUse(UserStoreError):
    """Raised when deleting a role that users still reference."""

    def __init__(self, role_id: int, user_count: int | None = None) -> None:
        self.role_id = role_id
        self.user_count = user_count
        if user_count is None:
            super().__init__(f"Role {role_id} is still assigned to users.")
        else:
            super().__init__(f"Role {role_id} is still assigned to {user_count} user(s).")


class DuplicateRoleName(UserStoreError):
    """Raised when another role already has the name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"A role named '{name}' already exists.")
