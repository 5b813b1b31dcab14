"""
User store: create, update, delete and look up user records.

Every mutation runs as one transaction on the given session: the constraint
checks (required fields, length, email uniqueness, role existence) and the
write are committed together, and the session is rolled back on any failure.
The database constraints stay authoritative: an IntegrityError raised at
commit (e.g. a concurrent insert of the same email) is translated into the
same error a pre-check would have raised.
"""

import logging
from collections.abc import Mapping

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.security import hash_password
from app.models import MAX_FIELD_LENGTH, User, id_in_range
from app.services.errors import (
    DuplicateEmail,
    FieldLengthViolation,
    ForeignKeyViolation,
    ImmutableFieldViolation,
    NotFound,
    NullConstraintViolation,
    UserStoreError,
)
from app.services.roles import role_exists

logger = logging.getLogger(__name__)

# Declaration order; validation reports the first offending field in this order.
REQUIRED_FIELDS = ("email", "password", "fullname", "role_id")
UPDATABLE_FIELDS = frozenset(REQUIRED_FIELDS)
STRING_FIELDS = frozenset({"email", "password", "fullname"})


def _validate_values(values: Mapping[str, object]) -> None:
    """Null/blank check first for every field, then lengths, then the role_id range."""
    for field in REQUIRED_FIELDS:
        if field not in values:
            continue
        value = values[field]
        if value is None or (isinstance(value, str) and not value.strip()):
            raise NullConstraintViolation(field)
    for field in REQUIRED_FIELDS:
        if field in STRING_FIELDS and field in values:
            value = values[field]
            if not isinstance(value, str):
                raise TypeError(f"{field} must be a string, got {type(value).__name__}")
            if len(value) > MAX_FIELD_LENGTH:
                raise FieldLengthViolation(field, MAX_FIELD_LENGTH)
    if "role_id" in values:
        # An id the INTEGER column cannot hold can never reference a role.
        if not id_in_range(values["role_id"]):
            raise ForeignKeyViolation(values["role_id"])


def _email_taken(session: Session, email: str, exclude_id: int | None = None) -> bool:
    query = session.query(User.id).filter(User.email == email)
    if exclude_id is not None:
        query = query.filter(User.id != exclude_id)
    return query.first() is not None


def translate_integrity_error(
    exc: IntegrityError, values: Mapping[str, object]
) -> UserStoreError | None:
    """
    Map an engine IntegrityError on the users table to the store's error taxonomy.

    Understands PostgreSQL and SQLite messages. Returns None when the error is
    not one of the users constraints, so the caller re-raises it unchanged.
    """
    text = str(exc.orig if exc.orig is not None else exc).lower()
    if "unique" in text or "duplicate key" in text:
        return DuplicateEmail(str(values.get("email", "")))
    if "foreign key" in text:
        return ForeignKeyViolation(values.get("role_id"))
    if "not null" in text or "null value" in text:
        for field in REQUIRED_FIELDS:
            if field in text:
                return NullConstraintViolation(field)
        return NullConstraintViolation("unknown")
    return None


def get_user(session: Session, user_id: int) -> User:
    user = session.get(User, user_id) if id_in_range(user_id) else None
    if user is None:
        raise NotFound("User", user_id)
    return user


def get_user_by_email(session: Session, email: str) -> User:
    user = session.query(User).filter(User.email == email).first()
    if user is None:
        raise NotFound("User", email)
    return user


def list_users(
    session: Session,
    role_id: int | None = None,
    limit: int = 100,
    offset: int = 0,
) -> list[User]:
    """Users ordered by id, optionally only those holding role_id."""
    query = session.query(User)
    if role_id is not None:
        if not id_in_range(role_id):
            return []
        query = query.filter(User.role_id == role_id)
    return query.order_by(User.id).offset(offset).limit(limit).all()


def create_user(
    session: Session,
    email: str | None,
    password: str | None,
    fullname: str | None,
    role_id: int | None,
) -> User:
    """
    Insert a user and commit; the database assigns the id.

    Raises NullConstraintViolation, FieldLengthViolation, DuplicateEmail or
    ForeignKeyViolation, checked in that order.
    """
    values = {
        "email": email,
        "password": password,
        "fullname": fullname,
        "role_id": role_id,
    }
    _validate_values(values)

    try:
        if _email_taken(session, email):
            raise DuplicateEmail(email)
        if not role_exists(session, role_id):
            raise ForeignKeyViolation(role_id)
        user = User(
            email=email,
            password=hash_password(password),
            fullname=fullname,
            role_id=role_id,
        )
        session.add(user)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        error = translate_integrity_error(e, values)
        if error is None:
            raise
        raise error from e
    except Exception:
        session.rollback()
        raise

    session.refresh(user)
    logger.info("Created user: id=%s role_id=%s", user.id, user.role_id)
    return user


def update_user(session: Session, user_id: int, changes: Mapping[str, object]) -> User:
    """
    Apply changes to an existing user and commit.

    Only the fields present in changes are checked and written. id is never
    writable. A new password is hashed before storage.
    """
    for field in changes:
        if field not in UPDATABLE_FIELDS:
            raise ImmutableFieldViolation(field)

    try:
        user = get_user(session, user_id)
        _validate_values(changes)
        if not changes:
            return user

        email = changes.get("email")
        if email is not None and email != user.email and _email_taken(
            session, email, exclude_id=user_id
        ):
            raise DuplicateEmail(email)
        if "role_id" in changes and not role_exists(session, changes["role_id"]):
            raise ForeignKeyViolation(changes["role_id"])

        for field, value in changes.items():
            if field == "password":
                value = hash_password(value)
            setattr(user, field, value)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        error = translate_integrity_error(e, changes)
        if error is None:
            raise
        raise error from e
    except Exception:
        session.rollback()
        raise

    session.refresh(user)
    logger.info("Updated user: id=%s fields=%s", user.id, sorted(changes))
    return user


def delete_user(session: Session, user_id: int) -> None:
    try:
        user = get_user(session, user_id)
        session.delete(user)
        session.commit()
    except Exception:
        session.rollback()
        raise
    logger.info("Deleted user: id=%s", user_id)
