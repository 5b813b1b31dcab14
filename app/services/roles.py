"""Role registry: the roles users point at, and the existence check their foreign key relies on."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models import Role, User, id_in_range
from app.services.errors import (
    DuplicateRoleName,
    FieldLengthViolation,
    NotFound,
    NullConstraintViolation,
    RoleInUse,
)

logger = logging.getLogger(__name__)

ROLE_NAME_MAX_LEN = 50


def role_exists(session: Session, role_id: int) -> bool:
    """True if a role with this id is present. Ids outside the column range never exist."""
    if not id_in_range(role_id):
        return False
    return session.query(Role.id).filter(Role.id == role_id).first() is not None


def get_role(session: Session, role_id: int) -> Role:
    role = session.get(Role, role_id) if id_in_range(role_id) else None
    if role is None:
        raise NotFound("Role", role_id)
    return role


def _count_users_with_role(session: Session, role_id: int) -> int:
    return session.query(func.count(User.id)).filter(User.role_id == role_id).scalar()


def list_roles(session: Session) -> list[Role]:
    return session.query(Role).order_by(Role.id).all()


def create_role(session: Session, name: str | None) -> Role:
    """Insert a role and commit. Names are unique and at most 50 characters."""
    if name is None or not name.strip():
        raise NullConstraintViolation("name")
    name = name.strip()
    if len(name) > ROLE_NAME_MAX_LEN:
        raise FieldLengthViolation("name", ROLE_NAME_MAX_LEN)

    try:
        if session.query(Role.id).filter(Role.name == name).first() is not None:
            raise DuplicateRoleName(name)
        role = Role(name=name)
        session.add(role)
        session.commit()
    except IntegrityError as e:
        session.rollback()
        raise DuplicateRoleName(name) from e
    except Exception:
        session.rollback()
        raise

    session.refresh(role)
    logger.info("Created role: id=%s name=%s", role.id, role.name)
    return role


def delete_role(session: Session, role_id: int) -> None:
    """
    Delete a role that no user references.

    Refuses with RoleInUse while users still point at the role, so no user is
    ever left with a dangling role_id.
    """
    try:
        role = get_role(session, role_id)
        user_count = _count_users_with_role(session, role_id)
        if user_count:
            raise RoleInUse(role_id, user_count)
        session.delete(role)
        session.commit()
    except IntegrityError as e:
        # A user was assigned the role between the count and the delete.
        session.rollback()
        raise RoleInUse(role_id, _count_users_with_role(session, role_id) or None) from e
    except Exception:
        session.rollback()
        raise

    logger.info("Deleted role: id=%s", role_id)
