"""SQLAlchemy ORM models."""

from app.models.base import Base
from app.models.role import Role
from app.models.user import MAX_FIELD_LENGTH, MAX_ID, User, id_in_range

__all__ = ["Base", "MAX_FIELD_LENGTH", "MAX_ID", "Role", "User", "id_in_range"]
