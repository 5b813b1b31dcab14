"""ORM model for registered user accounts."""

from sqlalchemy import Column, ForeignKey, Integer, String

from app.models.base import Base

MAX_FIELD_LENGTH = 100
# Ids live in signed 32-bit INTEGER columns (SERIAL on PostgreSQL).
MAX_ID = 2**31 - 1


def id_in_range(value: object) -> bool:
    """True for an int that an INTEGER id column can hold (bools excluded)."""
    return isinstance(value, int) and not isinstance(value, bool) and 1 <= value <= MAX_ID


class User(Base):
    """
    One row per registered user, pointing at exactly one role.

    password holds a bcrypt hash, never the plain value.
    """

    __tablename__ = "users"
    # AUTOINCREMENT keeps SQLite from reusing the ids of deleted rows.
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, autoincrement=True)
    email = Column(String(MAX_FIELD_LENGTH), nullable=False, unique=True, index=True)
    password = Column(String(MAX_FIELD_LENGTH), nullable=False)
    fullname = Column(String(MAX_FIELD_LENGTH), nullable=False)
    role_id = Column(
        Integer,
        ForeignKey("roles.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<User id={self.id} email={self.email!r} role_id={self.role_id}>"
