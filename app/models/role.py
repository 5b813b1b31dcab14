"""ORM model for roles referenced by users."""

from sqlalchemy import Column, Integer, String

from app.models.base import Base


class Role(Base):
    """
    Access-level category a user belongs to (e.g. 'reader', 'writer').

    Users hold only the role id; deleting a role that is still referenced is refused.
    """

    __tablename__ = "roles"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(50), nullable=False, unique=True)
