"""
User database model.
"""

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column

from lineage_tracker.core.database import Base


class User(Base):
    """
    User account.

    Passwords are stored as given; this table is not a hardened
    credential store.
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
