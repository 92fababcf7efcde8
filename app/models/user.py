# File: app/models/user.py

"""
User account model.

``password`` holds the hash produced by ``app.core.security.hash_password``,
never the plaintext.
"""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base import Base


class UserEntity(Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)

    bio: Mapped[str | None] = mapped_column(Text, nullable=True, default="")
    # URL of the profile image
    avatar: Mapped[str | None] = mapped_column(String(1024), nullable=True, default="")

    def __repr__(self) -> str:
        return f"<UserEntity {self.id} {self.email}>"
