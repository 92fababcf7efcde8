# File: app/repositories/user_repository.py

"""
Persistence wrapper around the ``users`` table.

Every lookup here is a single statement against the injected session;
``save`` commits immediately so each service call is one round trip.
"""

from typing import Any, List, Optional

from sqlalchemy import delete, or_, select
from sqlalchemy.orm import Session

from app.core.logging import get_logger
from app.models.user import UserEntity

logger = get_logger(__name__)


class UserRepository:
    def __init__(self, db: Session) -> None:
        self._db = db

    def find_all(self) -> List[UserEntity]:
        return list(self._db.scalars(select(UserEntity)).all())

    def find_one(self, **criteria: Any) -> Optional[UserEntity]:
        """First row whose columns equal every keyword in ``criteria``."""
        stmt = select(UserEntity).filter_by(**criteria).limit(1)
        return self._db.scalars(stmt).first()

    def find_by_id(self, user_id: int) -> Optional[UserEntity]:
        return self._db.get(UserEntity, user_id)

    def find_by_name_or_email(self, name: str, email: str) -> Optional[UserEntity]:
        stmt = (
            select(UserEntity)
            .where(or_(UserEntity.name == name, UserEntity.email == email))
            .limit(1)
        )
        return self._db.scalars(stmt).first()

    def save(self, user: UserEntity) -> UserEntity:
        self._db.add(user)
        try:
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise
        self._db.refresh(user)
        return user

    def delete(self, **criteria: Any) -> int:
        """Delete every row matching ``criteria`` and return the affected count."""
        stmt = delete(UserEntity).filter_by(**criteria)
        try:
            result = self._db.execute(stmt)
            self._db.commit()
        except Exception:
            self._db.rollback()
            raise
        logger.debug("Deleted %d users matching %s", result.rowcount, list(criteria))
        return result.rowcount
