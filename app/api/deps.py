# File: app/api/deps.py

from collections.abc import Generator
from typing import Any, Dict

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.config import Settings, get_settings
from app.core.errors import InvalidToken
from app.core.security import decode_token
from app.db.session import SessionLocal
from app.repositories.user_repository import UserRepository
from app.services.user_service import UserService

_bearer_scheme = HTTPBearer(auto_error=False)


def get_db() -> Generator[Session, None, None]:
    """
    FastAPI dependency that provides a SQLAlchemy session.

    Usage in route functions:
        db: Session = Depends(get_db)
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_user_service(
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
) -> UserService:
    return UserService(UserRepository(db), settings)


def get_token_claims(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer_scheme),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    """
    Decode the ``Authorization: Bearer <token>`` header into JWT claims.
    """
    if credentials is None:
        raise InvalidToken("is missing")
    return decode_token(credentials.credentials, settings.jwt_secret, algorithm=settings.algorithm)
