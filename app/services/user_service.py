# File: app/services/user_service.py

"""
User account service.

Sits between the HTTP routes and ``UserRepository``:

  - Register users (name/email uniqueness + field validation)
  - Credential lookup for login
  - Lookup by id / email, partial update, delete by email
  - Build the public user view, signing a fresh JWT each time

Failures are raised as ``app.core.errors`` exceptions; anything the
database raises is left to propagate.
"""

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from app.core import security
from app.core.config import Settings
from app.core.errors import UserNotFound, ValidationFailed
from app.core.logging import get_logger
from app.models.user import UserEntity
from app.repositories.user_repository import UserRepository
from app.schemas.user import (
    CreateUser,
    DeleteResult,
    LoginUser,
    NewUser,
    UpdateUser,
    normalize_email,
)

logger = get_logger(__name__)


class UserService:
    def __init__(self, repository: UserRepository, settings: Settings) -> None:
        self.repository = repository
        self.settings = settings

    def _hash(self, password: str) -> str:
        if security.password_too_long(password):
            raise ValidationFailed(
                {"password": f"must be at most {security.MAX_PASSWORD_BYTES} bytes"}
            )
        return security.hash_password(password, self.settings.password_scheme)

    # ------------------------------------------------------------------ #
    # Lookups
    # ------------------------------------------------------------------ #
    def find_all(self) -> List[UserEntity]:
        return self.repository.find_all()

    def find_one(self, credentials: LoginUser) -> Optional[UserEntity]:
        """
        Return the user matching ``credentials`` or ``None``.

        With the deterministic scheme the hash is matched inside the query;
        otherwise the row is loaded by email and the hash verified here.
        """
        if security.password_too_long(credentials.password):
            return None

        scheme = self.settings.password_scheme
        if security.is_deterministic(scheme):
            return self.repository.find_one(
                email=credentials.email,
                password=self._hash(credentials.password),
            )

        user = self.repository.find_one(email=credentials.email)
        if user is None or not security.verify_password(credentials.password, user.password, scheme):
            return None
        return user

    def find_by_id(self, user_id: int) -> Dict[str, Any]:
        user = self.repository.find_by_id(user_id)
        if user is None:
            logger.warning("User id %s not found", user_id)
            raise UserNotFound()
        return self.build_user_view(user)

    def find_by_email(self, email: str) -> Dict[str, Any]:
        user = self.repository.find_one(email=normalize_email(email))
        if user is None:
            logger.warning("User with email %s not found", email)
            raise UserNotFound()
        return self.build_user_view(user)

    # ------------------------------------------------------------------ #
    # Mutations
    # ------------------------------------------------------------------ #
    def create(self, dto: CreateUser) -> Dict[str, Any]:
        """
        Register a new user.

        Fields are validated first so the uniqueness check sees the same
        normalized email that gets stored.

        The uniqueness check and the insert run as two statements. Two
        concurrent registrations can both pass the check; the unique
        constraints on ``name``/``email`` then reject the second insert
        with an ``IntegrityError``.
        """
        try:
            fields = NewUser(name=dto.name, email=dto.email, password=dto.password)
        except ValidationError as exc:
            errors = {"username": "Userinput is not valid."}
            for err in exc.errors():
                field = ".".join(str(p) for p in err["loc"])
                errors[field] = err["msg"]
            raise ValidationFailed(errors) from exc

        existing = self.repository.find_by_name_or_email(fields.name, fields.email)
        if existing is not None:
            raise ValidationFailed({"username": "Username and email must be unique."})

        user = UserEntity(
            name=fields.name,
            email=fields.email,
            password=self._hash(fields.password),
        )
        saved = self.repository.save(user)
        logger.info("Created user %s (%s)", saved.id, saved.email)
        return self.build_user_view(saved)

    def update(self, user_id: int, dto: UpdateUser) -> UserEntity:
        """
        Merge ``dto`` over the stored user and persist it.

        The stored hash is never part of the merge. A new plaintext
        password in ``dto`` is hashed with the configured scheme before it
        is written. The merged row is not re-validated.
        """
        to_update = self.repository.find_by_id(user_id)
        if to_update is None:
            logger.warning("Cannot update missing user id %s", user_id)
            raise UserNotFound()

        patch = {k: v for k, v in dto.model_dump(exclude_unset=True).items() if v is not None}
        if "password" in patch:
            patch["password"] = self._hash(patch["password"])
        if "email" in patch:
            patch["email"] = normalize_email(patch["email"])
        for field, value in patch.items():
            setattr(to_update, field, value)

        updated = self.repository.save(to_update)
        logger.info("Updated user %s fields=%s", user_id, sorted(dto.model_fields_set))
        return updated

    def delete(self, email: str) -> DeleteResult:
        affected = self.repository.delete(email=normalize_email(email))
        logger.info("Deleted %d user(s) with email %s", affected, email)
        return DeleteResult(affected=affected)

    # ------------------------------------------------------------------ #
    # Response shaping
    # ------------------------------------------------------------------ #
    def generate_jwt(self, user: UserEntity) -> str:
        return security.generate_jwt(
            user,
            self.settings.jwt_secret,
            algorithm=self.settings.algorithm,
            expire_days=self.settings.jwt_expire_days,
        )

    def build_user_view(self, user: UserEntity) -> Dict[str, Any]:
        user_view = {
            "name": user.name,
            "email": user.email,
            "bio": user.bio,
            "token": self.generate_jwt(user),
            "avatar": user.avatar,
        }
        return {"user": user_view}
