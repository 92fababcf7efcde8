# File: app/api/v1/routes_users.py

from typing import Any, Dict

from fastapi import APIRouter, Depends

from app.api.deps import get_token_claims, get_user_service
from app.core.errors import InvalidToken
from app.schemas.user import (
    DeleteResult,
    UpdateUser,
    UserEnvelope,
    UserRead,
    normalize_email,
)
from app.services.user_service import UserService

router = APIRouter()


@router.get("/user", response_model=UserEnvelope, summary="Current user")
def read_current_user(
    claims: Dict[str, Any] = Depends(get_token_claims),
    service: UserService = Depends(get_user_service),
):
    return service.find_by_email(claims.get("email", ""))


@router.get("/users", response_model=list[UserRead], summary="List users")
def list_users(service: UserService = Depends(get_user_service)):
    return service.find_all()


@router.get("/users/{user_id}", response_model=UserEnvelope, summary="Get user by id")
def get_user(user_id: int, service: UserService = Depends(get_user_service)):
    return service.find_by_id(user_id)


@router.put("/users/{user_id}", response_model=UserRead, summary="Update user")
def update_user(
    user_id: int,
    payload: UpdateUser,
    claims: Dict[str, Any] = Depends(get_token_claims),
    service: UserService = Depends(get_user_service),
):
    if claims.get("id") != user_id:
        raise InvalidToken("does not belong to this user")
    return service.update(user_id, payload)


@router.delete("/users/{email}", response_model=DeleteResult, summary="Delete users by email")
def delete_user(
    email: str,
    claims: Dict[str, Any] = Depends(get_token_claims),
    service: UserService = Depends(get_user_service),
):
    if normalize_email(claims.get("email") or "") != normalize_email(email):
        raise InvalidToken("does not belong to this user")
    return service.delete(email)
