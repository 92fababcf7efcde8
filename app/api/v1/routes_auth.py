# File: app/api/v1/routes_auth.py

"""
Auth API routes: registration and login.

Both return the ``{"user": {...}}`` envelope carrying a freshly signed JWT.
"""

from fastapi import APIRouter, Depends, status

from app.api.deps import get_user_service
from app.core.errors import InvalidCredentials
from app.schemas.user import CreateUser, LoginUser, UserEnvelope
from app.services.user_service import UserService

router = APIRouter()


@router.post(
    "/register",
    response_model=UserEnvelope,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
def register(payload: CreateUser, service: UserService = Depends(get_user_service)):
    return service.create(payload)


@router.post("/login", response_model=UserEnvelope, summary="User login")
def login(payload: LoginUser, service: UserService = Depends(get_user_service)):
    """
    Look up the user by email + password hash.

    Unknown email or wrong password both answer 401.
    """
    user = service.find_one(payload)
    if user is None:
        raise InvalidCredentials()
    return service.build_user_view(user)
