# File: app/core/errors.py

"""
Structured HTTP failures raised by the service layer.

Each error carries a status code and a ``{"message", "errors"}`` payload
in ``detail`` so the routes can let FastAPI serialize it untouched.
"""

from typing import Dict, Optional

from fastapi import HTTPException, status


class ServiceError(HTTPException):
    status_code: int = status.HTTP_400_BAD_REQUEST
    message: Optional[str] = None

    def __init__(self, errors: Dict[str, str], message: Optional[str] = None):
        detail: dict = {"errors": errors}
        msg = message or self.message
        if msg:
            detail["message"] = msg
        super().__init__(status_code=self.status_code, detail=detail)

    @property
    def errors(self) -> Dict[str, str]:
        return self.detail["errors"]


class ValidationFailed(ServiceError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "Input data validation failed"


class UserNotFound(ServiceError):
    # 401 rather than 404: clients of the existing API key off this status.
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self):
        super().__init__({"User": " not found"})


class InvalidCredentials(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self):
        super().__init__({"email or password": "is invalid"})


class InvalidToken(ServiceError):
    status_code = status.HTTP_401_UNAUTHORIZED

    def __init__(self, reason: str = "is invalid or expired"):
        super().__init__({"token": reason})
