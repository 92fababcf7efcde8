# File: app/core/config.py

import os
from functools import lru_cache
from typing import List

from pydantic import BaseModel, AnyHttpUrl, field_validator

PASSWORD_SCHEMES = ("hmac-sha256", "bcrypt")


class Settings(BaseModel):
    model_config = {"validate_default": True}

    # Basic app info
    PROJECT_NAME: str = "User Accounts API"
    VERSION: str = "0.1.0"

    api_v1_prefix: str = "/api/v1"
    debug: bool = os.getenv("DEBUG", "false").lower() in ("1", "true", "yes")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    backend_cors_origins: List[AnyHttpUrl] = os.getenv("BACKEND_CORS_ORIGINS", "")

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./users.db")

    # Security / auth
    jwt_secret: str = os.getenv("JWT_SECRET", "CHANGE_ME_IN_PRODUCTION")
    algorithm: str = "HS256"
    jwt_expire_days: int = 60

    # "hmac-sha256" keeps existing stored hashes valid; "bcrypt" is salted.
    password_scheme: str = os.getenv("PASSWORD_SCHEME", "hmac-sha256")

    @field_validator("backend_cors_origins", mode="before")
    @classmethod
    def assemble_cors_origins(cls, v):
        if isinstance(v, str):
            return [i.strip() for i in v.split(",") if i.strip()]
        if isinstance(v, list):
            return v
        return []

    @field_validator("password_scheme")
    @classmethod
    def check_password_scheme(cls, v: str) -> str:
        v = v.lower()
        if v not in PASSWORD_SCHEMES:
            raise ValueError(f"password_scheme must be one of {PASSWORD_SCHEMES}")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
