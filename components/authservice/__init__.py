from .service import AuthService
from .crypto import Argon2PasswordHasher
from .store import InMemoryUserStore, SQLiteUserStore
from .config import AuthSettings
from .contracts import User, CreateUserRequest, Argon2Params, DEFAULT_ARGON2_PARAMS
from .errors import (
    AuthServiceError, InvalidInput, InvalidCredentials, StoreError,
    HashingError, HashVerificationError, PolicyViolation, FilesystemError,
)
from .deps import set_auth_service, get_auth_service, make_auth_service_from_env
from .routes import router as auth_router

__all__ = [
    "AuthService",
    "Argon2PasswordHasher",
    "InMemoryUserStore",
    "SQLiteUserStore",
    "AuthSettings",
    "User",
    "CreateUserRequest",
    "Argon2Params",
    "DEFAULT_ARGON2_PARAMS",
    "AuthServiceError",
    "InvalidInput",
    "InvalidCredentials",
    "StoreError",
    "HashingError",
    "HashVerificationError",
    "PolicyViolation",
    "FilesystemError",
    "set_auth_service",
    "get_auth_service",
    "make_auth_service_from_env",
    "auth_router",
]
