from __future__ import annotations
from typing import Any, Dict, Literal, Optional, Protocol
from pydantic import BaseModel, Field, conint, constr

# ---------- Unified Wire Format (UWF) ----------
class ErrorPayload(BaseModel):
    type: Literal["AUTH_ERROR","VALIDATION","CONFLICT","UPSTREAM","INTERNAL"]
    code: constr(strip_whitespace=True, min_length=1)
    message: constr(strip_whitespace=True, min_length=1)
    details: Optional[Dict[str, Any]] = None

class MetaPayload(BaseModel):
    request_id: Optional[str] = None
    duration_ms: Optional[int] = None

class UWFResponse(BaseModel):
    ok: bool
    result: Optional[Any] = None
    error: Optional[ErrorPayload] = None
    meta: MetaPayload = Field(default_factory=MetaPayload)

# ---------- Domain Models ----------
class User(BaseModel):
    username: constr(min_length=1)
    # encoded argon2id hash, never the plaintext
    password: str = Field(repr=False)

class CreateUserRequest(BaseModel):
    username: str = ""
    password: str = Field(default="", repr=False)
    log_dir: str = ""

class Argon2Params(BaseModel):
    """
    Argon2id cost parameters. memory_cost is in KiB.
    """
    memory_cost: conint(ge=8) = 64 * 1024
    time_cost: conint(ge=1) = 1
    parallelism: conint(ge=1) = 2
    salt_len: conint(ge=8) = 16
    hash_len: conint(ge=4) = 32

DEFAULT_ARGON2_PARAMS = Argon2Params()

# ---------- Ports (Contracts) ----------
class UserStorePort(Protocol):
    """
    Contract for user persistence. Every method raises StoreError on failure;
    find_by_username returns None (not an error) when the user is absent.
    """
    def count_users(self) -> int: ...
    def find_by_username(self, username: str) -> Optional[User]: ...
    def insert_user(self, user: User) -> None: ...

class PasswordHasherPort(Protocol):
    """
    Contract for one-way salted password hashing.
    hash() raises HashingError; verify() returns False on a clean mismatch and
    raises HashVerificationError when the encoded hash cannot be checked.
    """
    def hash(self, plaintext: str, params: Argon2Params) -> str: ...
    def verify(self, plaintext: str, encoded: str) -> bool: ...

# ---------- Service I/O ----------
class LoginRequest(BaseModel):
    username: str = ""
    password: str = Field(default="", repr=False)

class UserView(BaseModel):
    username: str

class OnboardStatus(BaseModel):
    onboarding_available: bool

# ---------- Errors ----------
class AuthErrorCodes:
    EMPTY_CREDENTIALS = "EMPTY_CREDENTIALS"
    BAD_CREDENTIALS = "BAD_CREDENTIALS"
    STORE_ERROR = "STORE_ERROR"
    USER_CREATE_FAILED = "USER_CREATE_FAILED"
    HASHING_FAILED = "HASHING_FAILED"
    CREDENTIAL_CHECK_FAILED = "CREDENTIAL_CHECK_FAILED"
    SINGLE_USER_ONLY = "SINGLE_USER_ONLY"
    LOG_DIR_FAILED = "LOG_DIR_FAILED"
