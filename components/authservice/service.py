from __future__ import annotations
import logging
from pathlib import Path
from typing import Optional
from .contracts import (
    UserStorePort, PasswordHasherPort, Argon2Params, DEFAULT_ARGON2_PARAMS,
    CreateUserRequest, User, AuthErrorCodes
)
from .errors import (
    InvalidInput, InvalidCredentials, StoreError, HashVerificationError,
    HashingError, PolicyViolation, FilesystemError
)

log = logging.getLogger("authservice.service")

class AuthService:
    """
    Authenticates the single admin user and provisions it exactly once.

    The count check in create_user is a fast-path guard only; strict
    single-user semantics under concurrency rely on the store refusing a
    second insert.
    """
    def __init__(
        self,
        *,
        user_store: UserStorePort,
        hasher: PasswordHasherPort,
        params: Optional[Argon2Params] = None,
    ):
        self.user_store = user_store
        self.hasher = hasher
        self.params = params or DEFAULT_ARGON2_PARAMS

    # --------- Core operations ----------
    def get_user_count(self) -> int:
        return self.user_store.count_users()

    def login(self, username: str, password: str) -> User:
        if not username or not password:
            raise InvalidInput()

        user = self.user_store.find_by_username(username)
        if user is None:
            log.info("login.unknown_user username=%s", username)
            raise InvalidCredentials()

        try:
            match = self.hasher.verify(password, user.password)
        except Exception as ex:
            log.exception("login.verify_failed username=%s", username)
            raise HashVerificationError() from ex

        if not match:
            log.info("login.bad_password username=%s", username)
            raise InvalidCredentials()

        log.info("login.ok username=%s", username)
        return user

    def create_user(self, req: CreateUserRequest) -> None:
        if not req.username or not req.password:
            raise InvalidInput()

        if self.user_store.count_users() > 0:
            log.warning("create_user.rejected username=%s reason=single_user", req.username)
            raise PolicyViolation()

        # Log dir is prepared before the insert so a failure leaves no user row.
        # It is not removed if a later step fails.
        log_dir = req.log_dir.strip()
        if log_dir:
            try:
                Path(log_dir).mkdir(parents=True, exist_ok=True)
            except (OSError, ValueError) as ex:
                log.error("create_user.log_dir_failed path=%s err=%s", log_dir, ex)
                raise FilesystemError(f"failed to create log dir: {ex}") from ex

        try:
            hashed = self.hasher.hash(req.password, self.params)
        except HashingError:
            raise
        except Exception as ex:
            log.exception("create_user.hash_failed username=%s", req.username)
            raise HashingError() from ex

        new_user = User(username=req.username, password=hashed)
        try:
            self.user_store.insert_user(new_user)
        except StoreError as ex:
            log.error("create_user.insert_failed username=%s err=%s", req.username, ex)
            raise StoreError("failed to create new user", code=AuthErrorCodes.USER_CREATE_FAILED) from ex

        log.info("create_user.ok username=%s log_dir=%s", new_user.username, log_dir or "-")
