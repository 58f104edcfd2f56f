from __future__ import annotations
from typing import Optional
from .contracts import AuthErrorCodes, ErrorPayload


class AuthServiceError(Exception):
    """Base class for authservice errors. Renders itself as a UWF ErrorPayload."""

    type = "INTERNAL"
    code = "INTERNAL"
    default_message = "internal error"

    def __init__(self, message: Optional[str] = None, *, code: Optional[str] = None, details: Optional[dict] = None):
        self.message = message or self.default_message
        if code:
            self.code = code
        self.details = details
        super().__init__(self.message)

    @property
    def payload(self) -> ErrorPayload:
        return ErrorPayload(type=self.type, code=self.code, message=self.message, details=self.details)


class InvalidInput(AuthServiceError):
    type = "VALIDATION"
    code = AuthErrorCodes.EMPTY_CREDENTIALS
    default_message = "empty credentials supplied"


class InvalidCredentials(AuthServiceError):
    type = "AUTH_ERROR"
    code = AuthErrorCodes.BAD_CREDENTIALS
    default_message = "bad credentials"


class StoreError(AuthServiceError):
    type = "UPSTREAM"
    code = AuthErrorCodes.STORE_ERROR
    default_message = "user store failure"


class HashingError(AuthServiceError):
    code = AuthErrorCodes.HASHING_FAILED
    default_message = "failed to hash password"


class HashVerificationError(AuthServiceError):
    code = AuthErrorCodes.CREDENTIAL_CHECK_FAILED
    default_message = "error checking credentials"


class PolicyViolation(AuthServiceError):
    type = "CONFLICT"
    code = AuthErrorCodes.SINGLE_USER_ONLY
    default_message = "only 1 user account is supported at the moment"


class FilesystemError(AuthServiceError):
    code = AuthErrorCodes.LOG_DIR_FAILED
    default_message = "failed to create log dir"
