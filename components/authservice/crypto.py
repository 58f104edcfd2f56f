from __future__ import annotations
import logging
from typing import Optional

from argon2 import PasswordHasher, Type
from argon2.exceptions import HashingError as Argon2HashingError
from argon2.exceptions import InvalidHashError, VerificationError, VerifyMismatchError

from .contracts import Argon2Params, DEFAULT_ARGON2_PARAMS, PasswordHasherPort
from .errors import HashingError, HashVerificationError

log = logging.getLogger("authservice.crypto")


def _hasher_for(params: Argon2Params) -> PasswordHasher:
    return PasswordHasher(
        time_cost=params.time_cost,
        memory_cost=params.memory_cost,
        parallelism=params.parallelism,
        hash_len=params.hash_len,
        salt_len=params.salt_len,
        type=Type.ID,
    )


class Argon2PasswordHasher(PasswordHasherPort):
    """
    Argon2id hasher backed by argon2-cffi.

    Encoded output is the PHC string ($argon2id$v=19$m=...,t=...,p=...$salt$hash),
    so verify() needs nothing but the stored value. A fresh random salt is drawn
    on every hash() call.
    """
    def hash(self, plaintext: str, params: Optional[Argon2Params] = None) -> str:
        try:
            return _hasher_for(params or DEFAULT_ARGON2_PARAMS).hash(plaintext)
        except (Argon2HashingError, TypeError, ValueError) as ex:
            log.error("hash.failed err=%s", type(ex).__name__)
            raise HashingError() from ex

    def verify(self, plaintext: str, encoded: str) -> bool:
        # Parameters and salt are read back from the encoded hash; the digest
        # comparison inside libargon2 is constant-time.
        try:
            return _hasher_for(DEFAULT_ARGON2_PARAMS).verify(encoded, plaintext)
        except VerifyMismatchError:
            return False
        except (InvalidHashError, VerificationError, TypeError, ValueError) as ex:
            log.error("verify.failed err=%s", type(ex).__name__)
            raise HashVerificationError() from ex
