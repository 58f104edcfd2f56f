from __future__ import annotations
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

from .contracts import Argon2Params

class AuthSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="AUTH_", env_file=".env", case_sensitive=False, extra="ignore")

    STORE: str = Field(default="sqlite")  # "sqlite" | "memory"
    SQLITE_PATH: str = Field(default="./var/auth.db")
    # Argon2id cost, tuned for sub-second interactive logins
    ARGON2_MEMORY_COST: int = Field(default=64 * 1024)  # KiB
    ARGON2_TIME_COST: int = Field(default=1)
    ARGON2_PARALLELISM: int = Field(default=2)
    ARGON2_SALT_LEN: int = Field(default=16)
    ARGON2_HASH_LEN: int = Field(default=32)

    def argon2_params(self) -> Argon2Params:
        return Argon2Params(
            memory_cost=self.ARGON2_MEMORY_COST,
            time_cost=self.ARGON2_TIME_COST,
            parallelism=self.ARGON2_PARALLELISM,
            salt_len=self.ARGON2_SALT_LEN,
            hash_len=self.ARGON2_HASH_LEN,
        )
