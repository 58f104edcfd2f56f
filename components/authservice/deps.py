from __future__ import annotations
import threading
from typing import Optional

from .config import AuthSettings
from .crypto import Argon2PasswordHasher
from .service import AuthService
from .store import InMemoryUserStore, SQLiteUserStore

_auth_service: Optional[AuthService] = None
_auth_lock = threading.Lock()


def set_auth_service(svc: Optional[AuthService]) -> None:
    """Install the process-wide AuthService used by the HTTP routes."""
    global _auth_service
    with _auth_lock:
        _auth_service = svc


def get_auth_service() -> AuthService:
    """
    FastAPI dependency. Lazily builds a service from env settings when none
    was installed with set_auth_service().
    """
    global _auth_service
    with _auth_lock:
        if _auth_service is None:
            _auth_service = make_auth_service_from_env()
        return _auth_service


def make_auth_service_from_env(cfg: Optional[AuthSettings] = None) -> AuthService:
    cfg = cfg or AuthSettings()
    kind = cfg.STORE.lower()
    if kind == "sqlite":
        store = SQLiteUserStore(cfg.SQLITE_PATH)
    elif kind == "memory":
        store = InMemoryUserStore()
    else:
        raise RuntimeError(f"Unknown AUTH_STORE: {cfg.STORE}")
    return AuthService(user_store=store, hasher=Argon2PasswordHasher(), params=cfg.argon2_params())
