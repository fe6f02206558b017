"""Configuração da aplicação lida de variáveis de ambiente.

Os valores são lidos no momento da chamada de ``Settings.from_env`` para que
testes possam trocar o banco apontando ``ACCOUNTS_DB_PATH`` para outro arquivo.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


def _default_db_dir() -> Path:
    # Banco fora do repositório por padrão. Pode ser sobrescrito por ACCOUNTS_DB_DIR.
    configured = os.environ.get("ACCOUNTS_DB_DIR")
    if configured:
        return Path(configured)
    return Path.home() / ".accounts"


def _default_db_url() -> str:
    configured = os.environ.get("ACCOUNTS_DB_URL")
    if configured:
        return configured
    path = os.environ.get("ACCOUNTS_DB_PATH")
    if not path:
        path = str(_default_db_dir() / os.environ.get("ACCOUNTS_DB_NAME", "accounts.db"))
    return f"sqlite:///{path}"


@dataclass(frozen=True)
class Settings:
    db_url: str
    backend: str = "sql"
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db: str = "retoMongo"
    release_delay: float = 0.0
    admin_username: str = "admin"
    admin_email: str = "admin@accounts.local"
    admin_password: str = "Admin1234"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            db_url=_default_db_url(),
            backend=os.environ.get("ACCOUNTS_BACKEND", "sql").strip().lower(),
            mongo_uri=os.environ.get("ACCOUNTS_MONGO_URI", "mongodb://localhost:27017"),
            mongo_db=os.environ.get("ACCOUNTS_MONGO_DB", "retoMongo"),
            release_delay=float(os.environ.get("ACCOUNTS_RELEASE_DELAY", "0")),
            admin_username=os.environ.get("ACCOUNTS_ADMIN_USERNAME", "admin"),
            admin_email=os.environ.get("ACCOUNTS_ADMIN_EMAIL", "admin@accounts.local"),
            admin_password=os.environ.get("ACCOUNTS_ADMIN_PASSWORD", "Admin1234"),
            log_level=os.environ.get("ACCOUNTS_LOG_LEVEL", "INFO").upper(),
        )


__all__ = ["Settings"]
