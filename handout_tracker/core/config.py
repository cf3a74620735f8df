# handout_tracker/core/config.py
import os
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

# .env next to the project root in dev, next to the executable when frozen
if getattr(sys, "frozen", False):
    BASE_DIR = Path(sys.executable).parent
else:
    BASE_DIR = Path(__file__).resolve().parents[2]

DEV_JWT_SECRET = "your-secret-key-change-this-in-production"
TOKEN_ISSUER = "middleware-finance-app"
ROLES = ("admin", "manager", "viewer")

DEFAULT_CORS_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://127.0.0.1:3000",
    "http://127.0.0.1:5173",
]


class ConfigError(RuntimeError):
    """Raised when a required setting is missing at boot."""


@dataclass(frozen=True)
class Settings:
    database_url: str
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algo: str = "HS256"
    token_ttl_hours: int = 24
    bcrypt_rounds: int = 14
    port: int = 9000
    cors_origins: List[str] = field(default_factory=lambda: list(DEFAULT_CORS_ORIGINS))
    super_admin_username: str = "admin"
    admin_password: Optional[str] = None
    statement_timeout_ms: int = 5000
    log_level: str = "INFO"

    @property
    def uses_dev_secret(self) -> bool:
        return self.jwt_secret == DEV_JWT_SECRET


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "" or raw.lower() == "none":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}")


def normalize_database_url(url: str) -> str:
    """Point plain postgres URLs at psycopg2 and require SSL unless told otherwise."""
    if url.startswith("postgres://"):
        url = "postgresql+psycopg2://" + url[len("postgres://"):]
    elif url.startswith("postgresql://"):
        url = "postgresql+psycopg2://" + url[len("postgresql://"):]

    if url.startswith("postgresql") and "sslmode=" not in url:
        url += "&sslmode=require" if "?" in url else "?sslmode=require"
    return url


def load_settings(env_path: Optional[Path] = None) -> Settings:
    load_dotenv(dotenv_path=env_path or BASE_DIR / ".env")

    database_url = os.getenv("DATABASE_URL", "").strip()
    if not database_url:
        raise ConfigError("DATABASE_URL environment variable is required")

    origins = os.getenv("CORS_ORIGINS", "")
    cors_origins = [o.strip() for o in origins.split(",") if o.strip()] or list(DEFAULT_CORS_ORIGINS)

    return Settings(
        database_url=normalize_database_url(database_url),
        jwt_secret=os.getenv("JWT_SECRET") or DEV_JWT_SECRET,
        jwt_algo=os.getenv("JWT_ALGO", "HS256"),
        token_ttl_hours=_int_env("TOKEN_TTL_HOURS", 24),
        bcrypt_rounds=_int_env("BCRYPT_ROUNDS", 14),
        port=_int_env("PORT", 9000),
        cors_origins=cors_origins,
        super_admin_username=os.getenv("SUPER_ADMIN_USERNAME", "admin"),
        admin_password=os.getenv("ADMIN_PASSWORD") or None,
        statement_timeout_ms=_int_env("DB_STATEMENT_TIMEOUT_MS", 5000),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
