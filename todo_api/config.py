import os
from dataclasses import dataclass

DEFAULT_ALGORITHM = "HS256"
# tokens are valid for one hour unless overridden
DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES = 60.0
# Default to local SQLite for dev; override via env in Docker/Prod
DEFAULT_DATABASE_URL = "sqlite:///./todo_api.db"


class ConfigurationError(RuntimeError):
    """Raised when the process cannot be configured to serve requests."""


@dataclass(frozen=True)
class Settings:
    secret_key: str
    algorithm: str = DEFAULT_ALGORITHM
    access_token_expire_minutes: float = DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES
    database_url: str = DEFAULT_DATABASE_URL
    log_level: str = "INFO"


def load_settings(environ=None) -> Settings:
    """Build the process settings from environment variables.

    SECRET_KEY is mandatory: without it no token can be signed or checked,
    so startup fails here instead of on the first request.
    """
    env = os.environ if environ is None else environ

    secret_key = env.get("SECRET_KEY", "").strip()
    if not secret_key:
        raise ConfigurationError("SECRET_KEY is not set")

    raw_expire = env.get("ACCESS_TOKEN_EXPIRE_MINUTES", DEFAULT_ACCESS_TOKEN_EXPIRE_MINUTES)
    try:
        expire_minutes = float(raw_expire)
    except ValueError:
        raise ConfigurationError(f"ACCESS_TOKEN_EXPIRE_MINUTES is not a number: {raw_expire!r}")

    return Settings(
        secret_key=secret_key,
        algorithm=env.get("ALGORITHM", DEFAULT_ALGORITHM),
        access_token_expire_minutes=expire_minutes,
        database_url=env.get("DATABASE_URL", DEFAULT_DATABASE_URL),
        log_level=env.get("LOG_LEVEL", "INFO").upper(),
    )
