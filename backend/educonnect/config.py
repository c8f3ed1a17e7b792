"""
Application configuration from environment variables.
Loads .env from the backend directory so settings are found regardless of cwd.
Constructed once here and handed to the database layer; business logic never reads os.environ.
"""
import os
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env next to backend/ (parent of educonnect/)
_BACKEND_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = _BACKEND_DIR / ".env"

if _ENV_FILE.exists():
    from dotenv import load_dotenv
    load_dotenv(_ENV_FILE, override=False)
else:
    # Fallback: backend/.env relative to cwd (e.g. when running from repo root)
    _cwd_env = Path(os.getcwd()) / "backend" / ".env"
    if _cwd_env.exists():
        from dotenv import load_dotenv
        load_dotenv(_cwd_env, override=False)

DEFAULT_SECRET_KEY = "change-me-in-production"


class Settings(BaseSettings):
    """Load and validate config from env."""

    model_config = SettingsConfigDict(
        env_file=_ENV_FILE if _ENV_FILE.exists() else None,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database: sqlite for local dev and tests, postgresql for production
    database_url: str = "sqlite:///./educonnect_dev.db"

    # Environment: set ENV=production in production; used to enforce SECRET_KEY.
    env: str = ""

    secret_key: str = DEFAULT_SECRET_KEY
    jwt_algorithm: str = "HS256"
    jwt_expire_hours: int = 24

    # CORS: comma-separated origins
    cors_origins: str = "http://localhost:3000,http://localhost:5173"

    log_level: str = "INFO"
    debug: bool = False

    # GET /api/activities?limit=N
    activities_default_limit: int = 10
    activities_max_limit: int = 100

    # Teacher dashboard: assignments due within [now, now + N days]
    assignments_due_window_days: int = 7

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, v: str) -> str:
        return (v or "INFO").strip().upper()

    @property
    def is_production(self) -> bool:
        return (self.env or "").strip().lower() == "production"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


settings = Settings()
