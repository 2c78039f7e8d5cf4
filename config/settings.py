"""
Application settings loaded from environment variables.
"""

from typing import Optional

from pydantic_settings import BaseSettings
from sqlalchemy.engine import URL

DEFAULT_JWT_SECRET = "your-secret-key"


class Settings(BaseSettings):
    # ── Database ─────────────────────────────────────────────────────────
    database_url: Optional[str] = None  # full URL, wins over the DB_* parts
    db_user: str = "postgres"
    db_password: str = "postgres"
    db_host: str = "localhost"
    db_port: int = 5432
    db_name: str = "vehicle_manager"

    # ── Security Secrets ──────────────────────────────────────────────────
    jwt_secret: str = DEFAULT_JWT_SECRET  # HMAC secret for auth tokens
    jwt_algorithm: str = "HS256"
    jwt_expiry_seconds: int = 604800      # 7 days
    bcrypt_rounds: int = 10

    # ── Server ───────────────────────────────────────────────────────────
    port: int = 3000
    host: str = "0.0.0.0"
    debug: bool = False
    cors_origins: list = ["*"]

    model_config = {
        "env_file": ".env",
        "case_sensitive": False,
    }

    @property
    def sqlalchemy_url(self) -> str:
        """
        Async SQLAlchemy URL for the vehicle store.

        """
        if self.database_url:
            return self.database_url
        return URL.create(
            "postgresql+asyncpg",
            username=self.db_user,
            password=self.db_password,
            host=self.db_host,
            port=self.db_port,
            database=self.db_name,
        ).render_as_string(hide_password=False)

    @property
    def uses_default_secret(self) -> bool:
        return self.jwt_secret == DEFAULT_JWT_SECRET
