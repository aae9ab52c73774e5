"""
Shop API Settings

Configuration is read once from the environment (and a local .env file).
JWT_SECRET has no default: the service refuses to start without it.
"""

import logging
from functools import lru_cache
from typing import List

from dotenv import load_dotenv
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict

load_dotenv()


class Settings(BaseSettings):
    """
    Server configuration settings.

    Environment variables:
    - MONGODB_URI: MongoDB connection string
    - DB_NAME: database holding users, orders, products and blog posts
    - JWT_SECRET: signing key for bearer tokens (required)
    - TOKEN_TTL_HOURS: token lifetime (default: 24)
    - BCRYPT_ROUNDS: bcrypt work factor (default: 12, minimum 10)
    - STORE_TIMEOUT_SECONDS: upper bound for a single store call (default: 10)
    - MAX_BODY_BYTES: largest accepted request body (default: 1 MiB)
    - ADMIN_EMAILS_RAW: comma-separated emails registered with the admin role
    - CLEAR_CANCELLATION_ON_REOPEN: drop the cancellation record when an order
      leaves the Cancelled status (default: false)
    - SEED_ROUTES_ENABLED: expose /api/seed/* (default: true)
    - CORS_ORIGINS_RAW: comma-separated allowed origins (default: *)
    - LOG_LEVEL: logging level name (default: INFO)
    """

    model_config = SettingsConfigDict(extra="ignore")

    mongodb_uri: str = "mongodb://localhost:27017"
    db_name: str = "ecommerce"

    jwt_secret: str = Field(..., min_length=1)
    jwt_algorithm: str = "HS256"
    token_ttl_hours: int = Field(24, ge=1)

    bcrypt_rounds: int = Field(12, ge=10, le=31)

    store_timeout_seconds: float = Field(10.0, gt=0)
    max_body_bytes: int = Field(1024 * 1024, gt=0)

    admin_emails_raw: str = ""
    clear_cancellation_on_reopen: bool = False
    seed_routes_enabled: bool = True
    cors_origins_raw: str = "*"

    log_level: str = "INFO"
    port: int = 5000

    @computed_field
    @property
    def admin_emails(self) -> List[str]:
        """Parse comma-separated admin emails into a lower-cased list."""
        return [v.strip().lower() for v in self.admin_emails_raw.split(",") if v.strip()]

    @computed_field
    @property
    def cors_origins(self) -> List[str]:
        return [v.strip() for v in self.cors_origins_raw.split(",") if v.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
