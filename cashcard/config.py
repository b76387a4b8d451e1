"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables or .env in deployed environments
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all settings: works out-of-the-box against local SQLite
    - users default to the demo accounts; override with a JSON list in USERS
"""

from functools import lru_cache

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from cashcard.core.domain_types import UserRole


class UserAccount(BaseModel):
    """A principal the HTTP Basic layer accepts."""
    username: str
    password: str
    roles: list[UserRole] = [UserRole.CARD_OWNER]


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = "sqlite+aiosqlite:///cashcard.db"

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    database_create_schema: bool = False

    # Pagination
    default_page_size: int = 20
    max_page_size: int = 100

    # Auth
    users: list[UserAccount] = [
        UserAccount(
            username="sarah1", password="abc123", roles=[UserRole.CARD_OWNER],
        ),
        UserAccount(
            username="hank-owns-no-cards", password="qrs456",
            roles=[UserRole.NON_OWNER],
        ),
        UserAccount(
            username="kumar2", password="xyz789", roles=[UserRole.CARD_OWNER],
        ),
    ]

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
