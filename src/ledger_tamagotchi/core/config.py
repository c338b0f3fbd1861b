"""Application configuration."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    app_name: str = "Ledger Tamagotchi"
    debug: bool = False

    # Database
    database_url: str = "postgresql+asyncpg://localhost/tamagotchi"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Owner tokens are HMAC-signed with this key; unset trusts X-Owner as-is
    auth_secret: str | None = None

    # Create tables on startup instead of running migrations (SQLite dev only)
    auto_create_tables: bool = False

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
