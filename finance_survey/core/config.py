"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment
    environment: str = "development"
    debug: bool = True

    # API
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_prefix: str = "/v1"

    # PostgreSQL (admin accounts)
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "postgres"
    postgres_password: str = "postgres"
    postgres_db: str = "finance_survey"
    database_url: str = ""

    # MongoDB (survey responses)
    mongodb_url: str = "mongodb://localhost:27017"
    mongodb_database: str = "finance_survey"
    responses_collection: str = "survey_responses"

    # Redis
    redis_url: str = "redis://localhost:6379/0"

    # JWT Settings
    jwt_secret_key: str = "your-super-secret-key-change-in-production"
    jwt_algorithm: str = "HS256"
    jwt_access_token_expire_minutes: int = 60
    jwt_refresh_token_expire_days: int = 7

    # Admin accounts
    allow_admin_signup: bool = False
    admin_password_min_length: int = 6

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Rate Limiting
    rate_limit_requests: int = 100
    rate_limit_window_seconds: int = 60

    # Dashboard
    timezone: str = "Asia/Jakarta"  # Zone the counter operates in
    rows_per_page: int = 10

    # Export
    export_filename_prefix: str = "survey-results"
    csv_escape_quotes: bool = False

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str):
            import json

            try:
                return json.loads(v)
            except json.JSONDecodeError:
                return [origin.strip() for origin in v.split(",")]
        return v

    @field_validator("rows_per_page")
    @classmethod
    def check_rows_per_page(cls, v: int) -> int:
        if v < 1:
            raise ValueError("rows_per_page must be positive")
        return v

    @property
    def postgres_dsn(self) -> str:
        """Build PostgreSQL connection string."""
        if self.database_url:
            return self.database_url
        return (
            f"postgresql+asyncpg://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def is_development(self) -> bool:
        return self.environment == "development"

    @property
    def is_production(self) -> bool:
        return self.environment == "production"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
