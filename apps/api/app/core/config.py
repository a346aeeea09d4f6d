"""Application configuration with environment variables."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Environment
    ENV: str = "dev"

    # App Version (format: a.bc.de - major.feature.patch)
    VERSION: str = "0.01.00"

    # CORS
    CORS_ORIGINS: str = "http://localhost:3000"

    # Internal compute endpoints (protected by X-Internal-Secret)
    INTERNAL_SECRET: str = ""

    # Item count assumed for a free-form tab whose checklist was never filled in
    DEFAULT_CHECKLIST_SIZE: int = Field(default=5, ge=0)

    # Logging
    LOG_LEVEL: str = "INFO"

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS_ORIGINS into a list."""
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]


settings = Settings()
