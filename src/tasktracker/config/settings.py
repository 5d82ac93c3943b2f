"""Application settings.

Every value can be supplied through the environment or a ``.env`` file.
Settings are built once at the composition root and passed down; nothing
reads them from a module-level global.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):

    database_url: str = Field(default="sqlite:///./database.sqlite", alias="DATABASE_URL")
    echo_sql: bool = Field(default=False, alias="ECHO_SQL")

    host: str = Field(default="127.0.0.1", alias="HOST")
    port: int = Field(default=3000, alias="PORT")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    cors_origin: str = Field(default="http://localhost:4200", alias="CORS_ORIGIN")  # Comma-separated

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_json: bool = Field(default=True, alias="LOG_JSON")
    env: str = Field(default="development", alias="ENV")  # development|production|test

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def allowed_origins(self) -> list[str]:
        if self.cors_origin.strip() == "*":
            return ["*"]
        return [o.strip() for o in self.cors_origin.split(",") if o.strip()]

    @property
    def is_production(self) -> bool:
        return self.env.lower() == "production"
