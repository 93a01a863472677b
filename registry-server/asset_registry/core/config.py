"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class DatabaseSettings(BaseModel):
    url: str = Field(default="sqlite+aiosqlite:///./ledger.db", alias="url")
    echo: bool = False
    pool_size: Optional[int] = None
    max_overflow: Optional[int] = None


class LedgerSettings(BaseModel):
    backend: Literal["memory", "sql"] = "sql"
    # Empty namespace means the registry owns the whole key space.
    namespace: str = ""

    @field_validator("namespace")
    @classmethod
    def _namespace_has_no_separator(cls, value: str) -> str:
        # ":" joins the namespace tag and the dealer key in stored keys.
        if ":" in value:
            raise ValueError("ledger namespace must not contain ':'")
        return value


class LoggingSettings(BaseModel):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    format: str = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    project_name: str = "Asset Registry"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    database: DatabaseSettings = DatabaseSettings()
    ledger: LedgerSettings = LedgerSettings()
    logging: LoggingSettings = LoggingSettings()

    @property
    def database_url(self) -> str:
        return self.database.url

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def ledger_backend(self) -> str:
        return self.ledger.backend

    @property
    def ledger_namespace(self) -> str:
        return self.ledger.namespace

    @property
    def log_level(self) -> str:
        return "DEBUG" if self.debug else self.logging.level


@lru_cache()
def get_settings() -> Settings:
    return Settings()
