"""Configuration management for the mock ISO 8583 service.

Configuration is loaded from environment variables (and an optional .env
file) through pydantic-settings.
"""

from __future__ import annotations

from enum import Enum
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnvironment(str, Enum):
    LOCAL = "local"
    TEST = "test"
    PROD = "prod"


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class AppConfig(BaseSettings):
    name: str = Field(default="iso8583-mock")
    env: AppEnvironment = Field(default=AppEnvironment.LOCAL)
    version: str = Field(default="0.1.0")
    debug: bool = Field(default=False)
    log_level: LogLevel = Field(default=LogLevel.INFO)
    api_prefix: str = Field(default="")

    model_config = SettingsConfigDict(env_prefix="APP_", env_file=".env", extra="ignore")

    @field_validator("env", mode="before")
    @classmethod
    def validate_env(cls, v: str | AppEnvironment) -> AppEnvironment:
        if isinstance(v, AppEnvironment):
            return v
        return AppEnvironment(v.lower())

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: str | LogLevel) -> LogLevel:
        if isinstance(v, LogLevel):
            return v
        return LogLevel(v.upper())

    @field_validator("api_prefix", mode="after")
    @classmethod
    def normalize_api_prefix(cls, v: str) -> str:
        """Strip trailing slashes; an empty prefix mounts routes at the root."""
        v = v.strip().rstrip("/")
        if v and not v.startswith("/"):
            v = "/" + v
        return v


class ServerConfig(BaseSettings):
    host: str = Field(default="127.0.0.1")
    port: int = Field(default=3000)
    workers: int = Field(default=1)

    model_config = SettingsConfigDict(env_prefix="SERVER_", env_file=".env", extra="ignore")

    @field_validator("workers", mode="after")
    @classmethod
    def validate_workers(cls, v: int) -> int:
        if v != 1:
            raise ValueError(
                "SERVER_WORKERS must be 1: the transaction store lives in process memory "
                "and is not shared between worker processes"
            )
        return v


class IssuerConfig(BaseSettings):
    # Comma-separated PAN prefixes the mock issuer approves
    approved_pan_prefixes: str = Field(default="4")

    model_config = SettingsConfigDict(env_prefix="ISSUER_", env_file=".env", extra="ignore")

    @field_validator("approved_pan_prefixes", mode="after")
    @classmethod
    def validate_prefixes(cls, v: str) -> str:
        if not [p for p in v.split(",") if p.strip()]:
            raise ValueError("ISSUER_APPROVED_PAN_PREFIXES must name at least one prefix")
        return v

    @property
    def prefixes_list(self) -> list[str]:
        """Parse the prefixes string into a list."""
        return [p.strip() for p in self.approved_pan_prefixes.split(",") if p.strip()]


class ObservabilityConfig(BaseSettings):
    service_name: str = Field(default="iso8583-mock")
    otlp_endpoint: str | None = Field(default=None)
    otlp_insecure: bool = Field(default=True)
    log_record_format: LogFormat = Field(default=LogFormat.CONSOLE)
    mask_pan: bool = Field(default=True)

    model_config = SettingsConfigDict(env_prefix="OTEL_", env_file=".env", extra="ignore")

    @field_validator("log_record_format", mode="before")
    @classmethod
    def validate_log_record_format(cls, v: str | LogFormat) -> LogFormat:
        if isinstance(v, LogFormat):
            return v
        return LogFormat(v.lower())


class SecurityConfig(BaseSettings):
    cors_allowed_origins: str = Field(default="*")
    cors_allow_credentials: bool = Field(default=False)
    cors_allow_methods: list[str] = Field(default=["*"])
    cors_allow_headers: list[str] = Field(default=["*"])

    model_config = SettingsConfigDict(env_prefix="SECURITY_", env_file=".env", extra="ignore")

    @field_validator("cors_allowed_origins", mode="after")
    @classmethod
    def validate_cors_allowed_origins(cls, v: str | list[str]) -> list[str]:
        """Parse comma-separated string into list of origins."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v


class Settings(BaseSettings):
    app: AppConfig = Field(default_factory=AppConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    issuer: IssuerConfig = Field(default_factory=IssuerConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    security: SecurityConfig = Field(default_factory=SecurityConfig)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Reload settings (useful for testing)."""
    get_settings.cache_clear()
    return get_settings()
