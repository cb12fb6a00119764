import logging

from pydantic import Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings

from app.environment import EnvironmentName
from settings.log import LoggingSettings


class DatabaseSettings(BaseSettings):
    host: str = Field(alias="DATABASE_HOST", default="postgresql://localhost:5432")
    name: str = Field(alias="DATABASE_NAME", default="folders")
    min_pool_size: int = Field(alias="DATABASE_MIN_POOL_SIZE", default=5)
    max_pool_size: int = Field(alias="DATABASE_MAX_POOL_SIZE", default=20)

    @property
    def async_host(self) -> str:
        """Return the host URL with async driver for SQLAlchemy async engine."""
        return self.host.replace("postgresql://", "postgresql+asyncpg://", 1)

    @property
    def url(self) -> str:
        return f"{self.async_host}/{self.name}"


class GuardianSettings(BaseSettings):
    viewers_can_edit: bool = Field(alias="VIEWERS_CAN_EDIT", default=False)


class SentrySettings(BaseSettings):
    dsn: str | None = Field(alias="SENTRY_DSN", default=None)

    @property
    def is_enabled(self) -> bool:
        return bool(self.dsn)


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "extra": "allow"}

    environment: EnvironmentName = Field(alias="ENVIRONMENT", default=EnvironmentName.DEVELOPMENT)

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    guardian: GuardianSettings = Field(default_factory=GuardianSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    sentry: SentrySettings = Field(default_factory=SentrySettings)

    @field_validator("environment", mode="before")
    def set_environment(cls, value: str | EnvironmentName, info: ValidationInfo) -> EnvironmentName:
        if isinstance(value, EnvironmentName):
            return value
        try:
            return EnvironmentName(value)
        except ValueError:
            logging.getLogger(__name__).warning(f"Invalid environment: {value}")
            return EnvironmentName.DEVELOPMENT
