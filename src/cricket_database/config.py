"""Configuration management for the cricket database bootstrap."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import URL


class DatabaseSettings(BaseSettings):
    """Database connection settings."""

    model_config = SettingsConfigDict(
        env_prefix="DB_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    host: str = "localhost"
    port: int = 5432
    user: str = "postgres"
    password: str = ""
    name: str = Field(default="cricket_master_db", min_length=1)
    # Always present on the server; used only to check/create the target database
    admin_name: str = Field(default="postgres", min_length=1)
    driver: str = "postgresql+psycopg2"
    connect_timeout: int = 10

    def _url(self, database: str) -> URL:
        return URL.create(
            drivername=self.driver,
            username=self.user,
            password=self.password or None,
            host=self.host,
            port=self.port,
            database=database,
        )

    @property
    def admin_url(self) -> URL:
        """URL of the administrative database."""
        return self._url(self.admin_name)

    @property
    def target_url(self) -> URL:
        """URL of the application database."""
        return self._url(self.name)


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    model_config = SettingsConfigDict(
        env_prefix="LOG_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    level: str = "INFO"
    dir: str = "logs"
    file_name: str = "log.txt"
    backup_count: int = 30


class Settings(BaseSettings):
    """Main application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings loaded from environment."""
    return Settings()
