import logging
from enum import Enum
from functools import lru_cache
from typing import List

from pydantic import AnyHttpUrl, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ScenarioStore(str, Enum):
    DATABASE = "database"
    MEMORY = "memory"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    app_name: str = Field(default="Invoicing ROI Simulator")
    environment: str = Field(default="development")
    database_url: str = Field(default="sqlite+aiosqlite:///./roi_simulator.db")
    database_echo: bool = Field(default=False)
    scenario_store: ScenarioStore = Field(
        default=ScenarioStore.DATABASE,
        description="Scenario persistence adapter: 'database' (SQLAlchemy) or 'memory' (process-local)",
    )
    allowed_origins: List[AnyHttpUrl] = Field(default_factory=list)
    log_level: str = Field(default="INFO")

    @field_validator("scenario_store", mode="before")
    @classmethod
    def validate_scenario_store(cls, value: object) -> object:
        """
        Normalize the store name and reject unknown adapters with a readable message.
        """
        if isinstance(value, ScenarioStore):
            return value
        normalized = str(value).strip().lower()
        allowed = {store.value for store in ScenarioStore}
        if normalized not in allowed:
            raise ValueError(f"scenario_store must be one of {sorted(allowed)}, got '{value}'")
        return normalized

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, value: object) -> str:
        level = str(value).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level must be a standard logging level name, got '{value}'")
        return level


@lru_cache(maxsize=None)
def get_settings() -> Settings:
    """
    Get cached settings instance.

    The same instance is returned for the application lifecycle so that the
    engine, the repository factory and the logging setup agree on configuration.

    Returns:
        Settings: The cached settings instance
    """
    return Settings()


def clear_settings_cache() -> None:
    """
    Clear the cached settings instance.

    After calling this function, the next call to get_settings() re-reads the
    environment.
    """
    get_settings.cache_clear()
