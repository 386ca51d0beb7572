# instance_describer/shared/config.py
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict


class AppEnv(str, Enum):
    DEVELOPMENT = "development"
    PRODUCTION = "production"
    TESTING = "testing"


class LogFormat(str, Enum):
    JSON = "json"
    CONSOLE = "console"


class Settings(BaseSettings):
    """
    Central Configuration Registry.
    Strictly typed and validated via Pydantic. Every field can be set from
    the environment with the DESCRIBER_ prefix (e.g. DESCRIBER_LOG_LEVEL).
    """

    # --- Application Meta ---
    APP_NAME: str = "Instance Describer"
    APP_ENV: AppEnv = AppEnv.DEVELOPMENT

    # --- Logging & Observability ---
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: LogFormat = LogFormat.CONSOLE
    # Log every CheckInstance outcome (failures at INFO, passes at DEBUG)
    LOG_CHECK_RESULTS: bool = True

    # --- Describers ---
    # Reuse one of_class / which_is_a describer per class name
    CACHE_DESCRIBERS: bool = True

    model_config = SettingsConfigDict(env_prefix="DESCRIBER_", env_file=".env", extra="ignore")


settings = Settings()
