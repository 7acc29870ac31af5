from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Event Management'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Logging
    LOG_TIMEZONE: str = 'UTC'
    LOG_TRUNCATE_LENGTH: int = 500  # Max chars of a logged arg/return value

    # Ticketing defaults
    DEFAULT_CURRENCY: str = 'TND'

    @field_validator('DEFAULT_CURRENCY', mode='before')
    @classmethod
    def normalize_currency(cls, v: str) -> str:
        return v.strip().upper() if isinstance(v, str) else v

    # Ended-event completion job (triggered externally, e.g. daily at midnight UTC)
    EVENT_SCHEDULER_ENABLED: bool = True
    EVENT_SCHEDULER_BATCH_LIMIT: int = 500  # Max events completed per run


settings = Settings()  # type: ignore
