"""Runtime settings, read from KNIGHTPATH_* environment variables."""

from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from knightpath.constants import DEFAULT_DATA_FILE


class Settings(BaseSettings):
    """
    Service settings.

    Fields:
        data_file: JSON file holding the persisted path collection.
        log_level: Root logging level for the web process, any case.
        host:      Interface uvicorn binds to.
        port:      Port uvicorn listens on.
    """

    model_config = SettingsConfigDict(env_prefix="KNIGHTPATH_")

    data_file: Path = Path(DEFAULT_DATA_FILE)
    log_level: str = "INFO"
    host: str = "127.0.0.1"
    port: int = 8000

    @field_validator("log_level")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """logging only accepts upper-case level names."""
        return v.strip().upper()


@lru_cache
def get_settings() -> Settings:
    return Settings()
