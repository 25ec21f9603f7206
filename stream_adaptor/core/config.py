from functools import lru_cache
from typing import Annotated, Any, FrozenSet, List
import json
import os

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


class Settings(BaseSettings):
    """Library configuration settings loaded from environment variables."""

    PROJECT_NAME: str = "Stream Adaptor"

    # Logging settings
    LOG_LEVEL: str = "INFO"
    ENABLE_STRUCTURED_LOGGING: bool = True

    # Response validation settings
    ACCEPTABLE_CONTENT_TYPES: Annotated[List[str], NoDecode] = ["application/json", "text/json", "text/javascript"]
    ACCEPTABLE_STATUS_MIN: int = 200
    ACCEPTABLE_STATUS_MAX: int = 299

    # Deserialization settings
    REMOVES_KEYS_WITH_NULL_VALUES: bool = False
    RECURSIVE_KEY_MAPPING: bool = True

    model_config = SettingsConfigDict(
        env_prefix="STREAM_ADAPTOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("ACCEPTABLE_CONTENT_TYPES", mode="before")
    @classmethod
    def assemble_content_types(cls, v: Any) -> List[str]:
        """Parse content types from a comma-separated string, a JSON list or a list."""
        if isinstance(v, str) and not v.strip().startswith("["):
            return [i.strip() for i in v.split(",") if i.strip()]
        elif isinstance(v, str):
            return json.loads(v)
        elif isinstance(v, (list, tuple, set, frozenset)):
            return list(v)
        raise ValueError(v)

    @field_validator("LOG_LEVEL")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        """Reject log level names the logging module does not know."""
        if v.upper() not in ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"):
            raise ValueError(f"Unknown log level: {v}")
        return v.upper()

    @field_validator("ACCEPTABLE_STATUS_MAX")
    @classmethod
    def check_status_range(cls, v: int, info) -> int:
        """Ensure the acceptable status range is not inverted."""
        low = info.data.get("ACCEPTABLE_STATUS_MIN")
        if low is not None and v < low:
            raise ValueError("ACCEPTABLE_STATUS_MAX must not be lower than ACCEPTABLE_STATUS_MIN")
        return v

    @property
    def acceptable_content_types(self) -> FrozenSet[str]:
        """Acceptable content types, lowercased."""
        return frozenset(item.strip().lower() for item in self.ACCEPTABLE_CONTENT_TYPES if item.strip())

    @property
    def acceptable_status_codes(self) -> range:
        """Inclusive range of status codes treated as success."""
        return range(self.ACCEPTABLE_STATUS_MIN, self.ACCEPTABLE_STATUS_MAX + 1)


def load_env_file(env_file: str = ".env") -> bool:
    """
    Load environment variables from specified .env file.

    Args:
        env_file: Path to the .env file. Defaults to ".env".

    Returns:
        bool: True if the file existed and was loaded
    """
    env_path = os.path.join(os.getcwd(), env_file)
    if not os.path.exists(env_path):
        return False
    load_dotenv(env_path)
    get_settings.cache_clear()
    return True


@lru_cache()
def get_settings() -> Settings:
    """
    Get library settings with caching for efficiency.

    Returns:
        Settings: Library settings instance
    """
    return Settings()
