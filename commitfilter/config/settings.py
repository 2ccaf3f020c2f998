from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Values are read from the process environment first and from a `.env` file
    in the working directory when one exists.
    """

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # Repository to scan
    REPOSITORY_PATH: str = "."
    DEFAULT_REV: str = "HEAD"

    # Upper bound on commits visited per request
    MAX_COUNT: int = 100

    # Hex digits shown for abbreviated object ids
    ABBREV_LENGTH: int = 7

    # Development and debugging
    DEBUG: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
