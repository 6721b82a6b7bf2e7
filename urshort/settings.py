import enum
from pathlib import Path
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

STATIC_DIR = Path(__file__).parent / "static"


class LogLevel(str, enum.Enum):
    """Possible log levels."""

    NOTSET = "NOTSET"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    FATAL = "FATAL"


class Settings(BaseSettings):
    """
    Application settings.

    These parameters can be configured
    with environment variables.

    The redirect mappings and the listening port are not fields here: they are
    read from the raw environment by
    :func:`urshort.services.mapping.loader.load_mapping_config`, which tolerates
    malformed entries instead of failing validation.
    """

    host: str = "0.0.0.0"
    # used when URSHORT_PORT is missing or not a valid port number
    default_port: int = 3000
    # quantity of workers for uvicorn
    workers_count: int = 1
    # Enable uvicorn reloading
    reload: bool = False

    log_level: LogLevel = LogLevel.INFO

    # ========== Mapping variables ==========
    standard_uri_prefix: str = "URSHORT_STANDARD_URI_"
    pattern_uri_prefix: str = "URSHORT_PATTERN_URI_"
    pattern_regex_prefix: str = "URSHORT_PATTERN_REGEX_"
    port_env_name: str = "URSHORT_PORT"

    # .env file merged into the process environment before mappings are read
    env_file: str = ".env"

    # HTML pages, packaged defaults unless overridden
    welcome_page: Optional[Path] = None
    error_page: Optional[Path] = None

    @property
    def welcome_page_path(self) -> Path:
        """Get the welcome page location, using the packaged page if not set."""
        return self.welcome_page or STATIC_DIR / "index.html"

    @property
    def error_page_path(self) -> Path:
        """Get the error page location, using the packaged page if not set."""
        return self.error_page or STATIC_DIR / "error.html"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="URSHORT_",
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
