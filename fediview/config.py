"""Configuration management using Pydantic Settings."""

from enum import Enum

from pydantic import model_validator
from pydantic_settings import BaseSettings

from fediview.exceptions import ConfigError


class StoreBackend(str, Enum):
    """Store backend type."""
    MEMORY = "memory"
    SQLITE = "sqlite"


class LogFormat(str, Enum):
    """Log output format."""
    JSON = "json"
    CONSOLE = "console"


class InstanceConfig(BaseSettings):
    """Read-only snapshot of deployment limits and policy."""

    # Instance identity
    host: str = "localhost"
    account_domain: str = ""
    protocol: str = "https"
    software_version: str = "0.1.0"

    # Status limits
    statuses_max_chars: int = 5000
    statuses_media_max_files: int = 6
    statuses_poll_max_options: int = 6
    statuses_poll_option_max_chars: int = 50

    # Media limits, in bytes
    media_image_max_size: int = 10 * 1024 * 1024
    media_video_max_size: int = 40 * 1024 * 1024
    media_emoji_local_max_size: int = 50 * 1024

    # Account policy
    accounts_registration_open: bool = True
    accounts_approval_required: bool = True
    accounts_allow_custom_css: bool = False

    # Store settings
    store_backend: StoreBackend = StoreBackend.SQLITE
    sqlite_path: str = ".fediview.db"

    # Logging
    log_level: str = "INFO"
    log_format: LogFormat = LogFormat.CONSOLE

    model_config = {
        "env_prefix": "FEDIVIEW_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "frozen": True,
    }

    @model_validator(mode="after")
    def _check(self) -> "InstanceConfig":
        if not self.host:
            raise ConfigError("host must not be empty")
        if self.protocol not in ("http", "https"):
            raise ConfigError(f"unsupported protocol {self.protocol!r}")
        return self

    @property
    def effective_account_domain(self) -> str:
        """Domain used in account handles, falls back to host."""
        return self.account_domain or self.host
