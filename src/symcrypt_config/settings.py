"""Settings for the symcrypt command line, loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. SYMCRYPT_ENV_FILE environment variable (path to a .env file)
3. .env in the current working directory

Uses pydantic-settings for automatic type coercion and validation. The
encryption core never reads settings; only the CLI does.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from symcrypt.domain.value_objects import HexKey


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. SYMCRYPT_ENV_FILE env var (relative paths resolve against the cwd)
    2. .env in the current working directory
    """
    env_file_path = os.environ.get("SYMCRYPT_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path).expanduser()
        if path.exists():
            return path

    local_env = Path.cwd() / ".env"
    if local_env.exists():
        return local_env

    return None


class Settings(BaseSettings):
    """CLI configuration loaded from SYMCRYPT_* environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (see _resolve_env_file_path)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="SYMCRYPT_",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Hex-encoded 32-byte key (SYMCRYPT_KEY); validated when a client is built
    key: SecretStr | None = None

    # Logging (SYMCRYPT_LOG_LEVEL)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: object) -> str:
        """Accept level names in any case."""
        return str(v).strip().upper() if v else "WARNING"

    def hex_key(self) -> HexKey | None:
        """Return the configured key, or None if unset."""
        if self.key is None:
            return None
        return HexKey(self.key.get_secret_value().strip())


@lru_cache()
def get_settings() -> Settings:
    """Return cached settings."""
    return Settings(_env_file=_resolve_env_file_path())  # type: ignore[call-arg]


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
