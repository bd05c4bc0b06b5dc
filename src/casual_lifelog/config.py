"""
Configuration for casual-lifelog.

Read once from the environment at startup and frozen afterwards. The remote
mirror is enabled only when both REMOTE_URL and REMOTE_KEY are set.
"""

import logging
import os
from typing import Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from casual_lifelog.storage.local.codec import DEFAULT_STORAGE_KEY


class LifelogConfig(BaseModel):
    """Runtime configuration."""

    model_config = ConfigDict(frozen=True)

    remote_url: Optional[str] = Field(default=None, description="Remote mirror endpoint (REMOTE_URL)")
    remote_key: Optional[str] = Field(default=None, description="Remote access credential (REMOTE_KEY)")
    local_backend: Literal["file", "redis", "memory"] = Field(
        default="file", description="Where the local snippet cache lives"
    )
    data_dir: str = Field(default="~/.casual_lifelog", description="Directory for the file backend")
    storage_key: str = Field(default=DEFAULT_STORAGE_KEY, min_length=1)
    redis_host: str = "localhost"
    redis_port: int = Field(default=6379, ge=1, le=65535)
    redis_db: int = Field(default=0, ge=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @property
    def remote_enabled(self) -> bool:
        return bool(self.remote_url) and bool(self.remote_key)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LifelogConfig":
        """
        Build a config from environment variables.

        Args:
            environ: Mapping to read instead of os.environ (for tests)

        Raises:
            pydantic.ValidationError: If a value is invalid
        """
        env = os.environ if environ is None else environ

        values = {
            "remote_url": env.get("REMOTE_URL") or None,
            "remote_key": env.get("REMOTE_KEY") or None,
            "local_backend": env.get("LIFELOG_LOCAL_BACKEND"),
            "data_dir": env.get("LIFELOG_DATA_DIR"),
            "storage_key": env.get("LIFELOG_STORAGE_KEY"),
            "redis_host": env.get("LIFELOG_REDIS_HOST"),
            "redis_port": env.get("LIFELOG_REDIS_PORT"),
            "redis_db": env.get("LIFELOG_REDIS_DB"),
            "log_level": env.get("LIFELOG_LOG_LEVEL", "").upper() or None,
        }
        return cls(**{name: value for name, value in values.items() if value is not None})


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for scripts and interactive use."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
