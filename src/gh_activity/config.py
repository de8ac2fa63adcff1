"""Configuration loading and validation."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

DEFAULT_ACCEPT = "application/vnd.github.v3+json"


class ApiConfig(BaseModel):
    """Remote endpoint configuration."""

    base_url: str = "https://api.github.com"
    accept: str = Field(default=DEFAULT_ACCEPT, pattern=r"^application/vnd\.github\.")
    timeout_seconds: float = Field(default=30.0, gt=0, le=300)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an absolute http(s) URL without a trailing slash."""
        if not v.startswith(("http://", "https://")):
            msg = f"base_url must start with http:// or https://, got '{v}'"
            raise ValueError(msg)
        return v.rstrip("/")


class ActivityConfig(BaseModel):
    """Activity aggregation configuration."""

    push_event_types: list[str] = Field(default_factory=lambda: ["PushEvent"], min_length=1)
    fill_gaps: bool = False


class Config(BaseModel):
    """Root configuration model."""

    api: ApiConfig = Field(default_factory=ApiConfig)
    activity: ActivityConfig = Field(default_factory=ActivityConfig)


def load_config(path: Path) -> Config:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        Validated Config object. An empty file yields the defaults.

    Raises:
        FileNotFoundError: If the config file doesn't exist.
        ValidationError: If the config is invalid.
    """
    if not path.exists():
        msg = f"Config file not found: {path}"
        raise FileNotFoundError(msg)

    with path.open() as f:
        raw_config: dict[str, Any] | None = yaml.safe_load(f)

    return Config.model_validate(raw_config or {})
