"""Application configuration: settings schema and config.yaml loader"""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


CONFIG_FILE = "config.yaml"
ENV_PREFIX = "DIFFPARSE_"

NO_NEWLINE_MARKER = r"^\\ No newline at end of file$"


class Settings(BaseModel):
    header_scan_limit: int = Field(default=6, ge=1, description="Lines scanned ahead for a delimiter-less section start")
    encoding:          str = Field(default="utf-8", description="Encoding used to read diff files")
    ignore_patterns:   list[str] = Field(
        default_factory=lambda: [NO_NEWLINE_MARKER],
        description="Regexes for lines dropped before classification",
    )
    log_level:  str = Field(default="WARNING", description="Log level name")
    log_format: str = Field(default="console", pattern="^(console|json)$", description="console or json")

    @field_validator("ignore_patterns", mode="before")
    @classmethod
    def _single_pattern(cls, value: Any) -> Any:
        """Accept one pattern as a plain string (env vars, CLI)."""
        if isinstance(value, str):
            return [value] if value else []
        return value

    @field_validator("log_level")
    @classmethod
    def _upper_level(cls, value: str) -> str:
        return value.upper()


def load_config(overrides: dict[str, Any] = None) -> Settings:
    """Load Settings from config.yaml, then DIFFPARSE_<FIELD> env vars, then non-None CLI overrides."""
    data: dict[str, Any] = {}
    if Path(CONFIG_FILE).exists():
        try:
            data = yaml.safe_load(Path(CONFIG_FILE).read_text()) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid {CONFIG_FILE}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid {CONFIG_FILE}: expected a mapping, got {type(data).__name__}")

    for name in Settings.model_fields:
        if (val := os.getenv(f"{ENV_PREFIX}{name.upper()}")) is not None:
            data[name] = val

    if overrides:
        data.update({k: v for k, v in overrides.items() if v is not None})
    return Settings(**data)
