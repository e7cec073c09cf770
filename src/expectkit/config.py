from __future__ import annotations

from pathlib import Path

import yaml
from expandvars import expandvars
from pydantic import BaseModel, ConfigDict, Field, field_validator


class ExpectConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    pp_max_depth: int = Field(8, ge=1)
    escape_usage_errors: bool = True
    log_file: str | None = None
    verbose: bool = False

    @field_validator("log_file")
    @classmethod
    def expand_log_file(cls, v: str | None) -> str | None:
        """Expand ${VAR} references, failing on unset variables without defaults."""
        if v is None:
            return v
        try:
            return expandvars(v, nounset=True)
        except Exception as e:
            raise ValueError(f"log_file has missing environment variables: {v}") from e


def load_config(path: Path) -> ExpectConfig:
    """Load and validate matcher settings from a YAML file."""
    config_dir = path.parent.resolve()

    with open(path) as f:
        raw = yaml.safe_load(f) or {}

    config = ExpectConfig(**raw)

    # Resolve a relative log file against the config file location
    if config.log_file is not None:
        log_path = Path(config.log_file)
        if not log_path.is_absolute():
            config.log_file = str((config_dir / log_path).resolve())

    return config
