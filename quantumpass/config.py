"""
Configuration for the quantumpass generator.

The config file is plain JSON. Only ``api_key`` is needed; the other keys
are optional overrides:

{
  "api_key": "<ANU quantum numbers key>",
  "block_size": 100,
  "source": "anu"
}
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .errors import ConfigError

DEFAULT_CONFIG_PATH = Path("config.json")
DEFAULT_BASE_URL = "https://api.quantumnumbers.anu.edu.au"

SOURCE_ANU = "anu"
SOURCE_SIMULATOR = "simulator"


class QuantumPassConfig(BaseModel):
    """
    Settings read from config.json. Unknown keys are ignored; known keys
    must already have the right JSON type (no string-to-int coercion).
    """

    model_config = ConfigDict(frozen=True, strict=True, extra="ignore")

    api_key: str = Field(default="", description="Sent as the x-api-key header")
    base_url: str = DEFAULT_BASE_URL

    # Passed straight through as the `type` and `size` query parameters.
    data_type: str = "uint8"
    block_size: int = 100

    timeout: float = Field(default=30.0, gt=0, description="HTTP timeout in seconds")

    source: str = Field(default=SOURCE_ANU, description='"anu" or "simulator"')

    # Qubits per simulator shot; the engine also checks the backend limit.
    num_qubits: int = Field(default=16, ge=1)

    @field_validator("api_key")
    @classmethod
    def _ascii_api_key(cls, value: str) -> str:
        # HTTP header values must be ASCII
        if not value.isascii():
            raise ValueError("api_key must contain only ASCII characters")
        return value


DEFAULT_CONFIG = QuantumPassConfig()


def load_config(path: str | Path = DEFAULT_CONFIG_PATH) -> QuantumPassConfig:
    """
    Read the JSON config file at `path`.

    Raises ConfigError if the file is missing, unreadable, not UTF-8, not
    valid JSON, or fails model validation. An empty api_key is accepted
    here; the pipeline decides whether the selected source needs one.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except UnicodeDecodeError as exc:
        raise ConfigError(f"Config file {path} is not UTF-8: {exc}") from exc

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ConfigError(f"Config file {path} is not valid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise ConfigError(f"Config file {path} must contain a JSON object")

    try:
        return QuantumPassConfig.model_validate(payload)
    except ValidationError as ve:
        raise ConfigError(f"Invalid config file {path}: {ve}") from ve


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_CONFIG",
    "DEFAULT_CONFIG_PATH",
    "QuantumPassConfig",
    "SOURCE_ANU",
    "SOURCE_SIMULATOR",
    "load_config",
]
