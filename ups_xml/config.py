"""YAML configuration loader with env var resolution and Pydantic validation.

Loads config from (priority order):
1. Explicit path argument
2. ./ups_xml.yaml or ./ups_xml.yml (working directory)
3. ~/.ups_xml/config.yaml (user home)

Environment variables override YAML: UPS_XML_<FIELD>.
${VAR} references in YAML values resolve from environment at load time.
"""

import logging
import os
import re
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ups_xml.services.ups_constants import DEFAULT_PICKUP_TYPE, PICKUP_CODES

logger = logging.getLogger(__name__)

_ENV_VAR_PATTERN = re.compile(r"\$\{([^}]+)\}")

ENV_PREFIX = "UPS_XML_"


def resolve_env_vars(value: str) -> str:
    """Resolve ${VAR} references in a string from environment variables.

    Args:
        value: String potentially containing ${VAR} references.

    Returns:
        String with all ${VAR} references replaced by their env values.
        Missing env vars resolve to empty string.
    """
    def _replace(match: re.Match) -> str:
        return os.environ.get(match.group(1), "")

    return _ENV_VAR_PATTERN.sub(_replace, value)


def _resolve_env_vars_recursive(data: Any) -> Any:
    """Recursively resolve ${VAR} references in a nested data structure."""
    if isinstance(data, str):
        return resolve_env_vars(data)
    elif isinstance(data, dict):
        return {k: _resolve_env_vars_recursive(v) for k, v in data.items()}
    elif isinstance(data, list):
        return [_resolve_env_vars_recursive(item) for item in data]
    return data


class UPSConfig(BaseModel):
    """UPS XML API credentials and client defaults.

    Immutable once constructed; each UPSService holds its own instance.
    """

    model_config = ConfigDict(frozen=True)

    key: str = Field(min_length=1)  # Access license number
    login: str = Field(min_length=1)
    password: str = Field(min_length=1)
    test: bool = False
    origin_account: str | None = None
    destination_account: str | None = None
    pickup_type: str = DEFAULT_PICKUP_TYPE
    timeout: float = Field(default=30.0, gt=0)

    @field_validator("pickup_type")
    @classmethod
    def known_pickup_type(cls, value: str) -> str:
        """Reject pickup types UPS has no code for."""
        if value not in PICKUP_CODES:
            raise ValueError(
                f"pickup_type must be one of {', '.join(sorted(PICKUP_CODES))}"
            )
        return value


def _find_config_file() -> Path | None:
    """Search for config file in standard locations.

    Returns:
        Path to config file if found, None otherwise.
    """
    candidates = [
        Path.cwd() / "ups_xml.yaml",
        Path.cwd() / "ups_xml.yml",
        Path.home() / ".ups_xml" / "config.yaml",
        Path.home() / ".ups_xml" / "config.yml",
    ]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Apply UPS_XML_<FIELD> env var overrides to config data.

    For example, ``UPS_XML_TEST=true`` sets ``test``.

    Args:
        data: Parsed YAML config dict.

    Returns:
        Config dict with env var overrides applied.
    """
    known_fields = set(UPSConfig.model_fields)
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX):
            continue
        field_name = key[len(ENV_PREFIX):].lower()
        if field_name not in known_fields:
            continue
        if value.lower() in ("true", "false"):
            data[field_name] = value.lower() == "true"
        else:
            data[field_name] = value
    return data


def load_config(config_path: str | None = None) -> UPSConfig | None:
    """Load UPS configuration from YAML file with env var resolution.

    Args:
        config_path: Explicit path to config file. If None, searches
            standard locations (cwd, then ~/.ups_xml/).

    Returns:
        Parsed and validated UPSConfig, or None if no config found.

    Raises:
        FileNotFoundError: If config_path is given but does not exist.
        pydantic.ValidationError: If credentials are missing or invalid.
    """
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        path = _find_config_file()
        if path is None:
            return None

    logger.info("Loading config from %s", path)

    with open(path) as f:
        raw_data = yaml.safe_load(f) or {}

    # Accept either a top-level mapping or one nested under "ups"
    if isinstance(raw_data.get("ups"), dict):
        raw_data = raw_data["ups"]

    data = _resolve_env_vars_recursive(raw_data)
    data = _apply_env_overrides(data)

    return UPSConfig(**data)
