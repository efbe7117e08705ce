"""
Client configuration loading.

Settings are read from a YAML file and may be overridden by environment
variables. Keys use the same camelCase names as the rest of the tks tooling:

    tksInfoUrl: tks-info.example.com:9110
    contractId: P0010010a
    connectTimeout: 10   # optional, seconds to wait for the channel

Usage:
    from tks_client.config import load_config

    config = load_config()                       # ~/.tks-client.yaml + env
    config = load_config("/etc/tks/client.yaml")
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = ".tks-client.yaml"
CONFIG_PATH_ENV = "TKS_CONFIG"

# Environment variable -> config key
ENV_OVERRIDES = {
    "TKS_INFO_URL": "tksInfoUrl",
    "TKS_CONTRACT_ID": "contractId",
}


class ClientConfig(BaseModel):
    """Resolved client configuration."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    tks_info_url: str = Field(default="", alias="tksInfoUrl", description="Address of the tks-info gRPC service")
    contract_id: str = Field(default="", alias="contractId", description="Contract whose clusters are listed")
    connect_timeout: Optional[float] = Field(
        default=None,
        alias="connectTimeout",
        gt=0,
        description="Seconds to wait for the channel to become ready (no wait when unset)"
    )


def default_config_path() -> Path:
    """Return the config file used when none is given explicitly."""
    return Path.home() / DEFAULT_CONFIG_FILENAME


def _read_config_file(path: Path) -> Dict[str, Any]:
    """Load a YAML config file into a dictionary."""
    try:
        with open(path, 'r') as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Failed to read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in config file {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping, got {type(data).__name__}")

    logger.debug(f"Loaded configuration from {path}")
    return data


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    environ: Optional[Mapping[str, str]] = None
) -> ClientConfig:
    """
    Resolve the client configuration.

    An explicitly given path (argument or ``TKS_CONFIG``) must exist. The
    default path is optional, so settings can come from the environment only.

    Args:
        config_path: Path to YAML configuration file
        environ: Environment mapping, defaults to ``os.environ``

    Returns:
        Validated ClientConfig

    Raises:
        ConfigurationError: If the file cannot be read or values are invalid
    """
    environ = os.environ if environ is None else environ

    explicit = config_path or environ.get(CONFIG_PATH_ENV)
    path = Path(explicit).expanduser() if explicit else default_config_path()

    values: Dict[str, Any] = {}
    if path.exists():
        values.update(_read_config_file(path))
    elif explicit:
        raise ConfigurationError(f"Config file not found: {path}")
    else:
        logger.debug(f"No config file at {path}, using environment only")

    for env_name, key in ENV_OVERRIDES.items():
        if environ.get(env_name):
            values[key] = environ[env_name]

    try:
        return ClientConfig.model_validate(values)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e
