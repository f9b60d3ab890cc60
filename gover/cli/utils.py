"""
Shared utilities for CLI commands.

Provides configuration loading and install root setup used by every
command, so they behave the same way.
"""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from gover.core.directory import ensure_install_root, get_install_root
from gover.core.exceptions import ConfigError
from gover.toolchain.installer import DEFAULT_DOWNLOAD_URL

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "GOVER_CONFIG"


# ============================================================================
# Configuration Management
# ============================================================================


@dataclass
class GoverConfig:
    """Settings read from the optional configuration file."""

    root: Optional[Path] = None
    """Install root override (default: <home>/sdk/gover)"""

    download_url: str = DEFAULT_DOWNLOAD_URL
    """Base URL of the distribution server"""

    timeout: Optional[float] = None
    """Fetch timeout in seconds (default: none)"""


def load_yaml_config(config_file: Path, required: bool = False) -> Dict[str, Any]:
    """
    Load and parse a YAML configuration file.

    Args:
        config_file: Path to YAML configuration file
        required: If True, raise error if file doesn't exist

    Returns:
        Configuration dictionary (empty dict if file doesn't exist and not required)

    Raises:
        ConfigError: If the file is required and missing, or is not valid YAML
    """
    if not config_file.exists():
        if required:
            raise ConfigError(f"Configuration file not found: {config_file}")
        logger.debug(f"Config file not found (optional): {config_file}")
        return {}

    logger.debug(f"Loading configuration from {config_file}")

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_file}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read {config_file}: {e}") from e

    config = config or {}
    if not isinstance(config, dict):
        raise ConfigError(f"Configuration in {config_file} must be a mapping")
    return config


def load_config(config_file: Optional[Path] = None) -> GoverConfig:
    """
    Build the effective configuration.

    The file is taken from the argument, then from $GOVER_CONFIG. Without
    either, defaults are used.

    Raises:
        ConfigError: If the file is missing, malformed or has bad values
    """
    if config_file is None and os.environ.get(CONFIG_ENV_VAR):
        config_file = Path(os.environ[CONFIG_ENV_VAR])
    if config_file is None:
        return GoverConfig()

    data = load_yaml_config(Path(config_file), required=True)
    config = GoverConfig()

    for key, value in data.items():
        if key == "root":
            config.root = Path(str(value)).expanduser() if value else None
        elif key == "download_url":
            if not isinstance(value, str) or not value:
                raise ConfigError("download_url must be a non-empty string")
            config.download_url = value
        elif key == "timeout":
            if value is not None and (
                isinstance(value, bool) or not isinstance(value, (int, float))
            ):
                raise ConfigError("timeout must be a number of seconds")
            config.timeout = float(value) if value is not None else None
        else:
            logger.debug(f"Ignoring unknown configuration key: {key}")

    return config


def prepare_root(config: GoverConfig) -> Path:
    """
    Resolve and create the install root.

    Raises:
        HomeResolutionError: If the home directory can't be determined
        DirectoryCreationError: If the root can't be created
    """
    root = get_install_root(config.root)
    return ensure_install_root(root)
