"""Configuration loader for userparam.

This module provides functions to load and validate the userparam
configuration from a YAML file.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import UserParamConfigModel

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "USERPARAM_CONFIG"


def find_config_path() -> Path | None:
    """Locate the configuration file.

    Looks for, in order:
    1. USERPARAM_CONFIG environment variable
    2. ~/.userparam/config.yaml
    3. ./userparam.yaml

    Returns:
        Path to use, or None when no file was found
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return Path(env_path)

    candidates = [Path.home() / ".userparam" / "config.yaml", Path.cwd() / "userparam.yaml"]
    for candidate in candidates:
        if candidate.exists():
            return candidate
    return None


def load_config(config_path: Path | str | None = None) -> UserParamConfigModel:
    """Load userparam configuration from a YAML file.

    Args:
        config_path: Optional path to the config file. If not provided, the
                    path is located with :func:`find_config_path`.

    Returns:
        UserParamConfigModel with all settings

    Raises:
        FileNotFoundError: If an explicitly configured file doesn't exist
        ValueError: If config is invalid
    """
    if config_path is None:
        config_path = find_config_path()
        if config_path is None:
            logger.info("No userparam config file found, using default configuration")
            return UserParamConfigModel()
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"userparam config file not found at {config_path}")

    logger.debug(f"Loading userparam config from: {config_path}")

    try:
        with open(config_path) as f:
            raw_config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML config file {config_path}: {e}") from e

    if not raw_config:
        logger.info("Empty userparam config file, using default configuration")
        return UserParamConfigModel()

    config = parse_config(raw_config)
    logger.debug(f"Loaded userparam config: {config}")
    return config


def parse_config(raw_config: Any) -> UserParamConfigModel:
    """Validate a loaded configuration document.

    The settings live under the top-level ``userparam`` key.

    Raises:
        ValueError: If the document is not a mapping or the settings are invalid
    """
    if not isinstance(raw_config, dict):
        raise ValueError("userparam config must be a mapping")

    section = raw_config.get("userparam") or {}
    if not isinstance(section, dict):
        raise ValueError("The 'userparam' section must be a mapping")

    try:
        return UserParamConfigModel.model_validate(section)
    except ValidationError as e:
        raise ValueError(f"Invalid userparam config: {e}") from e
