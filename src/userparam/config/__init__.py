"""Configuration for userparam.

Example:
    >>> from userparam.config import load_config
    >>> config = load_config("userparam.yaml")
    >>> config.ismulti_limit1
    50
"""

from .loader import CONFIG_ENV_VAR, find_config_path, load_config, parse_config
from .models import SeedUserModel, UserParamConfigModel

__all__ = [
    "CONFIG_ENV_VAR",
    "find_config_path",
    "load_config",
    "parse_config",
    "SeedUserModel",
    "UserParamConfigModel",
]
