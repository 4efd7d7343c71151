"""
Configuration utilities for the jr command
"""

import json
import logging
import math
import os
from pathlib import Path
from typing import Dict, Any, Optional


logger = logging.getLogger("jr.config")

DEFAULT_CONFIG_FILE = "jr_config.json"

DEFAULT_CONFIG = {
    "no_format": False,
    "timeout": None,
    "wrap_params": False,
    "log_level": "WARNING",
    "log_file": None
}

_BOOL_KEYS = ["no_format", "wrap_params"]
_FLOAT_KEYS = ["timeout"]
_STR_KEYS = ["log_level", "log_file"]


def convert_value(key: str, value: Any) -> Any:
    """Coerce one config value to its expected type.

    Raises ValueError for values that cannot be used.
    """
    if value is None:
        if key in _BOOL_KEYS or key == "log_level":
            raise ValueError("must not be null")
        return None
    if key in _FLOAT_KEYS:
        if isinstance(value, bool):
            raise ValueError("not a number")
        number = float(value)
        if not 0 < number < math.inf:
            raise ValueError("must be a positive number of seconds")
        return number
    if key in _BOOL_KEYS:
        if isinstance(value, bool):
            return value
        return str(value).lower() in ("true", "1", "yes", "on")
    if key in _STR_KEYS:
        if not isinstance(value, str):
            raise ValueError("must be a string")
    return value


def load_config(config_file: str = DEFAULT_CONFIG_FILE) -> Dict[str, Any]:
    """Load configuration from file"""
    config_path = Path(config_file)

    if config_path.exists():
        try:
            with open(config_path, 'r') as f:
                config = json.load(f)
            if not isinstance(config, dict):
                raise ValueError("top-level value must be an object")

            # Merge with defaults, dropping values of the wrong type
            merged_config = DEFAULT_CONFIG.copy()
            for key, value in config.items():
                try:
                    merged_config[key] = convert_value(key, value)
                except (TypeError, ValueError) as e:
                    logger.warning(f"Ignoring {key}={value!r} in {config_file}: {e}")
            return merged_config

        except (ValueError, IOError) as e:
            logger.warning(f"Could not load config file {config_file}: {e}")
            return DEFAULT_CONFIG.copy()

    return DEFAULT_CONFIG.copy()


def get_env_config() -> Dict[str, Any]:
    """Get configuration from environment variables"""
    env_config = {}

    # Map environment variables to config keys
    env_mapping = {
        "JR_NO_FORMAT": "no_format",
        "JR_TIMEOUT": "timeout",
        "JR_WRAP_PARAMS": "wrap_params",
        "JR_LOG_LEVEL": "log_level",
        "JR_LOG_FILE": "log_file"
    }

    for env_var, config_key in env_mapping.items():
        value = os.getenv(env_var)
        if value is not None:
            try:
                env_config[config_key] = convert_value(config_key, value)
            except ValueError as e:
                logger.warning(f"Ignoring {env_var}={value!r}: {e}")

    return env_config


def merge_configs(*configs: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    """Merge multiple configuration dictionaries, later ones winning"""
    merged = {}

    for config in configs:
        if config:
            merged.update(config)

    return merged


def resolve_config(
    config_file: str = DEFAULT_CONFIG_FILE,
    overrides: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Defaults < config file < environment < command-line overrides"""
    return merge_configs(load_config(config_file), get_env_config(), overrides)
