# file: src/reed_solomon/config.py

"""
Configuration loading.

Configuration is a plain dictionary, normally read from YAML:

    ecc:
      type: reed_solomon
      reed_solomon: {n: 255, k: 223, nsym: 32}
"""

import os
from typing import Any, Dict, Optional, Tuple

import yaml

from .errors import ConfigurationError

DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.yaml")

DEFAULT_N = 255
DEFAULT_K = 223
DEFAULT_NSYM = 32


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load configuration from a YAML file.

    Args:
        config_path: Path to config file, or None for the packaged default

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If the file is missing or not a YAML mapping
    """
    if config_path is None:
        config_path = DEFAULT_CONFIG_PATH

    if not os.path.exists(config_path):
        raise ConfigurationError(f"Config file not found: {config_path}")

    try:
        with open(config_path, "r") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {config_path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigurationError(f"Config file {config_path} must contain a mapping")
    return config


def get_ecc_type(config: Dict[str, Any]) -> str:
    try:
        return config["ecc"]["type"]
    except (KeyError, TypeError) as e:
        raise ConfigurationError(f"Missing required config key: {e}") from e


def get_reed_solomon_params(config: Dict[str, Any]) -> Tuple[int, int, int]:
    """
    Extract (n, k, nsym) from config['ecc']['reed_solomon'], with defaults.
    """
    ecc_config = config.get("ecc") or {}
    if not isinstance(ecc_config, dict):
        raise ConfigurationError("config['ecc'] must be a mapping")
    rs_config = ecc_config.get("reed_solomon") or {}
    if not isinstance(rs_config, dict):
        raise ConfigurationError("config['ecc']['reed_solomon'] must be a mapping")

    params = {
        "n": rs_config.get("n", DEFAULT_N),
        "k": rs_config.get("k", DEFAULT_K),
        "nsym": rs_config.get("nsym"),
    }
    for name, value in params.items():
        if value is None:
            continue
        if not isinstance(value, int) or isinstance(value, bool):
            raise ConfigurationError(f"config['ecc']['reed_solomon']['{name}'] must be an integer")

    n, k = params["n"], params["k"]
    nsym = params["nsym"] if params["nsym"] is not None else n - k
    return n, k, nsym
