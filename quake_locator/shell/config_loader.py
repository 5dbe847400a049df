"""Configuration Loader - Imperative Shell.

This module handles loading configuration from YAML files and
environment variables. All I/O is contained here.

Models (Config, QuickSearchDefaults) are defined in the core package
to avoid information leakage between layers.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from quake_locator.core.config import Config, validate_config
from quake_locator.core.search import QuickSearchDefaults


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/config.yaml"

# Environment variable -> (config attribute, converter)
ENV_OVERRIDES = {
    "USGS_API_URL": ("usgs_api_url", str),
    "GEOCODER_URL": ("geocoder_url", str),
    "GEOCODER_USER_AGENT": ("user_agent", str),
    "REQUEST_TIMEOUT": ("request_timeout_seconds", int),
}


def _parse_quick_search(data: dict[str, Any]) -> QuickSearchDefaults:
    """Parse quick search defaults from config data."""
    defaults = QuickSearchDefaults()
    return QuickSearchDefaults(
        min_magnitude=float(data.get("min_magnitude", defaults.min_magnitude)),
        radius_km=float(data.get("radius_km", defaults.radius_km)),
        lookback_months=int(data.get("lookback_months", defaults.lookback_months)),
    )


def load_config_from_dict(data: dict[str, Any]) -> Config:
    """Load configuration from a dictionary.

    Pure function: missing keys fall back to the Config defaults.

    Args:
        data: Configuration dictionary

    Returns:
        Parsed Config object
    """
    defaults = Config()

    return Config(
        usgs_api_url=data.get("usgs_api_url", defaults.usgs_api_url),
        geocoder_url=data.get("geocoder_url", defaults.geocoder_url),
        user_agent=data.get("user_agent", defaults.user_agent),
        request_timeout_seconds=int(
            data.get("request_timeout_seconds", defaults.request_timeout_seconds)
        ),
        map_viewer_url=data.get("map_viewer_url", defaults.map_viewer_url),
        max_magnitude=float(data.get("max_magnitude", defaults.max_magnitude)),
        quick_search=_parse_quick_search(data.get("quick_search") or {}),
    )


def apply_env_overrides(config: Config) -> Config:
    """Override config values from environment variables.

    Unparsable values are logged and ignored.

    Args:
        config: Config to update in place

    Returns:
        The same config object
    """
    for env_name, (attribute, convert) in ENV_OVERRIDES.items():
        raw = os.environ.get(env_name)
        if not raw:
            continue
        try:
            setattr(config, attribute, convert(raw))
        except ValueError:
            logger.warning("Ignoring invalid %s=%r", env_name, raw)

    return config


def load_config(config_path: str | Path | None = None) -> Config:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses CONFIG_PATH env var or default.

    Returns:
        Parsed Config object with environment overrides applied

    Raises:
        yaml.YAMLError: If config file is invalid YAML
        ValueError: If the resulting configuration has errors
    """
    if config_path is None:
        config_path = os.environ.get("CONFIG_PATH", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.info("Config file not found: %s, using defaults", path)
        data = None
    else:
        with open(path, "r") as f:
            data = yaml.safe_load(f)

    if data is None:
        config = Config()
    else:
        config = load_config_from_dict(data)

    config = apply_env_overrides(config)

    result = validate_config(config)
    for warning in result.warnings:
        logger.warning("Config %s: %s", warning.field, warning.message)
    if not result.valid:
        details = "; ".join(f"{e.field}: {e.message}" for e in result.critical_errors)
        raise ValueError(f"Invalid configuration: {details}")

    return config
