#!/usr/bin/env python3

import os
import json
import tomllib
from pathlib import Path

import logging
import sys

import yaml

from .exit_codes import ConfigError

# Configure logging
logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s: %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr) # Default to stderr
    ]
)
logger = logging.getLogger("modcommit")

CONFIG_FILENAMES = ['config.json', 'config.toml', 'config.yaml', 'config.yml']


def get_config_path():
    """Get the path to the configuration file.

    Checks in order:
    1. MODCOMMIT_CONFIG environment variable
    2. ~/.modcommit/ directory
    """
    if 'MODCOMMIT_CONFIG' in os.environ:
        path = Path(os.environ['MODCOMMIT_CONFIG']).expanduser()
        if path.exists():
            return path
        logger.debug(f"MODCOMMIT_CONFIG points at missing file {path}")

    config_dir = Path.home() / '.modcommit'
    for filename in CONFIG_FILENAMES:
        path = config_dir / filename
        if path.exists():
            return path

    # If no file exists, return default path
    return config_dir / 'config.json'


def get_default_config():
    """Get default configuration."""
    return {
        "installer": {
            "name": "pip",
            "extra_args": [],
            "python": "",  # empty = the running interpreter
            "npm": "npm",
        },
        "git": {
            "executable": "git",
        },
        "commit": {
            "parent": "HEAD",
        },
        "logging": {
            "level": "WARNING",
        },
    }


def read_config_file(config_path):
    """Parse a config file according to its suffix."""
    suffix = config_path.suffix.lower()
    try:
        if suffix == '.toml':
            with open(config_path, 'rb') as f:
                return tomllib.load(f)
        elif suffix in ['.yaml', '.yml']:
            with open(config_path, 'r') as f:
                return yaml.safe_load(f) or {}
        else:
            # Default to JSON format
            with open(config_path, 'r') as f:
                return json.load(f)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise ConfigError(f"cannot load configuration: {e}", path=str(config_path)) from e


def load_config():
    """Load configuration from file."""
    config_path = get_config_path()

    # Start with default config
    config = get_default_config()

    if config_path.exists():
        file_config = read_config_file(config_path)
        if not isinstance(file_config, dict):
            raise ConfigError("top level must be a mapping", path=str(config_path))
        logger.debug(f"Loaded configuration from {config_path}")
        config = merge_configs(config, file_config)

    # Apply environment variable overrides
    config = apply_env_overrides(config)

    validate_config(config, path=str(config_path) if config_path.exists() else None)

    return config


def validate_config(config, path=None):
    """
    Check that the known settings still have the shapes the defaults give them.

    Raises:
        ConfigError: A section is not a mapping or a value has the wrong type
    """
    for section, defaults in get_default_config().items():
        values = config.get(section)
        if not isinstance(values, dict):
            raise ConfigError(f"'{section}' must be a mapping", path=path)

        for key, default in defaults.items():
            value = values.get(key, default)
            if isinstance(default, list):
                if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                    raise ConfigError(f"'{section}.{key}' must be a list of strings", path=path)
            elif isinstance(default, str) and not isinstance(value, str):
                raise ConfigError(f"'{section}.{key}' must be a string", path=path)


def merge_configs(base_config, override_config):
    """
    Recursively merge two configuration dictionaries.

    Args:
        base_config (dict): Base configuration
        override_config (dict): Configuration to merge/override with

    Returns:
        dict: Merged configuration
    """
    merged = base_config.copy()

    for key, value in override_config.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            # Recursively merge nested dictionaries
            merged[key] = merge_configs(merged[key], value)
        else:
            # Override or add new key
            merged[key] = value

    return merged


def apply_env_overrides(config):
    """
    Apply environment variable overrides to configuration.
    Environment variables follow the pattern: MODCOMMIT_SECTION_KEY
    For example: MODCOMMIT_INSTALLER_NAME=npm

    List values are given as comma-separated strings.
    """
    env_prefix = "MODCOMMIT_"

    for env_key, value in os.environ.items():
        if not env_key.startswith(env_prefix) or env_key == "MODCOMMIT_CONFIG":
            continue

        key_parts = env_key[len(env_prefix):].lower().split('_')

        current_level = config
        i = 0
        while i < len(key_parts):
            # Find the longest key in current_level that is a prefix of the remaining key_parts
            best_match_len = 0
            matched_key = None

            for config_key in current_level.keys():
                config_key_parts = config_key.split('_')
                if key_parts[i : i + len(config_key_parts)] == config_key_parts:
                    if len(config_key_parts) > best_match_len:
                        best_match_len = len(config_key_parts)
                        matched_key = config_key

            if not matched_key:
                break

            if i + best_match_len == len(key_parts):
                current_level[matched_key] = _convert_env_value(value, current_level[matched_key])
                break

            if isinstance(current_level[matched_key], dict):
                current_level = current_level[matched_key]
                i += best_match_len
            else:
                # Path conflict, env var is longer than the config path
                break

    return config


def _convert_env_value(value, current):
    if isinstance(current, list):
        return [item.strip() for item in value.split(',') if item.strip()]
    if value.lower() in ('true', 'yes', 'on'):
        return True
    if value.lower() in ('false', 'no', 'off'):
        return False
    if value.isdigit() and not isinstance(current, str):
        return int(value)
    return value


def configure_logging(level):
    """Set the package log level from a name such as 'DEBUG'."""
    numeric = logging.getLevelName(str(level).upper())
    if not isinstance(numeric, int):
        raise ConfigError(f"unknown logging level: {level}")
    logger.setLevel(numeric)
