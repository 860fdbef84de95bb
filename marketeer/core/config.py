"""
Configuration management utilities for the Marketeer package.

This module provides functions for loading and accessing configuration settings.

Configuration Hierarchy:
1. Default configuration (marketeer/core/default_config.json) - Base settings for all installations
2. User configuration (~/.marketeer/config.json) - User-specific overrides that persist across runs
3. Runtime overrides - Temporary changes made during program execution via set_config_value()

The user configuration is deep merged into the defaults, so a user can override
a single nested value (e.g. ``generation.model``) without restating the rest.
"""

import os
import json
from typing import Dict, Any

# Default configuration paths
DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(__file__), "default_config.json")
USER_CONFIG_PATH = os.path.expanduser("~/.marketeer/config.json")

# Configuration singleton
_config_cache = {}

def get_config(reload: bool = False) -> Dict[str, Any]:
    """
    Get the configuration dictionary, loading it if necessary.

    Args:
        reload (bool): Force reload the configuration even if cached

    Returns:
        Dict[str, Any]: The configuration dictionary
    """
    global _config_cache

    if not _config_cache or reload:
        _config_cache = load_config()

    return _config_cache

def load_config() -> Dict[str, Any]:
    """
    Load configuration from default and user-specific files.

    Starts from the packaged defaults and deep merges the user configuration
    at USER_CONFIG_PATH on top of them when that file exists.

    Returns:
        Dict[str, Any]: The merged configuration dictionary
    """
    config = {}

    if os.path.exists(DEFAULT_CONFIG_PATH):
        with open(DEFAULT_CONFIG_PATH, 'r') as f:
            config.update(json.load(f))

    if os.path.exists(USER_CONFIG_PATH):
        with open(USER_CONFIG_PATH, 'r') as f:
            user_config = json.load(f)
            deep_merge(config, user_config)

    return config

def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> None:
    """
    Recursively merge override dictionary into base dictionary.

    If a key exists in both dictionaries and both values are dictionaries,
    they are merged recursively; otherwise the override value wins.

    Args:
        base (Dict[str, Any]): Base dictionary to be updated
        override (Dict[str, Any]): Dictionary with values to override
    """
    for key, value in override.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            deep_merge(base[key], value)
        else:
            base[key] = value

def save_user_config(config: Dict[str, Any]) -> None:
    """
    Save user configuration to the user config file.

    Args:
        config (Dict[str, Any]): Configuration dictionary to save
    """
    os.makedirs(os.path.dirname(USER_CONFIG_PATH), exist_ok=True)

    with open(USER_CONFIG_PATH, 'w') as f:
        json.dump(config, f, indent=2)

    # Update cache
    global _config_cache
    _config_cache = load_config()

def get_config_value(key: str, default: Any = None) -> Any:
    """
    Get a specific configuration value by key.

    Dot notation reaches into nested sections, so 'generation.model'
    resolves config['generation']['model'].

    Examples:
        >>> get_config_value('generation.model', 'gpt-4o')
        'openai/gpt-4o'

        >>> get_config_value('nonexistent.key', 'default-value')
        'default-value'

    Args:
        key (str): The configuration key (can use dot notation for nested keys)
        default (Any): Default value if key is not found

    Returns:
        Any: The configuration value or default
    """
    config = get_config()

    if '.' in key:
        current = config
        for part in key.split('.'):
            if isinstance(current, dict) and part in current:
                current = current[part]
            else:
                return default
        return current

    return config.get(key, default)

def set_config_value(key: str, value: Any, save: bool = True) -> None:
    """
    Set a specific configuration value by key.

    Intermediate sections are created as needed. With save=True the change is
    written to the user configuration file; with save=False it only lasts for
    the current process.

    Args:
        key (str): The configuration key (can use dot notation for nested keys)
        value (Any): The value to set
        save (bool): Whether to save the updated configuration to disk
    """
    config = get_config()

    if '.' in key:
        parts = key.split('.')
        current = config

        for part in parts[:-1]:
            if part not in current or not isinstance(current[part], dict):
                current[part] = {}
            current = current[part]

        current[parts[-1]] = value
    else:
        config[key] = value

    global _config_cache
    _config_cache = config

    if save:
        save_user_config(config)
