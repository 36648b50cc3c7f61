"""
Configuration utility for htmlnode.
"""

import copy
import logging
import os
import json
from typing import Dict, Any, Optional
import threading

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "HTMLNODE_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "parser": {
        "keep_whitespace_text": True,
        "clean_control_characters": True,
    },
    "conversion": {
        "default_locale": None,
        "default_time_zone": None,
    },
    "serializer": {
        "quote_attr_values": "always",
        "omit_optional_tags": False,
        "minimize_boolean_attributes": False,
    },
    "logging": {
        "console_level": "INFO",
        "file_level": "DEBUG",
    },
}


def get_default_config_path() -> str:
    """
    Get the default config file path.

    Returns:
        str: ``$HTMLNODE_CONFIG`` if set, otherwise ``~/.htmlnode/config.json``
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        return env_path
    return os.path.join(os.path.expanduser("~"), ".htmlnode", "config.json")


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


class Config:
    """Configuration manager for the parser, the serializer and value conversions."""

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration manager.

        Args:
            config_path: Path to the config file
        """
        if not config_path:
            config_path = get_default_config_path()

        self.config_path = config_path
        self.config: Dict[str, Any] = {}
        self._lock = threading.Lock()

        # Load config if it exists
        self.load()

        logger.debug(f"Configuration initialized (config_path: {config_path})")

    def load(self) -> None:
        """Load configuration from file, on top of the defaults."""
        self._set_defaults()
        if not os.path.exists(self.config_path):
            logger.debug(f"Configuration file not found at {self.config_path}, using defaults")
            return

        try:
            with open(self.config_path, 'r') as f:
                loaded = json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Error loading configuration: {e}")
            return

        if not isinstance(loaded, dict):
            logger.error(f"Configuration in {self.config_path} is not a JSON object, using defaults")
            return

        with self._lock:
            _merge(self.config, loaded)
        logger.debug(f"Configuration loaded from {self.config_path}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'parser.keep_whitespace_text')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if part not in config or not isinstance(config[part], dict):
                    return default
                config = config[part]

            return config.get(parts[-1], default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: Configuration key (can be nested using dots)
            value: Configuration value
        """
        with self._lock:
            parts = key.split('.')
            config = self.config

            for part in parts[:-1]:
                if not isinstance(config.get(part), dict):
                    config[part] = {}
                config = config[part]

            config[parts[-1]] = value

    def _set_defaults(self) -> None:
        """Set default configuration values."""
        with self._lock:
            self.config = copy.deepcopy(DEFAULTS)


_default_config: Optional[Config] = None
_default_config_lock = threading.Lock()


def get_config() -> Config:
    """Return the process-wide configuration, creating it on first use."""
    global _default_config
    with _default_config_lock:
        if _default_config is None:
            _default_config = Config()
        return _default_config


def set_config(config: Optional[Config]) -> None:
    """Replace the process-wide configuration (None resets it to be reloaded)."""
    global _default_config
    with _default_config_lock:
        _default_config = config
