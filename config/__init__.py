"""
Configuration Module for Invoice Scanner.

This module provides centralized configuration management using YAML files.
The bundled settings.yaml holds the defaults; a user supplied file only needs
the keys it wants to override.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional


DEFAULT_CONFIG_PATH = Path(__file__).parent / "settings.yaml"


class ConfigurationManager:
    """
    Centralized configuration management for the invoice scanner.

    This class handles loading and providing access to all configuration
    parameters defined in settings.yaml, optionally overlaid with a
    user supplied YAML file.

    Attributes:
        config_path (Optional[Path]): Path to the override file, if any.
        config (Dict): Loaded configuration dictionary.

    Example:
        >>> config = ConfigurationManager()
        >>> endpoint = config.get("inference.endpoint")
        >>> model_name = config.get("inference.model")
    """

    _instance: Optional['ConfigurationManager'] = None
    _config: Dict[str, Any] = {}

    def __new__(cls, config_path: Optional[str] = None) -> 'ConfigurationManager':
        """
        Singleton pattern to ensure only one configuration instance exists.

        Args:
            config_path: Optional path to configuration file.

        Returns:
            ConfigurationManager instance.
        """
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self, config_path: Optional[str] = None) -> None:
        """
        Initialize the configuration manager.

        Args:
            config_path: Optional path to an override configuration file.
                        Defaults are always read from config/settings.yaml.
        """
        if self._initialized:
            return

        self.config_path = Path(config_path) if config_path else None

        self._load_config()
        self._initialized = True

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        """
        Read a YAML mapping from disk.

        Raises:
            FileNotFoundError: If configuration file doesn't exist.
            yaml.YAMLError: If configuration file is invalid.
        """
        if not path.exists():
            raise FileNotFoundError(
                f"Configuration file not found: {path}"
            )

        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f) or {}

    def _load_config(self) -> None:
        """Load the bundled defaults and apply the override file on top."""
        from invoice_scanner.utils.helpers import merge_dicts

        self._config = self._read_yaml(DEFAULT_CONFIG_PATH)

        if self.config_path is not None:
            self._config = merge_dicts(self._config, self._read_yaml(self.config_path))

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value using dot notation.

        Args:
            key: Configuration key in dot notation (e.g., "inference.model").
            default: Default value if key doesn't exist.

        Returns:
            Configuration value or default.

        Example:
            >>> config.get("inference.model")
            "qwen2.5vl:7b"
            >>> config.get("nonexistent.key", "default_value")
            "default_value"
        """
        keys = key.split('.')
        value = self._config

        try:
            for k in keys:
                value = value[k]
            return value
        except (KeyError, TypeError):
            return default

    def get_all(self) -> Dict[str, Any]:
        """
        Get the complete configuration dictionary.

        Returns:
            Complete configuration dictionary.
        """
        return self._config.copy()

    @classmethod
    def reset(cls) -> None:
        """
        Reset the singleton instance.
        Useful for testing or configuration changes.
        """
        cls._instance = None


# Convenience function for quick access
def get_config(key: str, default: Any = None) -> Any:
    """
    Convenience function to get configuration values.

    Args:
        key: Configuration key in dot notation.
        default: Default value if key doesn't exist.

    Returns:
        Configuration value or default.
    """
    return ConfigurationManager().get(key, default)


# Export public API
__all__ = ['ConfigurationManager', 'get_config', 'DEFAULT_CONFIG_PATH']
