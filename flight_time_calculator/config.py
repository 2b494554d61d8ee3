"""
Configuration handling for the flight time calculator
"""
import copy
import logging
import os
import yaml
from typing import Dict, Any, Optional

from .core.timeutils import MODES
from .errors import ConfigError


class Config:
    """Application configuration: defaults < YAML file < CLI arguments"""

    DEFAULT_CONFIG = {
        'mode': 'hhmm',
        'fraction_digits': 2,
        'show_verbose': True,
        'strict': False,
        'log_level': 'WARNING',
        'display': {
            'labels': {
                'hhmm': 'HH:MM',
                'decimal_exact': 'Decimal (N.NN)',
                'decimal_tenths': 'Decimal (N.N)',
            },
        },
    }

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize the configuration

        Args:
            config_file: Path to a YAML configuration file (optional)
        """
        # Deep copy so instances never mutate the defaults
        self.config = copy.deepcopy(self.DEFAULT_CONFIG)

        if config_file and os.path.exists(config_file):
            self.load_from_file(config_file)

    def load_from_file(self, config_file: str) -> None:
        """
        Load configuration values from a YAML file

        Args:
            config_file: Path to the configuration file

        Raises:
            ConfigError: if the file cannot be read or is not a YAML mapping
        """
        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                file_config = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Error loading configuration file: {e}") from e

        if not file_config:
            return
        if not isinstance(file_config, dict):
            raise ConfigError("Configuration file must contain a mapping")

        for key, value in file_config.items():
            if key == 'display' and isinstance(value, dict):
                self._deep_merge(self.config.setdefault(key, {}), value)
            else:
                self.config[key] = value

    def _deep_merge(self, base: dict, update: dict) -> None:
        """
        Recursively merge nested dictionaries

        Args:
            base: Dictionary updated in place
            update: Dictionary with the new values
        """
        for key, value in update.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def update_from_args(self, args: Dict[str, Any]) -> None:
        """
        Override configuration with CLI arguments
        CLI arguments take precedence over the configuration file

        Args:
            args: Dictionary of CLI arguments; ``None`` values are ignored
        """
        for key, value in args.items():
            if value is not None:
                self.config[key] = value

    def validate(self) -> None:
        """
        Check the values the CLI depends on

        Raises:
            ConfigError: on an unknown display mode, bad digit count,
                unknown log level or malformed display section
        """
        mode = self.config.get('mode')
        if mode not in MODES:
            raise ConfigError(f"Invalid display mode: {mode!r} (expected one of {', '.join(MODES)})")
        digits = self.config.get('fraction_digits')
        if isinstance(digits, bool) or not isinstance(digits, int) or digits < 0:
            raise ConfigError(f"fraction_digits must be a non-negative integer, got {digits!r}")

        level = self.config.get('log_level')
        if level is not None and (not isinstance(level, str)
                                  or not isinstance(logging.getLevelName(level.upper()), int)):
            raise ConfigError(f"Unknown log level: {level!r}")

        display = self.config.get('display')
        if not isinstance(display, dict):
            raise ConfigError(f"display must be a mapping, got {display!r}")
        labels = display.get('labels')
        if labels is not None and not isinstance(labels, dict):
            raise ConfigError(f"display.labels must be a mapping, got {labels!r}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Return a configuration value

        Args:
            key: Configuration key
            default: Value returned when the key is missing

        Returns:
            The configured value
        """
        return self.config.get(key, default)

    def get_all(self) -> Dict[str, Any]:
        """
        Return the whole configuration

        Returns:
            Dictionary with every configuration value
        """
        return self.config.copy()
