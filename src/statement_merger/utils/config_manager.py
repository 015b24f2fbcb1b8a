"""Configuration management for the statement merger."""

import codecs
import json
import logging
import os
from typing import Dict, Any, Optional

import yaml

from ..models.core import MergerConfig
from .error_handler import ConfigurationError


logger = logging.getLogger(__name__)

CONFIG_KEYS = (
    'output_directory', 'output_prefix', 'include_account_columns',
    'isolate_failures', 'date_formats', 'encoding', 'log_directory'
)


class ConfigManager:
    """Manages loading and validation of merger configuration"""

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager

        Args:
            config_path: Path to configuration file. If None, searches for default locations.
        """
        self.config_path = config_path
        self._config_cache: Optional[MergerConfig] = None
        self.config_error: Optional[str] = None
        self.config_file: Optional[str] = None

    def load_config(self, force_reload: bool = False) -> MergerConfig:
        """Load merger configuration from file or return default

        Args:
            force_reload: Force reload from file even if cached

        Returns:
            MergerConfig instance with loaded or default configuration
        """
        if self._config_cache is not None and not force_reload:
            return self._config_cache

        config_data = self._load_config_file()
        self._config_cache = MergerConfig(
            **{key: config_data[key] for key in CONFIG_KEYS if key in config_data}
        )
        logger.info(f"Configuration loaded from {self.config_path or 'defaults'}")
        return self._config_cache

    def _load_config_file(self) -> Dict[str, Any]:
        """Load configuration from file

        Returns:
            Dictionary with configuration data or empty dict if no usable file found
        """
        config_file = self._find_config_file()
        self.config_file = config_file
        self.config_error = None

        if not config_file or not os.path.exists(config_file):
            logger.info("No configuration file found, using defaults")
            return {}

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                if config_file.endswith('.json'):
                    data = json.load(f)
                elif config_file.endswith(('.yml', '.yaml')):
                    data = yaml.safe_load(f)
                else:
                    logger.warning(f"Unsupported config file format: {config_file}")
                    return {}

            self._validate_config_data(data)
            logger.info(f"Configuration loaded from {config_file}")
            return data

        except (OSError, ValueError, yaml.YAMLError, ConfigurationError) as e:
            self.config_error = f"Error reading configuration file {config_file}: {e}. Using defaults."
            logger.error(self.config_error)
            return {}

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file in standard locations"""
        if self.config_path:
            return self.config_path

        search_paths = [
            'merger_config.json',
            'merger_config.yml',
            'merger_config.yaml',
            'config/merger_config.json',
            'config/merger_config.yml',
            'config/merger_config.yaml',
            os.path.expanduser('~/.statement_merger/config.json'),
            os.path.expanduser('~/.statement_merger/config.yml'),
        ]

        for path in search_paths:
            if os.path.exists(path):
                return path

        return None

    def _validate_config_data(self, data: Any) -> None:
        """Validate configuration data structure

        Raises:
            ConfigurationError: If configuration data is invalid
        """
        if not isinstance(data, dict):
            raise ConfigurationError("Configuration must be a dictionary")

        for key in data:
            if key not in CONFIG_KEYS:
                logger.warning(f"Unknown configuration key: {key}")

        for str_key in ['output_directory', 'output_prefix', 'encoding']:
            if str_key in data:
                if not isinstance(data[str_key], str):
                    raise ConfigurationError(f"{str_key} must be a string")
                if not data[str_key].strip():
                    raise ConfigurationError(f"{str_key} cannot be empty")

        if 'encoding' in data:
            try:
                codecs.lookup(data['encoding'])
            except LookupError:
                raise ConfigurationError(f"Unknown encoding: {data['encoding']}")

        for bool_key in ['include_account_columns', 'isolate_failures']:
            if bool_key in data and not isinstance(data[bool_key], bool):
                raise ConfigurationError(f"{bool_key} must be a boolean")

        if 'date_formats' in data:
            if not isinstance(data['date_formats'], list) or not data['date_formats']:
                raise ConfigurationError("date_formats must be a non-empty list")
            for fmt in data['date_formats']:
                if not isinstance(fmt, str):
                    raise ConfigurationError("All date formats must be strings")

        if data.get('log_directory') is not None and not isinstance(data['log_directory'], str):
            raise ConfigurationError("log_directory must be a string")

    def save_config_template(self, output_path: str) -> None:
        """Generate and save a configuration file template

        Args:
            output_path: Path where to save the template
        """
        defaults = MergerConfig()
        template = {key: getattr(defaults, key) for key in CONFIG_KEYS}

        output_dir = os.path.dirname(output_path)
        if output_dir:
            os.makedirs(output_dir, exist_ok=True)

        with open(output_path, 'w', encoding='utf-8') as f:
            if output_path.endswith(('.yml', '.yaml')):
                yaml.dump(template, f, default_flow_style=False, indent=2)
            else:
                json.dump(template, f, indent=2)

        logger.info(f"Configuration template saved to {output_path}")

    def update_config(self, updates: Dict[str, Any]) -> None:
        """Update configuration with new values

        Args:
            updates: Dictionary of configuration updates
        """
        if self._config_cache is None:
            self.load_config()

        for key, value in updates.items():
            if hasattr(self._config_cache, key):
                setattr(self._config_cache, key, value)
                logger.debug(f"Updated configuration: {key} = {value}")
            else:
                logger.warning(f"Unknown configuration key: {key}")
