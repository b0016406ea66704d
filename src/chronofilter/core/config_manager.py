"""Configuration Management for chronofilter

Handles loading, validation, and management of parser configurations.
Supports hierarchical YAML configuration with environment overrides.
"""

import logging
import os
import re
import threading
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .error_handler import ConfigurationError


class ParserConfig(BaseModel):
    """Configuration for the temporal expression parser."""
    max_query_length: int = Field(default=500, ge=1, le=10000)
    max_relative_days: int = Field(default=3650, ge=1)
    strict: bool = Field(default=False)


class LoggingConfig(BaseModel):
    """Configuration for logging."""
    level: str = Field(default="INFO", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    file_path: str = Field(default="logs/chronofilter.log")
    max_file_size: str = Field(default="10MB")
    backup_count: int = Field(default=5, ge=1, le=20)
    log_to_console: bool = Field(default=True)
    log_to_file: bool = Field(default=False)

    @field_validator('max_file_size')
    @classmethod
    def validate_file_size(cls, v):
        """Validate file size format"""
        if not re.match(r'^\d+[KMG]B$', v.upper()):
            raise ValueError("File size must be in format: 10KB, 10MB, or 1GB")
        return v


class AppConfig(BaseModel):
    """Main application configuration."""
    model_config = ConfigDict(validate_assignment=True)

    app_name: str = Field(default="chronofilter")
    version: str = Field(default="0.1.0")
    environment: str = Field(default="development", pattern="^(development|staging|production)$")

    parser: ParserConfig = Field(default_factory=ParserConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


class ConfigManager:
    """Manages configuration loading and validation."""

    ENV_PREFIX = "CHRONOFILTER_"

    def __init__(self, config_path: Optional[Path] = None, environment: Optional[str] = None):
        """Initialize configuration manager.

        Args:
            config_path: Optional path to the configuration directory
            environment: Environment name (development, staging, production)
        """
        self.config_base_path = Path(config_path) if config_path else self._get_default_config_path()
        self.environment = environment or os.getenv('CHRONOFILTER_ENV', 'development')
        self._config: Optional[AppConfig] = None
        self._lock = threading.RLock()
        self.logger = logging.getLogger(__name__)

        self.config_files = self._get_config_files()

    def _get_default_config_path(self) -> Path:
        """Get the default configuration directory."""
        config_locations = [
            Path("config"),
            Path.home() / ".chronofilter",
            Path("/etc/chronofilter"),
        ]

        for location in config_locations:
            if location.exists() and location.is_dir():
                return location

        return Path("config")

    def _get_config_files(self) -> Dict[str, Path]:
        """Get configuration file paths for hierarchical loading."""
        base_dir = self.config_base_path

        return {
            'default': base_dir / 'default_config.yaml',
            'environment': base_dir / f'{self.environment}.yaml',
            'local': base_dir / 'local.yaml'
        }

    @property
    def config(self) -> AppConfig:
        """Loaded configuration, loading it on first access."""
        return self.load_config()

    def load_config(self) -> AppConfig:
        """Load and validate configuration with hierarchical overrides.

        Returns:
            Validated application configuration

        Raises:
            ConfigurationError: If a file cannot be parsed or validation fails
        """
        with self._lock:
            if self._config:
                return self._config

            config_data: Dict[str, Any] = {}

            for config_type, config_file in self.config_files.items():
                if config_file.exists():
                    self.logger.info(f"Loading {config_type} config from {config_file}")
                    self._deep_merge(config_data, self._load_yaml_file(config_file))

            env_overrides = self._get_env_overrides()
            if env_overrides:
                self.logger.info(f"Applying environment overrides: {list(env_overrides.keys())}")
                self._deep_merge(config_data, env_overrides)

            self._config = self._validate(config_data)
            return self._config

    def _validate(self, config_data: Dict[str, Any]) -> AppConfig:
        try:
            return AppConfig(**config_data)
        except ValidationError as e:
            self.logger.error(f"Configuration validation failed: {e}")
            raise ConfigurationError(f"Invalid configuration: {e}")

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file.

        Returns:
            Configuration dictionary
        """
        try:
            with open(file_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            self.logger.error(f"Failed to parse YAML file {file_path}: {e}")
            raise ConfigurationError(f"Invalid YAML in {file_path}: {e}")

        if not isinstance(data, dict):
            raise ConfigurationError(f"Expected a mapping at the top of {file_path}")
        return data

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Get configuration overrides from environment variables.

        Environment variables follow pattern: CHRONOFILTER_<SECTION>_<KEY>
        Example: CHRONOFILTER_PARSER_MAX_QUERY_LENGTH -> parser.max_query_length
        """
        overrides: Dict[str, Any] = {}
        sections = set(AppConfig.model_fields)

        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX) or key == 'CHRONOFILTER_ENV':
                continue

            name = key[len(self.ENV_PREFIX):].lower()
            section, _, field_name = name.partition('_')

            if section in sections and field_name:
                overrides.setdefault(section, {})[field_name] = self._convert_env_value(value)
            elif name in sections:
                overrides[name] = self._convert_env_value(value)

        return overrides

    def _convert_env_value(self, value: str) -> Union[str, int, float, bool]:
        """Convert environment variable string to appropriate type."""
        if value.lower() in ('true', 'false'):
            return value.lower() == 'true'

        try:
            if '.' in value:
                return float(value)
            return int(value)
        except ValueError:
            pass

        return value

    def update_config(self, updates: Dict[str, Any]) -> AppConfig:
        """Update configuration with new values.

        Args:
            updates: Nested dictionary of configuration updates

        Returns:
            Updated configuration
        """
        with self._lock:
            config_dict = self.load_config().model_dump()
            self._deep_merge(config_dict, updates)

            self._config = self._validate(config_dict)
            self.logger.info(f"Configuration updated: {sorted(updates.keys())}")
            return self._config

    def _deep_merge(self, base_dict: Dict[str, Any], update_dict: Dict[str, Any]):
        """Recursively merge nested dictionaries."""
        for key, value in update_dict.items():
            if isinstance(value, dict) and key in base_dict and isinstance(base_dict[key], dict):
                self._deep_merge(base_dict[key], value)
            else:
                base_dict[key] = value

    def save_config(self, target: str = "local") -> Path:
        """Save current configuration to file.

        Args:
            target: Which config file to save to ('default', 'environment', 'local')

        Returns:
            Path of the written file
        """
        with self._lock:
            if not self._config:
                raise ConfigurationError("No configuration loaded")

            if target not in self.config_files:
                raise ConfigurationError(f"Invalid target: {target}")

            target_file = self.config_files[target]
            target_file.parent.mkdir(parents=True, exist_ok=True)

            with open(target_file, 'w') as f:
                yaml.dump(self._config.model_dump(), f, default_flow_style=False, sort_keys=False)

            self.logger.info(f"Configuration saved to {target_file}")
            return target_file

    def reload_config(self) -> AppConfig:
        """Reload configuration from files, keeping the old one on failure."""
        with self._lock:
            old_config = self._config
            self._config = None

            try:
                return self.load_config()
            except ConfigurationError:
                self.logger.error("Failed to reload configuration, keeping previous values")
                self._config = old_config
                raise
