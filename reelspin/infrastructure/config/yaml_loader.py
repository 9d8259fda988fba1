# reelspin/infrastructure/config/yaml_loader.py
import os
import json
import logging
from typing import Dict, Any, Optional

import yaml

from .errors import (
    ConfigError,
    FileNotFoundConfigError,
    YamlParseError,
    SchemaValidationError,
)


SCHEMA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "schemas")
GAME_SCHEMA_PATH = os.path.join(SCHEMA_DIR, "game_config.schema.json")


class YamlConfigLoader:
    """
    Loads YAML configuration files and optionally validates them.

    In strict mode a missing or broken file raises; otherwise the supplied
    default configuration is returned.
    """
    def __init__(self, schema_validator=None):
        """
        Initialize the YAML configuration loader.

        Args:
            schema_validator: Optional validator used to check loaded documents
        """
        self.logger = logging.getLogger("infrastructure.config.loader")
        self.schema_validator = schema_validator
        self.strict_mode = True

    def set_strict_mode(self, strict: bool = True):
        """
        Enable or disable strict mode.

        Args:
            strict: Whether missing files raise
        """
        self.strict_mode = strict
        return self

    def load_file(self, file_path: str, schema_path: Optional[str] = None,
                  default_config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Load a single YAML file, fill schema defaults and validate it.

        Args:
            file_path: Path to the YAML file
            schema_path: Optional JSON schema path for validation
            default_config: Returned when the file is missing or broken in non-strict mode

        Returns:
            Parsed configuration dictionary

        Raises:
            FileNotFoundConfigError: If the file does not exist and strict_mode=True
            YamlParseError: If parsing fails and strict_mode=True
            SchemaValidationError: If validation fails and strict_mode=True
        """
        if not os.path.isfile(file_path):
            self.logger.error(f"Configuration file not found: {file_path}")

            if default_config is not None and not self.strict_mode:
                self.logger.warning(f"Using default configuration instead of missing file: {file_path}")
                return default_config

            raise FileNotFoundConfigError(file_path)

        try:
            with open(file_path, 'r', encoding='utf-8') as file:
                config = yaml.safe_load(file)
        except yaml.YAMLError as e:
            error = YamlParseError(file_path, e)
            self.logger.error(error.message)

            if default_config is not None and not self.strict_mode:
                self.logger.warning(f"Using default configuration due to parse error in {file_path}")
                return default_config

            raise error from e

        self.logger.debug(f"Successfully loaded configuration from {file_path}")

        if config is None:
            self.logger.warning(f"Empty configuration file: {file_path}")
            config = default_config if default_config is not None else {}

        if schema_path and self.schema_validator:
            config = self.validate(config, schema_path, source=file_path)

        return config

    def validate(self, config: Dict[str, Any], schema_path: str,
                 source: str = "<memory>") -> Dict[str, Any]:
        """
        Validate an already loaded configuration, applying schema defaults.

        Args:
            config: Configuration dictionary
            schema_path: JSON schema path
            source: Name used in error messages

        Returns:
            The configuration with defaults applied
        """
        schema = self._load_schema(schema_path)
        is_valid, errors, updated = self.schema_validator.validate_with_defaults(config, schema)

        if not is_valid:
            error = SchemaValidationError(source, errors)

            if self.strict_mode:
                raise error

            self.logger.warning(f"{error.message}\nUsing unvalidated configuration.")
            return config

        self.logger.debug(f"Validated {source} against schema: {schema_path}")
        return updated

    def _load_schema(self, schema_path: str) -> Dict[str, Any]:
        """
        Load a JSON schema file.

        Raises:
            FileNotFoundConfigError: If the schema file does not exist
            ConfigError: If the schema cannot be parsed
        """
        if not os.path.isfile(schema_path):
            error_msg = f"Schema file not found: {schema_path}"
            self.logger.error(error_msg)
            raise FileNotFoundConfigError(schema_path, error_msg)

        try:
            with open(schema_path, 'r', encoding='utf-8') as file:
                return json.load(file)
        except json.JSONDecodeError as e:
            error_msg = f"Error parsing schema file {schema_path}: {str(e)}"
            self.logger.error(error_msg)
            raise ConfigError(error_msg) from e
