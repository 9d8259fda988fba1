# reelspin/infrastructure/config/errors.py
from typing import List


class ConfigError(Exception):
    """Base class for errors raised while loading or validating configuration."""
    pass


class FileNotFoundConfigError(ConfigError):
    """A configuration file or directory does not exist."""
    def __init__(self, path, message=None):
        self.path = path
        self.message = message or f"Configuration file or directory not found: {path}"
        super().__init__(self.message)


class YamlParseError(ConfigError):
    """A YAML file could not be parsed."""
    def __init__(self, file_path, yaml_error):
        self.file_path = file_path
        self.yaml_error = yaml_error
        self.message = f"Error parsing YAML file {file_path}: {str(yaml_error)}"
        super().__init__(self.message)


class SchemaValidationError(ConfigError):
    """A configuration document does not match its JSON schema."""
    def __init__(self, file_path, errors: List[str]):
        self.file_path = file_path
        self.errors = errors
        error_msg = "\n  - ".join([""] + errors)
        self.message = f"Configuration validation failed for {file_path}:{error_msg}"
        super().__init__(self.message)


class InvalidConfigurationError(ConfigError):
    """Reel settings that make a spin impossible (non-positive pitch, duration, ...)."""
    def __init__(self, errors: List[str]):
        self.errors = errors
        error_msg = "\n  - ".join([""] + errors)
        self.message = f"Invalid reel configuration:{error_msg}"
        super().__init__(self.message)
