# reelspin/application/config/config_service.py
import os
from typing import Dict, Any, Optional

from reelspin.infrastructure.config.schema_validator import SchemaValidator
from reelspin.infrastructure.config.yaml_loader import YamlConfigLoader, GAME_SCHEMA_PATH


DEFAULT_CONFIG_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "default_game.yaml")


def load_game_config(path: Optional[str] = None, loader: Optional[YamlConfigLoader] = None) -> Dict[str, Any]:
    """
    Load a game configuration and fill in schema defaults.

    Args:
        path: YAML file, the bundled default_game.yaml when omitted
        loader: Loader to use, a strict one with schema validation by default

    Returns:
        Validated configuration dictionary

    Raises:
        ConfigError: If the file is missing, unparsable or invalid
    """
    loader = loader or YamlConfigLoader(SchemaValidator())
    return loader.load_file(path or DEFAULT_CONFIG_PATH, GAME_SCHEMA_PATH)


def build_config(overrides: Optional[Dict[str, Any]] = None,
                 loader: Optional[YamlConfigLoader] = None) -> Dict[str, Any]:
    """
    Validate an in-memory configuration, filling schema defaults.

    Args:
        overrides: Partial configuration, e.g. {"reel": {"spin_duration": 2}}
        loader: Loader to use

    Returns:
        Validated configuration dictionary
    """
    loader = loader or YamlConfigLoader(SchemaValidator())
    return loader.validate(overrides or {}, GAME_SCHEMA_PATH)
