# reelspin/infrastructure/config/schema_validator.py
import copy
import logging
from typing import Dict, Any, Tuple, List

import jsonschema


class SchemaValidator:
    """
    Validates configuration data against JSON schemas.
    """
    def __init__(self):
        """Initialize the schema validator."""
        self.logger = logging.getLogger("infrastructure.config.validator")

    def validate(self, config: Dict[str, Any], schema: Dict[str, Any]) -> Tuple[bool, List[str]]:
        """
        Validate a configuration against a JSON schema.

        Args:
            config: The configuration dictionary to validate
            schema: The JSON schema to validate against

        Returns:
            Tuple of (is_valid, error_messages)
        """
        try:
            validator_cls = jsonschema.validators.validator_for(schema)
            validator_cls.check_schema(schema)
        except jsonschema.exceptions.SchemaError as e:
            self.logger.error(f"Invalid schema: {e.message}")
            return False, [f"Schema error: {e.message}"]

        validator = validator_cls(schema)
        errors = []
        for error in sorted(validator.iter_errors(config), key=lambda e: list(e.path)):
            error_path = '.'.join(str(p) for p in error.path) if error.path else 'root'
            errors.append(f"At {error_path}: {error.message}")

        for message in errors:
            self.logger.error(f"Schema validation error: {message}")

        return not errors, errors

    def validate_with_defaults(self, config: Dict[str, Any],
                               schema: Dict[str, Any]) -> Tuple[bool, List[str], Dict[str, Any]]:
        """
        Validate a configuration and fill in default values from the schema.

        Args:
            config: The configuration dictionary to validate
            schema: The JSON schema to validate against

        Returns:
            Tuple of (is_valid, error_messages, updated_config)
        """
        updated_config = copy.deepcopy(config) if config else {}
        self._apply_defaults(updated_config, schema)

        is_valid, errors = self.validate(updated_config, schema)
        return is_valid, errors, updated_config

    def _apply_defaults(self, config: Dict[str, Any], schema: Dict[str, Any]):
        """
        Recursively copy "default" values of object properties into config.

        Args:
            config: Configuration object to update in place
            schema: Schema of that object
        """
        properties = schema.get('properties')
        if not isinstance(properties, dict) or not isinstance(config, dict):
            return

        for prop_name, prop_schema in properties.items():
            if not isinstance(prop_schema, dict):
                continue

            if prop_name not in config:
                if 'default' in prop_schema:
                    config[prop_name] = copy.deepcopy(prop_schema['default'])
                    self.logger.debug(f"Applied default value for {prop_name}: {prop_schema['default']}")
                elif prop_schema.get('type') == 'object' and 'properties' in prop_schema:
                    config[prop_name] = {}

            if prop_schema.get('type') == 'object' and isinstance(config.get(prop_name), dict):
                self._apply_defaults(config[prop_name], prop_schema)
