"""Configuration validator using a JSON Schema like description"""

import json
import logging
from typing import Dict, Optional

from ..exceptions import ConverterError

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ('homeass', 'linknx')
LOG_LEVELS = ('debug', 'info', 'warning', 'error')

# JSON Schema for the options file
CONFIG_SCHEMA = {
    "type": "object",
    "required": [],
    "properties": {
        "format": {"type": "string", "enum": list(OUTPUT_FORMATS)},
        "addr": {"type": "string", "enum": ["Free", "TwoLevel", "ThreeLevel"]},
        "full_name": {"type": "boolean"},
        "ha_knx": {"type": "boolean"},
        "hook": {"type": "string"},
        "trace": {"type": "string", "enum": list(LOG_LEVELS)},
        "password": {"type": "string"},
    }
}

_JSON_TYPES = {
    "string": str,
    "boolean": bool,
    "object": dict,
}


class ConfigValidationError(ConverterError):
    """Raised when configuration validation fails"""
    pass


class ConfigValidator:
    """Validates configuration files"""

    def __init__(self, schema: Optional[Dict] = None):
        """Initialize validator with schema."""
        self.schema = schema or CONFIG_SCHEMA
        self.errors = []

    def validate(self, config: Dict) -> bool:
        """
        Validate configuration against schema.

        Args:
            config: Configuration dictionary to validate

        Returns:
            True if valid

        Raises:
            ConfigValidationError: If validation fails with details
        """
        self.errors = []

        if not isinstance(config, dict):
            raise ConfigValidationError("Configuration validation failed:\n  - top level must be an object")

        for required_field in self.schema.get('required', []):
            if required_field not in config:
                self.errors.append(f"Missing required field: {required_field}")

        properties = self.schema.get('properties', {})
        for key, value in config.items():
            if key not in properties:
                self.errors.append(f"Unknown field: {key}")
                continue
            self._validate_field(key, value, properties[key])

        if self.errors:
            error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in self.errors)
            raise ConfigValidationError(error_msg)

        logger.debug("Configuration validation successful")
        return True

    def _validate_field(self, key: str, value, definition: Dict):
        """Validate type and allowed values of one field."""
        expected_type = _JSON_TYPES[definition['type']]
        if not isinstance(value, expected_type):
            self.errors.append(f"Field '{key}' must be a {definition['type']}")
            return
        allowed = definition.get('enum')
        if allowed and value not in allowed:
            self.errors.append(f"Field '{key}' must be one of {', '.join(allowed)}, got {value!r}")


def validate_config_file(config_path: str) -> Dict:
    """
    Load and validate configuration file.

    Args:
        config_path: Path to the JSON options file

    Returns:
        Validated configuration dictionary

    Raises:
        ConfigValidationError: If the file is missing, not JSON or invalid
    """
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            config = json.load(f)
    except OSError as exc:
        raise ConfigValidationError(f"Cannot read configuration file {config_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigValidationError(f"Configuration file {config_path} is not valid JSON: {exc}") from exc

    validator = ConfigValidator()
    validator.validate(config)

    return config
