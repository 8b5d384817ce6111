"""Conversion options.

A ``ConverterConfig`` is built once by the command line (optionally from a
JSON options file) and passed to every stage that needs it.
"""
import logging
from dataclasses import dataclass, field, fields, replace
from typing import Optional

from .utils.config_validator import validate_config_file

logger = logging.getLogger(__name__)

# JSON options file key -> ConverterConfig field
FILE_KEYS = {
    'format': 'output_format',
    'addr': 'address_style',
    'full_name': 'full_name',
    'ha_knx': 'wrap_knx',
    'hook': 'hook_path',
    'trace': 'log_level',
    'password': 'password',
}


@dataclass(frozen=True)
class ConverterConfig:
    """Options of one conversion run."""
    output_format: str = 'homeass'
    address_style: Optional[str] = None  # None: use the project setting
    full_name: bool = False  # prefix names with building part, floor and room
    wrap_knx: bool = False  # put the entities under a top level "knx" key
    hook_path: Optional[str] = None
    log_level: str = 'info'
    password: Optional[str] = field(default=None, repr=False)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level.upper(), logging.INFO)

    def merged(self, **values) -> 'ConverterConfig':
        """Return a copy with every value that is not None applied."""
        known = {f.name for f in fields(self)}
        unknown = set(values) - known
        if unknown:
            raise TypeError(f"Unknown configuration fields: {', '.join(sorted(unknown))}")
        return replace(self, **{k: v for k, v in values.items() if v is not None})


def load_config(config_path: Optional[str] = None) -> ConverterConfig:
    """Load a JSON options file, defaults when no path is given."""
    if not config_path:
        return ConverterConfig()
    data = validate_config_file(config_path)
    logger.debug("Loaded options from %s: %s", config_path, ", ".join(sorted(data)))
    return ConverterConfig().merged(**{FILE_KEYS[key]: value for key, value in data.items()})
