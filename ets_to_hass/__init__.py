"""ETS to Home Assistant / linknx configuration generator"""

__version__ = "1.0.0"

import logging
from pathlib import Path
from typing import Optional, Union

from .config import ConverterConfig, load_config
from .converter import ProjectConverter
from .exceptions import ConverterError
from .hooks import CustomizationHook

logger = logging.getLogger(__name__)


def convert_project(knxproj_path: Union[str, Path], config: Optional[ConverterConfig] = None,
                    hook: Optional[CustomizationHook] = None) -> str:
    """
    Convert an ETS project file into the configured output document.

    Args:
        knxproj_path: Path to the .knxproj file
        config: Options, defaults when None
        hook: Customization hook, overrides config.hook_path

    Returns:
        Generated document as a string
    """
    converter = ProjectConverter(config or ConverterConfig(), hook=hook)
    return converter.convert(knxproj_path)


__all__ = [
    'convert_project',
    'ConverterConfig',
    'ConverterError',
    'CustomizationHook',
    'ProjectConverter',
    'load_config',
    '__version__',
]
