"""Conversion pipeline: archive -> model -> hook -> entities -> document"""
import logging
from pathlib import Path
from typing import Callable, Dict, Optional, Union

from .config import ConverterConfig
from .entity_resolver import EntityResolver, ResolutionResult
from .exceptions import ConverterError
from .exporters.homeassistant_exporter import HomeAssistantExporter
from .exporters.linknx_exporter import LinknxExporter
from .hooks import CustomizationHook, apply_hook, load_hook
from .model_builder import ModelBuilder
from .models import ProjectModel
from .parsers.knx_parser import KNXParser, ProjectTrees

logger = logging.getLogger(__name__)


class ProjectConverter:
    """Converts one ETS project into a configuration document"""

    def __init__(self, config: ConverterConfig, hook: Optional[CustomizationHook] = None):
        """
        Initialize converter.

        Args:
            config: Options of the conversion run
            hook: Customization hook, loaded from config.hook_path when None
        """
        self.config = config
        if hook is None and config.hook_path:
            hook = load_hook(config.hook_path)
        self.hook = hook
        self.renderers: Dict[str, Callable[[ProjectModel], str]] = {
            'homeass': self.generate_homeass,
            'linknx': self.generate_linknx,
        }
        if config.output_format not in self.renderers:
            raise ConverterError(
                f"No such output format: {config.output_format}, expected one of {', '.join(self.renderers)}"
            )

    def build_model(self, trees: ProjectTrees) -> ProjectModel:
        """Build the model and apply the customization hook."""
        model = ModelBuilder.from_trees(trees, self.config.address_style)
        if self.hook is not None:
            apply_hook(model, self.hook)
        return model

    def resolve(self, model: ProjectModel) -> ResolutionResult:
        return EntityResolver(self.config).resolve(model)

    def generate_homeass(self, model: ProjectModel) -> str:
        result = self.resolve(model)
        return HomeAssistantExporter(result, wrap_knx=self.config.wrap_knx).render()

    def generate_linknx(self, model: ProjectModel) -> str:
        return LinknxExporter(model).render()

    def convert_trees(self, trees: ProjectTrees) -> str:
        """Convert already parsed project trees."""
        model = self.build_model(trees)
        return self.renderers[self.config.output_format](model)

    def convert(self, knxproj_path: Union[str, Path]) -> str:
        """
        Convert a .knxproj archive.

        Args:
            knxproj_path: Path to the project file

        Returns:
            The generated document

        Raises:
            ConverterError: On any fatal error, nothing is generated then
        """
        trees = KNXParser(knxproj_path, password=self.config.password).parse()
        return self.convert_trees(trees)
