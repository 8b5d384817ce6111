"""Home Assistant Configuration Exporter Module

Renders resolved entities as the YAML of the Home Assistant KNX integration.
"""
import logging
from typing import Any, Dict, List

import yaml

from ..entity_resolver import ResolutionResult

logger = logging.getLogger(__name__)

WRAPPER_KEY = 'knx'


class HomeAssistantExporter:
    """Exporter for the Home Assistant KNX integration"""

    def __init__(self, result: ResolutionResult, wrap_knx: bool = False):
        """
        Initialize Home Assistant Exporter.

        Args:
            result: Resolved entities
            wrap_knx: Put everything below a top level "knx" key
        """
        self.result = result
        self.wrap_knx = wrap_knx

    def grouped_view(self) -> Dict[str, Any]:
        """
        Group entities by kind.

        Returns:
            Mapping from entity kind to the list of its entity properties
        """
        grouped: Dict[str, List[Dict[str, Any]]] = {
            kind: [entity.to_dict() for entity in entities]
            for kind, entities in self.result.entities.items()
        }
        if self.wrap_knx:
            return {WRAPPER_KEY: grouped}
        return grouped

    def render(self) -> str:
        """Render the grouped view as a YAML document."""
        view = self.grouped_view()
        logger.info("Exporting %d entities for Home Assistant", len(self.result.all_entities()))
        return yaml.safe_dump(
            view,
            explicit_start=True,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
