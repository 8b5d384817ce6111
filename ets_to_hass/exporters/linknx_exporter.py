"""linknx Configuration Exporter Module

Renders every group address as a linknx object definition.
https://sourceforge.net/p/linknx/wiki/Object_Definition_section/
"""
import logging
from typing import Dict, List
from xml.sax.saxutils import escape, quoteattr

from ..models import ProjectModel
from ..utils.addressing import identifier_for

logger = logging.getLogger(__name__)

OBJECT_INDENT = ' ' * 8


class LinknxExporter:
    """Exporter for linknx object definitions"""

    def __init__(self, model: ProjectModel):
        """
        Initialize linknx Exporter.

        Args:
            model: Project model after the customization hook
        """
        self.model = model

    def address_view(self) -> List[Dict[str, str]]:
        """
        Describe every registry address.

        Returns:
            Descriptors sorted by address string (so "10/0" comes before "2/0")
        """
        addresses = sorted(self.model.addresses.values(), key=lambda ga: ga.address)
        return [
            {
                'id': identifier_for(ga.address),
                'address': ga.address,
                'datapoint_type': ga.datapoint_type,
                'display_name': ga.label,
            }
            for ga in addresses
        ]

    def render(self) -> str:
        """Render the address view as linknx <object> lines."""
        view = self.address_view()
        logger.info("Exporting %d objects for linknx", len(view))
        return '\n'.join(self._format_object(descriptor) for descriptor in view)

    @staticmethod
    def _format_object(descriptor: Dict[str, str]) -> str:
        """
        Format one descriptor for linknx syntax.

        Args:
            descriptor: Entry of the address view

        Returns:
            Formatted object line
        """
        return (
            f"{OBJECT_INDENT}<object type={quoteattr(descriptor['datapoint_type'] or '')} "
            f"id={quoteattr(descriptor['id'])} gad={quoteattr(descriptor['address'])} "
            f"init=\"request\">{escape(descriptor['display_name'] or '')}</object>"
        )
