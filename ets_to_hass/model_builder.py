"""Build the project model from the generic XML trees.

Group ranges give the registry of group addresses, the spaces of the
installation give the function objects together with their location.
"""
import logging
from typing import Optional

from .datapoints import FUNCTION_KINDS, UNKNOWN_FUNCTION_KIND
from .exceptions import MalformedProjectError
from .models import FunctionObject, GroupAddress, ProjectModel, SpaceContext
from .parsers.knx_parser import ProjectTrees, Tree, dig_xml
from .utils.addressing import (
    format_group_address,
    parse_datapoint_type,
    parse_function_type,
    resolve_address_style,
)

logger = logging.getLogger(__name__)


def function_kind_for(type_token: str) -> str:
    """Map an ETS function type "FT-n" to its function kind."""
    ordinal = parse_function_type(type_token)
    if ordinal < len(FUNCTION_KINDS):
        return FUNCTION_KINDS[ordinal]
    return UNKNOWN_FUNCTION_KIND


def required_attribute(element: Tree, name: str, tag: str) -> str:
    """Return a mandatory XML attribute of an element."""
    try:
        return element[name]
    except KeyError as exc:
        raise MalformedProjectError(f"{tag} without {name}: {element.get('Name', element)}") from exc


class ModelBuilder:
    """Builds a ProjectModel in a single pass"""

    def __init__(self, address_style: str):
        """
        Initialize model builder.

        Args:
            address_style: One of Free, TwoLevel, ThreeLevel
        """
        self.address_style = address_style
        self.model = ProjectModel(address_style=address_style)

    @classmethod
    def from_trees(cls, trees: ProjectTrees, address_style: Optional[str] = None) -> ProjectModel:
        """
        Build the model of a project.

        Args:
            trees: Parsed project.xml and 0.xml
            address_style: Style forced by the user, None for the project setting

        Returns:
            ProjectModel with addresses and objects
        """
        proj_info = dig_xml(trees.info, ['Project', 'ProjectInformation'])
        style = resolve_address_style(address_style, proj_info.get('GroupAddressStyle'))
        logger.info("Using project %s, address style: %s", proj_info.get('Name'), style)

        builder = cls(style)
        builder.model.name = proj_info.get('Name')
        installation = dig_xml(trees.data, ['Project', 'Installations', 'Installation'])
        builder.process_group_ranges(dig_xml(installation, ['GroupAddresses', 'GroupRanges']))
        # ETS 5/6 store spaces below Locations, ETS 4 below Buildings
        if 'Locations' in installation:
            builder.process_space(dig_xml(installation, ['Locations']), 'Space')
        if 'Buildings' in installation:
            builder.process_space(dig_xml(installation, ['Buildings']), 'BuildingPart')
        if not builder.model.objects:
            logger.warning("No building information found.")
        return builder.model

    def process_group_ranges(self, group_range: Tree):
        """Process a group range recursively and register its addresses."""
        for sub_range in group_range.get('GroupRange', []):
            self.process_group_ranges(sub_range)
        for group_address in group_range.get('GroupAddress', []):
            self.process_group_address(group_address)

    def process_group_address(self, element: Tree) -> Optional[GroupAddress]:
        """Register one group address, None if its datapoint is unusable."""
        try:
            address = format_group_address(int(element['Address']), self.address_style)
        except (KeyError, ValueError) as exc:
            raise MalformedProjectError(f"Group address without valid Address: {element.get('Id')}") from exc
        name = element.get('Name', '')
        raw_datapoint = element.get('DatapointType')
        if raw_datapoint is None:
            logger.warning("No datapoint type for %s : %s, group address is skipped", address, name)
            return None
        datapoint_type = parse_datapoint_type(raw_datapoint)
        if datapoint_type is None:
            logger.warning("Cannot parse datapoint type: %s, group address %s is skipped, expect: DPST-x-x",
                           raw_datapoint, address)
            return None

        group_address = GroupAddress(
            id=required_attribute(element, 'Id', 'GroupAddress'),
            name=name,
            description=element.get('Description'),
            address=address,
            datapoint_type=datapoint_type,
        )
        self.model.addresses[group_address.id] = group_address
        logger.debug("group: %s", group_address)
        return group_address

    def process_space(self, space: Tree, space_tag: str, context: SpaceContext = SpaceContext()):
        """
        Process a space recursively and create its function objects.

        Args:
            space: Generic tree of the space
            space_tag: Tag of sub spaces, "Space" or "BuildingPart"
            context: Location inherited from the parent spaces
        """
        logger.debug("space %s: %s", space.get('Type'), space.get('Name'))
        if space.get('Type') == 'Floor':
            context = context.with_floor(space.get('Name'))
        elif space.get('Type') == 'BuildingPart':
            context = context.with_building_part(space.get('Name'))

        for sub_space in space.get(space_tag, []):
            self.process_space(sub_space, space_tag, context)

        functions = space.get('Function', [])
        if not functions:
            return
        # functions are directly in the room
        room_context = context.with_room(space.get('Name'))
        for function in functions:
            self.process_function(function, room_context)

    def process_function(self, function: Tree, context: SpaceContext) -> Optional[FunctionObject]:
        """Create the function object of an ETS function, None without group addresses."""
        refs = [required_attribute(ref, 'RefId', 'GroupAddressRef') for ref in function.get('GroupAddressRef', [])]
        if not refs:
            logger.debug("function without group address: %s", function.get('Name'))
            return None

        obj = FunctionObject(
            id=required_attribute(function, 'Id', 'Function'),
            name=function.get('Name', ''),
            function_kind=function_kind_for(function.get('Type')),
            group_address_refs=refs,
            floor=context.floor,
            building_part=context.building_part,
            room=context.room,
        )
        for ref in refs:
            if ref in self.model.addresses:
                self.model.addresses[ref].referencing_object_ids.append(obj.id)
        self.model.objects[obj.id] = obj
        logger.debug("function: %s", obj)
        return obj
