"""Data models for ETS to Home Assistant conversion.

This package contains data classes used throughout the application:
- GroupAddress: a KNX group address from the project registry
- FunctionObject: an ETS function (light, cover, ...) referencing addresses
- ResolvedEntity: one output record produced by the resolver
- ProjectModel: the whole model handed to the customization hook
- SpaceContext: location information inherited while walking spaces

GroupAddress and FunctionObject are only changed while the model is built and
by the customization hook. Once resolution starts nothing mutates them.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional


@dataclass
class AddressOverrides:
    """Values forced on a group address by the customization hook."""
    slot_name: Optional[str] = None  # e.g. "brightness_state_address"
    display_name: Optional[str] = None  # linknx label


@dataclass
class ObjectOverrides:
    """Values forced on a function object by the customization hook."""
    entity_kind: Optional[str] = None  # e.g. "switch"
    initial_properties: Optional[Dict[str, Any]] = None


@dataclass
class GroupAddress:
    """Represents a KNX group address with metadata."""
    id: str
    name: str
    address: str  # e.g. "1/2/3", depends on the project address style
    datapoint_type: Optional[str]  # e.g. "1.001", "12.1200"
    description: Optional[str] = None
    referencing_object_ids: List[str] = field(default_factory=list)
    overrides: AddressOverrides = field(default_factory=AddressOverrides)

    def __str__(self) -> str:
        return f"{self.name} ({self.address})"

    @property
    def label(self) -> str:
        """Name shown to users, the override wins."""
        return self.overrides.display_name or self.name


@dataclass
class FunctionObject:
    """Represents an ETS function located in a room."""
    id: str
    name: str
    function_kind: str  # see datapoints.FUNCTION_KINDS
    group_address_refs: List[str] = field(default_factory=list)
    floor: Optional[str] = None
    building_part: Optional[str] = None
    room: Optional[str] = None
    overrides: ObjectOverrides = field(default_factory=ObjectOverrides)

    def __str__(self) -> str:
        return f"{self.name}/{self.room}: {self.function_kind}"


@dataclass(frozen=True)
class ResolvedEntity:
    """One Home Assistant entity, never changed after creation."""
    entity_kind: str
    display_name: str
    properties: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        result = {'name': self.display_name}
        result.update(self.properties)
        return result


@dataclass(frozen=True)
class SpaceContext:
    """Location inherited by everything below a space."""
    floor: Optional[str] = None
    building_part: Optional[str] = None
    room: Optional[str] = None

    def with_floor(self, floor: str) -> 'SpaceContext':
        return replace(self, floor=floor)

    def with_building_part(self, building_part: str) -> 'SpaceContext':
        return replace(self, building_part=building_part)

    def with_room(self, room: str) -> 'SpaceContext':
        return replace(self, room=room)


@dataclass
class ProjectModel:
    """Objects and group addresses of one project, both keyed by id."""
    name: Optional[str] = None
    address_style: Optional[str] = None
    objects: Dict[str, FunctionObject] = field(default_factory=dict)
    addresses: Dict[str, GroupAddress] = field(default_factory=dict)
    hook_applied: bool = False

    def __str__(self) -> str:
        return f"Project {self.name}: {len(self.objects)} objects, {len(self.addresses)} addresses"

    def addresses_of(self, obj: FunctionObject) -> List[GroupAddress]:
        """Registry addresses referenced by an object, unknown ids dropped."""
        return [self.addresses[ref] for ref in obj.group_address_refs if ref in self.addresses]


__all__ = [
    'AddressOverrides',
    'ObjectOverrides',
    'GroupAddress',
    'FunctionObject',
    'ResolvedEntity',
    'SpaceContext',
    'ProjectModel',
]
