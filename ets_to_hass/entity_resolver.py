"""Resolve function objects into Home Assistant entities"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .config import ConverterConfig
from .datapoints import (
    DATAPOINT_SLOTS,
    IGNORED_DATAPOINTS,
    PERCENT_DATAPOINT,
    PERCENT_ENTITY_KINDS,
    SENSOR_SLOT,
    sensor_type_for,
)
from .generators.base_generator import BaseKindGenerator, KindDecision
from .generators.cover_generator import CoverGenerator
from .generators.custom_generator import CustomGenerator
from .generators.heating_generator import HeatingGenerator
from .generators.light_generator import LightGenerator
from .models import FunctionObject, GroupAddress, ProjectModel, ResolvedEntity
from .utils.addressing import split_suffix

logger = logging.getLogger(__name__)

# Sentinel for addresses that are deliberately not used
SKIP = object()


@dataclass
class ResolutionResult:
    """Entities grouped by kind, in resolution order"""
    entities: Dict[str, List[ResolvedEntity]] = field(default_factory=dict)
    unused_addresses: List[str] = field(default_factory=list)
    dropped_objects: List[str] = field(default_factory=list)

    def all_entities(self) -> List[ResolvedEntity]:
        return [entity for group in self.entities.values() for entity in group]


class EntityResolver:
    """Main resolver that orchestrates the entity kind generators"""

    def __init__(self, config: ConverterConfig):
        """
        Initialize entity resolver.

        Args:
            config: Options of the conversion run
        """
        self.config = config

        # Initialize generators in priority order
        self.generators: List[BaseKindGenerator] = [
            LightGenerator(config),
            CoverGenerator(config),
            CustomGenerator(config),
            HeatingGenerator(config),
        ]

    def resolve(self, model: ProjectModel) -> ResolutionResult:
        """
        Resolve every object of the model.

        Args:
            model: Project model, not changed

        Returns:
            ResolutionResult with entities and unused addresses
        """
        result = ResolutionResult()
        used_ids = set()

        logger.info("Resolving %d objects", len(model.objects))
        for obj in model.objects.values():
            entity = self.resolve_object(obj, model)
            if entity is None:
                result.dropped_objects.append(obj.id)
                continue
            used_ids.update(obj.group_address_refs)
            self._add_entity(result, entity)

        # addresses that will not be used (you can fix in a customization hook)
        for ga in model.addresses.values():
            if ga.id not in used_ids:
                logger.warning("Group not in object: %s: %s. Create a custom object in a hook if needed, "
                               "or use ETS to create functions", ga.address, ga.name)
                result.unused_addresses.append(ga.id)

        logger.info("Resolution complete: %d entities, %d objects dropped, %d addresses unused",
                    len(result.all_entities()), len(result.dropped_objects), len(result.unused_addresses))
        return result

    def resolve_object(self, obj: FunctionObject, model: ProjectModel) -> Optional[ResolvedEntity]:
        """Resolve one object, None when it is dropped."""
        properties: Dict[str, Any] = dict(obj.overrides.initial_properties or {})
        display_name = properties.pop('name', None) or self._build_display_name(obj)

        decision = self._decide_kind(obj, display_name)
        if decision is None:
            return None

        for ga in model.addresses_of(obj):
            self._resolve_address(ga, decision, properties)

        return ResolvedEntity(decision.entity_kind, decision.display_name, properties)

    def _build_display_name(self, obj: FunctionObject) -> str:
        """Build the entity name, qualified with the location when asked."""
        if not self.config.full_name:
            return obj.name
        parts = [obj.building_part, obj.floor, obj.room, obj.name]
        return ' '.join(part for part in parts if part)

    def _decide_kind(self, obj: FunctionObject, display_name: str) -> Optional[KindDecision]:
        """Compute the entity kind of an object."""
        if obj.overrides.entity_kind:
            return KindDecision(obj.overrides.entity_kind, display_name)

        for generator in self.generators:
            if generator.can_handle(obj):
                return generator.generate(obj, display_name)

        logger.error("Function type not supported for %s/%s, please report: %s",
                     obj.name, obj.room, obj.function_kind)
        return None

    def _resolve_address(self, ga: GroupAddress, decision: KindDecision, properties: Dict[str, Any]):
        """Put one group address into the property slot it belongs to."""
        entity_kind = decision.entity_kind
        context = f"{ga.address}({entity_kind}:{ga.datapoint_type}:{ga.name})"

        slot = self._find_slot(ga, decision, properties, context)
        if slot is SKIP:
            return
        if slot is None:
            logger.warning("%s: unexpected empty property name", context)
            return
        if slot == 'name' or slot in properties:
            logger.warning("%s: ignoring for %s already set with %s", context, slot, properties.get(slot))
            return

        # covers also need move_short_address, the stop address does it
        if entity_kind == 'cover' and slot == 'stop_address':
            if 'move_short_address' in properties:
                logger.warning("%s: ignoring for move_short_address already set with %s",
                               context, properties['move_short_address'])
            else:
                properties['move_short_address'] = ga.address
        properties[slot] = ga.address

    def _find_slot(self, ga: GroupAddress, decision: KindDecision, properties: Dict[str, Any], context: str):
        """Return the property of an address, None for an empty name or SKIP."""
        if ga.overrides.slot_name:
            return ga.overrides.slot_name

        # custom objects: address named "my address |<property>"
        if decision.from_custom_suffix and '|' in ga.name:
            return split_suffix(ga.name)[1] or None

        if decision.entity_kind == 'sensor':
            sensor_type = sensor_type_for(ga.datapoint_type)
            if sensor_type is not None:
                # every sensor address sets it, the last one wins
                if properties.get('type') not in (None, sensor_type):
                    logger.warning("%s: sensor type %s replaced by %s", context, properties['type'], sensor_type)
                properties['type'] = sensor_type
            return SENSOR_SLOT

        datapoint = ga.datapoint_type
        if datapoint in DATAPOINT_SLOTS:
            return DATAPOINT_SLOTS[datapoint]
        if datapoint in IGNORED_DATAPOINTS:
            logger.debug("%s: ignoring datapoint", context)
            return SKIP
        if datapoint == PERCENT_DATAPOINT and decision.entity_kind in PERCENT_ENTITY_KINDS:
            slot = split_suffix(ga.name)[1]
            if not slot:
                logger.warning("%s: missing %s property in address name 'my address name |<property>' "
                               "(example: |position_address or |brightness_state_address)",
                               context, decision.entity_kind)
                return SKIP
            return slot

        logger.warning("%s: no mapping for datapoint %s", context, datapoint)
        return SKIP

    @staticmethod
    def _add_entity(result: ResolutionResult, entity: ResolvedEntity):
        """Append an entity to its kind, names are used as identifiers."""
        group = result.entities.setdefault(entity.entity_kind, [])
        if any(other.display_name.casefold() == entity.display_name.casefold() for other in group):
            logger.warning("Object name is duplicated: %s", entity.display_name)
        group.append(entity)
