"""Customization hook for installations with pulse driven blinds.

Such blinds have one group address to go up ("Montee") and one to go down
("Descente"), both named "...:Pulse" in ETS. They are not covers for Home
Assistant: every address becomes its own switch.

Use it with ``--hook ets_to_hass/custom/pulse_blinds.py``.
"""
import logging

from ets_to_hass.models import FunctionObject, ObjectOverrides, ProjectModel

logger = logging.getLogger(__name__)

PULSE_SUFFIX = ':Pulse'
DIRECTIONS = ('Montee', 'Descente')
TRAVELLING_TIME = 59


def _direction(name: str) -> str:
    for direction in DIRECTIONS:
        if direction in name:
            return direction
    raise ValueError(f"No direction in pulse address name: {name}")


def split_pulse_blinds(model: ProjectModel):
    """Replace every pulse blind by one switch per group address."""
    replaced = []
    created = {}
    for key, obj in model.objects.items():
        refs = [ref for ref in obj.group_address_refs if ref in model.addresses]
        if obj.function_kind != 'sun_protection' or not refs:
            continue
        if not model.addresses[refs[0]].name.endswith(PULSE_SUFFIX):
            continue
        replaced.append(key)
        for ref in refs:
            ga = model.addresses[ref]
            direction = _direction(ga.name)
            ga.datapoint_type = '1.001'
            created[f"{key}_{direction}"] = FunctionObject(
                id=f"{key}_{direction}",
                name=f"{obj.name} {direction}",
                function_kind='custom',
                group_address_refs=[ref],
                floor=obj.floor,
                building_part=obj.building_part,
                room=obj.room,
                overrides=ObjectOverrides(entity_kind='switch'),
            )
    for key in replaced:
        del model.objects[key]
    model.objects.update(created)
    logger.info("Split %d pulse blinds into %d switches", len(replaced), len(created))


def name_with_room(model: ProjectModel):
    """Name every object "<name> <room>", covers get their travelling time."""
    for obj in model.objects.values():
        seed = {'name': ' '.join(part for part in (obj.name, obj.room) if part)}
        if obj.function_kind == 'sun_protection':
            seed['travelling_time_down'] = TRAVELLING_TIME
            seed['travelling_time_up'] = TRAVELLING_TIME
        obj.overrides.initial_properties = seed


def customize(model: ProjectModel) -> bool:
    split_pulse_blinds(model)
    name_with_room(model)

    unused = [ga for ga in model.addresses.values() if not ga.referencing_object_ids]
    for ga in unused:
        logger.error("Group not in object: %s", ga.address)
    return not unused
