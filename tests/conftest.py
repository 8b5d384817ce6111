"""Shared pytest fixtures for all tests."""

import pytest
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from ets_to_hass.config import ConverterConfig  # noqa: E402
from ets_to_hass.parsers.knx_parser import ProjectTrees  # noqa: E402


def three_level(main, middle, sub):
    """Raw integer of a three level group address."""
    return (main << 11) | (middle << 8) | sub


def make_ga(ga_id, name, raw_address, datapoint_type, description=None):
    element = {'Id': ga_id, 'Name': name, 'Address': str(raw_address)}
    if datapoint_type is not None:
        element['DatapointType'] = datapoint_type
    if description is not None:
        element['Description'] = description
    return element


def make_range(name, addresses=(), ranges=()):
    group_range = {'Name': name}
    if ranges:
        group_range['GroupRange'] = list(ranges)
    if addresses:
        group_range['GroupAddress'] = list(addresses)
    return group_range


def make_function(function_id, name, function_type, refs=()):
    function = {'Id': function_id, 'Name': name, 'Type': function_type}
    if refs:
        function['GroupAddressRef'] = [
            {'Id': f"{function_id}_R-{i}", 'RefId': ref} for i, ref in enumerate(refs)
        ]
    return function


def make_space(space_type, name, spaces=(), functions=(), space_tag='Space'):
    space = {'Type': space_type, 'Name': name}
    if spaces:
        space[space_tag] = list(spaces)
    if functions:
        space['Function'] = list(functions)
    return space


def make_trees(ranges, spaces, style='ThreeLevel', name='Demo', spaces_tag='Locations', space_tag='Space'):
    """Generic trees as KNXParser returns them."""
    installation = {
        'Name': '',
        'GroupAddresses': [{'GroupRanges': [{'GroupRange': list(ranges)}]}],
    }
    if spaces is not None:
        installation[spaces_tag] = [{space_tag: list(spaces)}]
    project_info = {'Name': name}
    if style is not None:
        project_info['GroupAddressStyle'] = style
    info = {'Project': [{'Id': 'P-0001', 'ProjectInformation': [project_info]}]}
    data = {'Project': [{'Id': 'P-0001', 'Installations': [{'Installation': [installation]}]}]}
    return ProjectTrees(info=info, data=data)


@pytest.fixture(scope="session")
def project_root_dir():
    """Return the project root directory."""
    return project_root


@pytest.fixture(scope="session")
def tree_builders():
    """Provide the generic tree builders as a dict.

    Example:
        >>> def test_something(tree_builders):
        ...     ga = tree_builders['make_ga']('GA-1', 'Light', 2049, 'DPST-1-1')
    """
    return {
        'three_level': three_level,
        'make_ga': make_ga,
        'make_range': make_range,
        'make_function': make_function,
        'make_space': make_space,
        'make_trees': make_trees,
    }


@pytest.fixture
def config():
    """Default conversion options."""
    return ConverterConfig()


@pytest.fixture
def sample_trees():
    """A small house with a kitchen and an office.

    Kitchen (Main / Ground): dimmable light, blind, temperature sensor and a
    radiator. Office (Main / First): switchable light whose only address has
    no usable datapoint.
    """
    addresses = [
        make_ga('GA-1', 'Kitchen light on/off', three_level(1, 0, 1), 'DPST-1-1'),
        make_ga('GA-2', 'Kitchen light state', three_level(1, 0, 2), 'DPST-1-11'),
        make_ga('GA-3', 'Kitchen light brightness |brightness_address', three_level(1, 0, 3), 'DPST-5-1'),
        make_ga('GA-10', 'Kitchen light dimming', three_level(1, 0, 4), 'DPST-3-7'),
        make_ga('GA-4', 'Blind up/down', three_level(1, 1, 1), 'DPST-1-8'),
        make_ga('GA-5', 'Blind stop', three_level(1, 1, 2), 'DPST-1-10'),
        make_ga('GA-6', 'Blind position |position_address', three_level(1, 1, 3), 'DPST-5-1'),
    ]
    sensors = [
        make_ga('GA-7', 'Temperature', three_level(2, 0, 1), 'DPST-9-1'),
        make_ga('GA-8', 'Radiator valve', three_level(2, 0, 2), 'DPST-1-1'),
        make_ga('GA-9', 'Broken', three_level(2, 0, 3), 'DPT-1'),
    ]
    far_away = [make_ga('GA-11', 'Far away', three_level(10, 0, 0), 'DPST-1-1')]
    ranges = [
        make_range('Lights and blinds', addresses=addresses),
        make_range('Climate', ranges=[make_range('Sensors', addresses=sensors)]),
        make_range('Spare', addresses=far_away),
    ]

    kitchen = make_space('Room', 'Kitchen', functions=[
        make_function('F-1', 'Ceiling', 'FT-2', ['GA-1', 'GA-2', 'GA-3', 'GA-10']),
        make_function('F-2', 'Blind', 'FT-3', ['GA-4', 'GA-5', 'GA-6']),
        make_function('F-3', 'Temperature |sensor', 'FT-0', ['GA-7', 'GA-missing']),
        make_function('F-4', 'Radiator', 'FT-4', ['GA-8']),
        make_function('F-6', 'No address', 'FT-1'),
    ])
    office = make_space('Room', 'Office', functions=[
        make_function('F-5', 'Desk lamp', 'FT-1', ['GA-9']),
    ])
    building = make_space('Building', 'House', spaces=[
        make_space('BuildingPart', 'Main', spaces=[
            make_space('Floor', 'Ground', spaces=[kitchen]),
            make_space('Floor', 'First', spaces=[office]),
        ]),
    ])
    return make_trees(ranges, [building])
