"""Helper functions for KNX address and datapoint canonicalization.

These functions turn the raw values found in the project XML into the
strings used everywhere else:

- Group address integers rendered in the project address style
- Datapoint types ("DPST-5-1") rendered as "5.001"
- ETS function types ("FT-3") parsed to an ordinal
"""

import re
from typing import Callable, Dict, Optional

from ..exceptions import AddressStyleError, MalformedProjectError

RE_DATAPOINT_TYPE = re.compile(r'^DPST-([0-9]+)-([0-9]+)$')
RE_FUNCTION_TYPE = re.compile(r'^FT-([0-9]+)$')

# Converters of a group address integer into its representation
ADDRESS_STYLES: Dict[str, Callable[[int], str]] = {
    'Free': lambda a: str(a),
    'TwoLevel': lambda a: f"{(a >> 11) & 31}/{a & 2047}",
    'ThreeLevel': lambda a: f"{(a >> 11) & 31}/{(a >> 8) & 7}/{a & 255}",
}


def resolve_address_style(override: Optional[str], declared: Optional[str]) -> str:
    """Select the address style of a project.

    Args:
        override: Style requested by the user, wins when set.
        declared: ``GroupAddressStyle`` from the project information.

    Returns:
        One of the keys of ``ADDRESS_STYLES``.

    Raises:
        AddressStyleError: If the selected style is unknown.

    Example:
        >>> resolve_address_style(None, 'ThreeLevel')
        'ThreeLevel'
        >>> resolve_address_style('Free', 'ThreeLevel')
        'Free'
    """
    style = override or declared
    if style not in ADDRESS_STYLES:
        raise AddressStyleError(
            f"No such address style {style!r}, expected one of {', '.join(ADDRESS_STYLES)}"
        )
    return style


def format_group_address(raw_address: int, style: str) -> str:
    """Render a group address integer in the given style.

    Example:
        >>> format_group_address(2048, 'ThreeLevel')
        '1/0/0'
        >>> format_group_address(2048, 'TwoLevel')
        '1/0'
        >>> format_group_address(2048, 'Free')
        '2048'
    """
    try:
        converter = ADDRESS_STYLES[style]
    except KeyError as exc:
        raise AddressStyleError(f"No such address style {style!r}") from exc
    return converter(int(raw_address))


def format_datapoint_type(main: int, sub: int) -> str:
    """Format a datapoint as "main.sub" with sub zero-padded to 3 digits."""
    return f"{int(main)}.{int(sub):03d}"


def parse_datapoint_type(raw: Optional[str]) -> Optional[str]:
    """Parse an ETS datapoint type.

    Args:
        raw: ``DatapointType`` attribute, e.g. "DPST-5-1".

    Returns:
        Canonical datapoint, or None when the value cannot be used. None is
        not an error, the caller skips the group address.

    Example:
        >>> parse_datapoint_type('DPST-5-1')
        '5.001'
        >>> parse_datapoint_type('DPST-12-1200')
        '12.1200'
        >>> parse_datapoint_type('DPT-1') is None
        True
    """
    if not raw:
        return None
    match = RE_DATAPOINT_TYPE.match(raw.strip())
    if not match:
        return None
    return format_datapoint_type(match.group(1), match.group(2))


def parse_function_type(token: str) -> int:
    """Parse an ETS function type "FT-n" and return n.

    Raises:
        MalformedProjectError: If the token does not look like "FT-n".
    """
    match = RE_FUNCTION_TYPE.match(token or '')
    if not match:
        raise MalformedProjectError(f"Unknown function type: {token!r}")
    return int(match.group(1))


def identifier_for(address: str) -> str:
    """Build an identifier from a group address.

    Example:
        >>> identifier_for('1/0/1')
        'id_1_0_1'
    """
    return 'id_' + re.sub(r'[^A-Za-z0-9_]+', '_', address)


def split_suffix(text: str, separator: str = '|'):
    """Split "label |token" on the last separator.

    Returns:
        Tuple (label, token), both stripped. token is None when the text
        has no separator.

    Example:
        >>> split_suffix('Socket kitchen |switch')
        ('Socket kitchen', 'switch')
        >>> split_suffix('Socket kitchen')
        ('Socket kitchen', None)
    """
    if text is None or separator not in text:
        return text, None
    label, _, token = text.rpartition(separator)
    return label.strip(), token.strip()
