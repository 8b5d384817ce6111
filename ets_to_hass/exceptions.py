"""Exceptions raised while converting an ETS project.

Everything derived from ``ConverterError`` is fatal: the run stops and no
output is written. Problems with single records are logged instead.
"""


class ConverterError(Exception):
    """Base class for all fatal conversion errors"""


class ProjectFileError(ConverterError):
    """The project archive cannot be read or is incomplete"""


class MalformedProjectError(ConverterError):
    """The project XML does not have the expected structure"""


class AddressStyleError(ConverterError):
    """Unknown group address style"""


class HookError(ConverterError):
    """The customization hook failed or was misused"""
