"""Base generator class for all entity kind generators"""
import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

from ..config import ConverterConfig
from ..models import FunctionObject

logger = logging.getLogger(__name__)


class KindDecision:
    """Result of an entity kind generation"""

    def __init__(self, entity_kind: str, display_name: str, from_custom_suffix: bool = False):
        self.entity_kind = entity_kind
        self.display_name = display_name
        # addresses may carry their property in their name as well
        self.from_custom_suffix = from_custom_suffix

    def __repr__(self) -> str:
        return f"KindDecision({self.entity_kind!r}, {self.display_name!r}, {self.from_custom_suffix})"


class BaseKindGenerator(ABC):
    """Base class for all entity kind generators"""

    # function kinds handled by this generator
    function_kinds: Tuple[str, ...] = ()

    def __init__(self, config: ConverterConfig):
        """
        Initialize generator.

        Args:
            config: Options of the conversion run
        """
        self.config = config

    def can_handle(self, obj: FunctionObject) -> bool:
        """
        Check if this generator can handle the given object.

        Args:
            obj: Function object to resolve

        Returns:
            True if this generator can handle the object
        """
        return obj.function_kind in self.function_kinds

    @abstractmethod
    def generate(self, obj: FunctionObject, display_name: str) -> Optional[KindDecision]:
        """
        Decide the Home Assistant entity kind of an object.

        Args:
            obj: Function object to resolve
            display_name: Name computed from the object and its seed

        Returns:
            KindDecision, or None when the object is dropped
        """
        pass
