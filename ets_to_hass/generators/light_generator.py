"""Generator for switchable and dimmable lights"""

import logging
from typing import Optional

from .base_generator import BaseKindGenerator, KindDecision
from ..models import FunctionObject

logger = logging.getLogger(__name__)


class LightGenerator(BaseKindGenerator):
    """Generator for ETS light functions"""

    function_kinds = ('switchable_light', 'dimmable_light')

    def generate(self, obj: FunctionObject, display_name: str) -> Optional[KindDecision]:
        return KindDecision('light', display_name)
