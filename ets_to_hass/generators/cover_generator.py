"""Generator for rollershutter/blind devices"""

import logging
from typing import Optional

from .base_generator import BaseKindGenerator, KindDecision
from ..models import FunctionObject

logger = logging.getLogger(__name__)


class CoverGenerator(BaseKindGenerator):
    """Generator for ETS sun protection functions"""

    function_kinds = ('sun_protection',)

    def generate(self, obj: FunctionObject, display_name: str) -> Optional[KindDecision]:
        return KindDecision('cover', display_name)
