"""Generator for heating/HVAC devices"""

import logging
from typing import Optional

from .base_generator import BaseKindGenerator, KindDecision
from ..datapoints import HEATING_FUNCTION_KINDS
from ..models import FunctionObject

logger = logging.getLogger(__name__)


class HeatingGenerator(BaseKindGenerator):
    """Generator for KNX heating functions, which have no entity kind yet"""

    function_kinds = HEATING_FUNCTION_KINDS

    def generate(self, obj: FunctionObject, display_name: str) -> Optional[KindDecision]:
        logger.warning("Function type not implemented for %s/%s: %s", obj.name, obj.room, obj.function_kind)
        return None
