"""Generator for custom functions carrying their entity kind in their name"""

import logging
from typing import Optional

from .base_generator import BaseKindGenerator, KindDecision
from ..models import FunctionObject

logger = logging.getLogger(__name__)


class CustomGenerator(BaseKindGenerator):
    """Generator for ETS custom functions named "<name> |<entity kind>".

    "Socket kitchen |switch" becomes a switch named "Socket kitchen". The
    group addresses of such an object may name their property the same way,
    e.g. "Socket kitchen state |state_address".
    """

    function_kinds = ('custom',)

    def generate(self, obj: FunctionObject, display_name: str) -> Optional[KindDecision]:
        # the kind always comes from the ETS name, a hook may rename the entity
        raw_kind = obj.name.rpartition('|')[2] if '|' in obj.name else ''
        entity_kind = raw_kind.strip()
        if not entity_kind:
            logger.warning("%s/%s: %s: custom function needs a name like "
                           "'<my ETS function name> |<entity kind>' (example: |sensor or |binary_sensor)",
                           obj.name, obj.room, obj.function_kind)
            return None
        name = ' '.join(display_name.replace('|' + raw_kind, '').split())
        return KindDecision(entity_kind, name, from_custom_suffix=True)
