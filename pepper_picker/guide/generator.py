from __future__ import annotations

import logging
from typing import Callable

from ..catalog.models import Item
from .models import Guide, Stage
from .stages import (
    feeding_care,
    growing_environment,
    harvesting,
    pest_disease,
    seed_starting,
    support_training,
    transplanting,
)

logger = logging.getLogger(__name__)

StageBuilder = Callable[[Item], Stage]

STAGE_BUILDERS: tuple[StageBuilder, ...] = (
    seed_starting,
    growing_environment,
    transplanting,
    support_training,
    feeding_care,
    pest_disease,
    harvesting,
)


def generate_guide(item: Item) -> Guide:
    """Build the seven-stage growing guide for one variety."""
    stages = tuple(build(item) for build in STAGE_BUILDERS)
    logger.debug("Generated %d-stage guide for %s", len(stages), item.name)
    return Guide(variety_name=item.name, stages=stages)
