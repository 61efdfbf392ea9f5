"""Computer opponent: a uniform draw over the three choices."""

from __future__ import annotations

import logging
import random

from ..core.models import Choice

logger = logging.getLogger(__name__)

CHOICES: tuple[Choice, ...] = tuple(Choice)


def random_choice(rng: random.Random | None = None) -> Choice:
    picker = rng if rng is not None else random
    choice = picker.choice(CHOICES)
    logger.debug("Computer drew %s", choice)
    return choice
