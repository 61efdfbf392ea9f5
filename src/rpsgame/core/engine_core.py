from __future__ import annotations

import logging
import random

from ..dynamic.rival import random_choice
from .interfaces import Presenter, Rival
from .models import InvalidChoice, RoundResult
from .rules import decide_winner, parse_choice

logger = logging.getLogger(__name__)


def run_core(
    presenter: Presenter,
    *,
    seed: int | None,
    rival: Rival = random_choice,
) -> RoundResult | None:
    """Play one round: read, validate, draw, judge.

    Returns None when the input is rejected; the computer never draws in
    that case.
    """
    raw = presenter.prompt_choice()
    try:
        user = parse_choice(raw)
    except InvalidChoice as exc:
        logger.debug("Rejected input %r", exc.raw)
        presenter.invalid_choice()
        return None

    rng = random.Random(seed)
    computer = rival(rng)
    presenter.show_computer_choice(computer)
    outcome = decide_winner(user, computer)
    presenter.show_outcome(outcome)
    logger.debug("Round finished: %s vs %s -> %s", user, computer, outcome.name)
    return RoundResult(user=user, computer=computer, outcome=outcome)
