"""Normalization of user text and the Rock-Paper-Scissors winner rule.

Both entry points are pure. ``normalize_choice`` never raises; callers that
prefer an exception use ``parse_choice``.
"""

from __future__ import annotations

import logging
from typing import Final

from .models import Choice, InvalidChoice, Outcome

logger = logging.getLogger(__name__)

# Plural "scissors" is accepted on input; output always uses the singular.
_ALIASES: Final[dict[str, Choice]] = {
    "rock": Choice.ROCK,
    "paper": Choice.PAPER,
    "scissor": Choice.SCISSOR,
    "scissors": Choice.SCISSOR,
}

# winner -> loser
_BEATS: Final[dict[Choice, Choice]] = {
    Choice.ROCK: Choice.SCISSOR,
    Choice.PAPER: Choice.ROCK,
    Choice.SCISSOR: Choice.PAPER,
}


def normalize_choice(raw: str | None) -> Choice | None:
    """Map *raw* to a Choice, or None when it names none of them."""

    if raw is None:
        logger.debug("No input to normalise")
        return None
    choice = _ALIASES.get(raw.strip().lower())
    logger.debug("Normalised %r to %s", raw, choice)
    return choice


def parse_choice(raw: str | None) -> Choice:
    choice = normalize_choice(raw)
    if choice is None:
        raise InvalidChoice(raw)
    return choice


def beats(a: Choice, b: Choice) -> bool:
    for c in (a, b):
        if not isinstance(c, Choice):
            raise TypeError(f"expected Choice, got {type(c).__name__}")
    return _BEATS[a] is b


def decide_winner(user: Choice, computer: Choice) -> Outcome:
    if beats(user, computer):
        return Outcome.USER_WINS
    if user is computer:
        return Outcome.TIE
    return Outcome.COMPUTER_WINS
