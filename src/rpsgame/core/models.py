from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Choice(Enum):
    ROCK = "Rock"
    PAPER = "Paper"
    SCISSOR = "Scissor"

    def __str__(self) -> str:
        return self.value


class Outcome(Enum):
    TIE = "It's a tie!"
    USER_WINS = "You win!"
    COMPUTER_WINS = "Computer wins!"

    @property
    def message(self) -> str:
        return self.value


@dataclass(frozen=True)
class RoundResult:
    """Both picks of a finished round and who took it."""

    user: Choice
    computer: Choice
    outcome: Outcome


class InvalidChoice(ValueError):
    """Raised when user text does not name Rock, Paper or Scissor."""

    def __init__(self, raw: str | None) -> None:
        super().__init__(f"invalid choice: {raw!r}")
        self.raw = raw
