from __future__ import annotations

import random
from typing import Protocol

from .models import Choice, Outcome


class Rival(Protocol):
    def __call__(self, rng: random.Random) -> Choice: ...


class Presenter(Protocol):
    def prompt_choice(self) -> str | None:
        """Show the prompt and return one line of input, or None at end of input."""

    def invalid_choice(self) -> None: ...

    def show_computer_choice(self, choice: Choice) -> None: ...

    def show_outcome(self, outcome: Outcome) -> None: ...
