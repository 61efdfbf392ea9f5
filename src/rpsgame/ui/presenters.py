from __future__ import annotations

from collections.abc import Callable
from typing import IO

from rich.console import Console

from ..core.interfaces import Presenter
from ..core.models import Choice, Outcome

PROMPT = "Enter your choice (Rock, Paper, Scissor): "
INVALID_MESSAGE = "Invalid choice. Please enter Rock, Paper, or Scissor."

_OUTCOME_STYLES = {
    Outcome.TIE: "bold yellow",
    Outcome.USER_WINS: "bold green",
    Outcome.COMPUTER_WINS: "bold red",
}


class RichPresenter(Presenter):
    def __init__(
        self,
        *,
        no_color: bool = False,
        file: IO[str] | None = None,
        input_fn: Callable[[str], str] = input,
    ):
        # Styles only reach a real colour terminal; piped output stays plain text.
        self.console = Console(
            file=file,
            color_system=None if no_color else "auto",
            highlight=False,
            soft_wrap=True,
        )
        self._input_fn = input_fn

    def prompt_choice(self) -> str | None:
        # Prompt goes through the console so the whole round shares one stream.
        self.console.print(PROMPT, end="", markup=False)
        try:
            return self._input_fn("")
        except EOFError:
            return None

    def invalid_choice(self) -> None:
        self.console.print(INVALID_MESSAGE, style="red", markup=False)

    def show_computer_choice(self, choice: Choice) -> None:
        self.console.print(f"Computer chose: {choice}", markup=False)

    def show_outcome(self, outcome: Outcome) -> None:
        self.console.print(outcome.message, style=_OUTCOME_STYLES[outcome], markup=False)
