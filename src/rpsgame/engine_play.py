from __future__ import annotations

import secrets
from collections.abc import Callable
from typing import IO

from .core.engine_core import run_core
from .core.models import RoundResult
from .ui.presenters import RichPresenter


def run_play(
    seed: int | None = None,
    no_color: bool = False,
    file: IO[str] | None = None,
    _input_fn: Callable[[str], str] = input,
) -> RoundResult | None:
    presenter = RichPresenter(no_color=no_color, file=file, input_fn=_input_fn)
    # Unseeded runs draw a fresh seed each time
    actual_seed = seed if seed is not None else secrets.randbits(32)
    return run_core(presenter, seed=actual_seed)
