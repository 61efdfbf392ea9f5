from __future__ import annotations

import io
import logging

import pytest

from rpsgame import cli


def test_parser_defaults() -> None:
    args = cli.build_parser().parse_args([])
    assert args.seed is None
    assert args.no_color is False
    assert args.verbose is False


def test_parser_rejects_non_integer_seed() -> None:
    with pytest.raises(SystemExit) as info:
        cli.build_parser().parse_args(["--seed", "abc"])
    assert info.value.code == 2


def test_main_forwards_options(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[dict] = []
    monkeypatch.setattr(cli, "run_play", lambda **kwargs: calls.append(kwargs))

    cli.main(["--seed", "5", "--no-color"])

    assert calls == [{"seed": 5, "no_color": True}]


def test_main_verbose_configures_debug_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    configured: list[dict] = []
    monkeypatch.setattr(cli, "run_play", lambda **kwargs: None)
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: configured.append(kwargs))

    cli.main(["-v"])

    assert configured and configured[0]["level"] == logging.DEBUG


def test_main_plays_a_round_from_stdin(monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]) -> None:
    monkeypatch.setattr("sys.stdin", io.StringIO("banana\n"))

    cli.main(["--no-color"])

    out = capsys.readouterr().out
    assert out == "Enter your choice (Rock, Paper, Scissor): Invalid choice. Please enter Rock, Paper, or Scissor.\n"
