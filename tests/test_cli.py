import logging

import pytest

from apicall import cli
from apicall.config import Settings
from apicall.utils import logging_utils
from apicall.models import AnswerOption, FuelPrice, PresentationQuestion


class FakeApi:
    diesel = [FuelPrice("diesel", None, "12.5")]
    gas = []
    trivia = [
        PresentationQuestion(
            category="Geography",
            difficulty="easy",
            question="Capital of France?",
            options=[AnswerOption("Berlin", False), AnswerOption("Paris", True)],
        )
    ]

    def __init__(self, settings=None, session=None):
        self.amount = None

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        pass

    def get_diesel_data(self):
        return self.diesel

    def get_gas_data(self):
        return self.gas

    def get_trivia(self, amount=None, rng=None):
        return self.trivia


@pytest.fixture(autouse=True)
def fake_api(monkeypatch):
    monkeypatch.setattr(cli, "ApiService", FakeApi)


def test_diesel(capsys):
    assert cli.main(["diesel"]) == 0
    assert "-\t12.5" in capsys.readouterr().out


def test_gas_empty_returns_1():
    assert cli.main(["gas"]) == 1


def test_trivia_reveal(capsys):
    assert cli.main(["trivia", "--amount", "1", "--seed", "4", "--reveal"]) == 0
    out = capsys.readouterr().out
    assert "1. [Geography / easy] Capital of France?" in out
    assert "A) Berlin\n" in out
    assert "B) Paris *" in out


def test_parser_requires_command():
    with pytest.raises(SystemExit):
        cli.build_parser().parse_args([])


def test_trivia_amount_must_be_positive(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["trivia", "--amount", "0"])
    assert exc.value.code == 2
    assert "must be at least 1" in capsys.readouterr().err


def test_trivia_amount_must_be_integer():
    with pytest.raises(SystemExit) as exc:
        cli.main(["trivia", "--amount", "many"])
    assert exc.value.code == 2


def test_trivia_invalid_configured_amount_returns_1(monkeypatch):
    class RejectingApi(FakeApi):
        def get_trivia(self, amount=None, rng=None):
            raise ValueError("amount must be positive, got 0")

    monkeypatch.setattr(cli, "ApiService", RejectingApi)
    assert cli.main(["trivia"]) == 1


def _capture_basic_config(monkeypatch):
    seen = {}
    monkeypatch.setattr(logging_utils, "_CONFIGURED", False)
    monkeypatch.setattr(logging, "basicConfig", lambda **kw: seen.update(kw))
    return seen


def test_log_level_falls_back_to_settings(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.setattr(cli, "load_settings", lambda: Settings(log_level="DEBUG"))
    seen = _capture_basic_config(monkeypatch)
    assert cli.main(["diesel"]) == 0
    assert seen["level"] == logging.DEBUG


def test_log_level_flag_wins_over_settings(monkeypatch):
    monkeypatch.setattr(cli, "load_settings", lambda: Settings(log_level="DEBUG"))
    seen = _capture_basic_config(monkeypatch)
    assert cli.main(["--log-level", "WARNING", "diesel"]) == 0
    assert seen["level"] == logging.WARNING
