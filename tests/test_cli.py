from __future__ import annotations

import builtins

import pytest

import autoplay
from app_cli import run_assessment


@pytest.fixture(autouse=True)
def _isolated(monkeypatch, tmp_path):
    for name in ("TECHNICAL_RULE", "CLASSIFIER", "JITTER_ENABLED", "SEED", "READINESS_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


def test_interactive_run_with_back_step(monkeypatch, tmp_path, capsys):
    replies = iter(["5", "b", "", "5", "5", "5", "5", "1", "1", "1", "5", "10", "5"])
    monkeypatch.setattr(builtins, "input", lambda _prompt="": next(replies))
    out = tmp_path / "report.html"

    assert run_assessment.main(["--no-jitter", "--out", str(out)]) == 0

    printed = capsys.readouterr().out
    assert "You're Ready!" in printed
    assert "Overall 100%" in printed
    assert out.exists()


def test_invalid_choice_is_reprompted(monkeypatch, capsys):
    replies = iter(["9", "4"])
    monkeypatch.setattr(builtins, "input", lambda _prompt="": next(replies))
    choice = run_assessment.ask("Pick", [{"value": "3", "label": "c"}, {"value": "4", "label": "d"}])
    assert choice == "4"
    assert "Enter one of: 3, 4" in capsys.readouterr().out


def test_interrupted_run_exits_nonzero(monkeypatch):
    def _eof(_prompt=""):
        raise EOFError

    monkeypatch.setattr(builtins, "input", _eof)
    assert run_assessment.main(["--out", "unused.html"]) == 1


def test_autoplay_profiles():
    strong = autoplay.play("strong", seed=3)
    assert strong["psychologicalFit"] == 100
    assert strong["technicalReadiness"] == 78, "legacy rule only part-credits logic1"
    assert strong["overallScore"] == 89
    assert strong["recommendation"] == "Yes"
    assert strong["meta"]["profile"] == "strong"

    keyed = autoplay.play("strong", seed=3, technical_rule="keyed")
    assert keyed["technicalReadiness"] == 100

    weak = autoplay.play("weak", seed=3)
    assert weak["psychologicalFit"] == 20
    assert weak["technicalReadiness"] == 22
    assert weak["recommendation"] == "No"


def test_autoplay_seed_repeats():
    a = autoplay.play("random", seed=7)
    b = autoplay.play("random", seed=7)
    assert a["meta"]["answers"] == b["meta"]["answers"]
    assert a["wiscarScores"] == b["wiscarScores"]
