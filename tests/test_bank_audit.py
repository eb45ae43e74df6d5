from __future__ import annotations

import json

import readiness_core.audit_bank as audit_bank
from readiness_core.types import Question

from tests.conftest import build_questionnaire


def test_shipped_questionnaire_only_flags_legacy_key(questionnaire):
    summary = audit_bank.audit_questionnaire(questionnaire)
    assert summary["totals"] == {"likert": 7, "multiple_choice": 3, "scale": 1}
    assert summary["sections"] == {"psychometric": 5, "technical": 3, "wiscar": 3}
    assert summary["warnings"] == [
        "logic1 legacy rule gives the correct answer (index 2) 33 instead of 100"
    ]


def test_audit_flags_malformed_questions():
    items = [
        Question(id="excel9", text="t", type="multiple_choice", options=("a", "b"), correct_index=5,
                 category="technical"),
        Question(id="forecasting9", text="t", type="multiple_choice", category="technical"),
        Question(id="skill9", text="t", type="scale", min=5, max=1),
        Question(id="interest9", text="t", type="likert", category="technical"),
        Question(id="interest9", text="t", type="likert", category="psychological"),
    ]
    warnings = "\n".join(audit_bank.audit_items(items)["warnings"])
    assert "excel9 correct_index 5 outside 0..1" in warnings
    assert "forecasting9 multiple_choice has no options" in warnings
    assert "skill9 scale min 5 >= max 1" in warnings
    assert "interest9 category 'technical' differs from id classification 'psychological'" in warnings
    assert "interest9 appears 2 times" in warnings


def test_empty_section_is_reported():
    summary = audit_bank.audit_questionnaire(build_questionnaire(1, 0))
    assert "section s1 has no questions" in summary["warnings"]


def test_main_returns_warning_exit(tmp_path, capsys):
    out = tmp_path / "audit.json"
    exit_code = audit_bank.main([str(out)])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "logic1" in captured.out
    saved = json.loads(out.read_text(encoding="utf-8"))
    assert saved["totals"]["likert"] == 7
