from __future__ import annotations

import pytest

from readiness_core.question_bank import load_questionnaire
from readiness_core.types import Question, Questionnaire, Section

PSYCH_IDS = ("interest1", "interest2", "personality1", "personality2", "cognitive1")
TECH_IDS = ("excel1", "forecasting1", "logic1")


def build_questionnaire(*section_sizes: int, title: str = "Synthetic") -> Questionnaire:
    """Deterministic likert-only questionnaire; a size of 0 gives an empty section."""

    sections: list[Section] = []
    for s_idx, size in enumerate(section_sizes or (2, 2)):
        questions = tuple(
            Question(
                id=f"interest_s{s_idx}_q{q_idx}",
                text=f"Section {s_idx} statement {q_idx}",
                type="likert",
                category="psychological",
            )
            for q_idx in range(size)
        )
        sections.append(
            Section(id=f"s{s_idx}", title=f"Section {s_idx}", description="", questions=questions)
        )
    return Questionnaire(title=title, sections=tuple(sections))


def full_answers(likert: str = "5", choice: str = "1", scale: str = "10") -> dict[str, str]:
    out: dict[str, str] = {}
    for q in load_questionnaire().iter_questions():
        if q.type == "likert":
            out[q.id] = likert
        elif q.type == "multiple_choice":
            out[q.id] = choice
        else:
            out[q.id] = scale
    return out


@pytest.fixture
def questionnaire() -> Questionnaire:
    return load_questionnaire()


@pytest.fixture
def synthetic_questionnaire() -> Questionnaire:
    return build_questionnaire(2, 3)
