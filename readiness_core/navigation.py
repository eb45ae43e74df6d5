"""Multi-step answer collection.

One question is shown at a time; the user may only move forward once the
current question has an answer, and may always step back. The finished
answer set is handed out as a copy once the final question is answered.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from .question_bank import load_questionnaire
from .types import AnswerSet, Question, Questionnaire, Section

log = logging.getLogger(__name__)


class FlowError(RuntimeError):
    """Raised when the flow is asked to move past an unanswered question."""


class AssessmentFlow:
    def __init__(self, questionnaire: Optional[Questionnaire] = None) -> None:
        self.questionnaire = questionnaire or load_questionnaire()
        if not self.questionnaire.sections or not any(s.questions for s in self.questionnaire.sections):
            raise ValueError("questionnaire has no questions")
        self.section_index = 0
        self.question_index = 0
        self.answers: Dict[str, str] = {}
        self._skip_empty_forward()

    # ---- position ----
    @property
    def current_section(self) -> Section:
        return self.questionnaire.sections[self.section_index]

    @property
    def current_question(self) -> Question:
        return self.current_section.questions[self.question_index]

    @property
    def is_first(self) -> bool:
        return self._prev_position() is None

    @property
    def is_last(self) -> bool:
        return self._next_position() is None

    def _next_position(self) -> Optional[tuple[int, int]]:
        secs = self.questionnaire.sections
        if self.question_index < len(self.current_section.questions) - 1:
            return self.section_index, self.question_index + 1
        for s in range(self.section_index + 1, len(secs)):
            if secs[s].questions:
                return s, 0
        return None

    def _prev_position(self) -> Optional[tuple[int, int]]:
        secs = self.questionnaire.sections
        if self.question_index > 0:
            return self.section_index, self.question_index - 1
        for s in range(self.section_index - 1, -1, -1):
            if secs[s].questions:
                return s, len(secs[s].questions) - 1
        return None

    def _skip_empty_forward(self) -> None:
        secs = self.questionnaire.sections
        while not secs[self.section_index].questions:
            self.section_index += 1
        self.question_index = 0

    # ---- answers ----
    def answer(self, value: object) -> None:
        qid = self.current_question.id
        self.answers[qid] = str(value)

    def answer_for(self, question_id: str) -> Optional[str]:
        return self.answers.get(question_id)

    @property
    def can_proceed(self) -> bool:
        return bool(self.answers.get(self.current_question.id))

    @property
    def answered_count(self) -> int:
        return len(self.answers)

    @property
    def total_questions(self) -> int:
        return self.questionnaire.total_questions

    @property
    def progress(self) -> float:
        total = self.total_questions
        return (self.answered_count / total) * 100.0 if total else 0.0

    @property
    def is_complete(self) -> bool:
        return self.is_last and self.can_proceed

    # ---- movement ----
    def next(self) -> bool:
        """Advance one question. Returns False when already on the final one."""

        if not self.can_proceed:
            raise FlowError(f"question {self.current_question.id!r} has no answer yet")
        pos = self._next_position()
        if pos is None:
            return False
        if pos[0] != self.section_index:
            log.debug("section %s -> %s", self.current_section.id, self.questionnaire.sections[pos[0]].id)
        self.section_index, self.question_index = pos
        return True

    def previous(self) -> bool:
        pos = self._prev_position()
        if pos is None:
            return False
        self.section_index, self.question_index = pos
        return True

    def finish(self) -> AnswerSet:
        if not self.is_last:
            raise FlowError("assessment is not on its final question")
        if not self.can_proceed:
            raise FlowError(f"question {self.current_question.id!r} has no answer yet")
        return dict(self.answers)

    def state(self) -> Dict[str, object]:
        sec = self.current_section
        return {
            "section_index": self.section_index,
            "section_count": len(self.questionnaire.sections),
            "section_id": sec.id,
            "section_title": sec.title,
            "section_description": sec.description,
            "question_index": self.question_index,
            "question_count": len(sec.questions),
            "answered": self.answered_count,
            "total": self.total_questions,
            "progress": self.progress,
            "is_first": self.is_first,
            "is_last": self.is_last,
            "can_proceed": self.can_proceed,
            "current_answer": self.answers.get(self.current_question.id),
        }
