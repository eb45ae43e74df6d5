from __future__ import annotations
from typing import Dict, List, Mapping, Optional, Tuple
import math
import re

from . import config
from .types import Category, Question, Questionnaire

_INT_PREFIX_RX = re.compile(r"^\s*([+-]?)([0-9]+)")
# answer magnitudes saturate here; anything past it already clamps to 0 or 100
_MAX_DIGITS = 6
_VALUE_CAP = 10 ** _MAX_DIGITS - 1


def _saturate(n: int) -> int:
    return max(-_VALUE_CAP, min(_VALUE_CAP, n))


def parse_value(raw: object) -> int:
    """Leading-integer parse of an encoded answer.

    ``"4"`` -> 4, ``" 3 "`` -> 3, ``"2.9"`` -> 2, ``"4abc"`` -> 4.
    Anything without a leading ASCII integer falls back to 0; magnitudes
    saturate at ``_VALUE_CAP``.
    """

    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return _saturate(raw)
    if isinstance(raw, float):
        return _saturate(int(raw)) if math.isfinite(raw) else 0
    m = _INT_PREFIX_RX.match(str(raw if raw is not None else ""))
    if not m:
        return 0
    sign, digits = m.groups()
    digits = digits.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        return -_VALUE_CAP if sign == "-" else _VALUE_CAP
    return int(sign + digits)


def round_half_up(x: float) -> int:
    return int(math.floor(x + 0.5))


def clamp_score(x: float) -> float:
    if x < config.SCORE_MIN: return config.SCORE_MIN
    if x > config.SCORE_MAX: return config.SCORE_MAX
    return x


def classify_by_id(question_id: str) -> Optional[Category]:
    if any(k in question_id for k in config.PSYCH_ID_KEYS):
        return "psychological"
    if any(k in question_id for k in config.TECH_ID_KEYS):
        return "technical"
    return None


def classify_by_category(question_id: str, questionnaire: Questionnaire) -> Optional[Category]:
    q = questionnaire.question(question_id)
    return q.category if q is not None else None


def partition(
    answers: Mapping[str, str],
    classifier: str = "id",
    questionnaire: Optional[Questionnaire] = None,
) -> Tuple[List[Tuple[str, str]], List[Tuple[str, str]]]:
    """Split an answer set into (psychological, technical) entries; the rest is dropped."""

    if classifier not in config.CLASSIFIERS:
        raise ValueError(f"unknown classifier: {classifier!r}")
    if classifier == "category" and questionnaire is None:
        raise ValueError("category classifier needs a questionnaire")
    psych: List[Tuple[str, str]] = []
    tech: List[Tuple[str, str]] = []
    for qid, value in answers.items():
        if classifier == "id":
            cat = classify_by_id(qid)
        else:
            cat = classify_by_category(qid, questionnaire)  # type: ignore[arg-type]
        if cat == "psychological":
            psych.append((qid, value))
        elif cat == "technical":
            tech.append((qid, value))
    return psych, tech


def legacy_technical_credit(value: str, question: Optional[Question] = None) -> int:
    """Index 1 always full credit, index 2 partial, regardless of the question key."""
    return config.LEGACY_TECH_CREDIT.get(parse_value(value), 0)


def keyed_technical_credit(value: str, question: Optional[Question] = None) -> int:
    if question is None or question.correct_index is None:
        return 0
    return config.KEYED_TECH_CREDIT if parse_value(value) == int(question.correct_index) else 0


TECHNICAL_RULES = {
    "legacy": legacy_technical_credit,
    "keyed": keyed_technical_credit,
}


def psychological_fit(entries: List[Tuple[str, str]]) -> int:
    if not entries:
        return 0
    total = sum(parse_value(v) for _, v in entries)
    return round_half_up(total / len(entries) * config.LIKERT_TO_PERCENT)


def technical_readiness(
    entries: List[Tuple[str, str]],
    rule: str = "legacy",
    questionnaire: Optional[Questionnaire] = None,
) -> int:
    credit_fn = TECHNICAL_RULES.get(rule)
    if credit_fn is None:
        raise ValueError(f"unknown technical rule: {rule!r}")
    if not entries:
        return 0
    total = 0
    for qid, value in entries:
        q = questionnaire.question(qid) if questionnaire is not None else None
        total += credit_fn(value, q)
    return round_half_up(total / len(entries))


def recommendation_for(overall: int) -> str:
    if overall >= config.YES_THRESHOLD: return "Yes"
    if overall >= config.MAYBE_THRESHOLD: return "Maybe"
    return "No"


def score_breakdown(
    answers: Mapping[str, str],
    *,
    rule: str = "legacy",
    classifier: str = "id",
    questionnaire: Optional[Questionnaire] = None,
) -> Dict[str, object]:
    """Deterministic part of the results: base scores, overall and recommendation."""

    psych, tech = partition(answers, classifier, questionnaire)
    pf = int(clamp_score(psychological_fit(psych)))
    tr = int(clamp_score(technical_readiness(tech, rule, questionnaire)))
    overall = round_half_up((pf + tr) / 2)
    return {
        "psychological_fit": pf,
        "technical_readiness": tr,
        "overall_score": overall,
        "recommendation": recommendation_for(overall),
        "psych_count": len(psych),
        "tech_count": len(tech),
    }
