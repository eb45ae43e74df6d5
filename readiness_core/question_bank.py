from __future__ import annotations
import json, importlib.resources as ir
from functools import lru_cache
from typing import Any, Dict, List, Mapping
from .types import Question, Questionnaire, Section
LIKERT_OPTIONS: List[Dict[str, str]] = [
    {"value": "1", "label": "Strongly Disagree"},
    {"value": "2", "label": "Disagree"},
    {"value": "3", "label": "Neutral"},
    {"value": "4", "label": "Agree"},
    {"value": "5", "label": "Strongly Agree"},
]
SCALE_LABELS = {"low": "Beginner", "high": "Expert"}
def _question(raw: Mapping[str, Any]) -> Question:
    opts = raw.get("options")
    return Question(
        id=str(raw["id"]), text=str(raw["text"]), type=raw["type"],
        options=tuple(str(o) for o in opts) if opts is not None else None,
        correct_index=raw.get("correct_index"),
        min=raw.get("min"), max=raw.get("max"),
        category=raw.get("category"),
    )
def parse_questionnaire(raw: Mapping[str, Any]) -> Questionnaire:
    sections = tuple(
        Section(id=str(s["id"]), title=str(s["title"]), description=str(s.get("description", "")),
                questions=tuple(_question(q) for q in s.get("questions", [])))
        for s in raw.get("sections", [])
    )
    return Questionnaire(title=str(raw.get("title", "")), sections=sections)
@lru_cache(maxsize=1)
def load_questionnaire() -> Questionnaire:
    data = ir.files(__package__).joinpath("data/questionnaire.json").read_text(encoding="utf-8")
    return parse_questionnaire(json.loads(data))
def answer_options(q: Question) -> List[Dict[str, str]]:
    """Selectable (value, label) pairs for a question, as the form renders them."""
    if q.type == "likert":
        return [dict(o) for o in LIKERT_OPTIONS]
    if q.type == "multiple_choice":
        return [{"value": str(i), "label": o} for i, o in enumerate(q.options or ())]
    lo = q.min if q.min is not None else 1
    hi = q.max if q.max is not None else 10
    return [{"value": str(n), "label": str(n)} for n in range(lo, hi + 1)]
