from __future__ import annotations

import json
from collections import Counter
from pathlib import Path
from typing import Iterable

from . import config
from .question_bank import load_questionnaire
from .scoring import classify_by_id
from .types import Question, Questionnaire

QUESTION_TYPES: tuple[str, ...] = ("likert", "multiple_choice", "scale")


def _check_question(q: Question) -> list[str]:
    warnings: list[str] = []
    if q.type not in QUESTION_TYPES:
        warnings.append(f"{q.id} has unknown type {q.type!r}")
        return warnings

    if q.type == "multiple_choice":
        if not q.options:
            warnings.append(f"{q.id} multiple_choice has no options")
        elif q.correct_index is None:
            warnings.append(f"{q.id} multiple_choice has no correct_index")
        elif not 0 <= q.correct_index < len(q.options):
            warnings.append(f"{q.id} correct_index {q.correct_index} outside 0..{len(q.options) - 1}")

    if q.type == "scale":
        if q.min is None or q.max is None:
            warnings.append(f"{q.id} scale is missing min/max")
        elif q.min >= q.max:
            warnings.append(f"{q.id} scale min {q.min} >= max {q.max}")

    by_id = classify_by_id(q.id)
    if by_id != q.category:
        warnings.append(f"{q.id} category {q.category!r} differs from id classification {by_id!r}")

    if q.category == "technical" and q.correct_index is not None:
        legacy_full = [k for k, v in config.LEGACY_TECH_CREDIT.items() if v >= config.KEYED_TECH_CREDIT]
        if q.correct_index not in legacy_full:
            credit = config.LEGACY_TECH_CREDIT.get(q.correct_index, 0)
            warnings.append(
                f"{q.id} legacy rule gives the correct answer (index {q.correct_index}) {credit} instead of "
                f"{config.KEYED_TECH_CREDIT}"
            )
    return warnings


def audit_items(questions: Iterable[Question]) -> dict[str, object]:
    qs = list(questions)
    totals: dict[str, int] = {t: 0 for t in QUESTION_TYPES}
    categories: Counter[str] = Counter()
    warnings: list[str] = []

    for qid, n in Counter(q.id for q in qs).items():
        if n > 1:
            warnings.append(f"{qid} appears {n} times")

    for q in qs:
        totals[q.type] = totals.get(q.type, 0) + 1
        categories[q.category or "none"] += 1
        warnings.extend(_check_question(q))

    return {"totals": totals, "categories": dict(categories), "warnings": warnings}


def audit_questionnaire(questionnaire: Questionnaire) -> dict[str, object]:
    summary = audit_items(questionnaire.iter_questions())
    empty = [s.id for s in questionnaire.sections if not s.questions]
    for sid in empty:
        summary["warnings"].append(f"section {sid} has no questions")  # type: ignore[union-attr]
    summary["sections"] = {s.id: len(s.questions) for s in questionnaire.sections}
    return summary


def print_report(summary: dict[str, object]) -> None:
    print("=== Questionnaire Audit ===")
    sections: dict[str, int] = summary.get("sections", {})  # type: ignore[assignment]
    for sid, n in sections.items():
        print(f"  section {sid}: {n} question(s)")
    print("Totals:", summary["totals"])
    print("Categories:", summary["categories"])

    warnings: list[str] = summary["warnings"]  # type: ignore[assignment]
    if warnings:
        print("\nWarnings:")
        for msg in warnings:
            print(f" - {msg}")
    else:
        print("\nNo warnings.")


def write_summary(summary: dict[str, object], path: Path = Path("questionnaire_audit.json")) -> str:
    text = json.dumps(summary, indent=2, sort_keys=True)
    path.write_text(text + "\n", encoding="utf-8")
    return text


def main(_argv: list[str] | None = None) -> int:
    summary = audit_questionnaire(load_questionnaire())
    print_report(summary)
    out = Path(_argv[0]) if _argv else Path("questionnaire_audit.json")
    write_summary(summary, path=out)
    return 2 if summary["warnings"] else 0


if __name__ == "__main__":
    import sys
    raise SystemExit(main(sys.argv[1:]))
