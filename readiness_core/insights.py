# readiness_core/insights.py
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Sequence, Tuple

from . import config
from .scoring import round_half_up
from .types import ResultsRecord

_HEADLINES: Dict[str, str] = {
    "Yes": "You're Ready!",
    "Maybe": "You're Almost There!",
    "No": "Consider Alternatives",
}

# (skill, required, source field, offset)
_SKILL_TARGETS: Sequence[Tuple[str, int, str, float]] = (
    ("Excel for Planning", 85, "technical_readiness", 0.0),
    ("Forecast Models", 80, "technical_readiness", -10.0),
    ("Trend Analysis", 75, "cognitive", 0.0),
    ("Communication", 80, "real_world_alignment", 0.0),
    ("Business Acumen", 70, "will", 0.0),
)

# (title, description, source field)
_CAREER_ROLES: Sequence[Tuple[str, str, str]] = (
    ("Demand Planner", "Projects future demand across categories", "overall_score"),
    ("Forecast Analyst", "Uses models for predictions", "technical_readiness"),
    ("Inventory Optimization Specialist", "Ensures product availability", "cognitive"),
    ("Supply Planner", "Balances supply based on demand", "real_world_alignment"),
    ("S&OP Coordinator", "Bridges planning between teams", "will"),
)

_NEXT_STEPS: Dict[str, Dict[str, Any]] = {
    "Yes": {
        "heading": "You're ready to pursue forecasting roles!",
        "steps": [
            "Start applying for entry-level Demand Planner or Forecast Analyst positions",
            "Consider advanced training in specific forecasting software (SAP IBP, Oracle ASCP)",
            "Build a portfolio with Excel-based forecasting projects",
        ],
    },
    "Maybe": {
        "heading": "You have potential but need some development",
        "steps": [
            "Take an Excel for Business Analytics course",
            "Study supply chain fundamentals",
            "Practice with forecasting case studies",
            "Consider starting in related roles like Inventory Coordinator",
        ],
    },
    "No": {
        "heading": "Consider alternative career paths",
        "steps": [
            "Explore Business Analysis or Operations Support roles",
            "Consider customer service or sales roles in supply chain companies",
            "Build foundational skills in Excel and data analysis first",
        ],
    },
}

GAP_CLOSE_MAX: int = 20


def _field(results: ResultsRecord, name: str) -> float:
    if hasattr(results.wiscar_scores, name):
        return float(getattr(results.wiscar_scores, name))
    return float(getattr(results, name))


def headline(recommendation: str) -> str:
    return _HEADLINES.get(recommendation, "")


def gap_status(gap: float) -> str:
    if gap <= 0: return "met"
    if gap <= GAP_CLOSE_MAX: return "close"
    return "gap"


def match_band(match: float) -> str:
    if match >= config.YES_THRESHOLD: return "strong"
    if match >= config.MAYBE_THRESHOLD: return "moderate"
    return "low"


def skills_gap(results: ResultsRecord) -> List[Dict[str, Any]]:
    """Required vs current level for the five core planning skills.

    ``gap = required - (source + offset)``; the reported ``current`` is that
    level floored at zero, so a gap can exceed ``required``.
    """

    rows: List[Dict[str, Any]] = []
    for skill, required, src, offset in _SKILL_TARGETS:
        level = round_half_up(_field(results, src) + offset)
        gap = required - level
        rows.append({
            "skill": skill,
            "required": required,
            "current": max(0, level),
            "gap": gap,
            "status": gap_status(gap),
        })
    return rows


def career_matches(results: ResultsRecord) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for title, desc, src in _CAREER_ROLES:
        match = round_half_up(_field(results, src))
        out.append({"title": title, "description": desc, "match": match, "band": match_band(match)})
    return out


def next_steps(recommendation: str) -> Dict[str, Any]:
    block = _NEXT_STEPS.get(recommendation) or _NEXT_STEPS["No"]
    return {"heading": block["heading"], "steps": list(block["steps"])}


def build_report(results: ResultsRecord, meta: Mapping[str, Any] | None = None) -> Dict[str, Any]:
    """JSON-ready results payload: the record plus everything the results page derives from it."""

    report: Dict[str, Any] = results.to_dict()
    report["headline"] = headline(results.recommendation)
    report["skillsGap"] = skills_gap(results)
    report["careerMatches"] = career_matches(results)
    report["nextSteps"] = next_steps(results.recommendation)
    m: Dict[str, Any] = dict(results.meta)
    if meta:
        m.update(meta)
    m.setdefault("createdAt", datetime.now(timezone.utc).isoformat())
    report["meta"] = m
    return report
