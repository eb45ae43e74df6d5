# readiness_core/engine.py
from __future__ import annotations
from typing import Callable, Mapping, Optional, Union
import logging
import random

from . import config
from .question_bank import load_questionnaire
from .scoring import clamp_score, score_breakdown
from .types import AnswerSet, Questionnaire, ResultsRecord, WiscarScores


log = logging.getLogger(__name__)

# (field, upper bound) -> added amount
Jitter = Callable[[str, float], float]

_RNG = random.Random(config.DEBUG_SEED)


def uniform_jitter(rng: Optional[random.Random] = None) -> Jitter:
    """Uniform draw in [0, bound) per field."""

    r = rng if rng is not None else _RNG

    def _draw(_field: str, bound: float) -> float:
        if bound <= 0:
            return 0.0
        return r.random() * bound

    return _draw


def no_jitter(_field: str, _bound: float) -> float:
    return 0.0


def max_jitter(_field: str, bound: float) -> float:
    return max(bound, 0.0)


def _resolve_jitter(
    jitter: Optional[Jitter],
    rng: Optional[random.Random],
    seed: Optional[int],
) -> Jitter:
    if jitter is not None:
        return jitter
    if seed is not None:
        return uniform_jitter(random.Random(seed))
    if rng is not None:
        return uniform_jitter(rng)
    return uniform_jitter() if config.JITTER_ENABLED else no_jitter


def _derived(base: float, field: str, jitter: Jitter) -> float:
    bound = config.WISCAR_JITTER.get(field, 0.0)
    return clamp_score(min(config.SCORE_MAX, base + jitter(field, bound)))


def compute_results(
    answers: Mapping[str, str],
    *,
    technical_rule: Optional[str] = None,
    classifier: Optional[str] = None,
    questionnaire: Optional[Questionnaire] = None,
    jitter: Optional[Jitter] = None,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
) -> ResultsRecord:
    """Derive the results record from a finished answer set.

    ``technical_rule`` is ``"legacy"`` (index 1 scores 100, index 2 scores 33)
    or ``"keyed"`` (the question's own ``correct_index``). ``classifier`` is
    ``"id"`` (substring match on the question id) or ``"category"`` (the
    question's explicit tag). Randomness for the derived WISCAR fields comes
    from ``jitter`` if given, else a ``random.Random`` seeded with ``seed``,
    else ``rng``, else the module RNG.
    """

    rule = technical_rule or config.TECHNICAL_RULE
    cls = classifier or config.CLASSIFIER
    qn = questionnaire
    if qn is None and (cls == "category" or rule == "keyed"):
        qn = load_questionnaire()

    snapshot: AnswerSet = {str(k): str(v) for k, v in dict(answers).items()}
    base = score_breakdown(snapshot, rule=rule, classifier=cls, questionnaire=qn)
    pf = int(base["psychological_fit"])
    tr = int(base["technical_readiness"])
    overall = int(base["overall_score"])

    draw = _resolve_jitter(jitter, rng, seed)
    wiscar = WiscarScores(
        will=_derived(pf, "will", draw),
        interest=_derived(pf, "interest", draw),
        skill=clamp_score(float(tr)),
        cognitive=_derived(tr, "cognitive", draw),
        ability_to_learn=_derived(pf, "ability_to_learn", draw),
        real_world_alignment=_derived(overall, "real_world_alignment", draw),
    )
    confidence = clamp_score(min(config.SCORE_MAX, overall + draw("confidence", config.CONFIDENCE_JITTER)))

    res = ResultsRecord(
        psychological_fit=pf,
        technical_readiness=tr,
        wiscar_scores=wiscar,
        overall_score=overall,
        recommendation=base["recommendation"],  # type: ignore[arg-type]
        confidence_score=confidence,
        meta={
            "technical_rule": rule,
            "classifier": cls,
            "answered": len(snapshot),
            "psych_count": base["psych_count"],
            "tech_count": base["tech_count"],
        },
    )
    log.debug(
        "results psych=%s tech=%s overall=%s rec=%s rule=%s classifier=%s n=%d",
        pf, tr, overall, res.recommendation, rule, cls, len(snapshot),
    )
    return res
