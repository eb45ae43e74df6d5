from __future__ import annotations

import random

from readiness_core.engine import compute_results, max_jitter, no_jitter, uniform_jitter
from readiness_core.scoring import round_half_up

from tests.conftest import PSYCH_IDS, TECH_IDS, full_answers


def _bounded(res) -> bool:
    values = list(res.wiscar_scores.to_dict().values()) + [res.confidence_score]
    return all(0.0 <= v <= 100.0 for v in values)


def test_all_psychological_answers():
    res = compute_results({qid: "5" for qid in PSYCH_IDS}, jitter=no_jitter)
    assert res.psychological_fit == 100
    assert res.technical_readiness == 0
    assert res.overall_score == 50
    assert res.recommendation == "No"


def test_all_technical_answers_at_index_one():
    res = compute_results({qid: "1" for qid in TECH_IDS}, jitter=no_jitter)
    assert res.technical_readiness == 100
    assert res.psychological_fit == 0
    assert res.overall_score == 50
    assert res.recommendation == "No"


def test_empty_answer_set():
    res = compute_results({}, jitter=no_jitter)
    assert res.psychological_fit == 0
    assert res.technical_readiness == 0
    assert res.overall_score == 0
    assert res.recommendation == "No"
    assert res.confidence_score == 0.0


def test_overall_rounds_half_up():
    res = compute_results({"interest1": "5", "excel1": "2"}, jitter=no_jitter)
    assert res.technical_readiness == 33
    assert res.overall_score == 67
    assert res.recommendation == "Maybe"


def test_full_strong_run_is_recommended():
    res = compute_results(full_answers(), jitter=no_jitter)
    assert res.psychological_fit == 100
    assert res.technical_readiness == 100
    assert res.recommendation == "Yes"
    assert res.meta["answered"] == 11
    assert res.meta["psych_count"] == 7
    assert res.meta["tech_count"] == 3


def test_keyed_rule_scores_the_declared_answer():
    answers = {"excel1": "1", "forecasting1": "1", "logic1": "2"}
    legacy = compute_results(answers, technical_rule="legacy", jitter=no_jitter)
    keyed = compute_results(answers, technical_rule="keyed", jitter=no_jitter)
    assert legacy.technical_readiness == 78
    assert keyed.technical_readiness == 100
    assert keyed.meta["technical_rule"] == "keyed"


def test_category_classifier_ignores_ids_outside_the_catalog():
    answers = {"interest99": "5", "excel1": "1"}
    by_id = compute_results(answers, classifier="id", jitter=no_jitter)
    by_cat = compute_results(answers, classifier="category", jitter=no_jitter)
    assert by_id.psychological_fit == 100
    assert by_cat.psychological_fit == 0
    assert by_cat.technical_readiness == 100


def test_malformed_values_fall_back_to_zero():
    res = compute_results({"interest1": "abc", "interest2": "4x", "excel1": "?"}, jitter=no_jitter)
    assert res.psychological_fit == 40
    assert res.technical_readiness == 0


def test_out_of_range_values_are_clamped():
    high = compute_results({"interest1": "9"}, jitter=max_jitter)
    low = compute_results({"interest1": "-5"}, jitter=max_jitter)
    assert high.psychological_fit == 100
    assert low.psychological_fit == 0
    assert _bounded(high) and _bounded(low)


def test_derived_scores_without_jitter_equal_their_base():
    res = compute_results({qid: "5" for qid in PSYCH_IDS}, jitter=no_jitter)
    w = res.wiscar_scores
    assert (w.will, w.interest, w.ability_to_learn) == (100, 100, 100)
    assert w.skill == 0 and w.cognitive == 0
    assert w.real_world_alignment == 50
    assert res.confidence_score == 50


def test_maximum_jitter_stays_capped():
    res = compute_results({qid: "5" for qid in PSYCH_IDS}, jitter=max_jitter)
    w = res.wiscar_scores
    assert w.will == 100
    assert w.skill == 0
    assert w.cognitive == 20
    assert w.real_world_alignment == 65
    assert res.confidence_score == 60


def test_same_seed_gives_same_record():
    answers = full_answers(likert="3", choice="2", scale="4")
    a = compute_results(answers, seed=42).to_dict()
    b = compute_results(answers, seed=42).to_dict()
    assert a == b


def test_invariants_hold_for_random_answer_sets():
    gen = random.Random(7)
    ids = list(PSYCH_IDS) + list(TECH_IDS) + ["will1", "learning1", "skill1"]
    for _ in range(200):
        chosen = gen.sample(ids, gen.randint(0, len(ids)))
        answers = {qid: str(gen.randint(0, 5)) for qid in chosen}
        res = compute_results(answers, jitter=uniform_jitter(gen))
        assert res.overall_score == round_half_up((res.psychological_fit + res.technical_readiness) / 2)
        if not any(k in PSYCH_IDS or k in ("will1", "learning1") for k in answers):
            assert res.psychological_fit == 0
        if not any(k in TECH_IDS for k in answers):
            assert res.technical_readiness == 0
        if res.overall_score >= 80:
            assert res.recommendation == "Yes"
        elif res.overall_score >= 60:
            assert res.recommendation == "Maybe"
        else:
            assert res.recommendation == "No"
        assert _bounded(res)


def test_caller_mapping_is_not_mutated():
    answers = {"interest1": "5"}
    compute_results(answers, jitter=no_jitter)
    assert answers == {"interest1": "5"}


def test_oversized_numeric_answers_do_not_raise():
    res = compute_results({"interest1": "9" * 5000, "excel1": "1" * 5000}, jitter=no_jitter)
    assert res.psychological_fit == 100
    assert res.technical_readiness == 0
    assert res.overall_score == 50
    assert _bounded(res)
