# autoplay.py
from __future__ import annotations
import argparse, os, json, random, datetime, logging
from typing import Optional
from readiness_core.config import load_config, seed_rng
from readiness_core.engine import compute_results
from readiness_core.insights import build_report
from readiness_core.navigation import AssessmentFlow
from readiness_core.report_html import export_report_html
from readiness_core.types import Question

log = logging.getLogger("autoplay")

PROFILES = ("strong", "mixed", "weak", "random")

def _wrong_idx(q: Question) -> int:
    n = len(q.options or ()) or 4
    return ((q.correct_index or 0) + 1) % n

def _answer_for(q: Question, profile: str, rng: random.Random) -> str:
    if q.type == "likert":
        if profile == "strong": return "5"
        if profile == "weak":   return "1"
        if profile == "mixed":  return "3"
        return str(rng.randint(1, 5))
    if q.type == "scale":
        lo, hi = q.min or 1, q.max or 10
        if profile == "strong": return str(hi)
        if profile == "weak":   return str(lo)
        if profile == "mixed":  return str((lo + hi) // 2)
        return str(rng.randint(lo, hi))
    if profile == "strong": return str(q.correct_index or 0)
    if profile == "weak":   return str(_wrong_idx(q))
    if profile == "mixed":  return "1"
    return str(rng.randrange(len(q.options or ()) or 4))

def play(profile: str, seed: Optional[int] = None, technical_rule: Optional[str] = None) -> dict:
    cfg = load_config()
    if seed is not None:
        cfg["SEED"] = seed
    rng = seed_rng(cfg)
    flow = AssessmentFlow()
    while True:
        flow.answer(_answer_for(flow.current_question, profile, rng))
        if not flow.next(): break
    answers = flow.finish()
    res = compute_results(answers, technical_rule=technical_rule or cfg.get("TECHNICAL_RULE"), rng=rng)
    return build_report(res, {"profile": profile, "seed": seed, "answers": answers})

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--profile", choices=PROFILES, default="mixed")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--technical-rule", choices=["legacy","keyed"], default=None)
    ap.add_argument("--json", action="store_true", help="also write the JSON payload")
    a = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")

    report = play(a.profile, a.seed, a.technical_rule)
    log.info("profile=%s overall=%s recommendation=%s", a.profile, report["overallScore"], report["recommendation"])

    os.makedirs("reports", exist_ok=True)
    run_id = datetime.datetime.now().strftime("run_%Y%m%d_%H%M%S")
    path = export_report_html(report, os.path.join("reports", f"{run_id}_{a.profile}.html"))
    if a.json:
        with open(os.path.join("reports", f"{run_id}_{a.profile}.json"), "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)
    print(f"Done. Report saved to: {path}")

if __name__ == "__main__":
    main()
