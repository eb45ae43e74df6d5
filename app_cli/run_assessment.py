from __future__ import annotations
import argparse, datetime, logging, os
from readiness_core.config import load_config
from readiness_core.engine import compute_results, no_jitter
from readiness_core.insights import build_report
from readiness_core.navigation import AssessmentFlow
from readiness_core.question_bank import answer_options
from readiness_core.report_html import export_report_html
def ask(prompt: str, choices: list[dict[str, str]], current: str | None = None) -> str:
    print(prompt)
    for c in choices: print(f"  [{c['value']}] {c['label']}")
    valid = {c["value"] for c in choices}
    hint = f" (enter keeps {current}, b=back)" if current else " (b=back)"
    while True:
        v = input(f"Your choice{hint}: ").strip()
        if v == "" and current: return current
        if v.lower() == "b" or v in valid: return v.lower()
        print("Enter one of: " + ", ".join(sorted(valid, key=lambda s: int(s))))
def run_flow(flow: AssessmentFlow) -> dict[str, str]:
    while True:
        sec = flow.current_section; q = flow.current_question
        print(f"\n== Section {flow.section_index + 1} of {len(flow.questionnaire.sections)}: {sec.title} "
              f"({flow.answered_count}/{flow.total_questions} answered, {flow.progress:.0f}%)")
        print(f"Question {flow.question_index + 1} of {len(sec.questions)}")
        v = ask(q.text, answer_options(q), flow.answer_for(q.id))
        if v == "b":
            if not flow.previous(): print("Already at the first question.")
            continue
        flow.answer(v)
        if flow.is_last: return flow.finish()
        flow.next()
def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Forecasting & Demand Planning readiness assessment")
    ap.add_argument("--seed", type=int, default=None)
    ap.add_argument("--technical-rule", choices=["legacy","keyed"], default=None)
    ap.add_argument("--classifier", choices=["id","category"], default=None)
    ap.add_argument("--no-jitter", action="store_true")
    ap.add_argument("--out", default=None, help="HTML report path")
    a = ap.parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    flow = AssessmentFlow()
    print(flow.questionnaire.title)
    try:
        answers = run_flow(flow)
    except (KeyboardInterrupt, EOFError):
        print("\nStopped by user."); return 1
    cfg = load_config()
    seed = a.seed if a.seed is not None else cfg.get("SEED")
    quiet = a.no_jitter or not cfg.get("JITTER_ENABLED", True)
    res = compute_results(answers, technical_rule=a.technical_rule or cfg.get("TECHNICAL_RULE"),
                          classifier=a.classifier or cfg.get("CLASSIFIER"),
                          seed=seed, jitter=no_jitter if quiet else None)
    report = build_report(res, {"seed": seed})
    print(f"\n{report['headline']}  (recommendation: {res.recommendation})")
    print(f"Psychological fit {res.psychological_fit}% | Technical readiness {res.technical_readiness}% | "
          f"Overall {res.overall_score}% | Confidence {res.confidence_score:.0f}%")
    out = a.out
    if out is None:
        os.makedirs("reports", exist_ok=True)
        ts = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
        out = os.path.join("reports", f"readiness_{ts}.html")
    export_report_html(report, out)
    print(f"Done. Report saved to: {out}")
    return 0
if __name__ == "__main__": raise SystemExit(main())
