from __future__ import annotations
from html import escape
from typing import Any, Dict, List

_WISCAR_LABELS = {
    "will": "Will",
    "interest": "Interest",
    "skill": "Skill",
    "cognitive": "Cognitive",
    "abilityToLearn": "Ability To Learn",
    "realWorldAlignment": "Real World Alignment",
}

_BANNER_CLASS = {"Yes": "success", "Maybe": "warning", "No": "danger"}


def _pct(v: Any) -> str:
    try:
        return f"{float(v):.0f}%"
    except (TypeError, ValueError):
        return "-"


def _row_wiscar(key: str, val: Any) -> str:
    return f"<tr><td>{escape(_WISCAR_LABELS.get(key, key))}</td><td>{_pct(val)}</td></tr>"


def _row_gap(d: Dict[str, Any]) -> str:
    gap = d.get("gap", 0)
    gap_txt = "&#10003;" if d.get("status") == "met" else f"{escape(str(gap))} gap"
    return (
        f"<tr><td>{escape(str(d.get('skill', '')))}</td><td>{_pct(d.get('current'))}</td>"
        f"<td>{_pct(d.get('required'))}</td><td class=\"{escape(str(d.get('status', '')))}\">{gap_txt}</td></tr>"
    )


def _role_block(d: Dict[str, Any]) -> str:
    return (
        '<div class="role">'
        f"<h4>{escape(str(d.get('title', '')))}</h4>"
        f"<p>{escape(str(d.get('description', '')))}</p>"
        f"<p>Match: <b class=\"{escape(str(d.get('band', '')))}\">{_pct(d.get('match'))}</b></p>"
        '</div>'
    )


def render_report_html(report: Dict[str, Any], title: str = "Your Assessment Results") -> str:
    rec = str(report.get("recommendation") or "No")
    wiscar = report.get("wiscarScores") or {}
    gaps: List[Dict[str, Any]] = [g for g in report.get("skillsGap") or [] if isinstance(g, dict)]
    roles: List[Dict[str, Any]] = [r for r in report.get("careerMatches") or [] if isinstance(r, dict)]
    steps = report.get("nextSteps") or {}

    wiscar_rows = "\n".join(_row_wiscar(k, wiscar.get(k)) for k in _WISCAR_LABELS if k in wiscar)
    gap_rows = "\n".join(_row_gap(g) for g in gaps)
    role_html = "".join(_role_block(r) for r in roles)
    step_items = "".join(f"<li>{escape(str(s))}</li>" for s in steps.get("steps") or [])
    steps_html = ""
    if step_items:
        steps_html = (
            "<h3>Next Steps &amp; Recommendations</h3>"
            f"<h4 class=\"{_BANNER_CLASS.get(rec, 'danger')}\">{escape(str(steps.get('heading', '')))}</h4>"
            f"<ul>{step_items}</ul>"
        )

    meta = report.get("meta") or {}
    created = escape(str(meta.get("createdAt", "")))

    return f"""<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8"/>
<title>{escape(title)}</title>
<style>
 body{{font-family:system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,'Helvetica Neue',Arial}}
 .wrap{{max-width:960px;margin:40px auto;padding:0 16px}}
 h1{{margin:0 0 16px}}
 .banner{{padding:12px 16px;border-radius:6px;margin:16px 0}}
 .banner.success{{background:#e3f7e8;border:1px solid #3aa35b}}
 .banner.warning{{background:#ffe7d9;border:1px solid #f5a623}}
 .banner.danger{{background:#fde2e2;border:1px solid #d64545}}
 .scores{{display:flex;gap:32px;margin:8px 0 16px}}
 .role{{border:1px solid #ddd;border-radius:6px;padding:8px 12px;margin:8px 0}}
 table{{border-collapse:collapse;width:100%}}
 th,td{{text-align:left}}
</style>
</head>
<body>
<div class="wrap">
  <h1>{escape(title)}</h1>
  <div class="banner {_BANNER_CLASS.get(rec, 'danger')}">
    <h2>{escape(str(report.get('headline', '')))}</h2>
    <p>Recommendation: <b>{escape(rec)}</b> &middot; Overall Confidence Score: {_pct(report.get('confidenceScore'))}</p>
  </div>
  <div class="scores">
    <div><b>{_pct(report.get('psychologicalFit'))}</b><br/>Psychological Fit</div>
    <div><b>{_pct(report.get('technicalReadiness'))}</b><br/>Technical Readiness</div>
    <div><b>{_pct(report.get('overallScore'))}</b><br/>Overall Score</div>
  </div>

  <h3>WISCAR Framework Analysis</h3>
  <table border='1' cellpadding='6' cellspacing='0'>
    <thead><tr><th>Dimension</th><th>Score</th></tr></thead>
    <tbody>{wiscar_rows}</tbody>
  </table>

  <h3>Skills Gap Analysis</h3>
  <table border='1' cellpadding='6' cellspacing='0'>
    <thead><tr><th>Skill</th><th>Current</th><th>Required</th><th>Gap</th></tr></thead>
    <tbody>{gap_rows}</tbody>
  </table>

  <h3>Top Career Matches</h3>
  {role_html}

  {steps_html}

  <p><i>Generated {created}</i></p>
</div>
</body>
</html>"""


def export_report_html(report: Dict[str, Any], path: str) -> str:
    html = render_report_html(report)
    with open(path, "w", encoding="utf-8") as f:
        f.write(html)
    return path
