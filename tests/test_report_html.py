from __future__ import annotations

from readiness_core.engine import compute_results, no_jitter
from readiness_core.insights import build_report
from readiness_core.report_html import export_report_html, render_report_html

from tests.conftest import PSYCH_IDS, full_answers


def test_report_sections_render(tmp_path):
    report = build_report(compute_results({qid: "5" for qid in PSYCH_IDS}, jitter=no_jitter))
    out = tmp_path / "report.html"
    assert export_report_html(report, str(out)) == str(out)
    html = out.read_text(encoding="utf-8")

    assert "Consider Alternatives" in html
    assert "Psychological Fit" in html
    assert "WISCAR Framework Analysis" in html
    assert "<td>Ability To Learn</td><td>100%</td>" in html
    assert "Skills Gap Analysis" in html
    assert "S&amp;OP Coordinator" in html
    assert "&#10003;" in html, "met skills are ticked"
    assert "Build foundational skills in Excel and data analysis first" in html
    assert 'class="banner danger"' in html


def test_ready_report_escapes_text():
    report = build_report(compute_results(full_answers(), jitter=no_jitter))
    html = render_report_html(report)
    assert "You&#x27;re Ready!" in html
    assert 'class="banner success"' in html
    assert "<b>100%</b><br/>Overall Score" in html


def test_render_tolerates_sparse_payload():
    html = render_report_html({"recommendation": "Maybe"})
    assert 'class="banner warning"' in html
    assert "<b>-</b><br/>Overall Score" in html
