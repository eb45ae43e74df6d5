from __future__ import annotations
from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
from typing import Literal, Optional
import logging, uuid, typing as t

# ---- Engine imports ----
from readiness_core import config
from readiness_core.engine import compute_results, no_jitter
from readiness_core.insights import build_report
from readiness_core.navigation import AssessmentFlow, FlowError
from readiness_core.question_bank import LIKERT_OPTIONS, SCALE_LABELS, answer_options, load_questionnaire
from readiness_core.report_html import render_report_html
from readiness_core.types import Question, question_to_dict

log = logging.getLogger(__name__)

SESS: dict[str, AssessmentFlow] = {}
SESSION_OPTS: dict[str, dict[str, t.Any]] = {}

app = FastAPI(title="Readiness Assessment API")

ALLOWED_ORIGINS = [
    "http://localhost:3000",
    "http://localhost:5173",
    "http://localhost:8080",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=False,
)

# ---- Schemas ----
TechnicalRule = Literal["legacy", "keyed"]
Classifier = Literal["id", "category"]

class ScoringOpts(BaseModel):
    technical_rule: Optional[TechnicalRule] = None
    classifier: Optional[Classifier] = None
    seed: Optional[int] = None
    jitter: bool = True

class StartReq(ScoringOpts):
    pass

class AnswerReq(BaseModel):
    question_id: Optional[str] = None
    value: int | str

class ResultsReq(ScoringOpts):
    answers: dict[str, int | str]

# ---- Helpers ----
def _serialize_question(q: Question) -> dict[str, t.Any]:
    out = question_to_dict(q)
    out["choices"] = answer_options(q)
    return out


def _flow_payload(sid: str, flow: AssessmentFlow) -> dict[str, t.Any]:
    return {"session_id": sid, "state": flow.state(), "question": _serialize_question(flow.current_question)}


def _get_flow(sid: str) -> AssessmentFlow:
    flow = SESS.get(sid)
    if not flow:
        raise HTTPException(404, "session not found")
    return flow


def _evict_oldest() -> None:
    # insertion order: oldest first
    while SESS and len(SESS) >= max(1, config.MAX_SESSIONS):
        old = next(iter(SESS))
        SESS.pop(old, None)
        SESSION_OPTS.pop(old, None)
        log.info("session %s evicted", old)


def _score(answers: t.Mapping[str, t.Any], opts: ScoringOpts | dict[str, t.Any]) -> dict[str, t.Any]:
    o = opts.model_dump() if isinstance(opts, BaseModel) else dict(opts)
    res = compute_results(
        answers,
        technical_rule=o.get("technical_rule"),
        classifier=o.get("classifier"),
        seed=o.get("seed"),
        jitter=None if o.get("jitter", True) else no_jitter,
    )
    return build_report(res, {"seed": o.get("seed")})

# ---- Health ----
@app.get("/")
def root():
    return {"status": "ok", "service": "readiness-assessment-api"}


@app.get("/health")
def health():
    return {
        "technical_rule": config.TECHNICAL_RULE,
        "classifier": config.CLASSIFIER,
        "jitter_enabled": config.JITTER_ENABLED,
        "debug_seed": config.DEBUG_SEED,
        "max_sessions": config.MAX_SESSIONS,
        "active_sessions": len(SESS),
    }


@app.get("/questionnaire")
def questionnaire():
    qn = load_questionnaire()
    body = qn.to_dict()
    body["total_questions"] = qn.total_questions
    body["likert_options"] = LIKERT_OPTIONS
    body["scale_labels"] = SCALE_LABELS
    return body

# ---- Session flow ----
@app.post("/session/start")
def start(req: StartReq | None = None):
    _evict_oldest()
    sid = str(uuid.uuid4())
    flow = AssessmentFlow()
    SESS[sid] = flow
    SESSION_OPTS[sid] = (req or StartReq()).model_dump()
    log.info("session %s started", sid)
    return _flow_payload(sid, flow)


@app.get("/session/{sid}")
def session_state(sid: str):
    return _flow_payload(sid, _get_flow(sid))


@app.post("/session/{sid}/answer")
def answer(sid: str, req: AnswerReq):
    flow = _get_flow(sid)
    if req.question_id and req.question_id != flow.current_question.id:
        raise HTTPException(409, f"current question is {flow.current_question.id}")
    flow.answer(req.value)
    return _flow_payload(sid, flow)


@app.post("/session/{sid}/next")
def advance(sid: str):
    flow = _get_flow(sid)
    try:
        moved = flow.next()
    except FlowError as e:
        raise HTTPException(409, str(e))
    body = _flow_payload(sid, flow)
    body["moved"] = moved
    return body


@app.post("/session/{sid}/previous")
def previous(sid: str):
    flow = _get_flow(sid)
    moved = flow.previous()
    body = _flow_payload(sid, flow)
    body["moved"] = moved
    return body


@app.post("/session/{sid}/finish")
def finish(sid: str):
    flow = _get_flow(sid)
    try:
        answers = flow.finish()
    except FlowError as e:
        raise HTTPException(409, str(e))
    report = _score(answers, SESSION_OPTS.get(sid, {}))
    report["meta"]["sessionId"] = sid
    SESS.pop(sid, None)
    SESSION_OPTS.pop(sid, None)
    log.info("session %s finished: %s", sid, report["recommendation"])
    return report

# ---- Stateless scoring ----
@app.post("/results")
def results(req: ResultsReq):
    return _score(req.answers, req)


@app.post("/results/html", response_class=HTMLResponse)
def results_html(req: ResultsReq):
    return HTMLResponse(render_report_html(_score(req.answers, req)))
