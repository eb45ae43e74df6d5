from __future__ import annotations
import os, json, pathlib, random


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        return default


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    raw = (os.getenv(name) or "").strip().lower()
    return raw if raw in choices else default


YES_THRESHOLD: int = 80
MAYBE_THRESHOLD: int = 60

PSYCH_ID_KEYS: tuple[str, ...] = ("interest", "personality", "cognitive", "will", "learning")
TECH_ID_KEYS: tuple[str, ...] = ("excel", "forecasting", "logic")

LIKERT_TO_PERCENT: int = 20
LEGACY_TECH_CREDIT: dict[int, int] = {1: 100, 2: 33}
KEYED_TECH_CREDIT: int = 100

SCORE_MIN: float = 0.0
SCORE_MAX: float = 100.0

# upper bound of the uniform draw added to each derived score
WISCAR_JITTER: dict[str, float] = {
    "will": 20.0,
    "interest": 15.0,
    "skill": 0.0,
    "cognitive": 20.0,
    "ability_to_learn": 25.0,
    "real_world_alignment": 15.0,
}
CONFIDENCE_JITTER: float = 10.0

TECHNICAL_RULES: tuple[str, ...] = ("legacy", "keyed")
CLASSIFIERS: tuple[str, ...] = ("id", "category")

TECHNICAL_RULE: str = "legacy"
CLASSIFIER: str = "id"
JITTER_ENABLED: bool = True
DEBUG_SEED: int | None = None
MAX_SESSIONS: int = 1000

# // env overrides for ops
TECHNICAL_RULE = _env_choice("TECHNICAL_RULE", TECHNICAL_RULE, TECHNICAL_RULES)
CLASSIFIER = _env_choice("CLASSIFIER", CLASSIFIER, CLASSIFIERS)
JITTER_ENABLED = _env_bool("JITTER_ENABLED", JITTER_ENABLED)
DEBUG_SEED = _env_int("DEBUG_SEED", DEBUG_SEED)
MAX_SESSIONS = _env_int("MAX_SESSIONS", MAX_SESSIONS) or MAX_SESSIONS


def load_config() -> dict:
    cfg: dict = {
        "TECHNICAL_RULE": TECHNICAL_RULE,
        "CLASSIFIER": CLASSIFIER,
        "JITTER_ENABLED": JITTER_ENABLED,
    }
    if DEBUG_SEED is not None:
        cfg["SEED"] = DEBUG_SEED
    p = pathlib.Path(os.getenv("READINESS_CONFIG", "config.json"))
    if p.exists():
        try: cfg.update(json.loads(p.read_text(encoding="utf-8")))
        except (OSError, ValueError): pass
    e = os.environ
    if e.get("TECHNICAL_RULE"): cfg["TECHNICAL_RULE"] = _env_choice("TECHNICAL_RULE", cfg["TECHNICAL_RULE"], TECHNICAL_RULES)
    if e.get("CLASSIFIER"): cfg["CLASSIFIER"] = _env_choice("CLASSIFIER", cfg["CLASSIFIER"], CLASSIFIERS)
    if e.get("JITTER_ENABLED"): cfg["JITTER_ENABLED"] = _env_bool("JITTER_ENABLED", True)
    if e.get("SEED"): cfg["SEED"] = _env_int("SEED", None)
    return cfg


def seed_rng(cfg: dict, rng: random.Random | None = None) -> random.Random:
    r = rng if rng is not None else random.Random()
    s = cfg.get("SEED")
    if s is not None:
        r.seed(int(s))
    return r
