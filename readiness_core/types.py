from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterator, Literal, Mapping, Optional, Tuple
QuestionType = Literal["likert","multiple_choice","scale"]
Category = Literal["psychological","technical"]
Recommendation = Literal["Yes","Maybe","No"]
AnswerSet = Dict[str, str]
@dataclass(frozen=True)
class Question:
    id: str; text: str; type: QuestionType
    options: Optional[Tuple[str, ...]] = None
    correct_index: Optional[int] = None
    min: Optional[int] = None
    max: Optional[int] = None
    category: Optional[Category] = None
@dataclass(frozen=True)
class Section:
    id: str; title: str; description: str
    questions: Tuple[Question, ...] = ()
@dataclass(frozen=True)
class Questionnaire:
    title: str
    sections: Tuple[Section, ...] = ()

    def iter_questions(self) -> Iterator[Question]:
        for sec in self.sections:
            yield from sec.questions

    @property
    def total_questions(self) -> int:
        return sum(len(sec.questions) for sec in self.sections)

    def question(self, question_id: str) -> Optional[Question]:
        return next((q for q in self.iter_questions() if q.id == question_id), None)

    def to_dict(self) -> Dict[str, object]:
        return {
            "title": self.title,
            "sections": [
                {
                    "id": sec.id,
                    "title": sec.title,
                    "description": sec.description,
                    "questions": [question_to_dict(q) for q in sec.questions],
                }
                for sec in self.sections
            ],
        }
def question_to_dict(q: Question) -> Dict[str, object]:
    out: Dict[str, object] = {"id": q.id, "text": q.text, "type": q.type}
    if q.options is not None: out["options"] = list(q.options)
    if q.min is not None: out["min"] = q.min
    if q.max is not None: out["max"] = q.max
    return out
@dataclass
class WiscarScores:
    will: float; interest: float; skill: float
    cognitive: float; ability_to_learn: float; real_world_alignment: float

    def to_dict(self) -> Dict[str, float]:
        return {
            "will": self.will,
            "interest": self.interest,
            "skill": self.skill,
            "cognitive": self.cognitive,
            "abilityToLearn": self.ability_to_learn,
            "realWorldAlignment": self.real_world_alignment,
        }
@dataclass
class ResultsRecord:
    psychological_fit: int
    technical_readiness: int
    wiscar_scores: WiscarScores
    overall_score: int
    recommendation: Recommendation
    confidence_score: float
    meta: Dict[str, object] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, object]:
        """camelCase payload, the shape the results page reads."""

        return {
            "psychologicalFit": self.psychological_fit,
            "technicalReadiness": self.technical_readiness,
            "wiscarScores": self.wiscar_scores.to_dict(),
            "overallScore": self.overall_score,
            "recommendation": self.recommendation,
            "confidenceScore": self.confidence_score,
        }

    @staticmethod
    def from_dict(d: Mapping[str, object]) -> "ResultsRecord":
        w = d.get("wiscarScores") or {}
        return ResultsRecord(
            psychological_fit=int(d.get("psychologicalFit", 0)),
            technical_readiness=int(d.get("technicalReadiness", 0)),
            wiscar_scores=WiscarScores(
                will=float(w.get("will", 0.0)),
                interest=float(w.get("interest", 0.0)),
                skill=float(w.get("skill", 0.0)),
                cognitive=float(w.get("cognitive", 0.0)),
                ability_to_learn=float(w.get("abilityToLearn", 0.0)),
                real_world_alignment=float(w.get("realWorldAlignment", 0.0)),
            ),
            overall_score=int(d.get("overallScore", 0)),
            recommendation=str(d.get("recommendation", "No")),  # type: ignore[arg-type]
            confidence_score=float(d.get("confidenceScore", 0.0)),
        )
