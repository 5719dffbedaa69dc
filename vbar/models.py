"""Pydantic models — single source of truth for all data types."""

from __future__ import annotations

import enum
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, model_validator

DEFAULT_THRESHOLD = 2.0


class BucketKind(str, enum.Enum):
    """Which aggregate score a category contributes to."""

    PRIMARY = "primary"  # W: indicators of an employment relationship
    SECONDARY = "secondary"  # Z + OP: indicators of self-employment


class AnswerValue(str, enum.Enum):
    """Possible answers to a single question."""

    YES = "yes"
    PARTIAL = "partial"
    NO = "no"
    UNANSWERED = "unanswered"

    @property
    def numeric(self) -> float:
        return _ANSWER_NUMERIC[self]

    @property
    def is_answered(self) -> bool:
        return self is not AnswerValue.UNANSWERED


_ANSWER_NUMERIC: dict[AnswerValue, float] = {
    AnswerValue.YES: 1.0,
    AnswerValue.PARTIAL: 0.5,
    AnswerValue.NO: 0.0,
    AnswerValue.UNANSWERED: 0.0,
}


class Category(BaseModel):
    """A named group of weighted questions sharing one bucket."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    kind: BucketKind
    questions: tuple[str, ...] = Field(min_length=1)
    weights: tuple[Annotated[float, Field(gt=0, allow_inf_nan=False)], ...]

    @model_validator(mode="after")
    def _check_weights(self) -> Category:
        if len(self.weights) != len(self.questions):
            raise ValueError(
                f"category {self.name!r} has {len(self.questions)} questions "
                f"but {len(self.weights)} weights"
            )
        return self

    @property
    def max_score(self) -> float:
        return sum(self.weights)


class Questionnaire(BaseModel):
    """Ordered categories making up one assessment."""

    model_config = ConfigDict(frozen=True)

    categories: tuple[Category, ...] = Field(min_length=1)

    @model_validator(mode="after")
    def _check_names(self) -> Questionnaire:
        names = [c.name for c in self.categories]
        dupes = sorted({n for n in names if names.count(n) > 1})
        if dupes:
            raise ValueError(f"duplicate category names: {', '.join(dupes)}")
        return self

    @property
    def total_questions(self) -> int:
        return sum(len(c.questions) for c in self.categories)

    def max_score(self, kind: BucketKind) -> float:
        """Highest score the given bucket can reach (every question Yes)."""
        return sum(c.max_score for c in self.categories if c.kind == kind)


class AnswerStore(BaseModel):
    """Immutable snapshot of every answer, indexed by (category, question)."""

    model_config = ConfigDict(frozen=True)

    answers: tuple[tuple[AnswerValue, ...], ...]

    def get(self, category_index: int, question_index: int) -> AnswerValue:
        return self.answers[category_index][question_index]

    @property
    def answered_count(self) -> int:
        return sum(1 for row in self.answers for a in row if a.is_answered)


class Scores(BaseModel):
    """The two bucket totals."""

    model_config = ConfigDict(frozen=True)

    primary: float = 0.0
    secondary: float = 0.0

    @property
    def risk_indicator(self) -> float:
        """RI = secondary - primary. Positive favours self-employment."""
        return self.secondary - self.primary


class OutcomeState(str, enum.Enum):
    """Classification result shown to the user."""

    INSUFFICIENT_DATA = "insufficient_data"
    LEANS_EMPLOYMENT = "leans_employment"
    UNDETERMINED = "undetermined"
    LEANS_SELF_EMPLOYMENT = "leans_self_employment"


class Verdict(BaseModel):
    """Everything a UI needs to render the current assessment."""

    scores: Scores
    state: OutcomeState
    answered_count: int = Field(ge=0)
    total_questions: int = Field(gt=0)
    threshold: float = Field(ge=0)
    category_scores: dict[str, float] = Field(default_factory=dict)

    @property
    def completion_pct(self) -> float:
        return self.answered_count / self.total_questions * 100


class AppConfig(BaseModel):
    """Application configuration (persisted to ~/.config/vbar/config.json)."""

    threshold: float = Field(default=DEFAULT_THRESHOLD, ge=0)
