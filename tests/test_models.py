"""Tests for Pydantic models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from vbar.models import (
    AnswerStore,
    AnswerValue,
    AppConfig,
    BucketKind,
    Category,
    OutcomeState,
    Questionnaire,
    Scores,
    Verdict,
)


def _category(**overrides) -> Category:
    fields = {
        "name": "W",
        "kind": BucketKind.PRIMARY,
        "questions": ["q1", "q2"],
        "weights": [2.0, 1.0],
    }
    fields.update(overrides)
    return Category(**fields)


class TestAnswerValue:
    def test_numeric_values(self) -> None:
        assert AnswerValue.YES.numeric == 1.0
        assert AnswerValue.PARTIAL.numeric == 0.5
        assert AnswerValue.NO.numeric == 0.0
        assert AnswerValue.UNANSWERED.numeric == 0.0

    def test_unanswered_is_not_answered(self) -> None:
        assert not AnswerValue.UNANSWERED.is_answered
        assert AnswerValue.NO.is_answered

    def test_from_string(self) -> None:
        assert AnswerValue("partial") is AnswerValue.PARTIAL


class TestBucketKind:
    def test_exactly_two_buckets(self) -> None:
        assert {k.value for k in BucketKind} == {"primary", "secondary"}


class TestCategory:
    def test_valid(self) -> None:
        cat = _category()
        assert cat.questions == ("q1", "q2")
        assert cat.max_score == 3.0

    def test_weight_count_mismatch_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _category(weights=[2.0])

    def test_no_questions_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _category(questions=[], weights=[])

    def test_non_positive_weight_rejected(self) -> None:
        with pytest.raises(ValidationError):
            _category(weights=[2.0, 0.0])

    @pytest.mark.parametrize("bad", [float("nan"), float("inf"), -1.0])
    def test_non_finite_or_negative_weight_rejected(self, bad: float) -> None:
        with pytest.raises(ValidationError):
            _category(weights=[2.0, bad])

    def test_frozen(self) -> None:
        cat = _category()
        with pytest.raises(ValidationError):
            cat.name = "Z"


class TestQuestionnaire:
    def test_empty_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Questionnaire(categories=[])

    def test_duplicate_names_rejected(self) -> None:
        with pytest.raises(ValidationError, match="duplicate category names"):
            Questionnaire(
                categories=[
                    _category(name="A"),
                    _category(name="A", kind=BucketKind.SECONDARY),
                ]
            )

    def test_totals(self) -> None:
        q = Questionnaire(
            categories=[
                _category(),
                _category(name="Z", kind=BucketKind.SECONDARY, questions=["a"], weights=[1.5]),
            ]
        )
        assert q.total_questions == 3
        assert q.max_score(BucketKind.PRIMARY) == 3.0
        assert q.max_score(BucketKind.SECONDARY) == 1.5


class TestAnswerStore:
    def test_answered_count(self) -> None:
        store = AnswerStore(answers=[["yes", "unanswered"], ["no"]])
        assert store.answered_count == 2
        assert store.get(0, 0) is AnswerValue.YES

    def test_frozen(self) -> None:
        store = AnswerStore(answers=[["yes"]])
        with pytest.raises(ValidationError):
            store.answers = ()


class TestScores:
    def test_risk_indicator(self) -> None:
        assert Scores(primary=7.0, secondary=3.0).risk_indicator == -4.0

    def test_defaults(self) -> None:
        s = Scores()
        assert s.primary == 0.0 and s.secondary == 0.0


class TestVerdict:
    def test_completion_pct(self) -> None:
        v = Verdict(
            scores=Scores(),
            state=OutcomeState.INSUFFICIENT_DATA,
            answered_count=7,
            total_questions=14,
            threshold=2.0,
        )
        assert v.completion_pct == 50.0

    def test_zero_total_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Verdict(
                scores=Scores(),
                state=OutcomeState.UNDETERMINED,
                answered_count=0,
                total_questions=0,
                threshold=2.0,
            )


class TestAppConfig:
    def test_default_threshold(self) -> None:
        assert AppConfig().threshold == 2.0

    def test_negative_threshold_rejected(self) -> None:
        with pytest.raises(ValidationError):
            AppConfig(threshold=-0.5)
