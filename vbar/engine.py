"""Scoring and classification for the work-relationship assessment.

The answer store is an immutable value: every mutation returns a new
snapshot and leaves the old one untouched, so a UI can keep it in whatever
session state it has.  Scoring and classification are pure functions over
that snapshot.
"""

from __future__ import annotations

import logging

from vbar.models import (
    DEFAULT_THRESHOLD,
    AnswerStore,
    AnswerValue,
    BucketKind,
    OutcomeState,
    Questionnaire,
    Scores,
    Verdict,
)

log = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Answer store
# ---------------------------------------------------------------------------


def new_answer_store(questionnaire: Questionnaire) -> AnswerStore:
    """Return a store with every question unanswered."""
    return AnswerStore(
        answers=tuple(
            (AnswerValue.UNANSWERED,) * len(cat.questions)
            for cat in questionnaire.categories
        )
    )


def _replace(
    store: AnswerStore, category_index: int, question_index: int, value: AnswerValue
) -> AnswerStore:
    if not 0 <= category_index < len(store.answers):
        raise IndexError(f"category index {category_index} out of range")
    row = store.answers[category_index]
    if not 0 <= question_index < len(row):
        raise IndexError(
            f"question index {question_index} out of range for category {category_index}"
        )
    # Only the touched category row is rebuilt; the others are shared.
    new_row = row[:question_index] + (value,) + row[question_index + 1:]
    answers = (
        store.answers[:category_index] + (new_row,) + store.answers[category_index + 1:]
    )
    return store.model_copy(update={"answers": answers})


def set_answer(
    store: AnswerStore,
    category_index: int,
    question_index: int,
    value: AnswerValue | str,
) -> AnswerStore:
    """Return a new store with one question answered.

    *value* must be Yes, Partial or No.  Unanswered is only ever the initial
    default; use :func:`clear_answer` to go back to it.
    """
    value = AnswerValue(value)
    if not value.is_answered:
        raise ValueError("set_answer() needs yes, partial or no; use clear_answer()")
    return _replace(store, category_index, question_index, value)


def clear_answer(store: AnswerStore, category_index: int, question_index: int) -> AnswerStore:
    """Return a new store with one question reset to unanswered."""
    return _replace(store, category_index, question_index, AnswerValue.UNANSWERED)


def answered_count(store: AnswerStore) -> int:
    return store.answered_count


def total_questions(questionnaire: Questionnaire) -> int:
    return questionnaire.total_questions


# ---------------------------------------------------------------------------
# Scoring
# ---------------------------------------------------------------------------


def store_matches(questionnaire: Questionnaire, store: AnswerStore) -> bool:
    """True if *store* has exactly one answer slot per question of *questionnaire*."""
    return [len(row) for row in store.answers] == [
        len(cat.questions) for cat in questionnaire.categories
    ]


def _check_store(questionnaire: Questionnaire, store: AnswerStore) -> None:
    if not store_matches(questionnaire, store):
        raise ValueError("answer store does not match the questionnaire layout")


def compute_scores(questionnaire: Questionnaire, store: AnswerStore) -> Scores:
    """Sum ``weight * answer`` into the bucket of each question's category.

    Accumulation runs in category order, then question order, so repeated
    calls give bit-identical floats.
    """
    _check_store(questionnaire, store)
    primary = 0.0
    secondary = 0.0
    for cat_index, cat in enumerate(questionnaire.categories):
        for q_index, weight in enumerate(cat.weights):
            contribution = store.get(cat_index, q_index).numeric * weight
            if cat.kind == BucketKind.PRIMARY:
                primary += contribution
            else:
                secondary += contribution
    return Scores(primary=primary, secondary=secondary)


def category_scores(questionnaire: Questionnaire, store: AnswerStore) -> dict[str, float]:
    """Weighted subtotal per category, keyed by category name."""
    _check_store(questionnaire, store)
    result: dict[str, float] = {}
    for cat_index, cat in enumerate(questionnaire.categories):
        subtotal = 0.0
        for q_index, weight in enumerate(cat.weights):
            subtotal += store.get(cat_index, q_index).numeric * weight
        result[cat.name] = subtotal
    return result


# ---------------------------------------------------------------------------
# Classification
# ---------------------------------------------------------------------------


def classify(
    primary_score: float,
    secondary_score: float,
    total_questions: int,
    answered_count: int,
    threshold: float = DEFAULT_THRESHOLD,
) -> OutcomeState:
    """Map the bucket scores and completion to an outcome.

    Fewer than half of the questions answered always gives
    ``INSUFFICIENT_DATA``.  The half is compared exactly (``2 * answered <
    total``), so with 7 of 15 answered the result is still insufficient and
    with 8 of 15 the risk indicator decides.  The threshold band is
    inclusive on both sides: an RI of exactly +/- threshold is undetermined.
    *threshold* is expected to be non-negative; :func:`evaluate` enforces it.
    """
    if 2 * answered_count < total_questions:
        return OutcomeState.INSUFFICIENT_DATA

    ri = secondary_score - primary_score
    if ri > threshold:
        return OutcomeState.LEANS_SELF_EMPLOYMENT
    if ri < -threshold:
        return OutcomeState.LEANS_EMPLOYMENT
    return OutcomeState.UNDETERMINED


def evaluate(
    questionnaire: Questionnaire,
    store: AnswerStore,
    threshold: float = DEFAULT_THRESHOLD,
) -> Verdict:
    """Score and classify *store* in one go."""
    if threshold < 0:
        raise ValueError(f"threshold must not be negative, got {threshold}")
    scores = compute_scores(questionnaire, store)
    answered = store.answered_count
    total = questionnaire.total_questions
    state = classify(scores.primary, scores.secondary, total, answered, threshold)
    log.debug(
        "evaluated %d/%d answers: primary=%.2f secondary=%.2f ri=%.2f -> %s",
        answered,
        total,
        scores.primary,
        scores.secondary,
        scores.risk_indicator,
        state.value,
    )
    return Verdict(
        scores=scores,
        state=state,
        answered_count=answered,
        total_questions=total,
        threshold=threshold,
        category_scores=category_scores(questionnaire, store),
    )
