from __future__ import annotations

from typing import Optional, Sequence

from ranksurvey.schemas.survey import (
    FinalCommentError,
    FormError,
    Question,
    QuestionError,
    UNSET,
    ValidationResult,
)
from ranksurvey.services.ranking_store import RankState, labels_for
from ranksurvey.services.sanitization import is_text_empty


PREVIEW_LENGTH = 50


def is_answered(state: RankState, question: Question) -> bool:
    # A lone "No" counts as an answer.
    return any(label != UNSET for label in labels_for(state, question))


def validate_form(
    questions: Sequence[Question],
    state: RankState,
    final_comment: Optional[str],
) -> ValidationResult:
    """
    Check that every question has at least one mark and that the final
    comment is not blank.

    Question errors keep question order; the comment error, if any, is last.
    """
    errors: list[FormError] = []

    for idx, question in enumerate(questions):
        if not is_answered(state, question):
            errors.append(
                QuestionError(
                    question_id=question.id,
                    question_index=idx,
                    message=f"Question {idx + 1}: {question.text[:PREVIEW_LENGTH]}...",
                )
            )

    if is_text_empty(final_comment):
        errors.append(FinalCommentError())

    return ValidationResult(is_valid=not errors, errors=errors)


def first_error_target(errors: Sequence[FormError]) -> Optional[str]:
    """Element id the client should focus; question errors win over the comment."""
    for error in errors:
        if isinstance(error, QuestionError):
            return f"question-{error.question_id}"

    for error in errors:
        if isinstance(error, FinalCommentError):
            return "final-comments"

    return None
