from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Dict, Mapping, Sequence

from ranksurvey.schemas.survey import NOT_RANKED, Question, SubmissionPayload
from ranksurvey.services.ranking_store import RankState, labels_for


def utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


def normalize_form_data(
    questions: Sequence[Question],
    state: RankState,
    other_text: Mapping[str, str],
    final_comment: str,
    clock: Callable[[], str] = utc_timestamp,
) -> SubmissionPayload:
    """
    Build the wire payload with a concrete label for every option.

    Unset options are sent as "No". Free text is expected to be sanitized
    already and is passed through as-is.
    """
    responses: Dict[str, Dict[str, str]] = {}
    for question in questions:
        responses[question.id] = {
            str(idx): label or NOT_RANKED
            for idx, label in enumerate(labels_for(state, question))
        }

    return SubmissionPayload(
        timestamp=clock(),
        responses=responses,
        other_text=dict(other_text),
        final_comment=final_comment,
    )
