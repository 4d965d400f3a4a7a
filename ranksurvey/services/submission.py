from __future__ import annotations

import logging
from typing import Mapping, Optional, Sequence

from ranksurvey.core.config import Settings, settings as default_settings
from ranksurvey.core.logger import service_logger
from ranksurvey.schemas.api import SubmissionResult
from ranksurvey.schemas.survey import Question
from ranksurvey.services.errors import (
    SubmissionError,
    SubmissionInProgressError,
    TransportError,
    describe_error,
)
from ranksurvey.services.normalizer import normalize_form_data
from ranksurvey.services.ranking_store import RankState
from ranksurvey.services.sanitization import sanitize_comment, sanitize_other_text
from ranksurvey.services.transport import SubmissionGuard, SubmissionTransport
from ranksurvey.services.validation import first_error_target, validate_form


logger = logging.getLogger(__name__)


class SubmissionPipeline:
    """
    validate -> sanitize -> normalize -> deliver, for one submit action.

    Incomplete forms come back as an "invalid" result and nothing is sent.
    Delivery failures come back as a "failed" result with a short message;
    the raw error only goes to the logs.
    """

    def __init__(
        self,
        questions: Sequence[Question],
        transport: SubmissionTransport,
        settings: Settings | None = None,
    ) -> None:
        self.questions = tuple(questions)
        self.transport = transport
        self.settings = settings or default_settings

    async def run(
        self,
        state: RankState,
        other_text: Mapping[str, str],
        final_comment: str,
        guard: SubmissionGuard,
        session_id: Optional[str] = None,
    ) -> SubmissionResult:
        # Checked before validating so a stale form never masks a busy session.
        if guard.busy:
            raise SubmissionInProgressError("A submission is already in progress")

        validation = validate_form(self.questions, state, final_comment)
        if not validation.is_valid:
            return SubmissionResult(
                status="invalid",
                errors=validation.errors,
                focus_target=first_error_target(validation.errors),
            )

        payload = normalize_form_data(
            self.questions,
            state,
            sanitize_other_text(other_text),
            sanitize_comment(final_comment),
        )

        def on_retry(attempt: int, error: TransportError, delay_ms: int) -> None:
            if delay_ms == 0:
                outcome = f"Failed to submit after {attempt} attempts"
            else:
                outcome = f"Retrying... (attempt {attempt + 1})"
            service_logger.log_submission(
                outcome,
                attempt,
                session_id=session_id,
                extra={"error": str(error), "kind": error.kind, "delay_ms": delay_ms},
            )

        # Raises SubmissionInProgressError while another submit is in flight.
        with guard.hold():
            try:
                await self.transport.submit(
                    payload,
                    self.settings.SUBMISSION_ENDPOINT_URL,
                    max_retries=self.settings.SUBMIT_MAX_RETRIES,
                    timeout_ms=self.settings.SUBMIT_TIMEOUT_MS,
                    initial_retry_delay_ms=self.settings.SUBMIT_INITIAL_RETRY_DELAY_MS,
                    on_retry=on_retry,
                )
            except SubmissionError as exc:
                service_logger.log_error(
                    "Submission error", error=exc, extra={"session_id": session_id}
                )
                return SubmissionResult(status="failed", message=describe_error(exc))

        logger.info("Session %s submitted", session_id)
        return SubmissionResult(status="submitted", payload=payload)
