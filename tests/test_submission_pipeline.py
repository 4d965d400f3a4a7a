from __future__ import annotations

import asyncio
import json

import httpx
import pytest

from ranksurvey.core.config import Settings
from ranksurvey.schemas.survey import Question
from ranksurvey.services.errors import (
    CONFIGURATION_MESSAGE,
    NETWORK_MESSAGE,
    SubmissionInProgressError,
)
from ranksurvey.services.ranking_store import RankAssignmentStore
from ranksurvey.services.submission import SubmissionPipeline
from ranksurvey.services.transport import SubmissionGuard, SubmissionTransport
from ranksurvey.services.validation import validate_form


QUESTIONS = [Question(id="q1", text="Which trail features matter most?", options=("A", "B"))]
ENDPOINT = "https://collector.example/exec"


def _pipeline(handler, endpoint: str = ENDPOINT) -> SubmissionPipeline:
    async def no_sleep(seconds: float) -> None:
        return None

    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return SubmissionPipeline(
        QUESTIONS,
        SubmissionTransport(client=client, sleep=no_sleep),
        Settings(SUBMISSION_ENDPOINT_URL=endpoint),
    )


@pytest.mark.asyncio
async def test_end_to_end_single_question():
    sent = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(json.loads(request.content))
        return httpx.Response(200)

    store = RankAssignmentStore(QUESTIONS)

    empty = validate_form(QUESTIONS, store.state, "")
    assert [e.type for e in empty.errors] == ["question", "final-comment"]
    assert empty.errors[0].question_id == "q1"

    store.assign("q1", 0, "1")
    filled = validate_form(QUESTIONS, store.state, "Great park")
    assert filled.is_valid and filled.errors == []

    result = await _pipeline(handler).run(store.state, {}, "Great park", SubmissionGuard())

    assert result.status == "submitted"
    assert result.payload.responses == {"q1": {"0": "1", "1": "No"}}
    assert sent[0]["responses"] == {"q1": {"0": "1", "1": "No"}}
    assert sent[0]["finalComment"] == "Great park"


@pytest.mark.asyncio
async def test_invalid_form_is_never_sent():
    sent = []
    pipeline = _pipeline(lambda request: sent.append(request) or httpx.Response(200))

    result = await pipeline.run(RankAssignmentStore(QUESTIONS).state, {}, " ", SubmissionGuard())

    assert result.status == "invalid"
    assert result.focus_target == "question-q1"
    assert len(result.errors) == 2
    assert sent == []


@pytest.mark.asyncio
async def test_free_text_is_sanitized_before_sending():
    sent = []

    def handler(request: httpx.Request) -> httpx.Response:
        sent.append(json.loads(request.content))
        return httpx.Response(200)

    store = RankAssignmentStore(QUESTIONS)
    store.assign("q1", 1, "No")

    result = await _pipeline(handler).run(
        store.state,
        {"q1": "  <script>boardwalks "},
        "  javascript:more shade  ",
        SubmissionGuard(),
    )

    assert result.status == "submitted"
    assert sent[0]["otherText"] == {"q1": ">boardwalks"}
    assert sent[0]["finalComment"] == "more shade"


@pytest.mark.asyncio
async def test_delivery_failure_becomes_friendly_message():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("refused", request=request)

    store = RankAssignmentStore(QUESTIONS)
    store.assign("q1", 0, "1")
    guard = SubmissionGuard()

    result = await _pipeline(handler).run(store.state, {}, "ok", guard)

    assert result.status == "failed"
    assert result.message == NETWORK_MESSAGE
    assert not guard.busy


@pytest.mark.asyncio
async def test_missing_endpoint_reports_configuration_problem():
    calls = []
    pipeline = _pipeline(lambda request: calls.append(request) or httpx.Response(200), endpoint="")
    store = RankAssignmentStore(QUESTIONS)
    store.assign("q1", 0, "1")

    result = await pipeline.run(store.state, {}, "ok", SubmissionGuard())

    assert result.status == "failed"
    assert result.message == CONFIGURATION_MESSAGE
    assert calls == []


@pytest.mark.asyncio
async def test_second_submit_while_busy_is_rejected():
    release = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        await release.wait()
        return httpx.Response(200)

    pipeline = _pipeline(handler)
    store = RankAssignmentStore(QUESTIONS)
    store.assign("q1", 0, "1")
    guard = SubmissionGuard()

    first = asyncio.create_task(pipeline.run(store.state, {}, "ok", guard))
    await asyncio.sleep(0.01)
    assert guard.busy

    with pytest.raises(SubmissionInProgressError):
        await pipeline.run(store.state, {}, "ok", guard)

    release.set()
    result = await first
    assert result.status == "submitted"
    assert not guard.busy


@pytest.mark.asyncio
async def test_busy_guard_is_checked_before_validation():
    sent = []
    pipeline = _pipeline(lambda request: sent.append(request) or httpx.Response(200))
    guard = SubmissionGuard()

    with guard.hold():
        with pytest.raises(SubmissionInProgressError):
            # An incomplete form must still be told the session is busy.
            await pipeline.run(RankAssignmentStore(QUESTIONS).state, {}, "", guard)

    assert sent == []


@pytest.mark.asyncio
async def test_cancelled_submit_releases_guard():
    started = asyncio.Event()

    async def handler(request: httpx.Request) -> httpx.Response:
        started.set()
        await asyncio.Event().wait()
        return httpx.Response(200)

    pipeline = _pipeline(handler)
    store = RankAssignmentStore(QUESTIONS)
    store.assign("q1", 0, "1")
    guard = SubmissionGuard()

    task = asyncio.create_task(pipeline.run(store.state, {}, "ok", guard))
    await started.wait()
    assert guard.busy

    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert not guard.busy
