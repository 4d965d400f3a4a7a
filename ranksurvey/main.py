from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
import time
import uuid

from ranksurvey.core.config import settings
from ranksurvey.core.logger import service_logger
from ranksurvey.schemas.api import (
    FinalCommentUpdate,
    OtherTextUpdate,
    QuestionsResponse,
    RankUpdate,
    SessionSnapshot,
    SubmissionResult,
)
from ranksurvey.schemas.survey import RANK_LABELS
from ranksurvey.services.catalogue import QUESTIONS
from ranksurvey.services.errors import SubmissionInProgressError
from ranksurvey.services.health_check import ReadinessResponse, run_readiness_check
from ranksurvey.services.sections import section_headers
from ranksurvey.services.sessions import SessionRegistry, SurveySession
from ranksurvey.services.submission import SubmissionPipeline
from ranksurvey.services.transport import SubmissionTransport


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    await pipeline.transport.aclose()


app = FastAPI(title="Ranked Survey Submission Service", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

registry = SessionRegistry(QUESTIONS, capacity=settings.SESSION_CAPACITY)
pipeline = SubmissionPipeline(QUESTIONS, SubmissionTransport(), settings)


@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.perf_counter()
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    response: Response = await call_next(request)

    process_time = time.perf_counter() - start_time
    service_logger.log_request(
        method=request.method,
        path=request.url.path,
        status_code=response.status_code,
        duration_ms=process_time * 1000,
        request_id=request_id
    )
    response.headers["X-Process-Time"] = str(process_time)
    response.headers["X-Request-ID"] = request_id
    return response


@app.get("/health", tags=["meta"])
def health() -> dict:
    return {"status": "ok"}


@app.get("/health/live", tags=["meta"])
def health_live() -> dict:
    return {"status": "ok"}


@app.get("/health/ready", response_model=ReadinessResponse, tags=["meta"])
def health_ready() -> ReadinessResponse:
    return run_readiness_check()


@app.get("/api/v1/questions", response_model=QuestionsResponse, tags=["survey"])
def list_questions() -> QuestionsResponse:
    return QuestionsResponse(
        questions=list(QUESTIONS),
        rank_labels=list(RANK_LABELS),
        sections=section_headers(QUESTIONS),
    )


def _get_session(session_id: str) -> SurveySession:
    session = registry.get(session_id)
    if session is None:
        raise HTTPException(status_code=404, detail="Unknown survey session")
    return session


def _get_editable_session(session_id: str) -> SurveySession:
    session = _get_session(session_id)
    if session.guard.busy:
        raise HTTPException(status_code=409, detail="A submission is already in progress")
    return session


@app.post(
    "/api/v1/sessions",
    response_model=SessionSnapshot,
    status_code=201,
    tags=["survey"],
)
async def create_session() -> SessionSnapshot:
    return registry.create().snapshot()


@app.get("/api/v1/sessions/{session_id}", response_model=SessionSnapshot, tags=["survey"])
async def get_session(session_id: str) -> SessionSnapshot:
    return _get_session(session_id).snapshot()


@app.put("/api/v1/sessions/{session_id}/ranks", response_model=SessionSnapshot, tags=["survey"])
async def assign_rank(session_id: str, update: RankUpdate) -> SessionSnapshot:
    session = _get_editable_session(session_id)
    try:
        question = session.store.question(update.question_id)
    except KeyError:
        raise HTTPException(status_code=422, detail=f"Unknown question: {update.question_id}")
    if update.option_index >= len(question.options):
        raise HTTPException(
            status_code=422,
            detail=f"Question {question.id} has {len(question.options)} options",
        )

    session.store.assign(update.question_id, update.option_index, update.label)
    return session.snapshot()


@app.put(
    "/api/v1/sessions/{session_id}/other-text",
    response_model=SessionSnapshot,
    tags=["survey"],
)
async def set_other_text(session_id: str, update: OtherTextUpdate) -> SessionSnapshot:
    session = _get_editable_session(session_id)
    try:
        session.store.question(update.question_id)
    except KeyError:
        raise HTTPException(status_code=422, detail=f"Unknown question: {update.question_id}")

    session.other_text[update.question_id] = update.text
    return session.snapshot()


@app.put(
    "/api/v1/sessions/{session_id}/final-comment",
    response_model=SessionSnapshot,
    tags=["survey"],
)
async def set_final_comment(session_id: str, update: FinalCommentUpdate) -> SessionSnapshot:
    session = _get_editable_session(session_id)
    session.final_comment = update.text
    return session.snapshot()


@app.post(
    "/api/v1/sessions/{session_id}/submit",
    response_model=SubmissionResult,
    tags=["survey"],
)
async def submit_session(session_id: str, request: Request) -> SubmissionResult:
    session = _get_session(session_id)
    try:
        result = await pipeline.run(
            session.store.state,
            session.other_text,
            session.final_comment,
            session.guard,
            session_id=session.id,
        )
    except SubmissionInProgressError:
        raise HTTPException(status_code=409, detail="A submission is already in progress")

    if result.status == "submitted":
        registry.discard(session.id)
    elif result.status == "failed":
        service_logger.log_error(
            "Submission failed",
            request_id=getattr(request.state, "request_id", None),
            extra={"session_id": session.id},
        )
    return result
