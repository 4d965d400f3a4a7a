from __future__ import annotations
from pydantic import BaseModel
from typing import Dict


class DependencyStatus(BaseModel):
    status: str
    details: str | None = None


class ReadinessResponse(BaseModel):
    status: str
    dependencies: Dict[str, DependencyStatus]


def check_catalogue_status() -> DependencyStatus:
    try:
        from ranksurvey.services.catalogue import QUESTIONS
        if QUESTIONS:
            return DependencyStatus(status="ok", details=f"{len(QUESTIONS)} questions loaded")
        return DependencyStatus(status="error", details="Question catalogue is empty")
    except Exception as e:
        return DependencyStatus(status="error", details=str(e))


def check_endpoint_status() -> DependencyStatus:
    from ranksurvey.core.config import settings
    if settings.SUBMISSION_ENDPOINT_URL:
        return DependencyStatus(
            status="ok",
            details=f"Submitting with up to {settings.SUBMIT_MAX_RETRIES} attempts",
        )
    return DependencyStatus(status="error", details="Submission endpoint URL is not configured")


def run_readiness_check() -> ReadinessResponse:
    catalogue_status = check_catalogue_status()
    endpoint_status = check_endpoint_status()

    total_status = "ready"
    if catalogue_status.status == "error" or endpoint_status.status == "error":
        total_status = "not_ready"

    return ReadinessResponse(
        status=total_status,
        dependencies={
            "catalogue": catalogue_status,
            "submission_endpoint": endpoint_status,
        }
    )
