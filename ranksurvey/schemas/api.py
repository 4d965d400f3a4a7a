from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from ranksurvey.schemas.survey import (
    FormError,
    Question,
    RankLabel,
    SectionHeader,
    SubmissionPayload,
)


class QuestionsResponse(BaseModel):
    questions: List[Question]
    rank_labels: List[str]
    sections: List[SectionHeader]


class RankUpdate(BaseModel):
    question_id: str
    option_index: int = Field(ge=0, description="Zero-based option position.")
    label: RankLabel = Field(description="'1'..'5', 'No', or '' to clear.")


class OtherTextUpdate(BaseModel):
    question_id: str
    text: str = ""


class FinalCommentUpdate(BaseModel):
    text: str = ""


class SessionSnapshot(BaseModel):
    session_id: str
    responses: Dict[str, List[RankLabel]]
    other_text: Dict[str, str] = Field(default_factory=dict)
    final_comment: str = ""
    submitting: bool = False


class SubmissionResult(BaseModel):
    status: Literal["submitted", "invalid", "failed"]
    errors: List[FormError] = Field(default_factory=list)
    focus_target: Optional[str] = Field(
        default=None,
        description="Element id the client should scroll to for the first error.",
    )
    message: Optional[str] = Field(
        default=None,
        description="Short human-readable failure message.",
    )
    payload: Optional[SubmissionPayload] = None
