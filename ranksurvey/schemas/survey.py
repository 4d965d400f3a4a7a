from __future__ import annotations

from typing import Annotated, Dict, List, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator


RankLabel = Literal["1", "2", "3", "4", "5", "No", ""]

# Marks a respondent can pick, in display order.
RANK_LABELS: Tuple[str, ...] = ("1", "2", "3", "4", "5", "No")
NUMERIC_RANKS = frozenset({"1", "2", "3", "4", "5"})
UNSET = ""
NOT_RANKED = "No"


class Question(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(description="Unique question identifier (e.g. 'q1').")
    text: str
    section: Optional[str] = Field(
        default=None,
        description="Section title; only set on the first question of a section.",
    )
    options: Tuple[str, ...]

    @field_validator("options")
    @classmethod
    def validate_options(cls, v: Tuple[str, ...]) -> Tuple[str, ...]:
        if not v:
            raise ValueError("a question needs at least one option")
        return v


class QuestionError(BaseModel):
    type: Literal["question"] = "question"
    question_id: str
    question_index: int
    message: str


class FinalCommentError(BaseModel):
    type: Literal["final-comment"] = "final-comment"
    message: str = "Final Comments: Please share your recommendations"


FormError = Annotated[
    Union[QuestionError, FinalCommentError], Field(discriminator="type")
]


class ValidationResult(BaseModel):
    is_valid: bool
    errors: List[FormError] = Field(default_factory=list)


class SectionHeader(BaseModel):
    first_question_index: int
    title: str


class SubmissionPayload(BaseModel):
    """
    Body sent to the remote collection endpoint.

    Field aliases are the exact wire keys; use `to_wire()` when serializing.
    Option indices are string keys on the wire.
    """

    model_config = ConfigDict(populate_by_name=True)

    timestamp: str
    responses: Dict[str, Dict[str, RankLabel]]
    other_text: Dict[str, str] = Field(default_factory=dict, alias="otherText")
    final_comment: str = Field(default="", alias="finalComment")

    def to_wire(self) -> dict:
        return self.model_dump(by_alias=True)
