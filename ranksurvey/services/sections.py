from __future__ import annotations

from typing import List, Optional, Sequence

from ranksurvey.schemas.survey import Question, SectionHeader


def section_headers(questions: Sequence[Question]) -> List[SectionHeader]:
    """
    Headers to render before questions, as (first question index, title).

    A header is emitted whenever a question opens a section different from
    the one currently in effect.
    """
    headers: List[SectionHeader] = []
    current: Optional[str] = None

    for idx, question in enumerate(questions):
        if question.section and question.section != current:
            headers.append(SectionHeader(first_question_index=idx, title=question.section))
            current = question.section

    return headers
