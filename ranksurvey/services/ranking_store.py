"""
Per-question rank assignments with the exclusivity constraint.

State is a mapping of question id to a tuple of labels, one per option.
Every update builds a new mapping; earlier snapshots are never mutated, so
callers can diff the old and new state.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from ranksurvey.schemas.survey import NOT_RANKED, NUMERIC_RANKS, UNSET, Question


logger = logging.getLogger(__name__)

RankState = Mapping[str, Tuple[str, ...]]

_VALID_LABELS = NUMERIC_RANKS | {NOT_RANKED, UNSET}


def empty_state() -> RankState:
    return MappingProxyType({})


def labels_for(state: RankState, question: Question) -> Tuple[str, ...]:
    """Labels of every option of `question`; untouched options read as ""."""
    labels = state.get(question.id)
    if labels is None:
        return (UNSET,) * len(question.options)
    return labels


def assign_rank(
    state: RankState, question: Question, option_index: int, label: str
) -> RankState:
    """
    Return a new state with `label` set on one option of `question`.

    A numeric label is taken away from whichever other option held it.
    "No" and "" never displace anything.
    """
    if label not in _VALID_LABELS:
        raise ValueError(f"Unknown rank label: {label!r}")
    if not 0 <= option_index < len(question.options):
        raise IndexError(
            f"Option index {option_index} out of range for question {question.id}"
        )

    labels = list(labels_for(state, question))
    if label in NUMERIC_RANKS:
        labels = [UNSET if current == label else current for current in labels]
    labels[option_index] = label

    new_state: Dict[str, Tuple[str, ...]] = dict(state)
    new_state[question.id] = tuple(labels)
    return MappingProxyType(new_state)


class RankAssignmentStore:
    """Owns the current assignment snapshot for one survey session."""

    def __init__(self, questions: Iterable[Question]) -> None:
        self.questions: Tuple[Question, ...] = tuple(questions)
        self._by_id = {q.id: q for q in self.questions}
        self._state: RankState = empty_state()

    @property
    def state(self) -> RankState:
        return self._state

    def question(self, question_id: str) -> Question:
        return self._by_id[question_id]

    def assign(self, question_id: str, option_index: int, label: str) -> RankState:
        question = self._by_id[question_id]
        self._state = assign_rank(self._state, question, option_index, label)
        logger.debug(
            "Assigned %r to %s option %d", label, question_id, option_index
        )
        return self._state

    def labels_for(self, question_id: str) -> Tuple[str, ...]:
        return labels_for(self._state, self._by_id[question_id])

    def snapshot(self) -> Dict[str, list]:
        """Every known question with its full label list, for rendering."""
        return {q.id: list(labels_for(self._state, q)) for q in self.questions}
