from __future__ import annotations
import collections
import uuid
from dataclasses import dataclass, field
from typing import Dict, Iterable, Optional

from ranksurvey.schemas.api import SessionSnapshot
from ranksurvey.schemas.survey import Question
from ranksurvey.services.ranking_store import RankAssignmentStore
from ranksurvey.services.transport import SubmissionGuard


@dataclass
class SurveySession:
    id: str
    store: RankAssignmentStore
    other_text: Dict[str, str] = field(default_factory=dict)
    final_comment: str = ""
    guard: SubmissionGuard = field(default_factory=SubmissionGuard)

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            session_id=self.id,
            responses=self.store.snapshot(),
            other_text=dict(self.other_text),
            final_comment=self.final_comment,
            submitting=self.guard.busy,
        )


class SessionRegistry:
    """
    In-memory LRU map of live survey sessions.

    Nothing is persisted; evicted or discarded sessions are simply gone.
    """

    def __init__(self, questions: Iterable[Question], capacity: int = 200):
        self.questions = tuple(questions)
        self.capacity = capacity
        self.sessions: "collections.OrderedDict[str, SurveySession]" = collections.OrderedDict()

    def create(self) -> SurveySession:
        session = SurveySession(
            id=uuid.uuid4().hex, store=RankAssignmentStore(self.questions)
        )
        self.sessions[session.id] = session
        self._evict()
        return session

    def get(self, session_id: str) -> Optional[SurveySession]:
        if session_id not in self.sessions:
            return None
        self.sessions.move_to_end(session_id)
        return self.sessions[session_id]

    def discard(self, session_id: str) -> None:
        self.sessions.pop(session_id, None)

    def __len__(self) -> int:
        return len(self.sessions)

    def _evict(self) -> None:
        while len(self.sessions) > self.capacity:
            # Never drop a session that is mid-submission, nor the newest one.
            for sid, session in list(self.sessions.items())[:-1]:
                if not session.guard.busy:
                    del self.sessions[sid]
                    break
            else:
                return
