"""
Match Score Store

Persists computed scores keyed by the ordered (student_id, job_id) pair.
(1, 2) and (2, 1) are different entries; nothing is mirrored.

Contract shared by every backend:
- upsert(student_id, job_id, score) -> MatchScore
    creates if absent, else overwrites score and calculated_at (last write wins)
- get(student_id, job_id) -> MatchScore | None
- list_for_student(student_id) / list_for_job(job_id) -> List[MatchScore]
- count() -> int

No referential checks: upserting ids that do not exist succeeds.
Entries never expire and are never invalidated when skills change;
the store is unbounded for the data sizes this service targets.
"""

import logging
import threading
from datetime import datetime
from typing import Dict, List, Optional, Protocol, Tuple

from internlink.models import MatchScore

logger = logging.getLogger(__name__)


class MatchScoreStore(Protocol):
    def upsert(self, student_id: int, job_id: int, score: float) -> MatchScore: ...

    def get(self, student_id: int, job_id: int) -> Optional[MatchScore]: ...

    def list_for_student(self, student_id: int) -> List[MatchScore]: ...

    def list_for_job(self, job_id: int) -> List[MatchScore]: ...

    def count(self) -> int: ...


class InMemoryMatchScoreStore:
    """
    Dict-backed store.

    A single lock serializes upsert/get so two requests recomputing the same
    pair cannot lose an update when the host runs handlers on threads.
    """

    def __init__(self):
        self._scores: Dict[Tuple[int, int], MatchScore] = {}
        self._id_counter = 1
        self._lock = threading.Lock()

    def upsert(self, student_id: int, job_id: int, score: float) -> MatchScore:
        key = (student_id, job_id)
        with self._lock:
            existing = self._scores.get(key)
            if existing:
                record = existing.model_copy(
                    update={"score": score, "calculated_at": datetime.utcnow()}
                )
            else:
                record = MatchScore(
                    id=self._id_counter,
                    student_id=student_id,
                    job_id=job_id,
                    score=score,
                )
                self._id_counter += 1
            self._scores[key] = record

        logger.debug("Stored match score %s for student %s / job %s", score, student_id, job_id)
        return record

    def get(self, student_id: int, job_id: int) -> Optional[MatchScore]:
        with self._lock:
            return self._scores.get((student_id, job_id))

    def list_for_student(self, student_id: int) -> List[MatchScore]:
        with self._lock:
            return [s for s in self._scores.values() if s.student_id == student_id]

    def list_for_job(self, job_id: int) -> List[MatchScore]:
        with self._lock:
            return [s for s in self._scores.values() if s.job_id == job_id]

    def count(self) -> int:
        with self._lock:
            return len(self._scores)
