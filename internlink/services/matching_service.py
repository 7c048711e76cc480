"""
Skill Matching Service

PURPOSE:
Score how well a student's skills cover a job's skills (and the reverse),
keep explicitly calculated scores, and rank top-N matches in either
direction.

HOW IT WORKS:
1. Comparator: exact-string set intersection over the TARGET's skill count
2. Persisted scores (MatchScoreStore) are ranked first
3. If they don't fill the limit, remaining candidates are scored on demand
   and appended (never written back to the store)

ASYMMETRY:
score(subject, target) divides by |target|.
- jobs for a student: subject = student skills, target = job skills
- students for a job: subject = job skills, target = student skills
So score(S, T) != score(T, S) in general. Rankings depend on it.

TIE-BREAKS:
- jobs for a student: ascending job id
- students for a job: higher profile completion first, then ascending
  student id. A job with no skills scores every student 0, so candidates
  come back ordered by profile completion alone.

STALENESS:
Persisted scores are not invalidated when skills change. A stored score
stays authoritative for its pair until overwritten through calculate().
"""

import logging
import math
from typing import Iterable, List, Optional

from internlink.db.memory import MemStorage
from internlink.models import MatchScore

logger = logging.getLogger(__name__)


# ============================================================
# COMPARATOR
# ============================================================

def compute_skill_match_score(
    subject_skills: Iterable[str],
    target_skills: Iterable[str]
) -> int:
    """
    Percentage of the target's skills present in the subject's skills.

    Case-sensitive exact matching, no trimming or synonyms.
    Either side empty -> 0.

    Returns:
        Integer between 0 and 100 (rounded half up)
    """
    subject = set(subject_skills or [])
    target = set(target_skills or [])

    if not subject or not target:
        return 0

    matches = subject.intersection(target)
    return int(math.floor(100 * len(matches) / len(target) + 0.5))


# ============================================================
# RANKING
# ============================================================

def _job_sort_key(item: dict):
    return (-item["score"], item["job"].id)


def _student_sort_key(item: dict):
    student = item["student"]
    return (-item["score"], -student.profile_completion_percentage, student.id)


class MatchingService:
    """
    Ranks jobs for students and students for jobs.

    Process (both directions):
    1. Load persisted scores for the subject, resolve the other side,
       drop rows whose entity is gone (or, for jobs, inactive)
    2. Sort descending, take up to limit
    3. If short, score uncovered candidates on demand and append enough
       to reach limit
    """

    def __init__(self, storage: MemStorage):
        self.storage = storage
        self.match_scores = storage.match_scores

    def top_matches_for_student(self, student_id: int, limit: int = 10) -> List[dict]:
        """
        Top jobs for a student, best first.

        Unknown student -> []. Inactive or deleted jobs never appear.
        """
        if limit <= 0:
            return []

        student = self.storage.get_student_profile(student_id)
        if not student:
            logger.debug("No student %s, returning no matches", student_id)
            return []

        persisted = self.match_scores.list_for_student(student_id)
        covered_job_ids = {s.job_id for s in persisted}

        ranked: List[dict] = []
        for stored in persisted:
            job = self.storage.get_job(stored.job_id)
            if job and job.is_active:
                ranked.append({"job": job, "score": stored.score})

        ranked.sort(key=_job_sort_key)
        results = ranked[:limit]

        if len(results) < limit:
            pool = [
                job for job in self.storage.get_all_active_jobs()
                if job.id not in covered_job_ids
            ]
            computed = [
                {"job": job, "score": compute_skill_match_score(student.skills, job.skills)}
                for job in pool
            ]
            computed.sort(key=_job_sort_key)
            results.extend(computed[:limit - len(results)])
            logger.debug(
                "Student %s: %d persisted, %d computed on demand",
                student_id, len(ranked), len(computed)
            )

        return results

    def top_matches_for_job(self, job_id: int, limit: int = 10) -> List[dict]:
        """
        Top students for a job, best first.

        Unknown job -> []. The denominator is the student's skill count.
        """
        if limit <= 0:
            return []

        job = self.storage.get_job(job_id)
        if not job:
            logger.debug("No job %s, returning no matches", job_id)
            return []

        persisted = self.match_scores.list_for_job(job_id)
        covered_student_ids = {s.student_id for s in persisted}

        ranked: List[dict] = []
        for stored in persisted:
            student = self.storage.get_student_profile(stored.student_id)
            if student:
                ranked.append({"student": student, "score": stored.score})

        ranked.sort(key=_student_sort_key)
        results = ranked[:limit]

        if len(results) < limit:
            pool = [
                student for student in self.storage.get_all_student_profiles()
                if student.id not in covered_student_ids
            ]
            computed = [
                {"student": student, "score": compute_skill_match_score(job.skills, student.skills)}
                for student in pool
            ]
            computed.sort(key=_student_sort_key)
            results.extend(computed[:limit - len(results)])
            logger.debug(
                "Job %s: %d persisted, %d computed on demand",
                job_id, len(ranked), len(computed)
            )

        return results

    def calculate(self, student_id: int, job_id: int, score: float) -> MatchScore:
        """
        Store a caller-supplied score for (student_id, job_id).

        The score is taken as given: it is not recomputed, range-checked or
        tied to existing entities.
        """
        record = self.match_scores.upsert(student_id, job_id, score)
        logger.info("Match score for student %s / job %s set to %s", student_id, job_id, score)
        return record

    def get_score(self, student_id: int, job_id: int) -> Optional[MatchScore]:
        return self.match_scores.get(student_id, job_id)
