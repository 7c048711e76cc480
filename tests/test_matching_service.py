"""Tests for skill comparison and ranking."""

from internlink.db.match_store import InMemoryMatchScoreStore
from internlink.db.memory import MemStorage
from internlink.services.matching_service import MatchingService, compute_skill_match_score


class TestComputeSkillMatchScore:
    """Tests for the set-overlap comparator."""

    def test_empty_sides_score_zero(self):
        """Either side empty gives 0."""
        assert compute_skill_match_score([], ["Python"]) == 0
        assert compute_skill_match_score(["Python"], []) == 0
        assert compute_skill_match_score([], []) == 0
        assert compute_skill_match_score(None, ["Python"]) == 0

    def test_ratio_over_target_count(self):
        """2 of 3 target skills present rounds to 67."""
        score = compute_skill_match_score({"Python", "SQL"}, {"Python", "Java", "SQL"})
        assert score == 67

    def test_asymmetric(self):
        """Denominator is always the target's count."""
        assert compute_skill_match_score({"A", "B"}, {"A"}) == 100
        assert compute_skill_match_score({"A"}, {"A", "B"}) == 50

    def test_exact_case_sensitive_matching(self):
        """No case folding or trimming."""
        assert compute_skill_match_score(["python"], ["Python"]) == 0
        assert compute_skill_match_score([" Python"], ["Python"]) == 0

    def test_duplicates_collapse(self):
        """Skill collections are treated as sets."""
        assert compute_skill_match_score(["Go", "Go"], ["Go", "Go", "Rust"]) == 50

    def test_rounds_half_up(self):
        """1 of 8 is 12.5 which rounds to 13."""
        target = [f"s{i}" for i in range(8)]
        assert compute_skill_match_score(["s0"], target) == 13

    def test_full_and_no_overlap(self):
        assert compute_skill_match_score(["A", "B", "C"], ["A", "B"]) == 100
        assert compute_skill_match_score(["X"], ["A", "B"]) == 0


class TestTopMatchesForStudent:
    """Tests for ranking jobs for a student."""

    def test_end_to_end_single_job(self, matching, make_student, make_job):
        """Student {Python, React} vs job {Python, React, SQL} gives 67."""
        student = make_student(skills=["Python", "React"])
        job = make_job(skills=["Python", "React", "SQL"])

        results = matching.top_matches_for_student(student.id, 10)

        assert len(results) == 1
        assert results[0]["job"].id == job.id
        assert results[0]["score"] == 67

    def test_never_exceeds_limit(self, matching, make_student, make_job):
        student = make_student(skills=["Python"])
        for _ in range(5):
            make_job(skills=["Python"])

        assert len(matching.top_matches_for_student(student.id, 3)) == 3

    def test_excludes_inactive_jobs(self, matching, storage, make_student, make_job):
        """Inactive jobs are dropped from persisted and on-demand results."""
        student = make_student(skills=["Python"])
        persisted_job = make_job(skills=["Python"])
        other_job = make_job(skills=["Python"])
        storage.match_scores.upsert(student.id, persisted_job.id, 90)
        storage.update_job(persisted_job.id, {"is_active": False})
        storage.update_job(other_job.id, {"is_active": False})

        assert matching.top_matches_for_student(student.id, 10) == []

    def test_sorted_descending_with_job_id_tie_break(self, matching, make_student, make_job):
        student = make_student(skills=["A", "B"])
        j1 = make_job(skills=["C"])           # 0
        j2 = make_job(skills=["A", "C"])      # 50
        j3 = make_job(skills=["A"])           # 100
        j4 = make_job(skills=["B", "D"])      # 50

        results = matching.top_matches_for_student(student.id, 10)

        assert [r["job"].id for r in results] == [j3.id, j2.id, j4.id, j1.id]
        assert [r["score"] for r in results] == [100, 50, 50, 0]

    def test_persisted_scores_rank_before_on_demand(self, matching, storage, make_student, make_job):
        """A stored score wins its slot even when an on-demand score is higher."""
        student = make_student(skills=["Python"])
        stored_job = make_job(skills=["Java"])
        perfect_job = make_job(skills=["Python"])
        storage.match_scores.upsert(student.id, stored_job.id, 40)

        results = matching.top_matches_for_student(student.id, 2)

        assert [r["job"].id for r in results] == [stored_job.id, perfect_job.id]
        assert [r["score"] for r in results] == [40, 100]

    def test_persisted_score_is_used_verbatim(self, matching, storage, make_student, make_job):
        """Stored scores are not recomputed even if skills changed since."""
        student = make_student(skills=["Python"])
        job = make_job(skills=["Python"])
        storage.match_scores.upsert(student.id, job.id, 12.5)

        results = matching.top_matches_for_student(student.id, 5)

        assert results[0]["score"] == 12.5

    def test_stored_score_survives_skill_change(self, matching, storage, make_student, make_job):
        """Changing skills leaves the stored row authoritative until overwritten."""
        student = make_student(skills=["Python"])
        job = make_job(skills=["Python"])
        storage.match_scores.upsert(student.id, job.id, 90)

        storage.update_student_profile(student.id, {"skills": ["Cobol"]})
        storage.update_job(job.id, {"skills": ["Rust"]})

        results = matching.top_matches_for_student(student.id, 10)
        assert results[0]["job"].id == job.id
        assert results[0]["score"] == 90
        assert storage.match_scores.get(student.id, job.id).score == 90

        matching.calculate(student.id, job.id, 0)
        assert matching.top_matches_for_student(student.id, 10)[0]["score"] == 0

    def test_persisted_only_when_limit_filled(self, matching, storage, make_student, make_job):
        student = make_student(skills=["Python"])
        j1 = make_job(skills=["Python"])
        j2 = make_job(skills=["Python"])
        make_job(skills=["Python"])
        storage.match_scores.upsert(student.id, j1.id, 10)
        storage.match_scores.upsert(student.id, j2.id, 20)

        results = matching.top_matches_for_student(student.id, 2)

        assert [r["job"].id for r in results] == [j2.id, j1.id]

    def test_on_demand_scores_are_not_persisted(self, matching, storage, make_student, make_job):
        student = make_student(skills=["Python"])
        make_job(skills=["Python"])

        matching.top_matches_for_student(student.id, 10)

        assert storage.match_scores.count() == 0

    def test_deleted_job_rows_are_skipped(self, matching, storage, make_student, make_job):
        student = make_student(skills=["Python"])
        job = make_job(skills=["Python"])
        storage.match_scores.upsert(student.id, job.id, 99)
        storage.delete_job(job.id)

        assert matching.top_matches_for_student(student.id, 10) == []

    def test_unknown_student_returns_empty(self, matching, storage, make_job):
        job = make_job(skills=["Python"])
        storage.match_scores.upsert(999, job.id, 80)

        assert matching.top_matches_for_student(999, 10) == []

    def test_non_positive_limit_returns_empty(self, matching, make_student, make_job):
        student = make_student(skills=["Python"])
        make_job(skills=["Python"])

        assert matching.top_matches_for_student(student.id, 0) == []

    def test_student_without_skills_scores_zero(self, matching, make_student, make_job):
        student = make_student()
        make_job(skills=["Python"])

        results = matching.top_matches_for_student(student.id, 10)

        assert [r["score"] for r in results] == [0]


class TestTopMatchesForJob:
    """Tests for ranking students for a job."""

    def test_denominator_is_student_skill_count(self, matching, make_student, make_job):
        """Job {A} vs student {A, B}: 1 of the student's 2 skills -> 50."""
        job = make_job(skills=["A"])
        student = make_student(skills=["A", "B"])

        results = matching.top_matches_for_job(job.id, 10)

        assert results[0]["student"].id == student.id
        assert results[0]["score"] == 50

    def test_sorted_descending(self, matching, make_student, make_job):
        job = make_job(skills=["Python", "SQL"])
        low = make_student(skills=["Java"])
        high = make_student(skills=["Python"])
        mid = make_student(skills=["Python", "Java"])

        results = matching.top_matches_for_job(job.id, 10)

        assert [r["student"].id for r in results] == [high.id, mid.id, low.id]
        assert [r["score"] for r in results] == [100, 50, 0]

    def test_ties_prefer_more_complete_profiles(self, matching, make_student, make_job):
        """Equal scores fall back to profile completion, then student id."""
        job = make_job(skills=[])
        sparse = make_student(skills=["Python"])
        rich = make_student(skills=["Python"], university="MIT", bio="Hi", location="Boston")
        sparse_again = make_student(skills=["Python"])

        results = matching.top_matches_for_job(job.id, 10)

        assert [r["student"].id for r in results] == [rich.id, sparse.id, sparse_again.id]
        assert all(r["score"] == 0 for r in results)

    def test_persisted_scores_first(self, matching, storage, make_student, make_job):
        job = make_job(skills=["Python"])
        stored = make_student(skills=["Java"])
        computed = make_student(skills=["Python"])
        storage.match_scores.upsert(stored.id, job.id, 30)

        results = matching.top_matches_for_job(job.id, 10)

        assert [r["student"].id for r in results] == [stored.id, computed.id]

    def test_limit_respected(self, matching, make_student, make_job):
        job = make_job(skills=["Python"])
        for _ in range(4):
            make_student(skills=["Python"])

        assert len(matching.top_matches_for_job(job.id, 2)) == 2

    def test_unknown_job_returns_empty(self, matching, make_student):
        make_student(skills=["Python"])
        assert matching.top_matches_for_job(42, 10) == []


class TestCalculate:
    """Tests for the caller-supplied score upsert."""

    def test_upsert_twice_keeps_one_entry(self, matching, storage):
        first = matching.calculate(1, 2, 40)
        second = matching.calculate(1, 2, 75)

        assert storage.match_scores.count() == 1
        assert second.id == first.id
        assert matching.get_score(1, 2).score == 75

    def test_score_is_trusted_verbatim(self, matching):
        """Out-of-range and unknown ids are stored as given."""
        record = matching.calculate(500, 600, 250.5)
        assert record.score == 250.5

    def test_pairs_are_ordered(self, matching, storage):
        matching.calculate(1, 2, 10)
        matching.calculate(2, 1, 20)

        assert storage.match_scores.count() == 2
        assert matching.get_score(1, 2).score == 10
        assert matching.get_score(2, 1).score == 20


class TestInjectedStore:
    """The service works against whatever store the repository was given."""

    def test_uses_injected_store(self):
        store = InMemoryMatchScoreStore()
        storage = MemStorage(match_scores=store, seed_resources=False)
        MatchingService(storage).calculate(1, 1, 55)

        assert store.get(1, 1).score == 55
