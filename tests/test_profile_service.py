"""Tests for profile completion."""

from internlink.services.profile_service import TOTAL_FIELDS, calculate_profile_completion


FULL_PROFILE = {
    "university": "MIT",
    "degree": "BSc",
    "field_of_study": "Computer Science",
    "graduation_year": 2026,
    "resume_url": "https://example.com/cv.pdf",
    "linkedin_url": "https://linkedin.com/in/someone",
    "bio": "Aspiring engineer",
    "phone_number": "+1 555 0100",
    "location": "Boston",
    "skills": ["Python"],
    "experience": [{"company": "Acme"}],
    "projects": [{"name": "Compiler"}],
    "educations": [{"school": "MIT"}],
    "certifications": [{"name": "AWS"}],
}


class TestCalculateProfileCompletion:
    """Tests for calculate_profile_completion."""

    def test_fourteen_slots(self):
        assert TOTAL_FIELDS == 14

    def test_full_profile_is_100(self):
        assert calculate_profile_completion(FULL_PROFILE) == 100

    def test_empty_profile_is_0(self):
        assert calculate_profile_completion({}) == 0

    def test_skills_only(self):
        """1 of 14 rounds to 7."""
        assert calculate_profile_completion({"skills": ["Python"]}) == 7

    def test_empty_values_do_not_count(self):
        profile = {**FULL_PROFILE, "bio": "", "location": None, "projects": [], "certifications": []}
        # 10 of 14 = 71.4
        assert calculate_profile_completion(profile) == 71

    def test_half_rounds_up(self):
        """7 of 14 is exactly 50."""
        profile = {k: FULL_PROFILE[k] for k in ("university", "degree", "bio", "location", "skills", "projects", "experience")}
        assert calculate_profile_completion(profile) == 50

    def test_recomputed_on_update(self, make_student, storage):
        """Storage derives the percentage and ignores caller-supplied values."""
        student = make_student(skills=["Python"], profile_completion_percentage=99)
        assert student.profile_completion_percentage == 7

        updated = storage.update_student_profile(student.id, {"university": "MIT", "bio": "Hi"})
        # 3 of 14 = 21.4
        assert updated.profile_completion_percentage == 21
