"""
Profile Completion Estimator

Scores how "complete" a student profile is, 0-100.

14 equally weighted slots:
- 9 scalar fields, filled when truthy (non-empty, non-null)
- 5 collection fields, filled when the collection is non-empty

Recomputed by the storage layer on every student profile create/update.
The matching service uses it to order candidates that skills cannot separate.
"""

import math
from typing import Any, Mapping

SCALAR_FIELDS = (
    "university",
    "degree",
    "field_of_study",
    "graduation_year",
    "resume_url",
    "linkedin_url",
    "bio",
    "phone_number",
    "location",
)

COLLECTION_FIELDS = (
    "skills",
    "experience",
    "projects",
    "educations",
    "certifications",
)

TOTAL_FIELDS = len(SCALAR_FIELDS) + len(COLLECTION_FIELDS)


def calculate_profile_completion(profile: Mapping[str, Any]) -> int:
    """
    Compute completion percentage for a student profile.

    Args:
        profile: profile fields as a mapping (a partial mapping is fine,
                 missing keys count as empty)

    Returns:
        Integer between 0 and 100
    """
    completed = 0

    for field in SCALAR_FIELDS:
        if profile.get(field):
            completed += 1

    for field in COLLECTION_FIELDS:
        values = profile.get(field)
        if values and len(values) > 0:
            completed += 1

    # round half up
    return int(math.floor(100 * completed / TOTAL_FIELDS + 0.5))
