"""
Profile completeness scoring for job seekers.

The score is a weighted sum over the presence of profile fields, capped at 100.
"""
from .profile_history import EducationList, WorkExperienceList

PROFILE_COMPLETION_THRESHOLD = 70

FIELD_WEIGHTS = (
    ('current_title', 10),
    ('profile_headline', 10),
    ('city', 10),
    ('skills', 20),
    ('resume_filename', 20),
)
PHONE_WEIGHT = 10
WORK_EXPERIENCE_WEIGHT = 10
EDUCATION_WEIGHT = 10


def _has_text(value):
    return value is not None and str(value).strip() != ''


def calculate_completeness(profile, phone_number=None):
    """Return the 0-100 completeness score for a seeker profile."""
    score = 0
    for field, weight in FIELD_WEIGHTS:
        if _has_text(getattr(profile, field, None)):
            score += weight

    if _has_text(phone_number):
        score += PHONE_WEIGHT
    if WorkExperienceList.from_json(profile.work_experience):
        score += WORK_EXPERIENCE_WEIGHT
    if EducationList.from_json(profile.education):
        score += EDUCATION_WEIGHT

    return min(score, 100)


def meets_application_threshold(profile):
    return profile is not None and profile.completeness_score >= PROFILE_COMPLETION_THRESHOLD
