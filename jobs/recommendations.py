"""
Job recommendations for premium seekers with a complete profile
"""
import re

from accounts.completeness import meets_application_threshold
from accounts.tiers import capabilities_for_user

from .models import JobPost

_KEYWORD_CLEANUP_RE = re.compile(r"[^a-zA-Z0-9 ]")


def recommendation_terms(profile):
    """Search terms built from the seeker's skills and current title."""
    raw_terms = (profile.skills or '').split(',') + [profile.current_title or '']
    terms = []
    for raw in raw_terms:
        term = _KEYWORD_CLEANUP_RE.sub('', raw).strip()
        if term and term.lower() not in (t.lower() for t in terms):
            terms.append(term)
    return terms


def recommended_jobs(seeker, profile, limit=6):
    """
    Active jobs matching any skill or the title of the seeker, excluding
    jobs already applied to.

    Only paid seekers whose profile meets the application threshold get
    recommendations; everyone else gets an empty list.
    """
    if profile is None or not capabilities_for_user(seeker).is_paid or not meets_application_threshold(profile):
        return []

    matches = {}
    for term in recommendation_terms(profile):
        for job in JobPost.objects.search(keyword=term).exclude(applications__seeker=seeker):
            matches.setdefault(job.pk, job)

    jobs = sorted(matches.values(), key=lambda job: (not job.is_featured, -job.posted_at.timestamp()))
    return jobs[:limit]
