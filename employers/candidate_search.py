"""
Candidate search for employers. Filters are a paid feature; Basic employers
get the unfiltered list together with an upgrade notice.
"""
import logging

from accounts.models import JobSeekerProfile, Role
from accounts.roles import role_of
from accounts.tiers import capabilities_for_user
from swifthire.exceptions import NotFound, Unauthorized

logger = logging.getLogger(__name__)

FILTERS_REQUIRE_PREMIUM = 'Advanced candidate search filters require a Premium subscription.'


def _require_employer(employer):
    if role_of(employer) != Role.EMPLOYER:
        raise Unauthorized('Access denied. Employer account required.')


def search_candidates(employer, skills=None, city=None, title=None):
    """
    Return ``(profiles, notice)``; featured candidates come first, then the
    most recently created profiles.
    """
    _require_employer(employer)
    profiles = (
        JobSeekerProfile.objects.filter(user__userprofile__role=Role.JOB_SEEKER, user__is_active=True)
        .select_related('user__userprofile')
        .order_by('-is_featured', '-id')
    )

    filters = {
        'skills__icontains': (skills or '').strip(),
        'city__icontains': (city or '').strip(),
        'current_title__icontains': (title or '').strip(),
    }
    filters = {lookup: value for lookup, value in filters.items() if value}
    if not filters:
        return profiles, None

    if not capabilities_for_user(employer).candidate_search_filters:
        logger.info(f"Ignoring candidate filters for Basic employer {employer.username}")
        return profiles, FILTERS_REQUIRE_PREMIUM

    return profiles.filter(**filters), None


def candidate_detail(employer, seeker_id):
    _require_employer(employer)
    profile = (
        JobSeekerProfile.objects.select_related('user__userprofile')
        .filter(user_id=seeker_id, user__userprofile__role=Role.JOB_SEEKER)
        .first()
    )
    if profile is None:
        raise NotFound('Candidate not found.')
    return profile
