"""
Subscription tier policy.

Maps a stored ``premium_tier`` value to the features the account may use.
Unknown or missing tiers are treated as BASIC.
"""
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from .models import Tier

MAX_BASIC_ACTIVE_APPLICATIONS = 10
MAX_BASIC_OPEN_JOB_POSTS = 5

TIER_PRICES = {
    Tier.PREMIUM: (Decimal('9.99'), 'SwiftHire Premium Subscription (Monthly)'),
    Tier.PRO: (Decimal('49.99'), 'SwiftHire Pro Subscription (Monthly)'),
}


@dataclass(frozen=True)
class TierCapabilities:
    tier: str
    unlimited_applications: bool
    unlimited_job_posts: bool
    candidate_search_filters: bool
    direct_candidate_contact: bool
    ai_features: bool
    featured_listing: bool

    @property
    def is_paid(self):
        return self.tier != Tier.BASIC

    @property
    def max_active_applications(self) -> Optional[int]:
        return None if self.unlimited_applications else MAX_BASIC_ACTIVE_APPLICATIONS

    @property
    def max_open_job_posts(self) -> Optional[int]:
        return None if self.unlimited_job_posts else MAX_BASIC_OPEN_JOB_POSTS


_PAID = dict(
    unlimited_applications=True,
    unlimited_job_posts=True,
    candidate_search_filters=True,
    direct_candidate_contact=True,
    ai_features=True,
    featured_listing=True,
)

_CAPABILITIES = {
    Tier.BASIC: TierCapabilities(
        tier=Tier.BASIC,
        unlimited_applications=False,
        unlimited_job_posts=False,
        candidate_search_filters=False,
        direct_candidate_contact=False,
        ai_features=False,
        featured_listing=False,
    ),
    Tier.PREMIUM: TierCapabilities(tier=Tier.PREMIUM, **_PAID),
    Tier.PRO: TierCapabilities(tier=Tier.PRO, **_PAID),
}


def resolve_tier(value) -> Tier:
    if value is None:
        return Tier.BASIC
    try:
        return Tier(str(value).strip().upper())
    except ValueError:
        return Tier.BASIC


def capabilities_for(value) -> TierCapabilities:
    return _CAPABILITIES[resolve_tier(value)]


def capabilities_for_user(user) -> TierCapabilities:
    profile = getattr(user, 'userprofile', None)
    return capabilities_for(profile.premium_tier if profile is not None else None)


def is_premium(user):
    return capabilities_for_user(user).is_paid
