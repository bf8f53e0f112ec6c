import pytest
from decimal import Decimal

from accounts.models import Role, Tier
from accounts.roles import NO_ACCESS, policy_for, resolve_role
from accounts.tiers import (
    MAX_BASIC_ACTIVE_APPLICATIONS, MAX_BASIC_OPEN_JOB_POSTS, TIER_PRICES, capabilities_for, resolve_tier,
)


@pytest.mark.unit
@pytest.mark.parametrize('raw', [None, '', 'GOLD', 'basic ', 42])
def test_unknown_or_missing_tier_is_basic(raw):
    assert resolve_tier(raw) == Tier.BASIC


@pytest.mark.unit
def test_basic_capabilities_are_capped():
    caps = capabilities_for(Tier.BASIC)
    assert caps.is_paid is False
    assert caps.max_active_applications == MAX_BASIC_ACTIVE_APPLICATIONS == 10
    assert caps.max_open_job_posts == MAX_BASIC_OPEN_JOB_POSTS == 5
    assert not (caps.candidate_search_filters or caps.direct_candidate_contact or caps.ai_features)


@pytest.mark.unit
@pytest.mark.parametrize('tier', [Tier.PREMIUM, Tier.PRO, 'premium'])
def test_paid_tiers_unlock_everything(tier):
    caps = capabilities_for(tier)
    assert caps.is_paid
    assert caps.max_active_applications is None
    assert caps.max_open_job_posts is None
    assert caps.featured_listing and caps.ai_features and caps.direct_candidate_contact


@pytest.mark.unit
def test_tier_prices():
    assert TIER_PRICES[Tier.PREMIUM][0] == Decimal('9.99')
    assert TIER_PRICES[Tier.PRO] == (Decimal('49.99'), 'SwiftHire Pro Subscription (Monthly)')
    assert Tier.BASIC not in TIER_PRICES


@pytest.mark.unit
def test_role_policies():
    assert policy_for(Role.JOB_SEEKER).can_apply
    assert not policy_for(Role.EMPLOYER).can_apply
    assert policy_for(Role.EMPLOYER).can_post_jobs
    assert policy_for(Role.ADMIN).can_moderate
    assert policy_for(Role.ADMIN).enabled_on_registration is False
    assert policy_for('nonsense') is NO_ACCESS
    assert resolve_role('employer') == Role.EMPLOYER
    assert resolve_role('MANAGER') is None
