"""
Mock premium checkout. No payment is taken: completing a checkout applies the
tier and its side effects directly.
"""
import logging
import uuid

from django.db import transaction

from jobs.lifecycle import release_held_jobs
from swifthire.exceptions import ValidationFailure

from .models import JobSeekerProfile, Role, Tier
from .roles import role_of
from .tiers import TIER_PRICES, capabilities_for_user

logger = logging.getLogger(__name__)


def _paid_tier(tier):
    try:
        tier = Tier(str(tier or '').strip().upper())
    except ValueError:
        raise ValidationFailure('Invalid subscription tier selected.')
    if tier not in TIER_PRICES:
        raise ValidationFailure('Invalid subscription tier selected.')
    return tier


def available_plans(user):
    current = capabilities_for_user(user)
    return {
        'current_tier': current.tier,
        'plans': [
            {'tier': tier.value, 'amount': str(amount), 'description': description}
            for tier, (amount, description) in TIER_PRICES.items()
        ],
    }


def start_checkout(user, tier):
    tier = _paid_tier(tier)
    amount, description = TIER_PRICES[tier]
    payment_id = f"mock_{uuid.uuid4().hex[:24]}"
    logger.info(f"Checkout {payment_id} started by {user.username} for {tier}")
    return {
        'tier': tier.value,
        'amount': str(amount),
        'description': description,
        'payment_id': payment_id,
    }


@transaction.atomic
def complete_checkout(user, tier):
    """
    Apply ``tier`` to ``user``.

    Employers get their held postings released for approval; job seekers get
    a featured profile. Returns the user-facing confirmation message.
    """
    tier = _paid_tier(tier)
    profile = user.userprofile
    profile.premium_tier = tier
    profile.save(update_fields=['premium_tier', 'updated_at'])

    message = f"Congratulations! Your account has been successfully upgraded to the {tier.value} tier."
    role = role_of(user)
    if role == Role.EMPLOYER:
        released = release_held_jobs(user, manual=False)
        if released:
            message += f" {released} previously held job(s) have been submitted for Admin approval."
    elif role == Role.JOB_SEEKER:
        seeker_profile, _ = JobSeekerProfile.objects.get_or_create(user=user)
        seeker_profile.is_featured = True
        seeker_profile.save(update_fields=['is_featured', 'updated_at'])

    logger.info(f"{user.username} upgraded to {tier}")
    return message
