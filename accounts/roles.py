"""
Role policy: what each account role is allowed to do.
"""
from dataclasses import dataclass
from typing import Optional

from .models import Role

SUPPORT_CHANNEL_SEEKER_PROFILE = 'seeker_profile'
SUPPORT_CHANNEL_USER = 'user'


@dataclass(frozen=True)
class RolePolicy:
    role: str
    can_apply: bool
    can_post_jobs: bool
    can_moderate: bool
    support_channel: Optional[str]
    enabled_on_registration: bool


ROLE_POLICIES = {
    Role.ADMIN: RolePolicy(
        role=Role.ADMIN,
        can_apply=False,
        can_post_jobs=False,
        can_moderate=True,
        support_channel=None,
        enabled_on_registration=False,
    ),
    Role.EMPLOYER: RolePolicy(
        role=Role.EMPLOYER,
        can_apply=False,
        can_post_jobs=True,
        can_moderate=False,
        support_channel=SUPPORT_CHANNEL_USER,
        enabled_on_registration=True,
    ),
    Role.JOB_SEEKER: RolePolicy(
        role=Role.JOB_SEEKER,
        can_apply=True,
        can_post_jobs=False,
        can_moderate=False,
        support_channel=SUPPORT_CHANNEL_SEEKER_PROFILE,
        enabled_on_registration=True,
    ),
}

NO_ACCESS = RolePolicy(
    role='',
    can_apply=False,
    can_post_jobs=False,
    can_moderate=False,
    support_channel=None,
    enabled_on_registration=False,
)


def resolve_role(value):
    """Return the ``Role`` for a raw value, or ``None`` when it is not a known role."""
    if value is None:
        return None
    try:
        return Role(str(value).strip().upper())
    except ValueError:
        return None


def policy_for(role) -> RolePolicy:
    resolved = resolve_role(role)
    return ROLE_POLICIES[resolved] if resolved is not None else NO_ACCESS


def policy_for_user(user) -> RolePolicy:
    if user is None or not user.is_authenticated:
        return NO_ACCESS
    profile = getattr(user, 'userprofile', None)
    if profile is None:
        return NO_ACCESS
    return policy_for(profile.role)


def role_of(user):
    profile = getattr(user, 'userprofile', None)
    return resolve_role(profile.role) if profile is not None else None
