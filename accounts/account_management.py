"""
Account lifecycle: registration, admin access changes and password reset
"""
import logging

from django.contrib.auth.models import User
from django.db import transaction
from django.db.models import Q

from swifthire.exceptions import NotFound, Unauthorized, ValidationFailure

from .forms import RegistrationForm, SecurityQuestionResetForm, first_form_error
from .models import JobSeekerProfile, Role, SECURITY_QUESTIONS
from .roles import policy_for, policy_for_user, resolve_role

logger = logging.getLogger(__name__)

DEFAULT_COMPANY_DESCRIPTION = 'Please update your company profile.'
DEFAULT_COMPANY_LOCATION = 'TBD'


@transaction.atomic
def register_user(data):
    """
    Create a user account with its profile for the requested role.

    Employers must provide a company name; job seekers get an empty seeker
    profile. Roles that cannot self-register are created disabled.
    """
    form = RegistrationForm(data)
    if not form.is_valid():
        raise ValidationFailure(first_form_error(form))
    cleaned = form.cleaned_data

    if User.objects.filter(Q(username__iexact=cleaned['username']) | Q(email__iexact=cleaned['email'])).exists():
        raise ValidationFailure('Username or Email already in use.')

    role = Role(cleaned['role'])
    company_name = (cleaned.get('company_name') or '').strip()
    if role == Role.EMPLOYER and not company_name:
        raise ValidationFailure('Company name is required for employers.')

    policy = policy_for(role)
    user = User.objects.create_user(
        username=cleaned['username'],
        email=cleaned['email'],
        password=cleaned['password'],
        first_name=cleaned.get('first_name', ''),
        last_name=cleaned.get('last_name', ''),
    )
    user.is_active = policy.enabled_on_registration
    user.save(update_fields=['is_active'])

    profile = user.userprofile
    profile.role = role
    if cleaned.get('security_question'):
        profile.security_question = cleaned['security_question']
        profile.security_answer = cleaned['security_answer'].strip()

    if role == Role.EMPLOYER:
        profile.company_name = company_name
        profile.company_description = DEFAULT_COMPANY_DESCRIPTION
        profile.company_location = DEFAULT_COMPANY_LOCATION
    else:
        profile.clear_company()
    profile.save()

    if role == Role.JOB_SEEKER:
        JobSeekerProfile.objects.create(user=user)

    logger.info(f"Registered {role} account {user.username} (enabled={user.is_active})")
    return user


@transaction.atomic
def update_user_access(admin, user_id, role, enabled, company_name=None):
    """
    Admin-only change of a user's role and enabled flag.

    Company fields only survive while the role is EMPLOYER and the seeker
    profile only while the role is JOB_SEEKER.
    """
    if not policy_for_user(admin).can_moderate:
        raise Unauthorized('Access denied. Admin account required.')

    new_role = resolve_role(role)
    user = User.objects.select_related('userprofile').filter(pk=user_id).first()
    if user is None or new_role is None:
        raise NotFound('Error: User or Role not found.')

    profile = user.userprofile
    old_role = profile.role

    if new_role == Role.EMPLOYER:
        company_name = (company_name or profile.company_name or '').strip()
        if not company_name:
            raise ValidationFailure('Company name is required for employers.')
        profile.company_name = company_name
        profile.company_description = profile.company_description or DEFAULT_COMPANY_DESCRIPTION
        profile.company_location = profile.company_location or DEFAULT_COMPANY_LOCATION
    else:
        profile.clear_company()

    profile.role = new_role
    profile.save()

    if new_role == Role.JOB_SEEKER:
        JobSeekerProfile.objects.get_or_create(user=user)
    else:
        JobSeekerProfile.objects.filter(user=user).delete()

    user.is_active = bool(enabled)
    user.save(update_fields=['is_active'])

    logger.info(
        f"Admin {admin.username} changed user {user.username}: role {old_role} -> {new_role}, enabled={user.is_active}"
    )
    return user


def find_security_question(identifier):
    """Return ``(username, question_text)`` for a username or email."""
    identifier = (identifier or '').strip()
    user = User.objects.select_related('userprofile').filter(
        Q(username__iexact=identifier) | Q(email__iexact=identifier)
    ).first()
    if user is None:
        raise NotFound('No account found with that username or email.')

    question_key = user.userprofile.security_question
    if not question_key or question_key not in SECURITY_QUESTIONS:
        raise ValidationFailure('This account has no security question configured. Please contact support.')
    return user.username, SECURITY_QUESTIONS[question_key]


def reset_password_with_security_answer(data):
    form = SecurityQuestionResetForm(data)
    if not form.is_valid():
        raise ValidationFailure(first_form_error(form))
    cleaned = form.cleaned_data

    user = User.objects.select_related('userprofile').filter(username=cleaned['username'].strip()).first()
    if user is None:
        raise NotFound('No account found with that username or email.')

    expected = (user.userprofile.security_answer or '').strip().lower()
    if not expected or cleaned['security_answer'].strip().lower() != expected:
        logger.warning(f"Failed security answer for {user.username}")
        raise Unauthorized('Incorrect security answer.')

    user.set_password(cleaned['new_password'])
    user.save(update_fields=['password'])
    logger.info(f"Password reset via security question for {user.username}")
    return user
