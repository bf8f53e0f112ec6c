"""
Seeker and company profile editing
"""
import logging

from django.db import transaction
from django.forms.models import model_to_dict

from swifthire.exceptions import NotFound, Unauthorized, ValidationFailure

from . import storage
from .forms import (
    CompanyProfileForm, EducationForm, JobSeekerProfileForm, WorkExperienceForm, first_form_error,
)
from .models import JobSeekerProfile, Role
from .profile_history import Education, WorkExperience
from .roles import role_of

logger = logging.getLogger(__name__)


def _require_role(user, role, message):
    if role_of(user) != role:
        raise Unauthorized(message)


def get_or_create_seeker_profile(seeker):
    _require_role(seeker, Role.JOB_SEEKER, 'Access denied. Job seeker account required.')
    profile, created = JobSeekerProfile.objects.get_or_create(user=seeker)
    if created:
        logger.info(f"Created seeker profile for {seeker.username}")
    return profile


@transaction.atomic
def update_seeker_profile(seeker, data, resume_file=None, picture_file=None):
    """
    Apply a profile edit. Fields missing from ``data`` keep their current values.

    Completeness is re-scored as part of saving the profile.
    """
    profile = get_or_create_seeker_profile(seeker)
    user_profile = seeker.userprofile

    merged = model_to_dict(profile, fields=JobSeekerProfileForm._meta.fields)
    merged['full_name'] = seeker.get_full_name()
    merged['phone_number'] = user_profile.phone_number or ''
    merged.update({k: v for k, v in data.items() if k in merged})
    merged = {k: ('' if v is None else v) for k, v in merged.items()}

    form = JobSeekerProfileForm(merged, instance=profile)
    if not form.is_valid():
        raise ValidationFailure(first_form_error(form))

    full_name = form.cleaned_data.get('full_name', '').strip()
    if full_name:
        first, _, last = full_name.partition(' ')
        seeker.first_name = first
        seeker.last_name = last.strip()
        seeker.save(update_fields=['first_name', 'last_name'])

    with storage.upload_session() as uploads:
        if picture_file is not None:
            user_profile.profile_picture_filename = uploads.replace(
                picture_file, storage.PROFILE_PICTURE, user_profile.profile_picture_filename, owner_id=seeker.pk,
            )

        user_profile.phone_number = form.cleaned_data.get('phone_number', '').strip() or None
        user_profile.save()

        profile = form.save(commit=False)
        if not profile.job_type:
            profile.job_type = None
        if resume_file is not None:
            profile.resume_filename = uploads.replace(
                resume_file, storage.RESUME, profile.resume_filename, owner_id=seeker.pk,
            )
        profile.save()

    logger.info(f"Seeker {seeker.username} updated profile (completeness {profile.completeness_score}%)")
    return profile


@transaction.atomic
def upload_resume(seeker, resume_file):
    profile = get_or_create_seeker_profile(seeker)
    with storage.upload_session() as uploads:
        profile.resume_filename = uploads.replace(
            resume_file, storage.RESUME, profile.resume_filename, owner_id=seeker.pk,
        )
        profile.save()
    logger.info(f"Seeker {seeker.username} uploaded a resume")
    return profile


@transaction.atomic
def add_work_experience(seeker, data):
    form = WorkExperienceForm(data)
    if not form.is_valid():
        raise ValidationFailure(first_form_error(form))
    cleaned = form.cleaned_data

    profile = get_or_create_seeker_profile(seeker)
    entries, entry = profile.work_experience_entries.append(WorkExperience(
        id='',
        job_title=cleaned['job_title'].strip(),
        company_name=cleaned['company_name'].strip(),
        description=cleaned.get('description', '').strip(),
        start_date=cleaned['start_date'].isoformat() if cleaned.get('start_date') else None,
        end_date=cleaned['end_date'].isoformat() if cleaned.get('end_date') else None,
    ))
    profile.work_experience_entries = entries
    profile.save()
    return entry, profile


@transaction.atomic
def remove_work_experience(seeker, entry_id):
    profile = get_or_create_seeker_profile(seeker)
    entries = profile.work_experience_entries
    if entries.get(entry_id) is None:
        raise NotFound('Work experience entry not found.')
    profile.work_experience_entries = entries.remove(entry_id)
    profile.save()
    return profile


@transaction.atomic
def add_education(seeker, data):
    form = EducationForm(data)
    if not form.is_valid():
        raise ValidationFailure(first_form_error(form))
    cleaned = form.cleaned_data

    profile = get_or_create_seeker_profile(seeker)
    entries, entry = profile.education_entries.append(Education(
        id='',
        institution_name=cleaned['institution_name'].strip(),
        degree=cleaned['degree'].strip(),
        field_of_study=cleaned.get('field_of_study', '').strip(),
        start_year=cleaned.get('start_year'),
        end_year=cleaned.get('end_year'),
    ))
    profile.education_entries = entries
    profile.save()
    return entry, profile


@transaction.atomic
def remove_education(seeker, entry_id):
    profile = get_or_create_seeker_profile(seeker)
    entries = profile.education_entries
    if entries.get(entry_id) is None:
        raise NotFound('Education entry not found.')
    profile.education_entries = entries.remove(entry_id)
    profile.save()
    return profile


@transaction.atomic
def update_company_profile(employer, data, logo_file=None):
    _require_role(employer, Role.EMPLOYER, 'Access denied. Employer account required.')
    form = CompanyProfileForm(data)
    if not form.is_valid():
        raise ValidationFailure(first_form_error(form))

    profile = employer.userprofile
    profile.company_name = form.cleaned_data['company_name'].strip()
    profile.company_description = form.cleaned_data.get('company_description', '').strip()
    profile.company_location = form.cleaned_data.get('company_location', '').strip()
    with storage.upload_session() as uploads:
        if logo_file is not None:
            profile.company_logo_filename = uploads.replace(
                logo_file, storage.COMPANY_LOGO, profile.company_logo_filename,
            )
        profile.save()

    logger.info(f"Employer {employer.username} updated company profile for {profile.company_name}")
    return profile
