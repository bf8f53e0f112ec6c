"""
Job posting lifecycle: creation, moderation, release of held postings,
admin edits and deletion.

Every operation takes the acting user explicitly and raises a
``WorkflowError`` subclass when the action is refused.
"""
import logging
from dataclasses import dataclass

from django.db import transaction
from django.forms.models import model_to_dict

from accounts.forms import first_form_error
from accounts.models import Role
from accounts.roles import policy_for_user, role_of
from accounts.tiers import capabilities_for_user
from swifthire.exceptions import NotFound, Unauthorized, ValidationFailure

from .forms import EDITABLE_FIELDS, JobPostForm
from .models import JobPost

logger = logging.getLogger(__name__)

Status = JobPost.Status

JOB_STATUS_TRANSITIONS = {
    Status.PENDING_ADMIN: {Status.ACTIVE},
    Status.ON_HOLD: {Status.PENDING_ADMIN},
    Status.ACTIVE: set(),
}

JOB_POSTED_MESSAGE = 'Job posted successfully and awaiting admin approval!'
JOB_ON_HOLD_MESSAGE = (
    'Job saved but placed ON HOLD. You have reached the 5-job limit for Basic accounts. '
    'Upgrade to Premium to activate this job.'
)


@dataclass(frozen=True)
class JobPostResult:
    job: JobPost
    held: bool
    message: str


def can_transition(current, target):
    return target in JOB_STATUS_TRANSITIONS.get(current, set())


def _transition(job, target):
    if not can_transition(job.status, target):
        raise ValidationFailure(
            f"Job ID {job.pk} cannot move from {job.get_status_display()} to {Status(target).label}."
        )
    job.status = target


def _require_admin(user):
    if not policy_for_user(user).can_moderate:
        raise Unauthorized('Access denied. Admin account required.')


def _get_job(job_id, message='Job not found.'):
    job = JobPost.objects.filter(pk=job_id).first()
    if job is None:
        raise NotFound(message)
    return job


def _clean_input(data):
    return {key: value.strip() if isinstance(value, str) else value for key, value in data.items()}


@transaction.atomic
def create_job_posting(employer, data):
    """
    Create a posting for ``employer``.

    Basic employers at their open-posting cap still get the posting saved,
    but ON_HOLD; that case is reported through ``JobPostResult.held``.
    """
    if role_of(employer) != Role.EMPLOYER:
        raise Unauthorized('Access denied. Employer account required.')
    if not (employer.userprofile.company_name or '').strip():
        raise ValidationFailure('Cannot post job: Your account is not associated with a company.')

    form = JobPostForm(_clean_input(data))
    if not form.is_valid():
        raise ValidationFailure(first_form_error(form))

    capabilities = capabilities_for_user(employer)
    job = form.save(commit=False)
    job.posted_by = employer
    job.is_featured = capabilities.featured_listing

    held = False
    limit = capabilities.max_open_job_posts
    if limit is not None and JobPost.objects.open_for(employer).count() >= limit:
        job.status = Status.ON_HOLD
        held = True
    else:
        job.status = Status.PENDING_ADMIN
    job.save()

    if held:
        logger.warning(f"Job {job.pk} from {employer.username} placed ON_HOLD: Basic limit of {limit} reached")
        return JobPostResult(job=job, held=True, message=JOB_ON_HOLD_MESSAGE)

    logger.info(f"Job {job.pk} '{job.title}' posted by {employer.username}, awaiting approval")
    return JobPostResult(job=job, held=False, message=JOB_POSTED_MESSAGE)


@transaction.atomic
def approve_job(admin, job_id):
    _require_admin(admin)
    job = _get_job(job_id)
    _transition(job, Status.ACTIVE)
    job.save(update_fields=['status', 'updated_at'])
    logger.info(f"Admin {admin.username} approved job {job.pk}")
    return job


@transaction.atomic
def release_held_jobs(employer, manual=True):
    """
    Move every ON_HOLD posting of ``employer`` back to PENDING_ADMIN and
    mark it featured.

    ``manual`` releases require a paid tier; the checkout flow calls this
    right after applying the new tier.
    """
    if role_of(employer) != Role.EMPLOYER:
        raise Unauthorized('Access denied. Employer account required.')
    if manual and not capabilities_for_user(employer).is_paid:
        raise Unauthorized('You must be Premium to release held jobs.')

    released = 0
    for job in JobPost.objects.held_for(employer).select_for_update():
        _transition(job, Status.PENDING_ADMIN)
        job.is_featured = True
        job.save(update_fields=['status', 'is_featured', 'updated_at'])
        released += 1

    logger.info(f"Released {released} held job(s) for {employer.username} (manual={manual})")
    return released


def delete_job(admin, job_id):
    """
    Delete a posting and every application that references it.

    Both deletes run in one transaction; on failure nothing is removed.
    """
    _require_admin(admin)
    job = _get_job(job_id)
    try:
        with transaction.atomic():
            _, deleted = job.applications.all().delete()
            removed_applications = deleted.get('applications.Application', 0)
            job.delete()
    except Exception as e:
        logger.exception(f"Failed to delete job {job_id}")
        raise ValidationFailure(f"Could not delete job. An unexpected error occurred: {e}")

    logger.info(f"Admin {admin.username} deleted job {job_id} and {removed_applications} application(s)")
    return removed_applications


@transaction.atomic
def edit_job(admin, job_id, data):
    """Admin edit limited to the whitelisted fields; status is never touched."""
    _require_admin(admin)
    job = _get_job(job_id, 'Job not found. Could not update.')

    merged = model_to_dict(job, fields=JobPostForm._meta.fields)
    merged.update({key: value for key, value in _clean_input(data).items() if key in EDITABLE_FIELDS})
    merged = {key: ('' if value is None else value) for key, value in merged.items()}

    form = JobPostForm(merged, instance=job)
    if not form.is_valid():
        raise ValidationFailure(first_form_error(form))
    job = form.save()

    logger.info(f"Admin {admin.username} edited job {job.pk}")
    return job
