"""
Application lifecycle: applying, review decisions, the exam and offer
sub-flows, and direct contact of candidates by premium employers.

Every operation receives the acting user explicitly. Refusals raise a
``WorkflowError`` subclass and leave the application untouched.
"""
import datetime
import json
import logging

from django.contrib.auth.models import User
from django.db import IntegrityError, transaction

from accounts.completeness import PROFILE_COMPLETION_THRESHOLD, meets_application_threshold
from accounts.models import JobSeekerProfile, Role
from accounts.roles import policy_for_user, role_of
from accounts.tiers import capabilities_for_user
from jobs.models import JobPost
from swifthire.exceptions import NotFound, Unauthorized, ValidationFailure

from .models import Application, ApplicationStatus
from .notification_utils import NotificationManager
from .security import validate_employer_access, validate_seeker_access

logger = logging.getLogger(__name__)

Status = Application.Status

STATUS_TRANSITIONS = {
    Status.APPLIED: {Status.REVIEWED, Status.ACCEPTED, Status.REJECTED},
    Status.REVIEWED: {Status.ACCEPTED, Status.REJECTED},
    Status.ACCEPTED: {Status.REJECTED, Status.HIRED},
    Status.REJECTED: set(),
    Status.HIRED: set(),
}

EXAM_OPEN_STATUSES = (Status.APPLIED, Status.REVIEWED)


def can_transition(current, target):
    return target in STATUS_TRANSITIONS.get(current, set())


def _record_status(application, new_status, changed_by):
    old_status = application.status
    application.status = new_status
    ApplicationStatus.objects.create(
        application=application,
        old_status=old_status,
        status=new_status,
        changed_by=changed_by,
    )
    logger.info(f"Application {application.pk}: {old_status} -> {new_status} by {changed_by.username}")


def _append(application, message):
    if message is not None:
        application.messages = application.messages.append(message)


def _parse_status(value):
    try:
        return Status(str(value or '').strip().upper())
    except ValueError:
        raise ValidationFailure(f"Invalid application status: {value}")


def active_application_count(seeker):
    return Application.objects.filter(seeker=seeker).exclude(status__in=Application.CLOSED_STATUSES).count()


@transaction.atomic
def apply_for_job(seeker, job_id):
    """Create an application for ``seeker`` on an active job."""
    if not policy_for_user(seeker).can_apply:
        raise Unauthorized('Only Job Seekers can apply for jobs.')

    job = JobPost.objects.active().select_related('posted_by__userprofile').filter(pk=job_id).first()
    if job is None:
        raise NotFound('Job not found or is no longer active.')

    profile = JobSeekerProfile.objects.filter(user=seeker).first()
    if not meets_application_threshold(profile):
        raise ValidationFailure(
            f"Your profile is incomplete! Please update your profile to at least "
            f"{PROFILE_COMPLETION_THRESHOLD}% to apply."
        )

    if Application.objects.filter(seeker=seeker, job=job).exists():
        raise ValidationFailure('You have already applied to this job.')

    limit = capabilities_for_user(seeker).max_active_applications
    if limit is not None:
        active_count = active_application_count(seeker)
        if active_count >= limit:
            raise ValidationFailure(
                f"Application Limit Reached! You have {active_count} active applications. "
                f"Upgrade to Premium for unlimited."
            )

    application = Application(seeker=seeker, job=job, status=Status.APPLIED)
    _append(application, NotificationManager.application_received_message(application))
    try:
        with transaction.atomic():
            application.save()
    except IntegrityError:
        raise ValidationFailure('You have already applied to this job.')

    logger.info(f"Seeker {seeker.username} applied to job {job.pk}")
    return application


@transaction.atomic
def assign_exam(employer, application_id, questions, answers_template=None):
    application = validate_employer_access(employer, application_id, for_update=True)
    questions = (questions or '').strip()
    if not questions:
        raise ValidationFailure('Exam questions cannot be empty.')
    if application.status not in EXAM_OPEN_STATUSES:
        raise ValidationFailure('An exam can only be assigned while the application is under review.')

    application.exam_questions = questions
    application.exam_answers = (answers_template or '').strip() or None
    application.exam_submitted = False
    application.exam_score = 0
    application.save()

    logger.info(f"Exam assigned on application {application.pk} by {employer.username}")
    return application


def _parse_exam_answers(answers):
    if isinstance(answers, str):
        try:
            answers = json.loads(answers)
        except json.JSONDecodeError:
            answers = None
    if not isinstance(answers, list) or not all(isinstance(item, dict) for item in answers):
        raise ValidationFailure(
            'Submission failed: Your answer format is invalid JSON. Expected a list of answer objects.'
        )
    return answers


@transaction.atomic
def submit_exam(seeker, application_id, answers):
    """
    Record the seeker's exam answers. An exam is submitted at most once; a
    submitted exam refuses any further payload.
    """
    application = validate_seeker_access(seeker, application_id, for_update=True)
    if application.exam_submitted:
        raise ValidationFailure('Exam already submitted.')
    if not application.has_exam:
        raise ValidationFailure('No exam has been assigned to this application.')
    if answers is None or (isinstance(answers, str) and not answers.strip()):
        raise ValidationFailure('Answers cannot be empty.')
    if application.status not in EXAM_OPEN_STATUSES:
        raise ValidationFailure('This application is no longer open for exam submission.')

    parsed = _parse_exam_answers(answers)
    application.exam_answers = json.dumps(parsed)
    application.exam_submitted = True
    if application.status != Status.REVIEWED:
        _record_status(application, Status.REVIEWED, seeker)
    _append(application, NotificationManager.exam_submitted_message(application))
    application.save()

    return application


@transaction.atomic
def score_exam(employer, application_id, score):
    application = validate_employer_access(employer, application_id, for_update=True)
    if not application.exam_submitted:
        raise ValidationFailure('Cannot score unsubmitted exam.')
    try:
        score = int(score)
    except (TypeError, ValueError):
        raise ValidationFailure('Exam score must be a whole number.')
    if not 0 <= score <= 100:
        raise ValidationFailure('Exam score must be between 0 and 100.')

    application.exam_score = score
    application.save(update_fields=['exam_score', 'updated_at'])
    logger.info(f"Exam on application {application.pk} scored {score}")
    return application


@transaction.atomic
def update_status(employer, application_id, new_status):
    """
    Employer decision on an application. HIRED is only reachable through
    ``send_offer``.
    """
    application = validate_employer_access(employer, application_id, for_update=True)
    new_status = _parse_status(new_status)

    if new_status == Status.HIRED:
        raise ValidationFailure('Cannot set status to HIRED manually without sending a final Job Offer first.')
    if new_status == Status.ACCEPTED and application.exam_pending:
        raise ValidationFailure('Cannot accept: The applicant has not yet submitted the required exam.')
    if not can_transition(application.status, new_status):
        raise ValidationFailure(
            f"Cannot change application status from {application.status} to {new_status}."
        )

    _record_status(application, new_status, employer)
    _append(application, NotificationManager.status_change_message(application, new_status))
    application.save()
    return application


def _parse_start_date(value):
    if isinstance(value, datetime.date):
        return value
    try:
        return datetime.date.fromisoformat(str(value or '').strip())
    except ValueError:
        raise ValidationFailure('Offer start date must be a valid date (YYYY-MM-DD).')


@transaction.atomic
def send_offer(employer, application_id, start_date, start_time=None, location=None, required_papers=None):
    """Attach a final offer to an ACCEPTED application and mark it HIRED."""
    application = validate_employer_access(employer, application_id, for_update=True)
    if application.status != Status.ACCEPTED:
        raise ValidationFailure("Offer can only be set for an 'ACCEPTED' application.")

    application.offer_start_date = _parse_start_date(start_date)
    application.offer_start_time = (start_time or '').strip() or None
    application.offer_location = (location or '').strip() or None
    application.offer_required_papers = (required_papers or '').strip() or None

    _record_status(application, Status.HIRED, employer)
    _append(application, NotificationManager.status_change_message(application, Status.HIRED))
    application.save()
    return application


@transaction.atomic
def contact_candidate(employer, seeker_id):
    """
    Open a conversation with a candidate. Reuses any existing application
    between the candidate and the employer's jobs, otherwise creates one on
    the employer's most recent active job.

    Returns ``(application, created)``.
    """
    if role_of(employer) != Role.EMPLOYER:
        raise Unauthorized('Access denied. Employer account required.')
    if not capabilities_for_user(employer).direct_candidate_contact:
        raise Unauthorized('Direct contact is a Premium feature.')

    seeker = User.objects.filter(pk=seeker_id, userprofile__role=Role.JOB_SEEKER).first()
    if seeker is None:
        raise NotFound('Candidate not found.')

    existing = (
        Application.objects.filter(seeker=seeker, job__in=JobPost.objects.of_company(employer))
        .order_by('-applied_at')
        .first()
    )
    if existing is not None:
        return existing, False

    job = JobPost.objects.active().owned_by(employer).order_by('-posted_at').first()
    if job is None:
        raise ValidationFailure('You need at least one Active job post to initiate contact.')

    application = Application(seeker=seeker, job=job, status=Status.REVIEWED)
    _append(application, NotificationManager.direct_contact_message(application))
    application.save()
    ApplicationStatus.objects.create(
        application=application, old_status=None, status=Status.REVIEWED, changed_by=employer,
    )

    logger.info(f"Employer {employer.username} contacted candidate {seeker.username} via job {job.pk}")
    return application, True
