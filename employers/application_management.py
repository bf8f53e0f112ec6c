"""
Application management queries for employers
"""
import logging
from datetime import timedelta

from django.db.models import Count, Q
from django.utils import timezone

from applications.models import Application
from jobs.models import JobPost
from swifthire.exceptions import NotFound

logger = logging.getLogger(__name__)

DATE_RANGES = {
    '24h': timedelta(hours=24),
    '7d': timedelta(days=7),
    '30d': timedelta(days=30),
}


def company_applications(employer):
    """Applications on any job posted under the employer's company."""
    company = employer.userprofile.company_name
    return (
        Application.objects.filter(job__posted_by__userprofile__company_name=company)
        .select_related('job__posted_by__userprofile', 'seeker')
    )


def filter_applications(employer, status=None, job_id=None, date_range=None, search=None):
    """
    Employer application list with optional filters: status, job, recent
    date range and a search over the applicant's name or the job title.
    """
    applications = company_applications(employer)

    if status and status != 'all':
        applications = applications.filter(status=status.upper())
    if job_id:
        applications = applications.filter(job_id=job_id)
    if date_range in DATE_RANGES:
        applications = applications.filter(applied_at__gte=timezone.now() - DATE_RANGES[date_range])
    if search:
        applications = applications.filter(
            Q(seeker__first_name__icontains=search)
            | Q(seeker__last_name__icontains=search)
            | Q(job__title__icontains=search)
        )
    return applications.order_by('-applied_at')


def job_applicants(employer, job_id):
    job = JobPost.objects.of_company(employer).filter(pk=job_id).first()
    if job is None:
        raise NotFound('Job not found.')
    return job, job.applications.select_related('seeker', 'job__posted_by__userprofile').order_by('-applied_at')


def dashboard_statistics(employer):
    jobs = JobPost.objects.owned_by(employer)
    job_counts = {row['status']: row['total'] for row in jobs.order_by().values('status').annotate(total=Count('id'))}
    applications = company_applications(employer)
    application_counts = {
        row['status']: row['total'] for row in applications.order_by().values('status').annotate(total=Count('id'))
    }

    return {
        'total_jobs': sum(job_counts.values()),
        'jobs_by_status': {status: job_counts.get(status, 0) for status in JobPost.Status.values},
        'total_applications': sum(application_counts.values()),
        'applications_by_status': {
            status: application_counts.get(status, 0) for status in Application.Status.values
        },
        'jobs': [
            {
                'id': job.pk,
                'title': job.title,
                'status': job.status,
                'is_featured': job.is_featured,
                'applicant_count': job.applicant_count,
            }
            for job in jobs.annotate(applicant_count=Count('applications')).order_by('-posted_at')
        ],
    }
