"""
Platform statistics for the admin dashboard
"""
from django.contrib.auth.models import User
from django.utils import timezone

from accounts.models import Role
from applications.models import Application
from jobs.models import JobPost


def month_start(now=None):
    now = timezone.localtime(now or timezone.now())
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def monthly_statistics(now=None):
    """Counts for the current calendar month plus the moderation backlog."""
    since = month_start(now)
    new_users = User.objects.filter(date_joined__gte=since)
    return {
        'new_jobs': JobPost.objects.filter(posted_at__gte=since).count(),
        'new_seekers': new_users.filter(userprofile__role=Role.JOB_SEEKER).count(),
        'new_employers': new_users.filter(userprofile__role=Role.EMPLOYER).count(),
        'applications_this_month': Application.objects.filter(applied_at__gte=since).count(),
        'pending_jobs_count': JobPost.objects.filter(status=JobPost.Status.PENDING_ADMIN).count(),
    }
