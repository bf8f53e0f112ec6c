import logging

from django.contrib.auth.models import User
from django.core.paginator import Paginator
from django.db.models import Q
from django.http import JsonResponse
from django.views.decorators.http import require_http_methods, require_POST

from accounts import account_management
from accounts.decorators import admin_required
from accounts.serializers import UserProfileSerializer
from jobs import lifecycle as job_lifecycle
from jobs.models import JobPost
from jobs.serializers import JobPostSerializer
from messaging import support
from swifthire.exceptions import json_endpoint, read_payload

from .models import AdminActivity
from .statistics import monthly_statistics

logger = logging.getLogger(__name__)

TRUTHY = {'true', '1', 'yes', 'on'}


def _as_bool(value):
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in TRUTHY


def log_admin_activity(admin_user, activity_type, description, target_model=None, target_id=None, request=None):
    """Log admin activity for audit trail"""
    ip_address = None
    if request:
        ip_address = request.META.get('REMOTE_ADDR')

    AdminActivity.objects.create(
        admin_user=admin_user,
        activity_type=activity_type,
        description=description,
        target_model=target_model or '',
        target_id=target_id,
        ip_address=ip_address,
    )


@admin_required
@require_http_methods(["GET"])
def admin_dashboard(request):
    """Monthly platform statistics and the moderation backlog"""
    stats = monthly_statistics()
    pending = JobPost.objects.filter(status=JobPost.Status.PENDING_ADMIN).select_related('posted_by__userprofile')
    stats['pending_jobs'] = JobPostSerializer(pending.order_by('posted_at')[:10], many=True).data
    return JsonResponse(stats)


@admin_required
@require_http_methods(["GET"])
def job_management(request):
    jobs = JobPost.objects.select_related('posted_by__userprofile').order_by('-posted_at')
    status = request.GET.get('status')
    if status and status != 'all':
        jobs = jobs.filter(status=status.upper())

    page = Paginator(jobs, 20).get_page(request.GET.get('page'))
    return JsonResponse({
        'jobs': JobPostSerializer(page.object_list, many=True).data,
        'page': page.number,
        'num_pages': page.paginator.num_pages,
        'total': page.paginator.count,
    })


@admin_required
@require_POST
@json_endpoint
def approve_job(request, job_id):
    job = job_lifecycle.approve_job(request.user, job_id)
    log_admin_activity(request.user, 'job_action', f"Approved job '{job.title}'", 'JobPost', job.pk, request)
    return JsonResponse({'success': True, 'message': f"Job ID {job.pk} approved and set to ACTIVE.", 'status': job.status})


@admin_required
@require_POST
@json_endpoint
def delete_job(request, job_id):
    removed = job_lifecycle.delete_job(request.user, job_id)
    log_admin_activity(
        request.user, 'job_action', f"Deleted job {job_id} and {removed} application(s)", 'JobPost', job_id, request,
    )
    return JsonResponse({
        'success': True,
        'message': 'Job and all related applications deleted successfully.',
        'removed_applications': removed,
    })


@admin_required
@require_POST
@json_endpoint
def edit_job(request, job_id):
    job = job_lifecycle.edit_job(request.user, job_id, read_payload(request))
    log_admin_activity(request.user, 'job_action', f"Edited job '{job.title}'", 'JobPost', job.pk, request)
    return JsonResponse({'success': True, 'message': f"Job ID {job.pk} updated successfully.", 'job': JobPostSerializer(job).data})


@admin_required
@require_http_methods(["GET"])
def user_management(request):
    users = User.objects.select_related('userprofile').exclude(userprofile__isnull=True).order_by('-date_joined')
    role = request.GET.get('role')
    if role and role != 'all':
        users = users.filter(userprofile__role=role.upper())
    search = (request.GET.get('search') or '').strip()
    if search:
        users = users.filter(Q(username__icontains=search) | Q(email__icontains=search))

    page = Paginator(users, 20).get_page(request.GET.get('page'))
    return JsonResponse({
        'users': UserProfileSerializer([user.userprofile for user in page.object_list], many=True).data,
        'page': page.number,
        'num_pages': page.paginator.num_pages,
        'total': page.paginator.count,
    })


@admin_required
@require_POST
@json_endpoint
def update_user(request, user_id):
    """Change a user's role and enabled flag"""
    data = read_payload(request)
    user = account_management.update_user_access(
        request.user,
        user_id,
        role=data.get('role'),
        enabled=_as_bool(data.get('enabled')),
        company_name=data.get('company_name'),
    )
    log_admin_activity(
        request.user, 'user_action',
        f"Set {user.username} to {user.userprofile.role} (enabled={user.is_active})",
        'User', user.pk, request,
    )
    return JsonResponse({
        'success': True,
        'message': f"User {user.username} updated successfully.",
        'user': UserProfileSerializer(user.userprofile).data,
    })


@admin_required
@require_http_methods(["GET"])
@json_endpoint
def support_inbox(request):
    return JsonResponse({'conversations': support.support_inbox(request.user)})


@admin_required
@require_http_methods(["GET", "POST"])
@json_endpoint
def support_conversation(request, user_id):
    if request.method == 'POST':
        log = support.reply_as_admin(request.user, user_id, read_payload(request).get('message'))
        log_admin_activity(request.user, 'support_action', f"Replied to support chat of user {user_id}", 'User', user_id, request)
    else:
        log = support.read_support_chat_as_admin(request.user, user_id)
    return JsonResponse({'success': True, 'messages': log.to_json()})
