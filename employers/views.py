import logging

from django.contrib.auth.models import User
from django.core.paginator import Paginator
from django.http import FileResponse, JsonResponse
from django.views.decorators.http import require_http_methods, require_POST

from accounts import storage
from accounts.decorators import employer_required
from accounts.profile_management import update_company_profile
from accounts.serializers import CandidateCardSerializer, JobSeekerProfileSerializer, UserProfileSerializer
from accounts.tiers import capabilities_for_user
from applications.lifecycle import contact_candidate
from applications.serializers import ApplicationSummarySerializer
from jobs import lifecycle as job_lifecycle
from jobs.models import JobPost
from jobs.serializers import JobPostSerializer
from messaging.support import post_support_message, read_support_chat
from swifthire.exceptions import json_endpoint, read_payload

from .application_management import dashboard_statistics, filter_applications, job_applicants
from .candidate_search import candidate_detail, search_candidates

logger = logging.getLogger(__name__)


@employer_required
@require_http_methods(["GET"])
@json_endpoint
def employer_dashboard(request):
    capabilities = capabilities_for_user(request.user)
    stats = dashboard_statistics(request.user)
    stats.update({
        'company': UserProfileSerializer(request.user.userprofile).data,
        'premium_tier': capabilities.tier,
        'open_job_limit': capabilities.max_open_job_posts,
        'open_jobs': JobPost.objects.open_for(request.user).count(),
    })
    return JsonResponse(stats)


@employer_required
@require_http_methods(["GET"])
def posted_jobs(request):
    jobs = JobPost.objects.owned_by(request.user).select_related('posted_by__userprofile').order_by('-posted_at')
    return JsonResponse({'jobs': JobPostSerializer(jobs, many=True).data})


@employer_required
@require_POST
@json_endpoint
def post_job(request):
    result = job_lifecycle.create_job_posting(request.user, read_payload(request))
    return JsonResponse({
        'success': not result.held,
        'message': result.message,
        'job': JobPostSerializer(result.job).data,
    }, status=201)


@employer_required
@require_POST
@json_endpoint
def release_held_jobs(request):
    released = job_lifecycle.release_held_jobs(request.user)
    return JsonResponse({'success': True, 'message': f"Successfully released {released} jobs!", 'released': released})


@employer_required
@require_http_methods(["GET"])
@json_endpoint
def applications_list(request):
    """Applications across the company's jobs with filters and pagination"""
    applications = filter_applications(
        request.user,
        status=request.GET.get('status'),
        job_id=request.GET.get('job'),
        date_range=request.GET.get('date_range'),
        search=request.GET.get('search'),
    )
    page = Paginator(applications, 20).get_page(request.GET.get('page'))
    return JsonResponse({
        'applications': ApplicationSummarySerializer(page.object_list, many=True).data,
        'page': page.number,
        'num_pages': page.paginator.num_pages,
        'total': page.paginator.count,
    })


@employer_required
@require_http_methods(["GET"])
@json_endpoint
def job_applicants_view(request, job_id):
    job, applications = job_applicants(request.user, job_id)
    return JsonResponse({
        'job': JobPostSerializer(job).data,
        'applications': ApplicationSummarySerializer(applications, many=True).data,
    })


@employer_required
@require_http_methods(["GET"])
@json_endpoint
def candidate_search(request):
    profiles, notice = search_candidates(
        request.user,
        skills=request.GET.get('skills'),
        city=request.GET.get('city'),
        title=request.GET.get('title'),
    )
    page = Paginator(profiles, 20).get_page(request.GET.get('page'))
    return JsonResponse({
        'candidates': CandidateCardSerializer(page.object_list, many=True).data,
        'notice': notice,
        'page': page.number,
        'num_pages': page.paginator.num_pages,
    })


@employer_required
@require_http_methods(["GET"])
@json_endpoint
def candidate_profile(request, seeker_id):
    profile = candidate_detail(request.user, seeker_id)
    return JsonResponse(JobSeekerProfileSerializer(profile).data)


@employer_required
@require_POST
@json_endpoint
def contact_candidate_view(request, seeker_id):
    application, created = contact_candidate(request.user, seeker_id)
    message = 'Conversation started with the candidate.' if created else 'You already have a conversation with this candidate.'
    return JsonResponse({'success': True, 'message': message, 'application_id': application.pk})


@employer_required
@require_POST
@json_endpoint
def edit_company(request):
    profile = update_company_profile(request.user, read_payload(request), logo_file=request.FILES.get('logo'))
    return JsonResponse({
        'success': True,
        'message': 'Company profile updated successfully!',
        'company': UserProfileSerializer(profile).data,
    })


@employer_required
@require_http_methods(["GET", "POST"])
@json_endpoint
def support_chat(request):
    if request.method == 'POST':
        post_support_message(request.user, read_payload(request).get('message'))
    return JsonResponse({'success': True, 'messages': read_support_chat(request.user).to_json()})


@employer_required
@require_http_methods(["GET"])
@json_endpoint
def download_candidate_resume(request, seeker_id):
    profile = candidate_detail(request.user, seeker_id)
    resume = storage.open_upload(storage.RESUME, profile.resume_filename)
    logger.info(f"Employer {request.user.username} downloaded the resume of seeker {seeker_id}")
    return FileResponse(resume, as_attachment=True, filename=profile.resume_filename)


@require_http_methods(["GET"])
@json_endpoint
def company_logo(request, employer_id):
    """Public company logo shown next to job postings"""
    employer = User.objects.select_related('userprofile').filter(pk=employer_id).first()
    filename = employer.userprofile.company_logo_filename if employer is not None else None
    return FileResponse(storage.open_upload(storage.COMPANY_LOGO, filename))
