import logging

from django.http import JsonResponse
from django.views.decorators.http import require_POST

from accounts.decorators import employer_required, jobseeker_required, login_required_json
from accounts.profile_management import get_or_create_seeker_profile
from accounts.tiers import capabilities_for_user
from employers.candidate_search import candidate_detail
from jobs.models import JobPost
from swifthire.exceptions import NotFound, Unauthorized, ValidationFailure, json_endpoint, read_payload

from .ai_service import AIAssistantService, job_summary, seeker_profile_summary

logger = logging.getLogger(__name__)

MATCH_SCORE_MIN_COMPLETENESS = 20

AI_REQUIRES_PREMIUM = 'AI features are available to Premium members only. Please upgrade your plan.'


def _require_ai_features(user):
    if not capabilities_for_user(user).ai_features:
        logger.warning(f"AI feature refused for Basic user {user.username}")
        raise Unauthorized(AI_REQUIRES_PREMIUM)


@login_required_json
@require_POST
@json_endpoint
def chatbot_api(request):
    """Free-form question to the job assistant"""
    _require_ai_features(request.user)
    message = (read_payload(request).get('message') or '').strip()
    if not message:
        raise ValidationFailure('Message is required.')
    return JsonResponse({'success': True, 'response': AIAssistantService().get_ai_response(message)})


@jobseeker_required
@require_POST
@json_endpoint
def match_score_api(request, job_id):
    """How well the logged-in seeker fits an active job"""
    _require_ai_features(request.user)
    profile = get_or_create_seeker_profile(request.user)
    if profile.completeness_score < MATCH_SCORE_MIN_COMPLETENESS:
        raise ValidationFailure(
            f"Please complete at least {MATCH_SCORE_MIN_COMPLETENESS}% of your profile to use AI matching."
        )

    job = JobPost.objects.active().filter(pk=job_id).first()
    if job is None:
        raise NotFound('Job not found.')

    result = AIAssistantService().analyze_match(job_summary(job), seeker_profile_summary(profile))
    return JsonResponse({'success': True, 'job_id': job.pk, **result})


@employer_required
@require_POST
@json_endpoint
def generate_job_description_api(request):
    _require_ai_features(request.user)
    data = read_payload(request)
    title = (data.get('title') or '').strip()
    if not title:
        raise ValidationFailure('Job title is required to generate a description.')

    description = AIAssistantService().generate_job_description(
        title,
        location=data.get('location'),
        job_type=data.get('job_type'),
        salary_range=data.get('salary_range'),
    )
    return JsonResponse({'success': True, 'description': description})


@employer_required
@require_POST
@json_endpoint
def analyze_candidate_api(request, seeker_id):
    _require_ai_features(request.user)
    profile = candidate_detail(request.user, seeker_id)
    analysis = AIAssistantService().analyze_candidate(seeker_profile_summary(profile))
    return JsonResponse({'success': True, 'seeker_id': profile.user_id, **analysis})
