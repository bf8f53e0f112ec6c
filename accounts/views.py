import logging

from django.contrib.auth import authenticate, login, logout
from django.contrib.auth.models import User
from django.http import FileResponse, JsonResponse
from django.views.decorators.http import require_http_methods, require_POST

from applications.lifecycle import active_application_count
from applications.models import Application
from applications.serializers import ApplicationSummarySerializer
from jobs.recommendations import recommended_jobs
from jobs.serializers import JobPostSummarySerializer
from messaging.support import post_support_message, read_support_chat
from swifthire.exceptions import json_endpoint, read_payload

from . import account_management, premium, profile_management, storage
from .completeness import PROFILE_COMPLETION_THRESHOLD
from .decorators import jobseeker_required, login_required_json
from .models import SECURITY_QUESTIONS
from .serializers import JobSeekerProfileSerializer, UserProfileSerializer
from .tiers import capabilities_for_user

logger = logging.getLogger(__name__)


@require_POST
@json_endpoint
def register(request):
    user = account_management.register_user(read_payload(request))
    message = 'Registration successful! You can now log in.'
    if not user.is_active:
        message = 'Registration received. Your account must be activated by an administrator.'
    return JsonResponse({'success': True, 'message': message, 'user_id': user.pk}, status=201)


@require_POST
@json_endpoint
def login_view(request):
    """Session login; disabled accounts are refused by the auth backend."""
    data = read_payload(request)
    user = authenticate(request, username=data.get('username'), password=data.get('password'))
    if user is None:
        logger.warning(f"Failed login for {data.get('username')!r}")
        return JsonResponse({'success': False, 'error': 'Invalid username or password.'}, status=401)
    login(request, user)
    return JsonResponse({'success': True, 'message': f"Welcome back, {user.first_name or user.username}!"})


@require_POST
def logout_view(request):
    logout(request)
    return JsonResponse({'success': True, 'message': 'You have been logged out.'})


@require_http_methods(["GET"])
def security_questions(request):
    return JsonResponse({'questions': SECURITY_QUESTIONS})


@require_POST
@json_endpoint
def forgot_password(request):
    """Look up the security question for a username or email"""
    data = read_payload(request)
    username, question = account_management.find_security_question(data.get('username_or_email'))
    return JsonResponse({'success': True, 'username': username, 'security_question': question})


@require_POST
@json_endpoint
def reset_password(request):
    account_management.reset_password_with_security_answer(read_payload(request))
    return JsonResponse({'success': True, 'message': 'Password reset successfully. Please log in.'})


@login_required_json
@require_http_methods(["GET"])
def me(request):
    return JsonResponse(UserProfileSerializer(request.user.userprofile).data)


@jobseeker_required
@require_http_methods(["GET"])
@json_endpoint
def seeker_dashboard(request):
    """Profile, applications and recommendations for the logged-in seeker"""
    profile = profile_management.get_or_create_seeker_profile(request.user)
    capabilities = capabilities_for_user(request.user)
    applications = (
        Application.objects.filter(seeker=request.user)
        .select_related('job__posted_by__userprofile', 'seeker')
    )
    active_count = active_application_count(request.user)
    limit = capabilities.max_active_applications

    return JsonResponse({
        'profile': JobSeekerProfileSerializer(profile).data,
        'premium_tier': capabilities.tier,
        'profile_complete': profile.completeness_score >= PROFILE_COMPLETION_THRESHOLD,
        'active_applications': active_count,
        'application_limit': limit,
        'limit_reached': limit is not None and active_count >= limit,
        'applications': ApplicationSummarySerializer(applications, many=True).data,
        'recommended_jobs': JobPostSummarySerializer(recommended_jobs(request.user, profile), many=True).data,
    })


@jobseeker_required
@require_POST
@json_endpoint
def update_profile(request):
    profile = profile_management.update_seeker_profile(
        request.user,
        read_payload(request),
        resume_file=request.FILES.get('resume'),
        picture_file=request.FILES.get('profile_picture'),
    )
    return JsonResponse({
        'success': True,
        'message': 'Profile updated successfully!',
        'profile': JobSeekerProfileSerializer(profile).data,
    })


@jobseeker_required
@require_POST
@json_endpoint
def upload_resume(request):
    resume = request.FILES.get('resume')
    if resume is None:
        return JsonResponse({'success': False, 'error': 'Please choose a resume file to upload.'}, status=400)
    profile = profile_management.upload_resume(request.user, resume)
    return JsonResponse({
        'success': True,
        'message': 'Resume uploaded successfully!',
        'completeness_score': profile.completeness_score,
    })


@jobseeker_required
@require_POST
@json_endpoint
def add_experience(request):
    entry, profile = profile_management.add_work_experience(request.user, read_payload(request))
    return JsonResponse({
        'success': True,
        'message': 'Work experience added.',
        'entry_id': entry.id,
        'completeness_score': profile.completeness_score,
    })


@jobseeker_required
@require_POST
@json_endpoint
def remove_experience(request, entry_id):
    profile = profile_management.remove_work_experience(request.user, entry_id)
    return JsonResponse({
        'success': True,
        'message': 'Work experience removed.',
        'completeness_score': profile.completeness_score,
    })


@jobseeker_required
@require_POST
@json_endpoint
def add_education(request):
    entry, profile = profile_management.add_education(request.user, read_payload(request))
    return JsonResponse({
        'success': True,
        'message': 'Education added.',
        'entry_id': entry.id,
        'completeness_score': profile.completeness_score,
    })


@jobseeker_required
@require_POST
@json_endpoint
def remove_education(request, entry_id):
    profile = profile_management.remove_education(request.user, entry_id)
    return JsonResponse({
        'success': True,
        'message': 'Education removed.',
        'completeness_score': profile.completeness_score,
    })


@jobseeker_required
@require_http_methods(["GET", "POST"])
@json_endpoint
def seeker_support_chat(request):
    if request.method == 'POST':
        post_support_message(request.user, read_payload(request).get('message'))
    return JsonResponse({'success': True, 'messages': read_support_chat(request.user).to_json()})


@login_required_json
@require_http_methods(["GET"])
@json_endpoint
def premium_plans(request):
    return JsonResponse(premium.available_plans(request.user))


@login_required_json
@require_POST
@json_endpoint
def premium_checkout(request):
    checkout = premium.start_checkout(request.user, read_payload(request).get('tier'))
    return JsonResponse({'success': True, 'checkout': checkout})


@login_required_json
@require_POST
@json_endpoint
def premium_complete(request):
    message = premium.complete_checkout(request.user, read_payload(request).get('tier'))
    return JsonResponse({'success': True, 'message': message})


@jobseeker_required
@require_http_methods(["GET"])
@json_endpoint
def download_resume(request):
    """The logged-in seeker's own resume"""
    profile = profile_management.get_or_create_seeker_profile(request.user)
    resume = storage.open_upload(storage.RESUME, profile.resume_filename)
    return FileResponse(resume, as_attachment=True, filename=profile.resume_filename)


@login_required_json
@require_http_methods(["GET"])
@json_endpoint
def profile_picture(request, user_id):
    user = User.objects.select_related('userprofile').filter(pk=user_id).first()
    filename = user.userprofile.profile_picture_filename if user is not None else None
    return FileResponse(storage.open_upload(storage.PROFILE_PICTURE, filename))
