from django.http import JsonResponse
from django.views.decorators.http import require_http_methods, require_POST

from accounts.decorators import employer_required, jobseeker_required, login_required_json
from swifthire.exceptions import json_endpoint, read_payload

from . import conversation, lifecycle
from .models import Application
from .serializers import ApplicationSerializer, ApplicationSummarySerializer


@jobseeker_required
@require_POST
@json_endpoint
def apply_job(request, job_id):
    application = lifecycle.apply_for_job(request.user, job_id)
    return JsonResponse({
        'success': True,
        'message': 'Your application has been submitted successfully!',
        'application_id': application.pk,
    }, status=201)


@jobseeker_required
@require_http_methods(["GET"])
def application_list(request):
    """Applications of the logged-in job seeker"""
    applications = (
        Application.objects.filter(seeker=request.user)
        .select_related('job__posted_by__userprofile', 'seeker')
    )
    return JsonResponse({'applications': ApplicationSummarySerializer(applications, many=True).data})


@login_required_json
@require_http_methods(["GET"])
@json_endpoint
def application_detail(request, application_id):
    application, _ = conversation.read_messages(request.user, application_id)
    return JsonResponse(ApplicationSerializer(application).data)


@login_required_json
@require_http_methods(["GET", "POST"])
@json_endpoint
def application_messages(request, application_id):
    if request.method == 'POST':
        messages = conversation.post_message(request.user, application_id, read_payload(request).get('message'))
    else:
        _, messages = conversation.read_messages(request.user, application_id)
    return JsonResponse({'success': True, 'messages': messages.to_json()})


@jobseeker_required
@require_POST
@json_endpoint
def submit_exam(request, application_id):
    lifecycle.submit_exam(request.user, application_id, read_payload(request).get('answers'))
    return JsonResponse({'success': True, 'message': 'Exam submitted successfully!'})


@employer_required
@require_POST
@json_endpoint
def update_status(request, application_id):
    application = lifecycle.update_status(request.user, application_id, read_payload(request).get('status'))
    return JsonResponse({
        'success': True,
        'message': f"Application status updated to {application.status}",
        'status': application.status,
    })


@employer_required
@require_POST
@json_endpoint
def assign_exam(request, application_id):
    data = read_payload(request)
    application = lifecycle.assign_exam(
        request.user, application_id, data.get('questions'), data.get('answers_template'),
    )
    return JsonResponse({
        'success': True,
        'message': f"Exam questions assigned to {application.seeker.first_name or application.seeker.username}.",
    })


@employer_required
@require_POST
@json_endpoint
def score_exam(request, application_id):
    application = lifecycle.score_exam(request.user, application_id, read_payload(request).get('score'))
    return JsonResponse({
        'success': True,
        'message': (
            f"Exam score set to {application.exam_score} for "
            f"{application.seeker.first_name or application.seeker.username}."
        ),
    })


@employer_required
@require_POST
@json_endpoint
def send_offer(request, application_id):
    data = read_payload(request)
    application = lifecycle.send_offer(
        request.user,
        application_id,
        start_date=data.get('start_date'),
        start_time=data.get('start_time'),
        location=data.get('location'),
        required_papers=data.get('required_papers'),
    )
    return JsonResponse({
        'success': True,
        'message': f"Final Job Offer sent to {application.seeker.first_name or application.seeker.username}!",
        'status': application.status,
    })
