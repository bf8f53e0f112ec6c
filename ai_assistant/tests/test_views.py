from unittest.mock import patch

import pytest
from django.urls import reverse

from accounts.models import Tier
from accounts.tests.factories import JobPostFactory, SeekerFactory
from ai_assistant.views import AI_REQUIRES_PREMIUM


@pytest.fixture
def ai_service():
    with patch('ai_assistant.views.AIAssistantService') as service_class:
        yield service_class.return_value


@pytest.mark.django_db
class TestPremiumGate:
    def test_basic_seeker_refused(self, seeker_client, ai_service):
        response = seeker_client.post(reverse('ai_assistant:chatbot_api'), {'message': 'hi'})

        assert response.status_code == 403
        assert response.json()['error'] == AI_REQUIRES_PREMIUM
        ai_service.get_ai_response.assert_not_called()

    def test_anonymous_refused(self, client, ai_service):
        assert client.post(reverse('ai_assistant:chatbot_api'), {'message': 'hi'}).status_code == 401


@pytest.mark.django_db
class TestSeekerFeatures:
    def test_chat(self, client, premium_seeker, ai_service):
        ai_service.get_ai_response.return_value = 'Tailor your CV.'
        client.force_login(premium_seeker)

        response = client.post(reverse('ai_assistant:chatbot_api'), {'message': 'CV tips?'},
                               content_type='application/json')

        assert response.json() == {'success': True, 'response': 'Tailor your CV.'}
        ai_service.get_ai_response.assert_called_once_with('CV tips?')

    def test_chat_requires_message(self, client, premium_seeker, ai_service):
        client.force_login(premium_seeker)
        assert client.post(reverse('ai_assistant:chatbot_api'), {'message': ' '}).status_code == 400

    def test_match_score(self, client, premium_seeker, active_job, ai_service):
        ai_service.analyze_match.return_value = {'score': 80, 'reasoning': 'Good.', 'missingKeywords': []}
        client.force_login(premium_seeker)

        data = client.post(reverse('ai_assistant:match_score_api', args=[active_job.pk])).json()

        assert data['score'] == 80
        assert data['job_id'] == active_job.pk
        job_text, profile_text = ai_service.analyze_match.call_args.args
        assert 'Python Developer' in job_text
        assert 'Skills: Python, Django, SQL' in profile_text

    def test_match_score_needs_some_profile(self, client, ai_service, active_job):
        seeker = SeekerFactory(
            tier=Tier.PREMIUM,
            seeker_profile__current_title=None,
            seeker_profile__profile_headline=None,
            seeker_profile__city=None,
            seeker_profile__skills=None,
            seeker_profile__resume_filename=None,
        )
        client.force_login(seeker)

        response = client.post(reverse('ai_assistant:match_score_api', args=[active_job.pk]))

        assert response.status_code == 400
        assert '20%' in response.json()['error']

    def test_match_score_inactive_job(self, client, premium_seeker, ai_service):
        job = JobPostFactory(status='PENDING_ADMIN')
        client.force_login(premium_seeker)
        assert client.post(reverse('ai_assistant:match_score_api', args=[job.pk])).status_code == 404


@pytest.mark.django_db
class TestEmployerFeatures:
    def test_generate_description(self, client, premium_employer, ai_service):
        ai_service.generate_job_description.return_value = '## About the Role'
        client.force_login(premium_employer)

        response = client.post(reverse('ai_assistant:job_description_api'), {
            'title': 'QA Engineer', 'location': 'Remote',
        })

        assert response.json()['description'] == '## About the Role'
        ai_service.generate_job_description.assert_called_once_with(
            'QA Engineer', location='Remote', job_type=None, salary_range=None,
        )

    def test_generate_description_requires_title(self, client, premium_employer, ai_service):
        client.force_login(premium_employer)
        assert client.post(reverse('ai_assistant:job_description_api'), {}).status_code == 400

    def test_basic_employer_refused(self, employer_client, ai_service):
        response = employer_client.post(reverse('ai_assistant:job_description_api'), {'title': 'QA'})
        assert response.status_code == 403

    def test_analyze_candidate(self, client, premium_employer, seeker, ai_service):
        ai_service.analyze_candidate.return_value = {'summary': 'Solid.', 'strengths': [], 'questions': []}
        client.force_login(premium_employer)

        data = client.post(reverse('ai_assistant:analyze_candidate_api', args=[seeker.pk])).json()

        assert data['summary'] == 'Solid.'
        assert data['seeker_id'] == seeker.pk

    def test_seeker_cannot_analyze_candidates(self, client, premium_seeker, seeker, ai_service):
        client.force_login(premium_seeker)
        assert client.post(reverse('ai_assistant:analyze_candidate_api', args=[seeker.pk])).status_code == 403
