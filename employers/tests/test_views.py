import pytest
from django.test import Client
from django.urls import reverse

from accounts.models import Tier
from accounts.tests.factories import ApplicationFactory, EmployerFactory, JobPostFactory, SeekerFactory
from applications.models import Application
from jobs.lifecycle import JOB_ON_HOLD_MESSAGE, JOB_POSTED_MESSAGE
from jobs.models import JobPost


def job_payload(**overrides):
    data = {
        'title': 'Data Engineer',
        'description': 'Build and run our data pipelines.',
        'job_type': 'FULL-TIME',
        'job_category': 'Information Technology',
        'location_city': 'Denver',
        'salary_min': '70000',
        'salary_max': '90000',
    }
    data.update(overrides)
    return data


@pytest.mark.django_db
class TestAccess:
    def test_anonymous_gets_401(self, client):
        assert client.get(reverse('employer:dashboard')).status_code == 401

    def test_seeker_gets_403(self, seeker_client):
        assert seeker_client.get(reverse('employer:dashboard')).status_code == 403


@pytest.mark.django_db
class TestDashboard:
    def test_counts_by_status(self, employer_client, employer, application):
        JobPostFactory(posted_by=employer, status=JobPost.Status.PENDING_ADMIN)

        data = employer_client.get(reverse('employer:dashboard')).json()

        assert data['total_jobs'] == 2
        assert data['jobs_by_status'] == {'PENDING_ADMIN': 1, 'ACTIVE': 1, 'ON_HOLD': 0}
        assert data['total_applications'] == 1
        assert data['applications_by_status']['APPLIED'] == 1
        assert data['open_jobs'] == 2
        assert data['open_job_limit'] == 5
        assert data['company']['company_name'] == 'Acme Corp'

    def test_premium_has_no_job_limit(self, client, premium_employer):
        client.force_login(premium_employer)
        assert client.get(reverse('employer:dashboard')).json()['open_job_limit'] is None

    def test_posted_jobs_only_lists_own_jobs(self, employer_client, active_job):
        JobPostFactory(title='Someone else')
        jobs = employer_client.get(reverse('employer:posted_jobs')).json()['jobs']
        assert [job['id'] for job in jobs] == [active_job.pk]


@pytest.mark.django_db
class TestPostJob:
    def test_job_awaits_approval(self, employer_client, employer):
        response = employer_client.post(reverse('employer:post_job'), job_payload())

        assert response.status_code == 201
        data = response.json()
        assert data['success'] is True
        assert data['message'] == JOB_POSTED_MESSAGE
        assert data['job']['status'] == 'PENDING_ADMIN'
        assert data['job']['is_featured'] is False

    def test_sixth_open_job_is_held(self, employer_client, employer):
        JobPostFactory.create_batch(5, posted_by=employer)

        response = employer_client.post(reverse('employer:post_job'), job_payload())

        assert response.status_code == 201
        data = response.json()
        assert data['success'] is False
        assert data['message'] == JOB_ON_HOLD_MESSAGE
        assert data['job']['status'] == 'ON_HOLD'

    def test_premium_job_is_featured(self, client, premium_employer):
        client.force_login(premium_employer)
        JobPostFactory.create_batch(5, posted_by=premium_employer)

        data = client.post(reverse('employer:post_job'), job_payload()).json()

        assert data['job']['status'] == 'PENDING_ADMIN'
        assert data['job']['is_featured'] is True

    def test_invalid_salary_range(self, employer_client):
        response = employer_client.post(reverse('employer:post_job'), job_payload(salary_min='9', salary_max='1'))

        assert response.status_code == 400
        assert response.json()['error'].endswith('Maximum salary must be greater than or equal to minimum salary.')
        assert not JobPost.objects.exists()

    def test_blank_title(self, employer_client):
        response = employer_client.post(reverse('employer:post_job'), job_payload(title='   '))
        assert response.json()['error'].endswith('Job title is required and cannot be empty.')


@pytest.mark.django_db
class TestReleaseHeld:
    def test_basic_employer_refused(self, employer_client, employer):
        JobPostFactory(posted_by=employer, status=JobPost.Status.ON_HOLD)

        response = employer_client.post(reverse('employer:release_held_jobs'))

        assert response.status_code == 403
        assert response.json()['error'] == 'You must be Premium to release held jobs.'

    def test_premium_employer_releases(self, client, premium_employer):
        held = JobPostFactory.create_batch(2, posted_by=premium_employer, status=JobPost.Status.ON_HOLD)
        client.force_login(premium_employer)

        data = client.post(reverse('employer:release_held_jobs')).json()

        assert data['released'] == 2
        assert data['message'] == 'Successfully released 2 jobs!'
        for job in held:
            job.refresh_from_db()
            assert job.status == JobPost.Status.PENDING_ADMIN
            assert job.is_featured


@pytest.mark.django_db
class TestApplications:
    def test_filters(self, employer_client, employer, active_job):
        other_job = JobPostFactory(posted_by=employer, title='Designer')
        ApplicationFactory(job=active_job, seeker=SeekerFactory(first_name='Alan'))
        ApplicationFactory(job=other_job, seeker=SeekerFactory(first_name='Grace'), status=Application.Status.REVIEWED)
        ApplicationFactory(job=JobPostFactory(), seeker=SeekerFactory(first_name='Elsewhere'))
        url = reverse('employer:applications')

        assert employer_client.get(url).json()['total'] == 2
        assert employer_client.get(url, {'status': 'reviewed'}).json()['total'] == 1
        assert employer_client.get(url, {'job': active_job.pk}).json()['total'] == 1
        names = [a['seeker_name'] for a in employer_client.get(url, {'search': 'grace'}).json()['applications']]
        assert len(names) == 1 and names[0].startswith('Grace')
        assert employer_client.get(url, {'date_range': '24h'}).json()['total'] == 2

    def test_job_applicants(self, employer_client, application, active_job):
        data = employer_client.get(reverse('employer:job_applicants', args=[active_job.pk])).json()
        assert [a['id'] for a in data['applications']] == [application.pk]

    def test_colleague_lists_applicants(self, application, active_job):
        client = Client()
        client.force_login(EmployerFactory(company='Acme Corp'))

        data = client.get(reverse('employer:job_applicants', args=[active_job.pk])).json()

        assert [a['id'] for a in data['applications']] == [application.pk]

    def test_applicants_of_foreign_job(self, employer_client):
        job = JobPostFactory()
        assert employer_client.get(reverse('employer:job_applicants', args=[job.pk])).status_code == 404


@pytest.mark.django_db
class TestContactCandidate:
    def test_basic_employer_refused(self, employer_client, seeker):
        response = employer_client.post(reverse('employer:contact_candidate', args=[seeker.pk]))
        assert response.status_code == 403

    def test_needs_active_job(self, client, premium_employer, seeker):
        client.force_login(premium_employer)
        response = client.post(reverse('employer:contact_candidate', args=[seeker.pk]))

        assert response.status_code == 400
        assert response.json()['error'] == 'You need at least one Active job post to initiate contact.'

    def test_starts_conversation_once(self, client, premium_employer, seeker):
        job = JobPostFactory(posted_by=premium_employer)
        client.force_login(premium_employer)
        url = reverse('employer:contact_candidate', args=[seeker.pk])

        first = client.post(url).json()
        second = client.post(url).json()

        assert first['message'] == 'Conversation started with the candidate.'
        assert second['message'] == 'You already have a conversation with this candidate.'
        assert first['application_id'] == second['application_id']
        application = Application.objects.get(pk=first['application_id'])
        assert application.job == job
        assert application.status == Application.Status.REVIEWED
        assert len(application.messages) == 1


@pytest.mark.django_db
class TestCompanyProfile:
    def test_edit_company(self, employer_client, employer):
        response = employer_client.post(reverse('employer:edit_company'), {
            'company_name': '  Acme Holdings ',
            'company_description': 'We make everything.',
            'company_location': 'Phoenix',
        })

        assert response.json()['company']['company_name'] == 'Acme Holdings'
        employer.userprofile.refresh_from_db()
        assert employer.userprofile.company_location == 'Phoenix'

    def test_company_name_required(self, employer_client):
        assert employer_client.post(reverse('employer:edit_company'), {'company_name': ''}).status_code == 400


@pytest.mark.django_db
class TestSupportChat:
    def test_greeting_then_message(self, employer_client):
        url = reverse('employer:support_chat')
        greeting = employer_client.get(url).json()['messages']
        assert len(greeting) == 1
        assert greeting[0]['senderRole'] == 'ADMIN'

        messages = employer_client.post(url, {'message': 'Cannot edit my job'}).json()['messages']

        assert [m['message'] for m in messages][1:] == ['Cannot edit my job']
        assert messages[1]['senderRole'] == 'EMPLOYER'


@pytest.mark.django_db
def test_second_employer_same_company_sees_applications(application):
    colleague = EmployerFactory(company='Acme Corp', tier=Tier.BASIC)
    client = Client()
    client.force_login(colleague)

    assert client.get(reverse('employer:applications')).json()['total'] == 1
