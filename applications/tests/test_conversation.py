import pytest
from django.test import Client
from django.urls import reverse

from accounts.tests.factories import EmployerFactory, SeekerFactory
from applications import conversation
from swifthire.exceptions import Unauthorized, ValidationFailure


@pytest.mark.django_db
class TestConversation:
    def test_both_parties_post_in_order(self, employer, seeker, application):
        conversation.post_message(seeker, application.pk, 'Is the role remote?')
        log = conversation.post_message(employer, application.pk, 'Hybrid, two days a week.')

        assert [(m.sender_id, m.sender_role) for m in log] == [
            (seeker.pk, 'JOB_SEEKER'),
            (employer.pk, 'EMPLOYER'),
        ]
        _, stored = conversation.read_messages(seeker, application.pk)
        assert [m.message for m in stored] == ['Is the role remote?', 'Hybrid, two days a week.']

    def test_blank_message_rejected(self, seeker, application):
        with pytest.raises(ValidationFailure, match='Message cannot be empty.'):
            conversation.post_message(seeker, application.pk, '  ')
        application.refresh_from_db()
        assert application.message_log == []

    def test_strangers_are_denied(self, application):
        for outsider in (SeekerFactory(), EmployerFactory(company='Other Co')):
            with pytest.raises(Unauthorized, match='Access Denied.'):
                conversation.read_messages(outsider, application.pk)

    def test_corrupted_log_reads_as_empty(self, seeker, application):
        application.message_log = 'not a list'
        application.save()

        _, log = conversation.read_messages(seeker, application.pk)
        assert len(log) == 0
        assert len(conversation.post_message(seeker, application.pk, 'Hello?')) == 1


@pytest.mark.django_db
class TestApplicationViews:
    def test_apply_endpoint(self, seeker_client, active_job):
        response = seeker_client.post(reverse('applications:apply_job', args=[active_job.pk]))

        assert response.status_code == 201
        assert response.json()['message'] == 'Your application has been submitted successfully!'

    def test_apply_twice(self, seeker_client, active_job):
        seeker_client.post(reverse('applications:apply_job', args=[active_job.pk]))
        response = seeker_client.post(reverse('applications:apply_job', args=[active_job.pk]))

        assert response.status_code == 400
        assert response.json() == {'success': False, 'error': 'You have already applied to this job.'}

    def test_apply_requires_post(self, seeker_client, active_job):
        assert seeker_client.get(reverse('applications:apply_job', args=[active_job.pk])).status_code == 405

    def test_employer_flow(self, employer, seeker, application):
        employer_client, seeker_client = Client(), Client()
        employer_client.force_login(employer)
        seeker_client.force_login(seeker)

        response = employer_client.post(
            reverse('applications:assign_exam', args=[application.pk]), {'questions': 'Explain GIL.'},
        )
        assert response.json()['message'] == 'Exam questions assigned to Jane.'

        response = seeker_client.post(
            reverse('applications:submit_exam', args=[application.pk]),
            {'answers': [{'question': 'Explain GIL.', 'answer': 'A lock.'}]},
            content_type='application/json',
        )
        assert response.status_code == 200

        response = employer_client.post(reverse('applications:update_status', args=[application.pk]), {
            'status': 'ACCEPTED',
        })
        assert response.json()['message'] == 'Application status updated to ACCEPTED'

        response = employer_client.post(reverse('applications:send_offer', args=[application.pk]), {
            'start_date': '2030-01-15', 'location': 'HQ',
        })
        assert response.json()['status'] == 'HIRED'

        detail = seeker_client.get(reverse('applications:application_detail', args=[application.pk])).json()
        assert detail['offer_start_date'] == '2030-01-15'
        assert detail['messages'][-1]['senderRole'] == 'EMPLOYER'

    def test_seeker_cannot_change_status(self, seeker_client, application):
        response = seeker_client.post(reverse('applications:update_status', args=[application.pk]), {
            'status': 'ACCEPTED',
        })
        assert response.status_code == 403

    def test_messages_endpoint(self, seeker_client, application):
        url = reverse('applications:application_messages', args=[application.pk])
        seeker_client.post(url, {'message': 'Hello!'}, content_type='application/json')

        messages = seeker_client.get(url).json()['messages']
        assert messages[-1]['message'] == 'Hello!'
        assert set(messages[-1]) == {
            'senderId', 'senderFirstName', 'senderLastName', 'message', 'createdAt', 'senderRole',
        }

    def test_list_own_applications(self, seeker_client, application):
        data = seeker_client.get(reverse('applications:application_list')).json()
        assert [a['id'] for a in data['applications']] == [application.pk]
