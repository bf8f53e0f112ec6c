import datetime
import json

import pytest

from accounts.tests.factories import ApplicationFactory, EmployerFactory, JobPostFactory
from applications import lifecycle
from applications.models import Application, ApplicationStatus
from swifthire.exceptions import NotFound, Unauthorized, ValidationFailure

Status = Application.Status


@pytest.mark.unit
@pytest.mark.parametrize('current, target, allowed', [
    (Status.APPLIED, Status.REVIEWED, True),
    (Status.APPLIED, Status.ACCEPTED, True),
    (Status.REVIEWED, Status.REJECTED, True),
    (Status.ACCEPTED, Status.HIRED, True),
    (Status.ACCEPTED, Status.REVIEWED, False),
    (Status.REJECTED, Status.ACCEPTED, False),
    (Status.HIRED, Status.REJECTED, False),
    (Status.APPLIED, Status.APPLIED, False),
])
def test_transition_table(current, target, allowed):
    assert lifecycle.can_transition(current, target) is allowed


@pytest.mark.django_db
class TestUpdateStatus:
    def test_review_appends_templated_message(self, employer, application):
        application = lifecycle.update_status(employer, application.pk, 'reviewed')

        assert application.status == Status.REVIEWED
        assert 'We have reviewed your application for the Python Developer position' in application.messages[-1].message
        history = ApplicationStatus.objects.get(application=application)
        assert (history.old_status, history.status, history.changed_by) == (Status.APPLIED, Status.REVIEWED, employer)

    def test_hired_cannot_be_set_manually(self, employer, application):
        application.status = Status.ACCEPTED
        application.save()
        with pytest.raises(ValidationFailure, match='Cannot set status to HIRED manually'):
            lifecycle.update_status(employer, application.pk, Status.HIRED)

    def test_accept_blocked_while_exam_pending(self, employer, application):
        lifecycle.assign_exam(employer, application.pk, 'What is a closure?')
        with pytest.raises(ValidationFailure, match='has not yet submitted the required exam'):
            lifecycle.update_status(employer, application.pk, Status.ACCEPTED)

    def test_terminal_status_cannot_change(self, employer, application):
        lifecycle.update_status(employer, application.pk, Status.REJECTED)
        with pytest.raises(ValidationFailure, match='Cannot change application status from REJECTED to ACCEPTED.'):
            lifecycle.update_status(employer, application.pk, Status.ACCEPTED)

    def test_unknown_status(self, employer, application):
        with pytest.raises(ValidationFailure, match='Invalid application status'):
            lifecycle.update_status(employer, application.pk, 'MAYBE')

    def test_other_company_is_unauthorized(self, application):
        outsider = EmployerFactory(company='Other Co')
        with pytest.raises(Unauthorized, match='Unauthorized action.'):
            lifecycle.update_status(outsider, application.pk, Status.REVIEWED)
        application.refresh_from_db()
        assert application.status == Status.APPLIED

    def test_colleague_at_same_company_may_manage(self, application):
        colleague = EmployerFactory(company='Acme Corp')
        assert lifecycle.update_status(colleague, application.pk, Status.REVIEWED).status == Status.REVIEWED

    def test_missing_application(self, employer):
        with pytest.raises(NotFound, match='Application not found or unauthorized.'):
            lifecycle.update_status(employer, 12345, Status.REVIEWED)


@pytest.mark.django_db
class TestExam:
    def test_assign_requires_questions(self, employer, application):
        with pytest.raises(ValidationFailure, match='Exam questions cannot be empty.'):
            lifecycle.assign_exam(employer, application.pk, '   ')

    def test_assign_only_while_under_review(self, employer, application):
        lifecycle.update_status(employer, application.pk, Status.ACCEPTED)
        with pytest.raises(ValidationFailure):
            lifecycle.assign_exam(employer, application.pk, 'Q1')

    def test_submit_moves_to_reviewed(self, employer, seeker, application):
        lifecycle.assign_exam(employer, application.pk, 'Q1')
        answers = [{'question': 'Q1', 'answer': 'A closure captures variables.'}]

        application = lifecycle.submit_exam(seeker, application.pk, json.dumps(answers))

        assert application.exam_submitted is True
        assert application.status == Status.REVIEWED
        assert json.loads(application.exam_answers) == answers
        last = application.messages[-1]
        assert last.sender_id == seeker.pk
        assert last.message == 'I have completed and submitted the required application exam.'

    def test_submitted_exam_rejects_any_payload(self, employer, seeker, application):
        lifecycle.assign_exam(employer, application.pk, 'Q1')
        lifecycle.submit_exam(seeker, application.pk, [{'answer': 'first'}])

        for payload in ([{'answer': 'second'}], '', 'not json', None):
            with pytest.raises(ValidationFailure, match='Exam already submitted.'):
                lifecycle.submit_exam(seeker, application.pk, payload)

    def test_submit_without_exam(self, seeker, application):
        with pytest.raises(ValidationFailure, match='No exam has been assigned'):
            lifecycle.submit_exam(seeker, application.pk, [{'answer': 'x'}])

    def test_empty_answers(self, employer, seeker, application):
        lifecycle.assign_exam(employer, application.pk, 'Q1')
        with pytest.raises(ValidationFailure, match='Answers cannot be empty.'):
            lifecycle.submit_exam(seeker, application.pk, '  ')

    @pytest.mark.parametrize('payload', ['{"answer": "x"}', '[1, 2]', 'nonsense'])
    def test_malformed_answers(self, employer, seeker, application, payload):
        lifecycle.assign_exam(employer, application.pk, 'Q1')
        with pytest.raises(ValidationFailure, match='answer format is invalid JSON'):
            lifecycle.submit_exam(seeker, application.pk, payload)
        application.refresh_from_db()
        assert application.exam_submitted is False

    def test_only_owner_submits(self, employer, application):
        lifecycle.assign_exam(employer, application.pk, 'Q1')
        other = ApplicationFactory().seeker
        with pytest.raises(Unauthorized, match='Access Denied.'):
            lifecycle.submit_exam(other, application.pk, [{'answer': 'x'}])

    def test_score(self, employer, seeker, application):
        lifecycle.assign_exam(employer, application.pk, 'Q1')
        with pytest.raises(ValidationFailure, match='Cannot score unsubmitted exam.'):
            lifecycle.score_exam(employer, application.pk, 50)

        lifecycle.submit_exam(seeker, application.pk, [{'answer': 'x'}])
        with pytest.raises(ValidationFailure, match='between 0 and 100'):
            lifecycle.score_exam(employer, application.pk, 101)
        assert lifecycle.score_exam(employer, application.pk, '85').exam_score == 85

    def test_accept_after_submission(self, employer, seeker, application):
        lifecycle.assign_exam(employer, application.pk, 'Q1')
        lifecycle.submit_exam(seeker, application.pk, [{'answer': 'x'}])
        assert lifecycle.update_status(employer, application.pk, Status.ACCEPTED).status == Status.ACCEPTED


@pytest.mark.django_db
class TestOffer:
    def test_offer_hires_accepted_application(self, employer, application):
        lifecycle.update_status(employer, application.pk, Status.ACCEPTED)

        application = lifecycle.send_offer(
            employer, application.pk, '2030-02-01', start_time='09:00', location='HQ', required_papers='ID',
        )

        assert application.status == Status.HIRED
        assert application.offer_start_date == datetime.date(2030, 2, 1)
        assert 'you are hired for the Python Developer position' in application.messages[-1].message
        assert 'Acme Corp' in application.messages[-1].message

    @pytest.mark.parametrize('status', [Status.APPLIED, Status.REVIEWED, Status.REJECTED])
    def test_offer_requires_accepted(self, employer, application, status):
        application.status = status
        application.save()
        with pytest.raises(ValidationFailure, match="Offer can only be set for an 'ACCEPTED' application."):
            lifecycle.send_offer(employer, application.pk, '2030-02-01')
        application.refresh_from_db()
        assert application.offer_start_date is None

    def test_offer_needs_valid_date(self, employer, application):
        lifecycle.update_status(employer, application.pk, Status.ACCEPTED)
        with pytest.raises(ValidationFailure, match='valid date'):
            lifecycle.send_offer(employer, application.pk, 'next monday')

    def test_hired_always_has_offer(self, employer, application):
        lifecycle.update_status(employer, application.pk, Status.ACCEPTED)
        lifecycle.send_offer(employer, application.pk, '2030-02-01')
        assert not Application.objects.filter(status=Status.HIRED, offer_start_date__isnull=True).exists()


@pytest.mark.django_db
class TestContactCandidate:
    def test_basic_employer_refused(self, employer, seeker, active_job):
        with pytest.raises(Unauthorized, match='Direct contact is a Premium feature.'):
            lifecycle.contact_candidate(employer, seeker.pk)

    def test_creates_reviewed_application(self, premium_employer, seeker):
        job = JobPostFactory(posted_by=premium_employer)

        application, created = lifecycle.contact_candidate(premium_employer, seeker.pk)

        assert created is True
        assert application.job == job
        assert application.status == Status.REVIEWED
        assert application.messages[0].sender_first_name == 'Globex (Direct)'

    def test_reuses_existing_application(self, premium_employer, seeker):
        job = JobPostFactory(posted_by=premium_employer)
        existing = ApplicationFactory(seeker=seeker, job=job)

        application, created = lifecycle.contact_candidate(premium_employer, seeker.pk)

        assert created is False
        assert application == existing

    def test_reuses_colleague_application(self, premium_employer, seeker):
        colleague = EmployerFactory(company='Globex')
        existing = ApplicationFactory(seeker=seeker, job=JobPostFactory(posted_by=colleague))
        JobPostFactory(posted_by=premium_employer)

        application, created = lifecycle.contact_candidate(premium_employer, seeker.pk)

        assert created is False
        assert application == existing

    def test_requires_active_job(self, premium_employer, seeker):
        with pytest.raises(ValidationFailure, match='at least one Active job post'):
            lifecycle.contact_candidate(premium_employer, seeker.pk)

    def test_unknown_candidate(self, premium_employer):
        with pytest.raises(NotFound):
            lifecycle.contact_candidate(premium_employer, 9999)
