import pytest

from accounts.models import Tier
from accounts.tests.factories import ApplicationFactory, JobPostFactory, SeekerFactory
from applications import lifecycle
from applications.models import Application
from jobs.models import JobPost
from swifthire.exceptions import NotFound, Unauthorized, ValidationFailure


@pytest.mark.django_db
class TestApplyForJob:
    def test_successful_application_seeds_chat(self, seeker, active_job):
        application = lifecycle.apply_for_job(seeker, active_job.pk)

        assert application.status == Application.Status.APPLIED
        messages = application.messages
        assert len(messages) == 1
        assert messages[0].sender_role == 'EMPLOYER'
        assert messages[0].sender_first_name == 'Acme Corp'
        assert messages[0].sender_last_name == 'Hiring Team'
        assert 'Python Developer' in messages[0].message

    def test_employer_cannot_apply(self, employer, active_job):
        with pytest.raises(Unauthorized, match='Only Job Seekers can apply for jobs.'):
            lifecycle.apply_for_job(employer, active_job.pk)

    @pytest.mark.parametrize('status', [JobPost.Status.PENDING_ADMIN, JobPost.Status.ON_HOLD])
    def test_inactive_job(self, seeker, status):
        job = JobPostFactory(status=status)
        with pytest.raises(NotFound, match='Job not found or is no longer active.'):
            lifecycle.apply_for_job(seeker, job.pk)

    def test_incomplete_profile_is_refused(self, active_job):
        seeker = SeekerFactory(seeker_profile__profile_headline='', seeker_profile__city='', tier=Tier.PRO)
        seeker.userprofile.phone_number = '555-0100'
        seeker.userprofile.save()

        with pytest.raises(ValidationFailure, match='Your profile is incomplete!'):
            lifecycle.apply_for_job(seeker, active_job.pk)
        assert not Application.objects.exists()

    def test_seeker_without_profile_is_refused(self, active_job):
        seeker = SeekerFactory(seeker_profile=None)
        with pytest.raises(ValidationFailure, match='at least 70% to apply'):
            lifecycle.apply_for_job(seeker, active_job.pk)

    def test_duplicate_application(self, seeker, active_job):
        lifecycle.apply_for_job(seeker, active_job.pk)
        with pytest.raises(ValidationFailure, match='You have already applied to this job.'):
            lifecycle.apply_for_job(seeker, active_job.pk)
        assert Application.objects.filter(seeker=seeker, job=active_job).count() == 1

    def test_basic_seeker_limit(self, seeker, active_job):
        for job in JobPostFactory.create_batch(10):
            ApplicationFactory(seeker=seeker, job=job)

        with pytest.raises(ValidationFailure, match='Application Limit Reached! You have 10 active applications.'):
            lifecycle.apply_for_job(seeker, active_job.pk)

    def test_closed_applications_do_not_count(self, seeker, active_job):
        for job in JobPostFactory.create_batch(9):
            ApplicationFactory(seeker=seeker, job=job)
        ApplicationFactory(seeker=seeker, status=Application.Status.REJECTED)
        ApplicationFactory(seeker=seeker, status=Application.Status.HIRED)

        assert lifecycle.apply_for_job(seeker, active_job.pk).pk

    def test_premium_seeker_is_unlimited(self, premium_seeker, active_job):
        for job in JobPostFactory.create_batch(12):
            ApplicationFactory(seeker=premium_seeker, job=job)

        assert lifecycle.apply_for_job(premium_seeker, active_job.pk).status == Application.Status.APPLIED
