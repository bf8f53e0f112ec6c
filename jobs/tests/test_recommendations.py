import pytest

from accounts.models import JobSeekerProfile, Tier
from accounts.tests.factories import ApplicationFactory, JobPostFactory, SeekerFactory
from jobs.models import JobPost
from jobs.recommendations import recommendation_terms, recommended_jobs


@pytest.mark.unit
def test_recommendation_terms_are_cleaned_and_unique():
    profile = JobSeekerProfile(skills='Python, C++, python ,  ', current_title='Data Engineer')
    assert recommendation_terms(profile) == ['Python', 'C', 'Data Engineer']


@pytest.mark.django_db
class TestRecommendedJobs:
    @pytest.fixture
    def premium(self, db):
        return SeekerFactory(
            tier=Tier.PREMIUM,
            seeker_profile__skills='Kotlin',
            seeker_profile__current_title='Mobile Developer',
        )

    def test_matches_skills_and_excludes_applied(self, premium):
        applied = JobPostFactory(title='Kotlin Developer')
        open_job = JobPostFactory(title='Android Kotlin Engineer')
        JobPostFactory(title='Kotlin Lead', status=JobPost.Status.PENDING_ADMIN)
        ApplicationFactory(seeker=premium, job=applied)

        assert recommended_jobs(premium, premium.seeker_profile) == [open_job]

    def test_basic_seeker_gets_nothing(self, db):
        seeker = SeekerFactory(seeker_profile__skills='Kotlin')
        JobPostFactory(title='Kotlin Developer')
        assert recommended_jobs(seeker, seeker.seeker_profile) == []

    def test_incomplete_profile_gets_nothing(self, db):
        seeker = SeekerFactory(tier=Tier.PREMIUM, seeker_profile__resume_filename=None)
        JobPostFactory(title='Backend Developer')
        assert recommended_jobs(seeker, seeker.seeker_profile) == []

    def test_limit(self, premium):
        JobPostFactory.create_batch(8, title='Kotlin Dev')
        assert len(recommended_jobs(premium, premium.seeker_profile, limit=6)) == 6
