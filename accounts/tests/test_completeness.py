import pytest
from types import SimpleNamespace

from accounts.completeness import calculate_completeness, meets_application_threshold
from accounts.models import JobSeekerProfile

from .factories import JobSeekerProfileFactory, SeekerFactory


def _profile(**overrides):
    values = dict(
        current_title=None, profile_headline=None, city=None, skills=None, resume_filename=None,
        work_experience=[], education=[],
    )
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.mark.unit
def test_empty_profile_scores_zero():
    assert calculate_completeness(_profile()) == 0


@pytest.mark.unit
def test_weighted_sum():
    profile = _profile(current_title='Dev', skills='Python', resume_filename='cv.pdf')
    assert calculate_completeness(profile) == 50
    assert calculate_completeness(profile, phone_number='555-0100') == 60


@pytest.mark.unit
def test_whitespace_does_not_count():
    assert calculate_completeness(_profile(city='   ', skills=''), phone_number=' ') == 0


@pytest.mark.unit
def test_full_profile_is_capped_at_100():
    profile = _profile(
        current_title='Dev', profile_headline='Hi', city='Austin', skills='Python', resume_filename='cv.pdf',
        work_experience=[{'id': '1', 'job_title': 'Dev', 'company_name': 'X'}],
        education=[{'id': '2', 'institution_name': 'MIT', 'degree': 'BSc'}],
    )
    assert calculate_completeness(profile, phone_number='555-0100') == 100


@pytest.mark.unit
def test_malformed_history_counts_as_empty():
    assert calculate_completeness(_profile(work_experience='broken', education=[{'bad': 1}])) == 0


@pytest.mark.unit
def test_threshold():
    assert meets_application_threshold(SimpleNamespace(completeness_score=70))
    assert not meets_application_threshold(SimpleNamespace(completeness_score=69))
    assert not meets_application_threshold(None)


@pytest.mark.django_db
class TestStoredScore:
    def test_score_is_recomputed_on_save(self):
        profile = JobSeekerProfileFactory()
        assert profile.completeness_score == 70

        profile.resume_filename = None
        profile.save(update_fields=['resume_filename'])
        profile.refresh_from_db()
        assert profile.completeness_score == 50

    def test_recomputation_is_idempotent(self):
        profile = JobSeekerProfileFactory()
        profile.save()
        profile.save()
        profile.refresh_from_db()
        assert profile.completeness_score == calculate_completeness(profile) == 70

    def test_phone_number_change_rescores_seeker_profile(self):
        seeker = SeekerFactory()
        seeker.userprofile.phone_number = '555-0100'
        seeker.userprofile.save()

        assert JobSeekerProfile.objects.get(user=seeker).completeness_score == 80
