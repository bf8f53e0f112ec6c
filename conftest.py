"""
Shared pytest fixtures for the SwiftHire test suite
"""
from unittest.mock import MagicMock

import pytest

from accounts.models import Tier
from accounts.tests.factories import (
    AdminFactory, ApplicationFactory, EmployerFactory, JobPostFactory, SeekerFactory,
)


@pytest.fixture(autouse=True)
def media_root(settings, tmp_path):
    settings.MEDIA_ROOT = tmp_path / 'media'
    return settings.MEDIA_ROOT


@pytest.fixture
def seeker(db):
    return SeekerFactory(first_name='Jane', last_name='Doe')


@pytest.fixture
def premium_seeker(db):
    return SeekerFactory(tier=Tier.PREMIUM)


@pytest.fixture
def employer(db):
    return EmployerFactory(company='Acme Corp')


@pytest.fixture
def premium_employer(db):
    return EmployerFactory(company='Globex', tier=Tier.PREMIUM)


@pytest.fixture
def admin_user(db):
    return AdminFactory(username='siteadmin')


@pytest.fixture
def active_job(employer):
    return JobPostFactory(posted_by=employer, title='Python Developer')


@pytest.fixture
def application(seeker, active_job):
    return ApplicationFactory(seeker=seeker, job=active_job)


@pytest.fixture
def seeker_client(client, seeker):
    client.force_login(seeker)
    return client


@pytest.fixture
def employer_client(client, employer):
    client.force_login(employer)
    return client


@pytest.fixture
def moderator_client(client, admin_user):
    client.force_login(admin_user)
    return client


def make_completion(content):
    """Chat completion response double carrying ``content``."""
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    return response


@pytest.fixture
def completion():
    return make_completion


@pytest.fixture
def ai_client():
    client = MagicMock()
    client.chat.completions.create.return_value = make_completion('Hello from the assistant.')
    return client
