"""
Access checks for application management
"""
import logging

from accounts.models import Role
from accounts.roles import role_of
from swifthire.exceptions import NotFound, Unauthorized

from .models import Application

logger = logging.getLogger(__name__)

NOT_FOUND_OR_UNAUTHORIZED = 'Application not found or unauthorized.'


def employer_owns_application(employer, application):
    """
    An employer manages an application when their company name matches the
    company of the employer who posted the job.
    """
    if role_of(employer) != Role.EMPLOYER:
        return False
    company = (employer.userprofile.company_name or '').strip()
    return bool(company) and company == (application.job.company_name or '').strip()


def seeker_owns_application(seeker, application):
    return role_of(seeker) == Role.JOB_SEEKER and application.seeker_id == seeker.pk


def get_application(application_id, for_update=False):
    queryset = Application.objects.select_related('job__posted_by__userprofile', 'seeker')
    if for_update:
        queryset = queryset.select_for_update(of=('self',))
    application = queryset.filter(pk=application_id).first()
    if application is None:
        raise NotFound(NOT_FOUND_OR_UNAUTHORIZED)
    return application


def validate_employer_access(employer, application_id, for_update=False):
    """Load the application and refuse unless ``employer`` manages it."""
    application = get_application(application_id, for_update)
    if not employer_owns_application(employer, application):
        logger.warning(f"Employer {employer.pk} refused access to application {application_id}")
        raise Unauthorized('Unauthorized action.')
    return application


def validate_seeker_access(seeker, application_id, for_update=False):
    application = get_application(application_id, for_update)
    if not seeker_owns_application(seeker, application):
        logger.warning(f"Seeker {seeker.pk} refused access to application {application_id}")
        raise Unauthorized('Access Denied.')
    return application


def validate_application_access(user, application_id, for_update=False):
    """Either party of the application may read and post messages."""
    application = get_application(application_id, for_update)
    if employer_owns_application(user, application) or seeker_owns_application(user, application):
        return application
    logger.warning(f"User {user.pk} refused access to application {application_id}")
    raise Unauthorized('Access Denied.')
