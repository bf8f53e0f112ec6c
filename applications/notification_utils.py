"""
Automatic messages appended to application chat logs
"""
import logging

from messaging.chat_log import ChatMessage, SenderRole

from .models import Application

logger = logging.getLogger(__name__)

HIRING_TEAM = 'Hiring Team'

STATUS_MESSAGES = {
    Application.Status.REVIEWED: (
        "We have reviewed your application for the {title} position and are currently considering it. "
        "We will let you know about the next steps."
    ),
    Application.Status.ACCEPTED: (
        "Congratulations! We were impressed with your application and would like to move to the next step. "
        "You will receive an official email shortly detailing the next phase, which will include required "
        "documents and location details."
    ),
    Application.Status.REJECTED: (
        "Thank you for your interest in the {title} position. After careful consideration, we have decided "
        "to move forward with other candidates. We wish you the best in your job search."
    ),
    Application.Status.HIRED: (
        "Congratulations, you are hired for the {title} position! We are excited to welcome you to {company}. "
        "An official hiring package will be sent to your email address shortly."
    ),
}

APPLICATION_RECEIVED_MESSAGE = (
    "Hello {first_name},\n\n"
    "Thank you for your application for the \"{title}\" position. We have successfully received it and "
    "our team will review it shortly.\n\n"
    "You can track the status of your application here. We appreciate your interest in {company}."
)

DIRECT_CONTACT_MESSAGE = "Hi {first_name}, we viewed your profile and would like to discuss an opportunity."

EXAM_SUBMITTED_MESSAGE = "I have completed and submitted the required application exam."


class NotificationManager:
    """Builds the messages the platform writes into an application's chat log."""

    @staticmethod
    def _employer_message(application, text, first_name=None):
        employer = application.job.posted_by
        company = application.job.company_name
        return ChatMessage.create(
            employer.pk,
            first_name or company or 'our team',
            HIRING_TEAM,
            text,
            SenderRole.EMPLOYER,
        )

    @staticmethod
    def status_change_message(application, new_status):
        """Templated message for an employer-driven move to ``new_status``."""
        template = STATUS_MESSAGES.get(new_status)
        if template is None:
            return None
        company = application.job.company_name or 'our team'
        text = template.format(title=application.job.title, company=company)
        logger.debug(f"Status message for application {application.pk}: {new_status}")
        return NotificationManager._employer_message(application, text)

    @staticmethod
    def application_received_message(application):
        company = application.job.company_name or 'our team'
        text = APPLICATION_RECEIVED_MESSAGE.format(
            first_name=application.seeker.first_name or application.seeker.username,
            title=application.job.title,
            company=company,
        )
        return NotificationManager._employer_message(application, text)

    @staticmethod
    def direct_contact_message(application):
        company = application.job.company_name or 'our team'
        text = DIRECT_CONTACT_MESSAGE.format(
            first_name=application.seeker.first_name or application.seeker.username,
        )
        return NotificationManager._employer_message(application, text, first_name=f"{company} (Direct)")

    @staticmethod
    def exam_submitted_message(application):
        return ChatMessage.from_user(application.seeker, EXAM_SUBMITTED_MESSAGE, SenderRole.JOB_SEEKER)
