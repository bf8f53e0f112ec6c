"""
Chat between an employer and a candidate on an application
"""
import logging

from django.db import transaction

from messaging.chat_log import ChatMessage, SenderRole

from .security import employer_owns_application, validate_application_access

logger = logging.getLogger(__name__)


def read_messages(user, application_id):
    application = validate_application_access(user, application_id)
    return application, application.messages


@transaction.atomic
def post_message(user, application_id, text):
    """Append a message from either the managing employer or the candidate."""
    application = validate_application_access(user, application_id, for_update=True)

    role = SenderRole.EMPLOYER if employer_owns_application(user, application) else SenderRole.JOB_SEEKER
    message = ChatMessage.from_user(user, text, role)

    application.messages = application.messages.append(message)
    application.save(update_fields=['message_log', 'updated_at'])
    logger.info(f"{user.username} posted a message on application {application.pk}")
    return application.messages
