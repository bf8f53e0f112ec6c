"""
Support chat between users and the admin team.

Job seekers keep their support log on the seeker profile, employers on their
user profile. Readers other than admins see a greeting first; the greeting
is generated on every read and never stored.
"""
import logging

from django.contrib.auth.models import User
from django.db import transaction
from django.utils import timezone

from accounts.models import JobSeekerProfile, UserProfile
from accounts.roles import (
    SUPPORT_CHANNEL_SEEKER_PROFILE, policy_for, policy_for_user,
)
from swifthire.exceptions import NotFound, Unauthorized

from .chat_log import (
    GLOBAL_ADMIN_SENDER_ID, SYSTEM_BOT_SENDER_ID, ChatLog, ChatMessage, SenderRole,
)

logger = logging.getLogger(__name__)

EMPLOYER_WELCOME = (
    "Welcome to the Employer Support Chat. We're here to assist with any platform issues, "
    "job posting queries, or account management questions. Please submit your request below."
)

SEEKER_WELCOME = (
    "Welcome to SwiftHire, {name}!\n\n"
    "This support chat is for any technical questions you have about your account, your profile, "
    "or platform issues.\n\n"
    "**Please note:** For questions about a *specific job or application*, please use the "
    "'My Chats' feature to contact the employer directly.\n\n"
    "We're here to help you succeed. Good luck!"
)

BOT_ACKNOWLEDGEMENT = (
    "Thank you for contacting Support. Your message has been logged, and a live admin "
    "will review your inquiry shortly."
)


class SupportChannel:
    """Where a user's support log is stored, and how it greets its owner."""

    def __init__(self, user):
        self.user = user
        self.kind = policy_for(user.userprofile.role).support_channel
        if self.kind is None:
            raise Unauthorized('Support chat is not available for this account.')

    @property
    def owner_label(self):
        return f"{self.kind} support log of user {self.user.pk}"

    def _owner(self, for_update=False):
        if self.kind == SUPPORT_CHANNEL_SEEKER_PROFILE:
            queryset = JobSeekerProfile.objects.filter(user=self.user)
            if for_update:
                profile = queryset.select_for_update().first()
                return profile or JobSeekerProfile.objects.create(user=self.user)
            return queryset.first()
        queryset = UserProfile.objects.filter(user=self.user)
        if for_update:
            queryset = queryset.select_for_update()
        return queryset.first()

    def _field(self):
        return 'support_chat_log' if self.kind == SUPPORT_CHANNEL_SEEKER_PROFILE else 'admin_support_chat_log'

    def load(self):
        owner = self._owner()
        if owner is None:
            return ChatLog()
        return ChatLog.from_json(getattr(owner, self._field()), owner=self.owner_label)

    def store(self, log):
        owner = self._owner(for_update=True)
        setattr(owner, self._field(), log.to_json())
        owner.save(update_fields=[self._field(), 'updated_at'])

    def greeting(self):
        if self.kind == SUPPORT_CHANNEL_SEEKER_PROFILE:
            text = SEEKER_WELCOME.format(name=self.user.first_name or 'Seeker')
        else:
            text = EMPLOYER_WELCOME
        return ChatMessage(
            sender_id=GLOBAL_ADMIN_SENDER_ID,
            sender_first_name='Global',
            sender_last_name='Admin',
            message=text,
            created_at=timezone.now().isoformat(),
            sender_role=SenderRole.ADMIN.value,
        )


def read_support_chat(user):
    """Messages shown to the user in their own support chat, greeting first."""
    channel = SupportChannel(user)
    return channel.load().with_greeting(channel.greeting())


@transaction.atomic
def post_support_message(user, text):
    """
    Append a user-authored message to their support log.

    The first message in a seeker's log is followed by an automatic
    acknowledgement from the support bot.
    """
    channel = SupportChannel(user)
    sender_role = SenderRole(user.userprofile.role)
    log = channel.load()
    was_empty = not log

    log = log.append(ChatMessage.from_user(user, text, sender_role))
    if was_empty and channel.kind == SUPPORT_CHANNEL_SEEKER_PROFILE:
        log = log.append(ChatMessage.create(
            SYSTEM_BOT_SENDER_ID, 'Support', 'Bot', BOT_ACKNOWLEDGEMENT, SenderRole.SYSTEM_BOT,
        ))
    channel.store(log)

    logger.info(f"Support message from {user.username} stored ({len(log)} messages in log)")
    return log


def _require_admin(admin):
    if not policy_for_user(admin).can_moderate:
        raise Unauthorized('Access denied. Admin account required.')


def _support_user(user_id):
    user = User.objects.select_related('userprofile').filter(pk=user_id).first()
    if user is None:
        raise NotFound('User not found.')
    return user


def read_support_chat_as_admin(admin, user_id):
    """Stored messages only; admins never see the greeting."""
    _require_admin(admin)
    return SupportChannel(_support_user(user_id)).load()


@transaction.atomic
def reply_as_admin(admin, user_id, text):
    _require_admin(admin)
    channel = SupportChannel(_support_user(user_id))
    log = channel.load().append(ChatMessage.create(admin.pk, 'Admin', 'Support', text, SenderRole.ADMIN))
    channel.store(log)
    logger.info(f"Admin {admin.username} replied to support chat of user {user_id}")
    return log


def support_inbox(admin):
    """Users with a non-empty support log, most recent activity first."""
    _require_admin(admin)
    entries = []
    for profile in JobSeekerProfile.objects.select_related('user'):
        log = ChatLog.from_json(profile.support_chat_log, owner=f"seeker profile {profile.pk}")
        if log:
            entries.append((profile.user, log))
    for profile in UserProfile.objects.select_related('user'):
        log = ChatLog.from_json(profile.admin_support_chat_log, owner=f"user profile {profile.pk}")
        if log:
            entries.append((profile.user, log))

    inbox = [
        {
            'user_id': user.pk,
            'username': user.username,
            'full_name': user.get_full_name(),
            'message_count': len(log),
            'last_message': log[-1].to_dict(),
        }
        for user, log in entries
    ]
    inbox.sort(key=lambda entry: entry['last_message']['createdAt'], reverse=True)
    return inbox
