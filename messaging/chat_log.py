"""
Chat messages and append-only chat logs.

A log is stored as a JSON list of message dicts on its owning row
(application, user profile or seeker profile). Inside the code it is an
immutable ``ChatLog``; appending returns a new log.
"""
import json
import logging
from dataclasses import dataclass

from django.db import models
from django.utils import timezone

from swifthire.exceptions import ValidationFailure

logger = logging.getLogger(__name__)

SYSTEM_BOT_SENDER_ID = 0
GLOBAL_ADMIN_SENDER_ID = 1


class SenderRole(models.TextChoices):
    ADMIN = 'ADMIN', 'Admin'
    EMPLOYER = 'EMPLOYER', 'Employer'
    JOB_SEEKER = 'JOB_SEEKER', 'Job Seeker'
    SYSTEM_BOT = 'SYSTEM_BOT', 'System Bot'


@dataclass(frozen=True)
class ChatMessage:
    sender_id: int
    sender_first_name: str
    sender_last_name: str
    message: str
    created_at: str
    sender_role: str

    @classmethod
    def create(cls, sender_id, first_name, last_name, text, role):
        """Build a message stamped with the current time; blank text is rejected."""
        text = (text or '').strip()
        if not text:
            raise ValidationFailure('Message cannot be empty.')
        return cls(
            sender_id=sender_id,
            sender_first_name=first_name or '',
            sender_last_name=last_name or '',
            message=text,
            created_at=timezone.now().isoformat(),
            sender_role=SenderRole(role).value,
        )

    @classmethod
    def from_user(cls, user, text, role):
        return cls.create(user.pk, user.first_name, user.last_name, text, role)

    def to_dict(self):
        return {
            'senderId': self.sender_id,
            'senderFirstName': self.sender_first_name,
            'senderLastName': self.sender_last_name,
            'message': self.message,
            'createdAt': self.created_at,
            'senderRole': self.sender_role,
        }

    @classmethod
    def from_dict(cls, data):
        return cls(
            sender_id=data['senderId'],
            sender_first_name=data.get('senderFirstName') or '',
            sender_last_name=data.get('senderLastName') or '',
            message=data['message'],
            created_at=data.get('createdAt') or '',
            sender_role=data.get('senderRole') or '',
        )


class ChatLog:
    """Ordered, immutable sequence of chat messages."""

    def __init__(self, messages=()):
        self._messages = tuple(messages)

    def __iter__(self):
        return iter(self._messages)

    def __len__(self):
        return len(self._messages)

    def __bool__(self):
        return bool(self._messages)

    def __getitem__(self, index):
        return self._messages[index]

    def append(self, message):
        if not message.message.strip():
            raise ValidationFailure('Message cannot be empty.')
        return ChatLog(self._messages + (message,))

    def with_greeting(self, greeting):
        """Log as presented to a reader: ``greeting`` first, never stored."""
        return ChatLog((greeting,) + self._messages)

    def to_json(self):
        return [message.to_dict() for message in self._messages]

    @classmethod
    def from_json(cls, raw, owner=''):
        """
        Parse a stored log. Malformed data yields an empty log and a warning
        naming ``owner``; individual bad entries are skipped.
        """
        if not raw:
            return cls()
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except json.JSONDecodeError:
                logger.warning(f"Unparseable chat log on {owner or 'unknown owner'}, treating it as empty")
                return cls()
        if not isinstance(raw, list):
            logger.warning(f"Malformed chat log on {owner or 'unknown owner'}: expected a list, got {type(raw).__name__}")
            return cls()

        messages = []
        for item in raw:
            try:
                messages.append(ChatMessage.from_dict(item))
            except (KeyError, TypeError, AttributeError):
                logger.warning(f"Skipping malformed chat message on {owner or 'unknown owner'}: {item!r}")
        return cls(messages)
