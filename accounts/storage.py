"""
Upload validation and storage for resumes, company logos and profile pictures
"""
import logging
import os
import uuid
from contextlib import contextmanager

from django.conf import settings
from django.core.files.storage import default_storage
from django.db import transaction
from PIL import Image, UnidentifiedImageError

from swifthire.exceptions import NotFound, ValidationFailure

logger = logging.getLogger(__name__)

RESUME = 'resumes'
COMPANY_LOGO = 'company_logos'
PROFILE_PICTURE = 'profile_pics'

ALLOWED_EXTENSIONS = {
    RESUME: ['.pdf', '.doc', '.docx', '.txt', '.rtf'],
    COMPANY_LOGO: ['.png', '.jpg', '.jpeg', '.gif', '.webp'],
    PROFILE_PICTURE: ['.png', '.jpg', '.jpeg', '.gif', '.webp'],
}

IMAGE_CATEGORIES = (COMPANY_LOGO, PROFILE_PICTURE)


def validate_file_upload(uploaded_file, category):
    """
    Validate an uploaded file for its storage category.

    Raises ValidationFailure when the file is too large, has a disallowed
    extension, or claims to be an image but cannot be decoded.
    """
    max_size = getattr(settings, 'MAX_UPLOAD_SIZE', 5 * 1024 * 1024)
    if uploaded_file.size > max_size:
        raise ValidationFailure(f"File size exceeds {max_size // (1024 * 1024)}MB limit")

    allowed_extensions = ALLOWED_EXTENSIONS[category]
    file_extension = os.path.splitext(uploaded_file.name)[1].lower()
    if file_extension not in allowed_extensions:
        raise ValidationFailure(
            f"File type {file_extension or '(none)'} not allowed. Allowed types: {', '.join(allowed_extensions)}"
        )

    if category in IMAGE_CATEGORIES:
        try:
            with Image.open(uploaded_file) as image:
                image.verify()
        except (UnidentifiedImageError, OSError, SyntaxError):
            raise ValidationFailure('Uploaded file is not a valid image.')
        finally:
            uploaded_file.seek(0)

    return file_extension


def generate_filename(category, extension, owner_id=None):
    if category == RESUME:
        prefix = f"user_{owner_id}_"
    elif category == PROFILE_PICTURE:
        prefix = f"user_pic_{owner_id}_"
    else:
        prefix = ''
    return f"{prefix}{uuid.uuid4()}{extension}"


def save_upload(uploaded_file, category, owner_id=None):
    """Validate and store ``uploaded_file``; returns the stored filename."""
    extension = validate_file_upload(uploaded_file, category)
    filename = generate_filename(category, extension, owner_id)
    stored_path = default_storage.save(f"{category}/{filename}", uploaded_file)
    logger.info(f"Stored {category} upload for owner {owner_id} at {stored_path}")
    return os.path.basename(stored_path)


def delete_upload(category, filename):
    if not filename:
        return
    path = f"{category}/{filename}"
    if default_storage.exists(path):
        default_storage.delete(path)
        logger.info(f"Deleted stored file {path}")


def open_upload(category, filename):
    """Open a stored file for reading; raises NotFound when it is missing."""
    path = f"{category}/{filename}" if filename else None
    if path is None or not default_storage.exists(path):
        raise NotFound('File not found.')
    return default_storage.open(path, 'rb')


class UploadSession:
    """
    Uploads stored while a transaction is open.

    Replaced files are only deleted once the transaction commits; files
    stored by a session that fails are discarded.
    """

    def __init__(self):
        self.stored = []

    def replace(self, uploaded_file, category, old_filename=None, owner_id=None):
        filename = save_upload(uploaded_file, category, owner_id=owner_id)
        self.stored.append((category, filename))
        if old_filename:
            transaction.on_commit(lambda: delete_upload(category, old_filename))
        return filename

    def discard(self):
        for category, filename in self.stored:
            delete_upload(category, filename)
        self.stored = []


@contextmanager
def upload_session():
    session = UploadSession()
    try:
        yield session
    except Exception:
        logger.warning(f"Discarding {len(session.stored)} upload(s) from a failed update")
        session.discard()
        raise
