"""
WSGI config for swifthire project.
"""
import os

from django.core.wsgi import get_wsgi_application

os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'swifthire.settings')

application = get_wsgi_application()
