"""
URL configuration for the SwiftHire project.

Uploaded files are never served from MEDIA_URL; the account and employer
apps stream them through views that check who is asking.
"""
from django.contrib import admin
from django.urls import path, include

urlpatterns = [
    path('admin/', admin.site.urls),
    path('accounts/', include('accounts.urls')),
    path('employer/', include('employers.urls')),
    path('applications/', include('applications.urls')),
    path('admin-panel/', include('admin_panel.urls')),
    path('ai/', include('ai_assistant.urls')),
    # API Routes
    path('api/v1/jobs/', include('jobs.api_urls')),
]
