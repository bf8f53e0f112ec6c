"""
API URLs for jobs app
"""
from django.urls import path
from . import api_views

app_name = 'jobs_api'

urlpatterns = [
    path('', api_views.JobSearchAPIView.as_view(), name='job_search'),
    path('<int:pk>/', api_views.JobDetailAPIView.as_view(), name='job_detail'),
    path('suggestions/', api_views.job_title_suggestions, name='job_suggestions'),
    path('filters/', api_views.job_filters, name='job_filters'),
]
