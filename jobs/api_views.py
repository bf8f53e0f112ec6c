"""
API views for jobs app
"""
import logging

from rest_framework import generics
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import AllowAny
from rest_framework.response import Response

from swifthire.exceptions import NotFound

from .models import JOB_CATEGORIES, JOB_TYPES, JobPost
from .serializers import JobPostSerializer, JobPostSummarySerializer

logger = logging.getLogger(__name__)


class JobSearchAPIView(generics.ListAPIView):
    """Active jobs filtered by keyword, location, category and job types; featured first"""
    permission_classes = [AllowAny]
    serializer_class = JobPostSummarySerializer

    def get_queryset(self):
        params = self.request.query_params
        job_types = params.getlist('job_type') or [
            t.strip() for t in params.get('job_types', '').split(',') if t.strip()
        ]
        return JobPost.objects.search(
            keyword=params.get('keyword'),
            location=params.get('location'),
            category=params.get('category'),
            job_types=job_types,
        )


class JobDetailAPIView(generics.RetrieveAPIView):
    permission_classes = [AllowAny]
    serializer_class = JobPostSerializer

    def get_object(self):
        job = (
            JobPost.objects.active()
            .select_related('posted_by__userprofile')
            .filter(pk=self.kwargs['pk'])
            .first()
        )
        if job is None:
            raise NotFound('Job not found or is no longer active.')
        return job


@api_view(['GET'])
@permission_classes([AllowAny])
def job_title_suggestions(request):
    """Distinct active job titles containing the query (3+ characters)"""
    return Response(JobPost.objects.title_suggestions(request.query_params.get('q', '')))


@api_view(['GET'])
@permission_classes([AllowAny])
def job_filters(request):
    return Response({'job_types': JOB_TYPES, 'categories': JOB_CATEGORIES})
