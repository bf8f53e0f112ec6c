from rest_framework import serializers

from .models import JobPost


class JobPostSerializer(serializers.ModelSerializer):
    company_name = serializers.CharField(read_only=True)
    formatted_salary = serializers.CharField(source='get_formatted_salary', read_only=True)

    class Meta:
        model = JobPost
        fields = [
            'id', 'title', 'description', 'required_skills', 'company_name',
            'job_type', 'job_category', 'location_city', 'location_country', 'remote_option',
            'salary_min', 'salary_max', 'formatted_salary', 'status', 'is_featured',
            'posted_at', 'expires_at',
        ]


class JobPostSummarySerializer(JobPostSerializer):
    description = serializers.SerializerMethodField()

    def get_description(self, job):
        if len(job.description) > 200:
            return job.description[:200] + '...'
        return job.description
