from rest_framework import serializers

from .models import JobSeekerProfile, UserProfile


class UserProfileSerializer(serializers.ModelSerializer):
    id = serializers.IntegerField(source='user.id', read_only=True)
    username = serializers.CharField(source='user.username', read_only=True)
    email = serializers.EmailField(source='user.email', read_only=True)
    first_name = serializers.CharField(source='user.first_name', read_only=True)
    last_name = serializers.CharField(source='user.last_name', read_only=True)
    is_enabled = serializers.BooleanField(source='user.is_active', read_only=True)

    class Meta:
        model = UserProfile
        fields = [
            'id', 'username', 'email', 'first_name', 'last_name', 'role', 'is_enabled',
            'premium_tier', 'phone_number', 'profile_picture_filename',
            'company_name', 'company_description', 'company_location', 'company_logo_filename',
            'created_at',
        ]


class JobSeekerProfileSerializer(serializers.ModelSerializer):
    user_id = serializers.IntegerField(source='user.id', read_only=True)
    full_name = serializers.SerializerMethodField()
    email = serializers.EmailField(source='user.email', read_only=True)
    phone_number = serializers.CharField(source='user.userprofile.phone_number', read_only=True)

    class Meta:
        model = JobSeekerProfile
        fields = [
            'id', 'user_id', 'full_name', 'email', 'phone_number',
            'city', 'preferred_location', 'current_title', 'profile_headline', 'years_experience',
            'skills', 'job_type', 'expected_salary', 'resume_filename',
            'work_experience', 'education', 'offering_services', 'completeness_score', 'is_featured',
        ]

    def get_full_name(self, profile):
        return profile.user.get_full_name() or profile.user.username


class CandidateCardSerializer(JobSeekerProfileSerializer):
    """Trimmed profile shown in employer candidate search results"""

    class Meta(JobSeekerProfileSerializer.Meta):
        fields = [
            'id', 'user_id', 'full_name', 'city', 'current_title', 'profile_headline',
            'years_experience', 'skills', 'completeness_score', 'is_featured',
        ]
