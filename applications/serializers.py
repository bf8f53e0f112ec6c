from rest_framework import serializers

from .models import Application


class ApplicationSerializer(serializers.ModelSerializer):
    job_id = serializers.IntegerField(source='job.id', read_only=True)
    job_title = serializers.CharField(source='job.title', read_only=True)
    company_name = serializers.CharField(source='job.company_name', read_only=True)
    seeker_id = serializers.IntegerField(source='seeker.id', read_only=True)
    seeker_name = serializers.SerializerMethodField()
    messages = serializers.SerializerMethodField()

    class Meta:
        model = Application
        fields = [
            'id', 'job_id', 'job_title', 'company_name', 'seeker_id', 'seeker_name', 'status',
            'applied_at', 'updated_at', 'exam_questions', 'exam_answers', 'exam_submitted', 'exam_score',
            'offer_start_date', 'offer_start_time', 'offer_location', 'offer_required_papers', 'messages',
        ]

    def get_seeker_name(self, application):
        return application.seeker.get_full_name() or application.seeker.username

    def get_messages(self, application):
        return application.messages.to_json()


class ApplicationSummarySerializer(ApplicationSerializer):
    class Meta(ApplicationSerializer.Meta):
        fields = [
            'id', 'job_id', 'job_title', 'company_name', 'seeker_id', 'seeker_name', 'status',
            'applied_at', 'exam_submitted', 'exam_score',
        ]
