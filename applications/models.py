from django.db import models
from django.contrib.auth.models import User

from messaging.chat_log import ChatLog


class Application(models.Model):
    class Status(models.TextChoices):
        APPLIED = 'APPLIED', 'Applied'
        REVIEWED = 'REVIEWED', 'Reviewed'
        ACCEPTED = 'ACCEPTED', 'Accepted'
        REJECTED = 'REJECTED', 'Rejected'
        HIRED = 'HIRED', 'Hired'

    CLOSED_STATUSES = (Status.REJECTED, Status.HIRED)

    seeker = models.ForeignKey(User, on_delete=models.CASCADE, related_name='applications')
    job = models.ForeignKey('jobs.JobPost', on_delete=models.CASCADE, related_name='applications')
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.APPLIED)

    message_log = models.JSONField(default=list, blank=True)

    # Exam
    exam_questions = models.TextField(blank=True, null=True)
    exam_answers = models.TextField(blank=True, null=True)
    exam_submitted = models.BooleanField(default=False)
    exam_score = models.IntegerField(default=0)

    # Final offer
    offer_start_date = models.DateField(blank=True, null=True)
    offer_start_time = models.CharField(max_length=20, blank=True, null=True)
    offer_location = models.CharField(max_length=255, blank=True, null=True)
    offer_required_papers = models.TextField(blank=True, null=True)

    applied_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-applied_at']
        constraints = [
            models.UniqueConstraint(fields=['seeker', 'job'], name='unique_application_per_seeker_job'),
        ]

    def __str__(self):
        return f"{self.seeker.username} - {self.job.title}"

    @property
    def is_active(self):
        return self.status not in self.CLOSED_STATUSES

    @property
    def has_exam(self):
        return bool((self.exam_questions or '').strip())

    @property
    def exam_pending(self):
        return self.has_exam and not self.exam_submitted

    @property
    def messages(self):
        return ChatLog.from_json(self.message_log, owner=f"application {self.pk}")

    @messages.setter
    def messages(self, log):
        self.message_log = log.to_json()


class ApplicationStatus(models.Model):
    """History of status changes for an application."""
    application = models.ForeignKey(Application, on_delete=models.CASCADE, related_name='status_history')
    old_status = models.CharField(max_length=20, choices=Application.Status.choices, blank=True, null=True)
    status = models.CharField(max_length=20, choices=Application.Status.choices)
    changed_by = models.ForeignKey(User, on_delete=models.SET_NULL, null=True, blank=True)
    changed_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['changed_at', 'id']
        verbose_name_plural = 'Application status history'

    def __str__(self):
        return f"{self.application} -> {self.status}"
