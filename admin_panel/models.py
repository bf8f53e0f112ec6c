from django.db import models
from django.contrib.auth.models import User


class AdminActivity(models.Model):
    """Track admin activities for audit purposes"""
    ACTIVITY_TYPES = [
        ('job_action', 'Job Action'),
        ('user_action', 'User Action'),
        ('support_action', 'Support Action'),
    ]

    admin_user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='admin_activities')
    activity_type = models.CharField(max_length=20, choices=ACTIVITY_TYPES)
    description = models.TextField()
    target_model = models.CharField(max_length=50, blank=True, default='')
    target_id = models.PositiveIntegerField(null=True, blank=True)
    ip_address = models.GenericIPAddressField(null=True, blank=True)
    timestamp = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-timestamp']
        verbose_name = 'Admin Activity'
        verbose_name_plural = 'Admin Activities'

    def __str__(self):
        return f"{self.admin_user.username} - {self.activity_type} - {self.timestamp}"
