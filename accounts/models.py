import logging

from django.db import models
from django.contrib.auth.models import User
from django.db.models.signals import post_save
from django.dispatch import receiver

from .completeness import calculate_completeness
from .profile_history import EducationList, WorkExperienceList

logger = logging.getLogger(__name__)


class Role(models.TextChoices):
    ADMIN = 'ADMIN', 'Admin'
    EMPLOYER = 'EMPLOYER', 'Employer'
    JOB_SEEKER = 'JOB_SEEKER', 'Job Seeker'


class Tier(models.TextChoices):
    BASIC = 'BASIC', 'Basic'
    PREMIUM = 'PREMIUM', 'Premium'
    PRO = 'PRO', 'Pro'


SECURITY_QUESTIONS = {
    'pet': 'What was the name of your first pet?',
    'car': 'What was the make and model of your first car?',
    'maiden_name': "What is your mother's maiden name?",
    'high_school': 'What is the name of the high school you attended?',
    'first_school': 'What was the name of your elementary school?',
    'birth_city': 'In what city were you born?',
    'movie': 'What is your favorite movie?',
    'food': 'What is your favorite food?',
    'best_friend': 'What is the name of your childhood best friend?',
    'street': 'What street did you grow up on?',
}


class UserProfile(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE)
    role = models.CharField(max_length=20, choices=Role.choices, default=Role.JOB_SEEKER)
    phone_number = models.CharField(max_length=20, blank=True, null=True)
    profile_picture_filename = models.CharField(max_length=255, blank=True, null=True)
    premium_tier = models.CharField(max_length=20, choices=Tier.choices, default=Tier.BASIC)

    # Employer only
    company_name = models.CharField(max_length=200, blank=True, null=True)
    company_description = models.TextField(blank=True, null=True)
    company_location = models.CharField(max_length=200, blank=True, null=True)
    company_logo_filename = models.CharField(max_length=255, blank=True, null=True)

    security_question = models.CharField(max_length=50, blank=True, null=True,
                                         choices=[(key, text) for key, text in SECURITY_QUESTIONS.items()])
    security_answer = models.CharField(max_length=255, blank=True, null=True)

    admin_support_chat_log = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    def __str__(self):
        return f"{self.user.username} - {self.get_role_display()}"

    @property
    def is_employer(self):
        return self.role == Role.EMPLOYER

    @property
    def is_job_seeker(self):
        return self.role == Role.JOB_SEEKER

    @property
    def is_admin(self):
        return self.role == Role.ADMIN

    def clear_company(self):
        self.company_name = None
        self.company_description = None
        self.company_location = None
        self.company_logo_filename = None


@receiver(post_save, sender=User)
def create_user_profile(sender, instance, created, **kwargs):
    if created:
        role = Role.ADMIN if instance.is_superuser else Role.JOB_SEEKER
        UserProfile.objects.create(user=instance, role=role)


class JobSeekerProfile(models.Model):
    user = models.OneToOneField(User, on_delete=models.CASCADE, related_name='seeker_profile')
    city = models.CharField(max_length=100, blank=True, null=True)
    preferred_location = models.CharField(max_length=200, blank=True, null=True)
    current_title = models.CharField(max_length=200, blank=True, null=True)
    profile_headline = models.CharField(max_length=255, blank=True, null=True)
    years_experience = models.PositiveIntegerField(blank=True, null=True)
    skills = models.TextField(blank=True, null=True)
    job_type = models.CharField(max_length=20, blank=True, null=True)
    expected_salary = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)
    resume_filename = models.CharField(max_length=255, blank=True, null=True)

    work_experience = models.JSONField(default=list, blank=True)
    education = models.JSONField(default=list, blank=True)
    support_chat_log = models.JSONField(default=list, blank=True)

    offering_services = models.BooleanField(default=True)
    completeness_score = models.PositiveSmallIntegerField(default=0)
    is_featured = models.BooleanField(default=False)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['-is_featured', '-id']

    def __str__(self):
        return f"{self.user.get_full_name() or self.user.username} - Job Seeker"

    @property
    def work_experience_entries(self):
        return WorkExperienceList.from_json(self.work_experience)

    @work_experience_entries.setter
    def work_experience_entries(self, entries):
        self.work_experience = entries.to_json()

    @property
    def education_entries(self):
        return EducationList.from_json(self.education)

    @education_entries.setter
    def education_entries(self, entries):
        self.education = entries.to_json()

    def calculate_completeness(self):
        phone_number = None
        profile = UserProfile.objects.filter(user_id=self.user_id).only('phone_number').first()
        if profile is not None:
            phone_number = profile.phone_number
        return calculate_completeness(self, phone_number)

    def save(self, *args, **kwargs):
        self.completeness_score = self.calculate_completeness()
        update_fields = kwargs.get('update_fields')
        if update_fields is not None:
            kwargs['update_fields'] = set(update_fields) | {'completeness_score'}
        super().save(*args, **kwargs)


@receiver(post_save, sender=UserProfile)
def refresh_seeker_completeness(sender, instance, **kwargs):
    """Phone number counts toward completeness, so re-score the seeker profile."""
    profile = JobSeekerProfile.objects.filter(user_id=instance.user_id).first()
    if profile is None:
        return
    score = profile.calculate_completeness()
    if score != profile.completeness_score:
        JobSeekerProfile.objects.filter(pk=profile.pk).update(completeness_score=score)
        logger.info(f"Completeness for seeker {instance.user_id} refreshed to {score}")
