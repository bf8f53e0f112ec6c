from django.db import models
from django.contrib.auth.models import User
from django.db.models import Q
from django.utils import timezone

JOB_TYPES = ['FULL-TIME', 'PART-TIME', 'REMOTE', 'FREELANCE', 'CONTRACT', 'TEMPORARY']

JOB_CATEGORIES = [
    'Design & Creative',
    'Design & Development',
    'Sales & Marketing',
    'Mobile Application',
    'Construction',
    'Information Technology',
    'Real Estate',
    'Content Writer',
    'Digital Marketing',
    'Software Development',
    'Human Resources',
    'Finance',
    'Sales',
    'Education',
]


class JobPostQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status=JobPost.Status.ACTIVE)

    def owned_by(self, employer):
        return self.filter(posted_by=employer)

    def of_company(self, employer):
        """Postings by any employer sharing ``employer``'s company name."""
        company = (employer.userprofile.company_name or '').strip()
        if not company:
            return self.none()
        return self.filter(posted_by__userprofile__company_name=company)

    def open_for(self, employer):
        """Postings that count toward the Basic job-post cap."""
        return self.owned_by(employer).filter(status__in=JobPost.OPEN_STATUSES)

    def held_for(self, employer):
        return self.owned_by(employer).filter(status=JobPost.Status.ON_HOLD)

    def featured_first(self):
        return self.order_by('-is_featured', '-posted_at', '-id')

    def search(self, keyword=None, location=None, category=None, job_types=None):
        """
        Active postings matching the given filters, featured postings first.

        ``keyword`` matches the title or the employer's company name.
        """
        jobs = self.active().select_related('posted_by__userprofile')
        keyword = (keyword or '').strip()
        if keyword:
            jobs = jobs.filter(
                Q(title__icontains=keyword) | Q(posted_by__userprofile__company_name__icontains=keyword)
            )
        location = (location or '').strip()
        if location:
            jobs = jobs.filter(location_city__icontains=location)
        category = (category or '').strip()
        if category:
            jobs = jobs.filter(job_category=category)
        job_types = [t for t in (job_types or []) if t]
        if job_types:
            jobs = jobs.filter(job_type__in=job_types)
        return jobs.featured_first()

    def title_suggestions(self, query, limit=10):
        query = (query or '').strip()
        if len(query) < 3:
            return []
        titles = (
            self.active()
            .filter(title__icontains=query)
            .order_by('title')
            .values_list('title', flat=True)
            .distinct()
        )
        return list(titles[:limit])


class JobPost(models.Model):
    class Status(models.TextChoices):
        PENDING_ADMIN = 'PENDING_ADMIN', 'Pending Admin Approval'
        ACTIVE = 'ACTIVE', 'Active'
        ON_HOLD = 'ON_HOLD', 'On Hold'

    OPEN_STATUSES = (Status.ACTIVE, Status.PENDING_ADMIN)

    JOB_TYPE_CHOICES = [(job_type, job_type.replace('-', ' ').title()) for job_type in JOB_TYPES]
    CATEGORY_CHOICES = [(category, category) for category in JOB_CATEGORIES]

    title = models.CharField(max_length=200)
    description = models.TextField()
    required_skills = models.TextField(blank=True, null=True)
    posted_by = models.ForeignKey(User, on_delete=models.CASCADE, related_name='posted_jobs')
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.PENDING_ADMIN)
    is_featured = models.BooleanField(default=False)

    job_type = models.CharField(max_length=20, choices=JOB_TYPE_CHOICES, blank=True, null=True)
    job_category = models.CharField(max_length=100, choices=CATEGORY_CHOICES, blank=True, null=True)
    location_city = models.CharField(max_length=100, blank=True, null=True)
    location_country = models.CharField(max_length=100, blank=True, null=True)
    remote_option = models.BooleanField(default=False)

    salary_min = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)
    salary_max = models.DecimalField(max_digits=10, decimal_places=2, blank=True, null=True)

    posted_at = models.DateTimeField(default=timezone.now)
    expires_at = models.DateTimeField(blank=True, null=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = JobPostQuerySet.as_manager()

    class Meta:
        ordering = ['-is_featured', '-posted_at']
        indexes = [
            models.Index(fields=['status', '-is_featured', '-posted_at'], name='jobpost_status_featured_idx'),
        ]

    def __str__(self):
        return f"{self.title} at {self.company_name or 'Unknown company'}"

    @property
    def company_name(self):
        profile = getattr(self.posted_by, 'userprofile', None)
        return profile.company_name if profile is not None else None

    @property
    def is_active(self):
        return self.status == self.Status.ACTIVE

    def get_formatted_salary(self):
        """Return formatted salary range"""
        if self.salary_min and self.salary_max:
            return f"${self.salary_min:,.0f} - ${self.salary_max:,.0f}"
        elif self.salary_min:
            return f"${self.salary_min:,.0f}+"
        elif self.salary_max:
            return f"Up to ${self.salary_max:,.0f}"
        return "Salary not specified"
