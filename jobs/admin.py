from django.contrib import admin

from .models import JobPost


@admin.register(JobPost)
class JobPostAdmin(admin.ModelAdmin):
    list_display = ('title', 'company_name', 'status', 'is_featured', 'job_type', 'location_city', 'posted_at')
    list_filter = ('status', 'is_featured', 'job_type', 'job_category', 'remote_option')
    search_fields = ('title', 'description', 'posted_by__username', 'posted_by__userprofile__company_name')
    readonly_fields = ('posted_at', 'updated_at')
    date_hierarchy = 'posted_at'
    list_select_related = ('posted_by__userprofile',)

    fieldsets = (
        ('Job Information', {
            'fields': ('title', 'description', 'required_skills', 'posted_by')
        }),
        ('Classification', {
            'fields': ('job_type', 'job_category', 'location_city', 'location_country', 'remote_option')
        }),
        ('Compensation', {
            'fields': ('salary_min', 'salary_max')
        }),
        ('Status', {
            'fields': ('status', 'is_featured', 'expires_at')
        }),
        ('Timestamps', {
            'fields': ('posted_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
