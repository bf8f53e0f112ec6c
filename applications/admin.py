from django.contrib import admin

from .models import Application, ApplicationStatus


class ApplicationStatusInline(admin.TabularInline):
    model = ApplicationStatus
    extra = 0
    readonly_fields = ('old_status', 'status', 'changed_by', 'changed_at')
    can_delete = False


@admin.register(Application)
class ApplicationAdmin(admin.ModelAdmin):
    list_display = ('job', 'seeker', 'status', 'exam_submitted', 'exam_score', 'applied_at')
    list_filter = ('status', 'exam_submitted', 'applied_at', 'updated_at')
    search_fields = ('job__title', 'seeker__username', 'job__posted_by__userprofile__company_name')
    readonly_fields = ('applied_at', 'updated_at')
    date_hierarchy = 'applied_at'
    inlines = (ApplicationStatusInline,)

    fieldsets = (
        ('Application Information', {
            'fields': ('job', 'seeker', 'status', 'message_log')
        }),
        ('Exam', {
            'fields': ('exam_questions', 'exam_answers', 'exam_submitted', 'exam_score')
        }),
        ('Offer', {
            'fields': ('offer_start_date', 'offer_start_time', 'offer_location', 'offer_required_papers')
        }),
        ('Timestamps', {
            'fields': ('applied_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )


@admin.register(ApplicationStatus)
class ApplicationStatusAdmin(admin.ModelAdmin):
    list_display = ('application', 'old_status', 'status', 'changed_by', 'changed_at')
    list_filter = ('status', 'changed_at')
    search_fields = ('application__job__title', 'application__seeker__username')
    readonly_fields = ('changed_at',)
