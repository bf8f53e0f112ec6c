from django.contrib import admin
from django.contrib.auth.admin import UserAdmin
from django.contrib.auth.models import User
from django.utils.html import format_html

from .models import JobSeekerProfile, Role, UserProfile


class UserProfileInline(admin.StackedInline):
    model = UserProfile
    can_delete = False
    verbose_name_plural = 'User Profile'
    exclude = ('security_answer', 'admin_support_chat_log')


class JobSeekerProfileInline(admin.StackedInline):
    model = JobSeekerProfile
    can_delete = False
    verbose_name_plural = 'Job Seeker Profile'
    extra = 0
    readonly_fields = ('completeness_score',)
    exclude = ('support_chat_log',)


class CustomUserAdmin(UserAdmin):
    inlines = (UserProfileInline, JobSeekerProfileInline)
    list_display = ('username', 'email', 'get_full_name', 'role_badge', 'is_active', 'date_joined')
    list_filter = ('is_staff', 'is_superuser', 'is_active', 'date_joined', 'userprofile__role')
    search_fields = ('username', 'first_name', 'last_name', 'email')
    ordering = ('-date_joined',)
    list_per_page = 25

    def role_badge(self, obj):
        if hasattr(obj, 'userprofile'):
            role = obj.userprofile.role
            colors = {
                Role.JOB_SEEKER: '#10b981',
                Role.EMPLOYER: '#3b82f6',
                Role.ADMIN: '#f59e0b',
            }
            return format_html(
                '<span style="background: {}; color: white; padding: 4px 8px; border-radius: 4px; font-size: 11px;">{}</span>',
                colors.get(role, '#64748b'), obj.userprofile.get_role_display()
            )
        return format_html('<span style="color: #64748b;">No Profile</span>')
    role_badge.short_description = 'Role'
    role_badge.admin_order_field = 'userprofile__role'


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'role', 'premium_tier', 'company_name', 'created_at')
    list_filter = ('role', 'premium_tier')
    search_fields = ('user__username', 'user__email', 'company_name')
    readonly_fields = ('created_at', 'updated_at')
    exclude = ('security_answer',)


@admin.register(JobSeekerProfile)
class JobSeekerProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'current_title', 'city', 'completeness_score', 'is_featured', 'offering_services')
    list_filter = ('is_featured', 'offering_services', 'job_type')
    search_fields = ('user__username', 'current_title', 'skills', 'city')
    readonly_fields = ('completeness_score', 'created_at', 'updated_at')


admin.site.unregister(User)
admin.site.register(User, CustomUserAdmin)
