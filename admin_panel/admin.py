from django.contrib import admin

from .models import AdminActivity


@admin.register(AdminActivity)
class AdminActivityAdmin(admin.ModelAdmin):
    list_display = ('admin_user', 'activity_type', 'target_model', 'target_id', 'timestamp')
    list_filter = ('activity_type', 'timestamp')
    search_fields = ('admin_user__username', 'description')
    readonly_fields = ('admin_user', 'activity_type', 'description', 'target_model', 'target_id', 'ip_address', 'timestamp')
