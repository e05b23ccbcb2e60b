"""
Read-only audit log in the admin.
"""

from django.contrib import admin

from moderation.models import AdminAction


@admin.register(AdminAction)
class AdminActionAdmin(admin.ModelAdmin):
    list_display = ['id', 'action_type', 'target_type', 'target_id', 'admin', 'created_at']
    list_filter = ['action_type', 'target_type', 'created_at']
    search_fields = ['target_id', 'admin__username', 'admin__email']
    readonly_fields = ['admin', 'action_type', 'target_id', 'target_type', 'details', 'created_at']
    ordering = ['-created_at']

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False

    def has_delete_permission(self, request, obj=None):
        return False
