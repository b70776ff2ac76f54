# apps/core/admin.py

from django.contrib import admin
from django.contrib.auth import update_session_auth_hash
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .forms import AdminUserChangeForm, AdminUserCreationForm
from .models import AdminUser


@admin.register(AdminUser)
class AdminUserAdmin(BaseUserAdmin):
    """Admin for admin users; creating one sends reset instructions"""

    form = AdminUserChangeForm
    add_form = AdminUserCreationForm

    list_display = [
        'email', 'current_sign_in_at', 'sign_in_count', 'created_at'
    ]
    list_display_links = ['email']
    list_filter = ['current_sign_in_at', 'sign_in_count', 'created_at']
    search_fields = ['email']
    ordering = ['email']
    filter_horizontal = []

    readonly_fields = [
        'sign_in_count', 'current_sign_in_at', 'last_sign_in_at',
        'current_sign_in_ip', 'last_sign_in_ip', 'created_at', 'updated_at'
    ]

    fieldsets = (
        ('Admin Details', {
            'fields': ('email', 'password1', 'password2')
        }),
        ('Access', {
            'fields': ('is_active', 'is_superuser')
        }),
        ('Sign-in activity', {
            'fields': (
                'sign_in_count', 'current_sign_in_at', 'last_sign_in_at',
                'current_sign_in_ip', 'last_sign_in_ip', 'created_at', 'updated_at'
            ),
            'classes': ('collapse',)
        }),
    )

    add_fieldsets = (
        ('Admin Details', {
            'classes': ('wide',),
            'fields': ('email',),
        }),
    )

    def save_model(self, request, obj, form, change):
        super().save_model(request, obj, form, change)

        # Keep the session alive when admins change their own password
        if change and getattr(form, 'password_changed', False) and obj.pk == request.user.pk:
            update_session_auth_hash(request, obj)
