from django.contrib import admin
from django.contrib.auth.admin import UserAdmin as BaseUserAdmin

from .models import User


@admin.register(User)
class UserAdmin(BaseUserAdmin):
    """Users are keyed by email and attached to a company"""
    list_display = ['email', 'company', 'is_staff', 'is_active', 'created_at']
    list_filter = ['is_staff', 'is_active', 'created_at']
    search_fields = ['email', 'company__company_name']
    ordering = ['-created_at']
    raw_id_fields = ['company']

    fieldsets = (
        (None, {'fields': ('email', 'password')}),
        ('Company', {'fields': ('company',)}),
        ('Permissions', {'fields': ('is_active', 'is_staff', 'is_superuser')}),
        ('Timestamps', {'fields': ('last_login', 'created_at', 'updated_at'), 'classes': ('collapse',)}),
    )
    add_fieldsets = (
        (None, {'classes': ('wide',), 'fields': ('email', 'company', 'password1', 'password2')}),
    )
    readonly_fields = ['last_login', 'created_at', 'updated_at']
