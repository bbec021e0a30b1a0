from django.contrib import admin

from .models import Listing


@admin.register(Listing)
class ListingAdmin(admin.ModelAdmin):
    list_display = ['title', 'company', 'category', 'created_at']
    list_filter = ['category', 'created_at']
    search_fields = ['title', 'description', 'company__company_name']
    raw_id_fields = ['company']
    readonly_fields = ['created_at', 'updated_at']
