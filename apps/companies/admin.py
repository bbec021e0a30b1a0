from django.contrib import admin

from apps.common.clock import today
from apps.membership.services import MembershipService
from .models import Company
from .services import CompanyService


@admin.register(Company)
class CompanyAdmin(admin.ModelAdmin):
    """Company admin showing the loyalty tier derived from the enrollment date"""
    list_display = [
        'company_name', 'industry', 'size', 'membership_start_date',
        'loyalty_tier', 'membership_duration', 'is_approved'
    ]
    list_filter = ['is_approved', 'size', 'industry']
    search_fields = ['company_name', 'industry']
    readonly_fields = ['loyalty_tier', 'membership_duration', 'created_at', 'updated_at']
    actions = ['approve_companies']

    fieldsets = (
        ('Profile', {'fields': ('company_name', 'description', 'industry', 'size', 'website')}),
        ('Membership', {'fields': ('is_approved', 'membership_start_date', 'loyalty_tier', 'membership_duration')}),
        ('Timestamps', {'fields': ('created_at', 'updated_at'), 'classes': ('collapse',)}),
    )

    @admin.display(description='Tier')
    def loyalty_tier(self, obj):
        snapshot = MembershipService.loyalty_for_company(obj, today())
        return f"{snapshot.badge} {snapshot.tier.label}"

    @admin.display(description='Member for')
    def membership_duration(self, obj):
        return MembershipService.format_duration(obj.membership_start_date, today()) or '-'

    @admin.action(description='Approve selected companies')
    def approve_companies(self, request, queryset):
        now = today()
        for company in queryset.filter(is_approved=False):
            CompanyService.approve(company, now, actor=request.user)
        self.message_user(request, 'Selected companies approved')
