"""
Company views module.
"""
from .company_views import CompanyListView, CompanyDetailView
from .admin_views import (
    PendingCompaniesView, ApproveCompanyView, CompanyMembershipDateView
)

__all__ = [
    'CompanyListView',
    'CompanyDetailView',
    'PendingCompaniesView',
    'ApproveCompanyView',
    'CompanyMembershipDateView',
]
