"""
Company ownership and approval permissions.
"""
from rest_framework.permissions import BasePermission

from .services import CompanyService


class IsCompanyMemberOrAdmin(BasePermission):
    """Object-level: the object belongs to the acting user's company, or the user is an admin"""
    message = 'Forbidden'

    def has_object_permission(self, request, view, obj):
        company = getattr(obj, 'company', obj)
        return CompanyService.can_manage(request.user, company)


class IsApprovedMember(BasePermission):
    """The acting user belongs to an approved company"""
    message = 'Your company has not been approved yet'

    def has_permission(self, request, view):
        company = getattr(request.user, 'company', None)
        return company is not None and company.is_approved
