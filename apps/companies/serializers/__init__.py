"""
Company serializers module.
"""
from .company_serializers import (
    CompanyDetailSerializer, CompanyListSerializer, CompanyUpdateSerializer,
    MembershipDateSerializer
)

__all__ = [
    'CompanyDetailSerializer',
    'CompanyListSerializer',
    'CompanyUpdateSerializer',
    'MembershipDateSerializer',
]
