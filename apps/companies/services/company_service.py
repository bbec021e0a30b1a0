"""
Company service for directory queries and admin operations.
"""
import logging

from django.db import transaction

from apps.membership.services import MembershipService
from ..models import Company
from .directory_ranker import DirectoryEntry, rank_with_loyalty

audit_logger = logging.getLogger('security.audit')


class CompanyService:
    """Service class for company directory operations"""

    @staticmethod
    def directory(now, sort_key=None, industry=None, size=None):
        """
        Approved companies, filtered and ordered by the directory ranker.

        Returns (company, loyalty snapshot) pairs so the classification made
        while ranking is not repeated.
        """
        companies = {company.pk: company for company in Company.objects.filter(is_approved=True)}
        entries = [DirectoryEntry.from_company(company) for company in companies.values()]
        ranked = rank_with_loyalty(entries, sort_key, now, industry=industry, size=size)
        return [
            (companies[item.entry.id], MembershipService.snapshot_for(item.classification))
            for item in ranked
        ]

    @staticmethod
    def pending_companies():
        return Company.objects.filter(is_approved=False).order_by('created_at')

    @staticmethod
    def approve(company, now, actor=None):
        """Approve a company; enrollment starts today if no date was set"""
        actor_id = getattr(actor, 'id', None)
        with transaction.atomic():
            company.approve(now)
            transaction.on_commit(lambda: audit_logger.info(
                f"Company {company.pk} approved by user {actor_id}; "
                f"enrolled on {company.membership_start_date}"
            ))
        return company

    @staticmethod
    def set_membership_start_date(company, enrolled_on, actor=None):
        """Override the enrollment date (admin correction)"""
        previous = company.membership_start_date
        company.membership_start_date = enrolled_on
        company.save(update_fields=['membership_start_date', 'updated_at'])
        audit_logger.info(
            f"Company {company.pk} enrollment date changed from {previous} to {enrolled_on} "
            f"by user {getattr(actor, 'id', None)}"
        )
        return company

    @staticmethod
    def can_manage(user, company):
        """Members manage their own company; admins manage any"""
        if not user or not user.is_authenticated:
            return False
        return user.is_staff or user.company_id == company.pk
