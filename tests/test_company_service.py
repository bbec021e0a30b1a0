"""
Tests for the company service: directory ranking and approval auditing.
"""
from datetime import date
from unittest.mock import patch

from django.test import TestCase
from rest_framework.test import APIClient

from apps.common.clock import today
from apps.companies.services import CompanyService
from apps.membership.models import Tier
from apps.membership.services import MembershipService, months_before
from tests.factories import CompanyFactory

EVALUATED_ON = date(2026, 1, 15)


class DirectoryTests(TestCase):

    def setUp(self):
        self.champion = CompanyFactory(company_name='Circular', membership_start_date=months_before(EVALUATED_ON, 40))
        self.participant = CompanyFactory(company_name='Eco', membership_start_date=months_before(EVALUATED_ON, 8))
        CompanyFactory(company_name='Pending', is_approved=False)

    def test_returns_companies_with_their_snapshots(self):
        ranked = CompanyService.directory(EVALUATED_ON, sort_key='tier')

        self.assertEqual([company for company, _ in ranked], [self.champion, self.participant])
        for company, snapshot in ranked:
            self.assertEqual(
                snapshot,
                MembershipService.calculate_loyalty(company.membership_start_date, EVALUATED_ON),
            )
        self.assertEqual(ranked[0][1].tier, Tier.CHAMPION)
        self.assertEqual(ranked[1][1].elapsed_months, 8)

    def test_listing_reuses_ranking_classification(self):
        with patch.object(
            MembershipService, 'calculate_loyalty', wraps=MembershipService.calculate_loyalty
        ) as calculate:
            response = APIClient().get('/api/companies/', {'sort': 'tier'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(len(response.data['data']), 2)
        calculate.assert_not_called()


class ApproveAuditTests(TestCase):

    def test_audit_entry_written_after_commit(self):
        company = CompanyFactory(is_approved=False)

        with self.captureOnCommitCallbacks(execute=False) as callbacks:
            CompanyService.approve(company, today())
        self.assertEqual(len(callbacks), 1)

        with self.assertLogs('security.audit', level='INFO') as logs:
            callbacks[0]()
        self.assertIn(f'Company {company.pk} approved', logs.output[0])

    def test_approval_is_audited(self):
        company = CompanyFactory(is_approved=False)
        with self.assertLogs('security.audit', level='INFO') as logs:
            with self.captureOnCommitCallbacks(execute=True):
                CompanyService.approve(company, today())
        self.assertIn(f'enrolled on {today()}', logs.output[0])
