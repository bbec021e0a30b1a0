
from django.core.management.base import BaseCommand
from django.db import transaction

from apps.common.clock import today
from apps.companies.models import Company
from apps.listings.models import Listing
from apps.membership.services import MembershipService, months_before
from apps.users.models import User

ADMIN_EMAIL = 'admin@cic.ca'


COMPANIES = [
    {
        'company_name': 'CIC Admin Co',
        'description': 'The administrative company for the CIC network.',
        'industry': 'Administration',
        'size': 'small',
        'months': 60,
        'email': ADMIN_EMAIL,
        'password': 'admin123',
        'is_admin': True,
    },
    {
        'company_name': 'GreenTech Solutions',
        'description': 'Sustainable technology solutions for a greener future.',
        'industry': 'Technology',
        'size': 'medium',
        'months': 24,
        'email': 'greentech@example.com',
        'password': 'password123',
        'listings': [
            {
                'title': 'Green Tech Workshop',
                'description': 'Join us for a hands-on workshop on sustainable technology practices.',
                'category': 'event',
            },
            {
                'title': 'Collaboration Opportunity: AI for Sustainability',
                'description': 'Looking for partners to develop AI-driven sustainability tools.',
                'category': 'collaboration',
            },
        ],
    },
    {
        'company_name': 'EcoVentures Inc',
        'description': 'Eco-friendly ventures driving circular economy.',
        'industry': 'Environment',
        'size': 'startup',
        'months': 8,
        'email': 'eco@example.com',
        'password': 'password123',
    },
    {
        'company_name': 'CircularMaterials Ltd',
        'description': 'Leading the way in circular material supply chains.',
        'industry': 'Manufacturing',
        'size': 'large',
        'months': 48,
        'email': 'circular@example.com',
        'password': 'password123',
        'listings': [
            {
                'title': 'Circular Economy Resource Pack',
                'description': 'A comprehensive set of resources for implementing circular economy principles.',
                'category': 'resource',
            },
            {
                'title': 'Annual CIC Networking Session',
                'description': 'Our flagship annual networking session for all CIC members.',
                'category': 'session',
            },
        ],
    },
    {
        'company_name': 'FreshStart Startup',
        'description': 'A brand new startup exploring sustainable possibilities.',
        'industry': 'Technology',
        'size': 'startup',
        'months': 1,
        'email': 'fresh@example.com',
        'password': 'password123',
    },
]


class Command(BaseCommand):
    help = 'Create the demo network: member companies of every tier, their users and sample listings'

    def handle(self, *args, **options):
        if User.objects.filter(email=ADMIN_EMAIL).exists():
            self.stdout.write(self.style.WARNING('Directory already seeded; nothing to do'))
            return

        now = today()
        with transaction.atomic():
            for data in COMPANIES:
                company = Company.objects.create(
                    company_name=data['company_name'],
                    description=data['description'],
                    industry=data['industry'],
                    size=data['size'],
                    membership_start_date=months_before(now, data['months']),
                    is_approved=True,
                )
                if data.get('is_admin'):
                    User.objects.create_superuser(
                        email=data['email'], password=data['password'], company=company
                    )
                else:
                    User.objects.create_user(
                        email=data['email'], password=data['password'], company=company
                    )
                for listing in data.get('listings', []):
                    Listing.objects.create(company=company, **listing)

                snapshot = MembershipService.loyalty_for_company(company, now)
                self.stdout.write(
                    self.style.SUCCESS(
                        f'Created {company.company_name}: {snapshot.badge} {snapshot.tier.label}'
                    )
                )

        self.stdout.write(
            self.style.SUCCESS(f'Successfully seeded {len(COMPANIES)} companies')
        )
