from django.core.management.base import BaseCommand

from apps.membership.services import MembershipService


class Command(BaseCommand):
    help = 'Print the configured loyalty tiers: thresholds, badges and privileges'

    def handle(self, *args, **options):
        for row in MembershipService.tier_table():
            self.stdout.write(
                self.style.SUCCESS(f"{row['badge']} {row['level']} (from {row['min_months']} months)")
            )
            self.stdout.write(f"    privileges: {', '.join(row['privileges'])}")
            if row['unlocks']:
                self.stdout.write(f"    unlocks: {', '.join(row['unlocks'])}")
