"""
Management command to seed the order, table and reservation status catalogs.

Idempotent: existing rows are left untouched, missing well-known names are
created. Run after migrations in deployment.

Usage:
    python manage.py seed_statuses
"""

from django.core.management.base import BaseCommand

from statuses.catalog import status_catalogs
from statuses.services import ensure_default_statuses


class Command(BaseCommand):
    help = "Ensure the well-known order/table/reservation statuses exist (idempotent)"

    def handle(self, *args, **options):
        created = ensure_default_statuses()

        if created:
            for model_name, status_name in created:
                self.stdout.write(self.style.SUCCESS(f"✓ Created {model_name} '{status_name}'"))
        else:
            self.stdout.write(self.style.SUCCESS("✓ All statuses already exist"))

        status_catalogs.reload()
        self.stdout.write(f"  Orders: {', '.join(sorted(status_catalogs.orders.names()))}")
        self.stdout.write(f"  Tables: {', '.join(sorted(status_catalogs.tables.names()))}")
        self.stdout.write(f"  Reservations: {', '.join(sorted(status_catalogs.reservations.names()))}")
