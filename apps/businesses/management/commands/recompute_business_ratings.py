"""
Management command to repair drifted business ratings.

Business ``rating`` / ``review_count`` are eventually consistent with the
review set. A failed or raced recompute leaves a stale aggregate until the
next review change for that business; this command fixes all of them now.

Usage:
    python manage.py recompute_business_ratings [--dry-run]
"""

from django.core.management.base import BaseCommand
from apps.businesses.services import recompute_all_business_ratings


class Command(BaseCommand):
    help = 'Recompute every business rating and review count from its reviews'

    def add_arguments(self, parser):
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Show which businesses drifted without making changes',
        )

    def handle(self, *args, **options):
        dry_run = options['dry_run']

        drifted = recompute_all_business_ratings(dry_run=dry_run)

        if not drifted:
            self.stdout.write(
                self.style.SUCCESS('All business ratings are consistent with their reviews.')
            )
            return

        self.stdout.write(f'\nFound {len(drifted)} business(es) with drifted ratings:\n')

        for business, expected in drifted:
            self.stdout.write(
                f'  - {business.name} | stored {business.rating} ({business.review_count}) '
                f'-> {expected.rating} ({expected.review_count})'
            )

        if dry_run:
            self.stdout.write(
                self.style.WARNING('\n--dry-run mode: No changes made.')
            )
            return

        self.stdout.write(
            self.style.SUCCESS(f'\nRepaired {len(drifted)} business rating(s).')
        )
