"""
Seed the curated Oslo featured spots.

Usage:
    python manage.py seed_featured_spots
    python manage.py seed_featured_spots --file=/path/to/spots.json
    python manage.py seed_featured_spots --dry-run

Existing spots (matched by id) are updated in place; sort order follows
the position in the file.
"""

import json
import logging
from decimal import Decimal
from pathlib import Path

from django.core.management.base import BaseCommand, CommandError
from django.db import transaction

from spots.models import FeaturedSpot

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[2] / "data" / "featured_spots.json"


class Command(BaseCommand):
    help = 'Create or update the curated featured bathing spots'

    def add_arguments(self, parser):
        parser.add_argument(
            '--file',
            type=str,
            help='JSON file with spot records (default: bundled Oslo spots)',
        )
        parser.add_argument(
            '--dry-run',
            action='store_true',
            help='Parse the file without saving to database',
        )

    def handle(self, *args, **options):
        file_path = Path(options.get('file') or DEFAULT_DATA_FILE)
        dry_run = options.get('dry_run', False)

        try:
            records = json.loads(file_path.read_text(encoding='utf-8'))
        except FileNotFoundError:
            raise CommandError(f"File not found: {file_path}")
        except json.JSONDecodeError as e:
            raise CommandError(f"Invalid JSON in {file_path}: {e}")

        created = 0
        updated = 0

        with transaction.atomic():
            for position, record in enumerate(records):
                spot_id = record.pop('id', None)
                if not spot_id:
                    raise CommandError(f"Record {position} has no id")

                record['latitude'] = Decimal(str(record['latitude']))
                record['longitude'] = Decimal(str(record['longitude']))
                record.setdefault('sort_order', position)

                if dry_run:
                    self.stdout.write(f"  [DRY RUN] {spot_id}: {record.get('name')}")
                    continue

                _, was_created = FeaturedSpot.objects.update_or_create(id=spot_id, defaults=record)
                if was_created:
                    created += 1
                else:
                    updated += 1

        logger.info(f"Seeded featured spots: {created} created, {updated} updated")
        self.stdout.write(
            self.style.SUCCESS(f"Seed complete: {created} created, {updated} updated")
        )
