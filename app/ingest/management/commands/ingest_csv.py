import csv
import os
from django.core.management.base import BaseCommand, CommandError
from django.utils import timezone
from django.utils.dateparse import parse_datetime
from ingest.clean import clean_rows, missing_columns
from pipeline.exceptions import ManifestError
from pipeline.promote import ingest_upload
from pipeline.shapes import SHAPES, get_shape


class Command(BaseCommand):
    help = 'Ingest a manifest CSV as one upload and reconcile it into the master list'

    def add_arguments(self, parser):
        parser.add_argument('--mode', type=str, choices=sorted(SHAPES), default='ocean',
                            help='Manifest layout (ocean or air)')
        parser.add_argument('--file', type=str, required=True, help='CSV file path')
        parser.add_argument('--upload-date', type=str, default=None,
                            help='ISO timestamp to record as the upload date (default: now)')

    def handle(self, *args, **options):
        shape = get_shape(options['mode'])
        file_path = options['file']
        upload_date = self.parse_upload_date(options['upload_date'])

        self.stdout.write(f'Ingesting {file_path} as {shape.mode} manifest...')

        try:
            with open(file_path, 'r', encoding='utf-8-sig', newline='') as f:
                reader = csv.DictReader(f)
                missing = missing_columns(reader.fieldnames, shape)
                if missing:
                    raise CommandError(f'Missing required columns: {", ".join(missing)}')
                rows = clean_rows(reader, shape)
        except FileNotFoundError:
            raise CommandError(f'File not found: {file_path}')
        except csv.Error as e:
            raise CommandError(f'Error reading CSV: {e}')
        except UnicodeDecodeError as e:
            raise CommandError(f'Error reading CSV: {file_path} is not UTF-8 ({e})')

        if not rows:
            raise CommandError('No valid data rows found in CSV')

        try:
            result = ingest_upload(shape, os.path.basename(file_path), rows, upload_date=upload_date)
        except ManifestError as e:
            raise CommandError(str(e))

        self.stdout.write(self.style.SUCCESS(
            f'{result.rows_inserted} rows imported, {result.items_added} new items, '
            f'{result.items_updated} updated (upload {result.upload.id})'
        ))

    def parse_upload_date(self, value):
        if not value:
            return None
        try:
            parsed = parse_datetime(value)
        except ValueError:
            parsed = None
        if parsed is None:
            raise CommandError(f'Invalid --upload-date: {value}')
        if timezone.is_naive(parsed):
            parsed = timezone.make_aware(parsed)
        return parsed
