import json
import os
from django.core.management.base import BaseCommand
from google.oauth2 import service_account
from googleapiclient.discovery import build
from googleapiclient.errors import HttpError
from ingest.clean import clean_rows, missing_columns
from pipeline.exceptions import ManifestError
from pipeline.promote import ingest_upload
from pipeline.shapes import SHAPES

SCOPES = ['https://www.googleapis.com/auth/spreadsheets.readonly']


class Command(BaseCommand):
    help = 'Pull manifests from Google Sheets and ingest each sheet as one upload'

    def add_arguments(self, parser):
        parser.add_argument('--only', type=str, default=None,
                            help='Pull only the configured sheet with this name')

    def handle(self, *args, **options):
        sheets_config = self.load_config()
        if options['only']:
            sheets_config = [entry for entry in sheets_config if entry.get('name') == options['only']]
        if not sheets_config:
            self.stdout.write(self.style.WARNING('No sheets configured in MANIFEST_SHEETS_CONFIG'))
            return

        service = self.sheets_service()
        if service is None:
            return

        totals = {'rows': 0, 'added': 0, 'updated': 0}
        for entry in sheets_config:
            mode = entry.get('mode', 'ocean')
            if not all([entry.get('name'), entry.get('sheet_id'), entry.get('tab')]) or mode not in SHAPES:
                self.stderr.write(self.style.ERROR(f'Invalid config: {entry}'))
                continue

            try:
                result = self.pull_sheet(service, entry, SHAPES[mode])
            except (HttpError, ManifestError) as e:
                self.stderr.write(self.style.ERROR(f'  Error pulling {entry["name"]}: {e}'))
                continue

            if result is not None:
                totals['rows'] += result.rows_inserted
                totals['added'] += result.items_added
                totals['updated'] += result.items_updated

        self.stdout.write(self.style.SUCCESS(
            f'Total: {totals["rows"]} rows, {totals["added"]} new items, {totals["updated"]} updated'
        ))

    def load_config(self):
        """Sheet entries from MANIFEST_SHEETS_CONFIG: name, sheet_id, tab, mode, header_row."""
        raw = os.environ.get('MANIFEST_SHEETS_CONFIG', '[]')
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            self.stderr.write(self.style.ERROR(f'Invalid MANIFEST_SHEETS_CONFIG JSON: {e}'))
            return []

    def sheets_service(self):
        credentials_path = os.environ.get('GOOGLE_APPLICATION_CREDENTIALS')
        if not credentials_path or not os.path.exists(credentials_path):
            self.stderr.write(self.style.ERROR(f'Google credentials not found at: {credentials_path}'))
            return None

        credentials = service_account.Credentials.from_service_account_file(credentials_path, scopes=SCOPES)
        return build('sheets', 'v4', credentials=credentials)

    def pull_sheet(self, service, entry, shape):
        """Fetch one tab and ingest it. Returns None when the tab is skipped."""
        name, sheet_id, tab = entry['name'], entry['sheet_id'], entry['tab']
        self.stdout.write(f'Pulling {name} from {sheet_id}:{tab}...')

        response = service.spreadsheets().values().get(
            spreadsheetId=sheet_id,
            range=f'{tab}!A{entry.get("header_row", 1)}:ZZ',
        ).execute()
        values = response.get('values', [])
        if not values:
            self.stdout.write(self.style.WARNING(f'  No data found in {name}'))
            return None

        headers = [header.strip() for header in values[0]]
        missing = missing_columns(headers, shape)
        if missing:
            self.stderr.write(self.style.ERROR(f'  {name}: missing required columns: {", ".join(missing)}'))
            return None

        # Sheets drops trailing empty cells
        width = len(headers)
        rows = clean_rows(
            (dict(zip(headers, list(row) + [''] * (width - len(row)))) for row in values[1:]),
            shape,
        )
        if not rows:
            self.stdout.write(self.style.WARNING(f'  No valid data rows in {name}'))
            return None

        result = ingest_upload(shape, f'{name} ({sheet_id}:{tab})', rows)
        self.stdout.write(self.style.SUCCESS(
            f'  {name}: {result.rows_inserted} rows, {result.items_added} new items, '
            f'{result.items_updated} updated'
        ))
        return result
