import json
from io import StringIO

import pytest
from django.core.management import call_command
from googleapiclient.errors import HttpError
from ingest.management.commands import pull_sheets
from ingest.models import Upload
from pipeline.models import AirMasterEntry, OceanMasterEntry
from pipeline.shapes import AIR, OCEAN


class FakeRequest:
    def __init__(self, result):
        self.result = result

    def execute(self):
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


class FakeSheetsService:
    """Answers spreadsheets().values().get() from a dict keyed by (sheet_id, range)."""

    def __init__(self, responses):
        self.responses = responses
        self.requests = []

    def spreadsheets(self):
        return self

    def values(self):
        return self

    def get(self, spreadsheetId, range):
        self.requests.append((spreadsheetId, range))
        return FakeRequest(self.responses[(spreadsheetId, range)])


def blank_row(shape, **cells):
    return [cells.get(header, '') for header in shape.required_columns]


@pytest.fixture
def sheets(monkeypatch, tmp_path):
    """Point pull_sheets at a fake Sheets API and a throwaway credentials file."""
    credentials = tmp_path / 'service-account.json'
    credentials.write_text('{}')
    monkeypatch.setenv('GOOGLE_APPLICATION_CREDENTIALS', str(credentials))
    monkeypatch.setattr(
        pull_sheets.service_account.Credentials,
        'from_service_account_file',
        lambda path, scopes: object(),
    )

    def configure(config, responses):
        service = FakeSheetsService(responses)
        monkeypatch.setenv('MANIFEST_SHEETS_CONFIG', json.dumps(config))
        monkeypatch.setattr(pull_sheets, 'build', lambda *args, **kwargs: service)
        return service

    return configure


def run_pull(**options):
    out, err = StringIO(), StringIO()
    call_command('pull_sheets', stdout=out, stderr=err, **options)
    return out.getvalue(), err.getvalue()


@pytest.mark.django_db
class TestPullSheets:
    """Test pulling manifests from Google Sheets."""

    def test_ocean_and_air_sheets(self, sheets):
        ocean_values = [
            list(OCEAN.required_columns),
            blank_row(OCEAN, CONTAINER='C1', MBL='M1', HB='6.17E+08', FRL='45000'),
            # Sheets drops trailing empty cells
            ['C1', '', '', 'M1', '', '', 'HB2'],
            [],
        ]
        air_values = [
            list(AIR.required_columns),
            blank_row(AIR, MAWB='176-1', HAWB='H1'),
        ]
        service = sheets(
            [
                {'name': 'Ocean', 'sheet_id': 'sheet-1', 'tab': 'Manifest', 'mode': 'ocean', 'header_row': 3},
                {'name': 'Air', 'sheet_id': 'sheet-2', 'tab': 'AIR', 'mode': 'air'},
            ],
            {
                ('sheet-1', 'Manifest!A3:ZZ'): {'values': ocean_values},
                ('sheet-2', 'AIR!A1:ZZ'): {'values': air_values},
            },
        )

        out, err = run_pull()

        assert err == ''
        assert service.requests == [('sheet-1', 'Manifest!A3:ZZ'), ('sheet-2', 'AIR!A1:ZZ')]
        assert 'Ocean: 2 rows, 2 new items, 0 updated' in out
        assert 'Total: 3 rows, 3 new items, 0 updated' in out
        assert set(OceanMasterEntry.objects.values_list('hb', flat=True)) == {'617000000', 'HB2'}
        assert AirMasterEntry.objects.get().hawb == 'H1'
        assert Upload.objects.get(mode='ocean').filename == 'Ocean (sheet-1:Manifest)'

    def test_missing_columns_skips_sheet(self, sheets):
        sheets(
            [{'name': 'Bad', 'sheet_id': 's', 'tab': 'T', 'mode': 'ocean'}],
            {('s', 'T!A1:ZZ'): {'values': [['CONTAINER', 'MBL', 'HB'], ['C1', 'M1', 'HB1']]}},
        )

        out, err = run_pull()

        assert 'Bad: missing required columns: SEAL #' in err
        assert Upload.objects.count() == 0

    def test_api_error_does_not_stop_other_sheets(self, sheets):
        class Response(dict):
            status = 403
            reason = 'Forbidden'

        sheets(
            [
                {'name': 'Denied', 'sheet_id': 'denied', 'tab': 'T', 'mode': 'ocean'},
                {'name': 'Air', 'sheet_id': 'ok', 'tab': 'T', 'mode': 'air'},
            ],
            {
                ('denied', 'T!A1:ZZ'): HttpError(Response(), b'forbidden'),
                ('ok', 'T!A1:ZZ'): {'values': [list(AIR.required_columns), blank_row(AIR, HAWB='H1')]},
            },
        )

        out, err = run_pull()

        assert 'Error pulling Denied' in err
        assert 'Total: 1 rows, 1 new items, 0 updated' in out
        assert Upload.objects.count() == 1

    def test_invalid_entries_skipped(self, sheets):
        sheets(
            [{'name': 'NoTab', 'sheet_id': 's'}, {'name': 'Rail', 'sheet_id': 's', 'tab': 'T', 'mode': 'rail'}],
            {},
        )

        out, err = run_pull()

        assert err.count('Invalid config') == 2
        assert 'Total: 0 rows' in out

    def test_empty_sheet(self, sheets):
        sheets([{'name': 'Empty', 'sheet_id': 's', 'tab': 'T'}], {('s', 'T!A1:ZZ'): {}})

        out, err = run_pull()

        assert 'No data found in Empty' in out
        assert Upload.objects.count() == 0

    def test_no_configuration(self, monkeypatch):
        monkeypatch.delenv('MANIFEST_SHEETS_CONFIG', raising=False)
        out, err = run_pull()
        assert 'No sheets configured' in out

    def test_invalid_configuration_json(self, monkeypatch):
        monkeypatch.setenv('MANIFEST_SHEETS_CONFIG', '{not json')
        out, err = run_pull()
        assert 'Invalid MANIFEST_SHEETS_CONFIG JSON' in err

    def test_missing_credentials(self, monkeypatch, tmp_path):
        monkeypatch.setenv('MANIFEST_SHEETS_CONFIG', json.dumps([{'name': 'A', 'sheet_id': 's', 'tab': 'T'}]))
        monkeypatch.setenv('GOOGLE_APPLICATION_CREDENTIALS', str(tmp_path / 'missing.json'))
        out, err = run_pull()
        assert 'Google credentials not found' in err

    def test_only_one_sheet(self, sheets):
        service = sheets(
            [
                {'name': 'Ocean', 'sheet_id': 'a', 'tab': 'T'},
                {'name': 'Air', 'sheet_id': 'b', 'tab': 'T', 'mode': 'air'},
            ],
            {('b', 'T!A1:ZZ'): {'values': [list(AIR.required_columns), blank_row(AIR, HAWB='H1')]}},
        )

        out, err = run_pull(only='Air')

        assert service.requests == [('b', 'T!A1:ZZ')]
        assert AirMasterEntry.objects.count() == 1
