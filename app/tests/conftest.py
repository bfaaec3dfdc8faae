from pathlib import Path

import pytest
from django.core.management import call_command

SAMPLE_DATA = Path(__file__).resolve().parent.parent / 'sample_data'


@pytest.fixture
def sample_path():
    def _path(name):
        return str(SAMPLE_DATA / name)
    return _path


@pytest.fixture
def ingest_sample(sample_path):
    """Run ingest_csv on a sample manifest with a fixed upload date."""
    def _ingest(name, upload_date, mode='ocean'):
        call_command('ingest_csv', mode=mode, file=sample_path(name), upload_date=upload_date.isoformat())
    return _ingest
