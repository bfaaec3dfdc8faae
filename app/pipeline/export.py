"""
CSV export of upload and Master List views.

Files are written with the manifest's own header row, so an exported view can
be fed back through ingest_csv.
"""

import csv
import logging

from pipeline.gateway import ROW_FILTERS

logger = logging.getLogger(__name__)

UPLOAD_VIEWS = ROW_FILTERS + ('new', 'removed', 'released')
MASTER_VIEWS = ROW_FILTERS


def upload_view_rows(gateway, comparison, view):
    """Rows of one upload for a row filter, or the rows behind a comparison set."""
    if view == 'new':
        return comparison.new_rows
    if view == 'removed':
        return comparison.removed_rows
    if view == 'released':
        return comparison.released_rows
    if view not in ROW_FILTERS:
        raise ValueError(f'Unknown upload view: {view!r}')
    return gateway.get_report_rows(comparison.upload.id, view)


def write_rows_csv(path, rows, shape):
    """Write field-keyed rows under the manifest headers. Returns the row count."""
    # utf-8-sig so spreadsheet apps pick the encoding up
    with open(path, 'w', encoding='utf-8-sig', newline='') as f:
        writer = csv.DictWriter(f, fieldnames=shape.required_columns)
        writer.writeheader()
        for row in rows:
            writer.writerow({header: row.get(field) or '' for header, field in shape.columns})

    logger.info('Exported %d %s rows to %s', len(rows), shape.mode, path)
    return len(rows)
