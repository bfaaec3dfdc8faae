import logging
from dataclasses import dataclass

from django.db import DatabaseError, transaction

from pipeline.exceptions import MasterListWriteError
from pipeline.gateway import DjangoManifestGateway, chunked
from pipeline.normalize import normalize_identifier
from pipeline.reconcile import reconcile

logger = logging.getLogger(__name__)


@dataclass
class IngestResult:
    upload: object
    rows_inserted: int
    items_added: int
    items_updated: int


def ingest_upload(shape, filename, rows, gateway=None, upload_date=None):
    """
    Record one manifest upload and fold it into the Master List.

    `rows` are header-keyed and already cleaned (see ingest.clean). Callers
    must not run two ingestions for the same shape at once.
    Returns an IngestResult with the upload and the row / entry counts.
    """
    gateway = gateway or DjangoManifestGateway(shape)
    rows = list(rows)

    # Upload history: the upload and its raw rows land together or not at all
    with transaction.atomic():
        upload = gateway.create_upload(filename, len(rows), upload_date=upload_date)
        rows_inserted = gateway.insert_report_rows(upload, rows)

    logger.info('Recorded %s upload %s (%s): %d rows', shape.mode, upload.id, filename, rows_inserted)

    items_added, items_updated = promote_rows(gateway, upload.id, rows)

    return IngestResult(
        upload=upload,
        rows_inserted=rows_inserted,
        items_added=items_added,
        items_updated=items_updated,
    )


def promote_rows(gateway, upload_id, rows):
    """
    Reconcile rows against the Master List and write the staged changes.

    The existing entries are read in one snapshot before anything is written.
    Writes go out in batches of gateway.batch_size; a failing batch raises
    MasterListWriteError carrying how many inserts and updates had landed.
    """
    shape = gateway.shape
    identifiers = {normalize_identifier(row.get(shape.key_column)) for row in rows}
    existing_index = gateway.get_master_entries_by_identifiers(identifiers)

    result = reconcile(existing_index, rows, upload_id, shape)

    items_added = 0
    items_updated = 0
    try:
        for batch in chunked(result.inserts, gateway.batch_size):
            items_added += gateway.insert_master_entries(batch)
        for batch in chunked(result.updates, gateway.batch_size):
            items_updated += gateway.update_master_entries(batch)
    except DatabaseError as exc:
        logger.error(
            'Master list write failed for %s upload %s after %d/%d inserts, %d/%d updates',
            shape.mode, upload_id, items_added, result.items_added, items_updated, result.items_updated,
        )
        raise MasterListWriteError(
            items_added=items_added,
            items_updated=items_updated,
            attempted_added=result.items_added,
            attempted_updated=result.items_updated,
        ) from exc

    logger.info(
        'Master list for %s upload %s: %d added, %d updated',
        shape.mode, upload_id, items_added, items_updated,
    )
    return items_added, items_updated
