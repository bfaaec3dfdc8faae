"""
Persistence gateway for uploads, report rows and the Master List.

The reconciliation and diff code only sees this interface. DjangoManifestGateway
is the ORM-backed implementation; one instance serves one manifest shape.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass

from django.conf import settings
from django.core.exceptions import ValidationError
from django.db import transaction
from django.db.models import Q
from django.utils import timezone

from ingest.models import AirReportRow, OceanReportRow, Upload
from pipeline.exceptions import UploadNotFound
from pipeline.models import AirMasterEntry, OceanMasterEntry
from pipeline.reconcile import ExistingEntry

logger = logging.getLogger(__name__)

ROW_FILTERS = ('all', 'with_frl', 'without_frl')
DELETE_POLICIES = ('delete', 'nullify')

ROW_MODELS = {
    'ocean': OceanReportRow,
    'air': AirReportRow,
}

MASTER_MODELS = {
    'ocean': OceanMasterEntry,
    'air': AirMasterEntry,
}


@dataclass(frozen=True)
class DeleteResult:
    rows_deleted: int
    entries_deleted: int
    entries_orphaned: int


def chunked(items, size):
    for start in range(0, len(items), size):
        yield items[start:start + size]


class ManifestGateway(ABC):
    """
    Storage contract consumed by ingestion, comparison and reporting.
    Implementations expose the manifest shape they serve as `shape`.
    """

    @abstractmethod
    def list_uploads(self):
        """Uploads of this shape, newest upload_date first."""

    @abstractmethod
    def get_upload(self, upload_id):
        """Return one upload or raise UploadNotFound."""

    @abstractmethod
    def create_upload(self, filename, row_count, upload_date=None):
        pass

    @abstractmethod
    def insert_report_rows(self, upload, rows):
        """Store header-keyed rows for an upload, returning the count stored."""

    @abstractmethod
    def get_report_rows(self, upload_id, filter='all'):
        pass

    @abstractmethod
    def get_master_entries_by_identifiers(self, identifiers):
        pass

    @abstractmethod
    def insert_master_entries(self, batch):
        pass

    @abstractmethod
    def update_master_entries(self, batch):
        pass

    @abstractmethod
    def get_master_entries(self, filter='all'):
        pass

    @abstractmethod
    def get_master_entries_touched_by(self, upload_id):
        """Entries first seen in, or last updated by, the given upload."""

    @abstractmethod
    def delete_upload(self, upload_id, policy=None):
        pass


class DjangoManifestGateway(ManifestGateway):

    def __init__(self, shape, batch_size=None):
        self.shape = shape
        self.row_model = ROW_MODELS[shape.mode]
        self.master_model = MASTER_MODELS[shape.mode]
        self.batch_size = batch_size or settings.MASTER_LIST_BATCH_SIZE

    # -- uploads ---------------------------------------------------------

    def list_uploads(self):
        return list(Upload.objects.filter(mode=self.shape.mode).order_by('-upload_date'))

    def get_upload(self, upload_id):
        try:
            return Upload.objects.get(pk=upload_id, mode=self.shape.mode)
        except (Upload.DoesNotExist, ValidationError, ValueError):
            raise UploadNotFound(upload_id) from None

    def create_upload(self, filename, row_count, upload_date=None):
        return Upload.objects.create(
            mode=self.shape.mode,
            filename=filename,
            row_count=row_count,
            upload_date=upload_date or timezone.now(),
        )

    # -- report rows -----------------------------------------------------

    def insert_report_rows(self, upload, rows):
        objs = [
            self.row_model(upload=upload, line_number=line_number, **self.shape.row_to_fields(row))
            for line_number, row in enumerate(rows, start=1)
        ]
        with transaction.atomic():
            self.row_model.objects.bulk_create(objs, batch_size=self.batch_size)
        return len(objs)

    def _release_filter(self, queryset, filter):
        if filter not in ROW_FILTERS:
            raise ValueError(f'Unknown row filter: {filter!r}')

        release = self.shape.release_field
        blank = Q(**{release: ''}) | Q(**{f'{release}__isnull': True})
        if filter == 'with_frl':
            return queryset.exclude(blank)
        if filter == 'without_frl':
            return queryset.filter(blank)
        return queryset

    def get_report_rows(self, upload_id, filter='all'):
        queryset = self.row_model.objects.filter(upload_id=upload_id).order_by('line_number')
        return list(self._release_filter(queryset, filter).values())

    # -- master list -----------------------------------------------------

    def get_master_entries_by_identifiers(self, identifiers):
        key = self.shape.key_field
        tracked_fields = [tracked.field for tracked in self.shape.tracked]
        identifiers = sorted({identifier for identifier in identifiers if identifier})

        index = {}
        for chunk in chunked(identifiers, self.batch_size):
            queryset = self.master_model.objects.filter(**{f'{key}__in': chunk})
            for values in queryset.values('id', key, *tracked_fields):
                index[values[key]] = ExistingEntry(
                    pk=values['id'],
                    identifier=values[key],
                    tracked={name: values[name] for name in tracked_fields},
                )
        return index

    def insert_master_entries(self, batch):
        """
        Insert new entries, upserting on the identifier.

        A retried batch that partly landed before overwrites the rows it
        already created instead of duplicating them. first_seen_upload and
        created_at are left as first written.
        """
        key = self.shape.key_field
        domain_fields = [name for name in self.shape.fields if name != key]
        objs = [
            self.master_model(
                **dict(insert.domain),
                first_seen_upload_id=insert.first_seen_upload_id,
                last_updated_upload_id=insert.last_updated_upload_id,
                last_update_reason='',
                created_at=insert.created_at,
                updated_at=insert.updated_at,
            )
            for insert in batch
        ]
        with transaction.atomic():
            self.master_model.objects.bulk_create(
                objs,
                update_conflicts=True,
                batch_size=self.batch_size,
                unique_fields=[key],
                update_fields=domain_fields + ['last_updated_upload', 'updated_at'],
            )
        return len(objs)

    def update_master_entries(self, batch):
        key = self.shape.key_field
        domain_fields = [name for name in self.shape.fields if name != key]
        objs = [
            self.master_model(
                pk=update.pk,
                **dict(update.domain),
                last_updated_upload_id=update.last_updated_upload_id,
                last_update_reason=update.last_update_reason,
                updated_at=update.updated_at,
            )
            for update in batch
        ]
        with transaction.atomic():
            self.master_model.objects.bulk_update(
                objs,
                batch_size=self.batch_size,
                fields=domain_fields + ['last_updated_upload', 'last_update_reason', 'updated_at'],
            )
        return len(objs)

    def get_master_entries(self, filter='all'):
        queryset = self.master_model.objects.order_by(self.shape.key_field)
        return list(self._release_filter(queryset, filter).values())

    def get_master_entries_touched_by(self, upload_id):
        """Entries first seen in, or last updated by, the given upload."""
        queryset = self.master_model.objects.filter(
            Q(first_seen_upload_id=upload_id) | Q(last_updated_upload_id=upload_id)
        ).order_by(self.shape.key_field)
        return list(queryset.values())

    # -- deletion --------------------------------------------------------

    def delete_upload(self, upload_id, policy=None):
        """
        Delete an upload and its report rows.

        Master entries first seen in this upload are deleted ('delete') or
        kept with their first-seen provenance nulled ('nullify'). Entries first
        seen in other uploads keep their data; a last-updated reference to the
        deleted upload is nulled by the foreign key.
        """
        policy = policy or settings.MASTER_LIST_DELETE_POLICY
        if policy not in DELETE_POLICIES:
            raise ValueError(f'Unknown delete policy: {policy!r}')

        upload = self.get_upload(upload_id)
        owned = self.master_model.objects.filter(first_seen_upload=upload)

        with transaction.atomic():
            rows_deleted = self.row_model.objects.filter(upload=upload).count()
            entries_deleted = 0
            entries_orphaned = 0
            if policy == 'delete':
                entries_deleted, _ = owned.delete()
            else:
                entries_orphaned = owned.update(first_seen_upload=None)
            upload.delete()

        logger.info(
            'Deleted %s upload %s: %d rows, %d entries deleted, %d entries orphaned',
            self.shape.mode, upload_id, rows_deleted, entries_deleted, entries_orphaned,
        )
        return DeleteResult(
            rows_deleted=rows_deleted,
            entries_deleted=entries_deleted,
            entries_orphaned=entries_orphaned,
        )
