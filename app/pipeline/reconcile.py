"""
Master List reconciliation.

Turns one upload's rows into staged inserts and updates against a snapshot of
the existing Master List. Nothing here touches the database; the staged value
objects are handed to the gateway by `pipeline.promote`.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Mapping

from django.utils import timezone

from pipeline.normalize import has_value_changed, normalize_identifier


@dataclass(frozen=True)
class ExistingEntry:
    """The slice of a stored Master List entry needed for change detection."""
    pk: Any
    identifier: str
    tracked: Mapping[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class EntryInsert:
    identifier: str
    domain: Mapping[str, str]
    first_seen_upload_id: Any
    last_updated_upload_id: Any
    created_at: datetime
    updated_at: datetime


@dataclass(frozen=True)
class EntryUpdate:
    """
    Overwrite of an existing entry.

    Carries the full set of domain fields plus the bookkeeping a touch is
    allowed to change. First-seen provenance and created_at are not part of
    an update and can never be clobbered by one.
    """
    pk: Any
    identifier: str
    domain: Mapping[str, str]
    last_updated_upload_id: Any
    last_update_reason: str
    updated_at: datetime


@dataclass
class ReconcileResult:
    inserts: List[EntryInsert] = field(default_factory=list)
    updates: List[EntryUpdate] = field(default_factory=list)

    @property
    def items_added(self):
        return len(self.inserts)

    @property
    def items_updated(self):
        return len(self.updates)


def change_reasons(existing, row, shape):
    """Reason labels for every tracked column whose value appeared or changed."""
    reasons = []
    for tracked in shape.tracked:
        if has_value_changed(existing.tracked.get(tracked.field), row.get(tracked.column)):
            reasons.append(tracked.reason)
    return reasons


def latest_rows_by_identifier(rows, shape):
    """
    Index rows by normalized identifier, dropping rows without one.

    A later row for the same identifier replaces an earlier one; the dict keeps
    the position where the identifier first appeared.
    """
    latest = {}
    for row in rows:
        identifier = normalize_identifier(row.get(shape.key_column))
        if not identifier:
            continue
        latest[identifier] = row
    return latest


def reconcile(existing_index, incoming_rows, upload_id, shape, now=None):
    """
    Stage Master List changes for one upload.

    - unseen identifier: one EntryInsert, first seen in this upload
    - seen identifier with a tracked field that appeared or changed: one
      EntryUpdate overwriting every domain field, reasons joined with ', '
    - seen identifier with no tracked change: left alone and not counted,
      even when untracked columns differ
    """
    now = now or timezone.now()
    result = ReconcileResult()

    for identifier, row in latest_rows_by_identifier(incoming_rows, shape).items():
        domain = shape.row_to_fields(row)
        existing = existing_index.get(identifier)

        if existing is None:
            result.inserts.append(EntryInsert(
                identifier=identifier,
                domain=domain,
                first_seen_upload_id=upload_id,
                last_updated_upload_id=upload_id,
                created_at=now,
                updated_at=now,
            ))
            continue

        reasons = change_reasons(existing, row, shape)
        if reasons:
            result.updates.append(EntryUpdate(
                pk=existing.pk,
                identifier=identifier,
                domain=domain,
                last_updated_upload_id=upload_id,
                last_update_reason=', '.join(reasons),
                updated_at=now,
            ))

    return result
