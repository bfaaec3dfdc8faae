"""
Upload diffing.

Compares one upload's rows with those of its chronological predecessor.
Rows are mappings keyed by stored field names (see ManifestShape.fields).
Passing previous_rows=None means there is no predecessor: everything in the
current upload is new and nothing is removed.
"""

import logging
from dataclasses import dataclass
from typing import FrozenSet

from pipeline.normalize import normalize_date_for_comparison, normalize_identifier
from pipeline.shapes import OCEAN

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IdentifierDiff:
    new_ids: FrozenSet[str]
    removed_ids: FrozenSet[str]


def _chronological_key(upload):
    return (upload.upload_date, str(upload.id))


def previous_upload(uploads, current_upload_id):
    """
    Return the upload immediately before `current_upload_id` by upload_date.

    Only uploads with an upload_date strictly earlier than the current one
    qualify; the latest of those wins, ties broken by id. The order of
    `uploads` is ignored. Returns None for the first upload or an unknown id.
    """
    uploads = list(uploads)
    current = next((u for u in uploads if str(u.id) == str(current_upload_id)), None)
    if current is None:
        logger.warning('Upload %s not found among %d uploads', current_upload_id, len(uploads))
        return None

    earlier = [u for u in uploads if u.upload_date < current.upload_date]
    if not earlier:
        return None
    return max(earlier, key=_chronological_key)


def identifier_set(rows, shape=OCEAN):
    ids = (normalize_identifier(row.get(shape.key_field)) for row in rows)
    return frozenset(identifier for identifier in ids if identifier)


def diff_identifiers(current_rows, previous_rows, shape=OCEAN):
    current_ids = identifier_set(current_rows, shape)
    if previous_rows is None:
        return IdentifierDiff(new_ids=current_ids, removed_ids=frozenset())

    previous_ids = identifier_set(previous_rows, shape)
    return IdentifierDiff(
        new_ids=current_ids - previous_ids,
        removed_ids=previous_ids - current_ids,
    )


def select_rows_by_identifier(rows, id_set, shape=OCEAN):
    return [row for row in rows if normalize_identifier(row.get(shape.key_field)) in id_set]


def newly_released(current_rows, previous_rows, shape=OCEAN):
    """
    Identifiers whose release value (FRL / LOG) appeared in the current upload.

    An identifier counts when it carries a release value now and either was
    missing from the previous upload or had an empty release value there.
    Values are compared after normalize_date_for_comparison, so a day serial
    and its MM/DD/YYYY rendering are the same release.
    """
    previous_release = {}
    for row in previous_rows or ():
        identifier = normalize_identifier(row.get(shape.key_field))
        if identifier:
            previous_release[identifier] = normalize_date_for_comparison(row.get(shape.release_field))

    released = set()
    for row in current_rows:
        identifier = normalize_identifier(row.get(shape.key_field))
        if not identifier:
            continue
        if not normalize_date_for_comparison(row.get(shape.release_field)):
            continue
        if not previous_release.get(identifier):
            released.add(identifier)

    return frozenset(released)
