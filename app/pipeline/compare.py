import logging
from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional

from pipeline.diff import diff_identifiers, newly_released, previous_upload, select_rows_by_identifier
from pipeline.exceptions import UploadNotFound
from pipeline.gateway import DjangoManifestGateway

logger = logging.getLogger(__name__)


@dataclass
class UploadComparison:
    """An upload measured against its chronological predecessor."""
    upload: object
    previous_upload: Optional[object]
    new_ids: FrozenSet[str] = frozenset()
    removed_ids: FrozenSet[str] = frozenset()
    released_ids: FrozenSet[str] = frozenset()
    new_rows: List[Dict] = field(default_factory=list)
    removed_rows: List[Dict] = field(default_factory=list)
    released_rows: List[Dict] = field(default_factory=list)

    @property
    def new_items(self):
        return len(self.new_ids)

    @property
    def removed_items(self):
        return len(self.removed_ids)

    @property
    def newly_released_items(self):
        return len(self.released_ids)


def compare_upload(shape, upload_id, gateway=None):
    gateway = gateway or DjangoManifestGateway(shape)

    uploads = gateway.list_uploads()
    upload = next((u for u in uploads if str(u.id) == str(upload_id)), None)
    if upload is None:
        raise UploadNotFound(upload_id)

    previous = previous_upload(uploads, upload.id)
    current_rows = gateway.get_report_rows(upload.id)
    if previous is None:
        logger.info('%s upload %s has no earlier upload; every item is new', shape.mode, upload.id)
        previous_rows = None
    else:
        previous_rows = gateway.get_report_rows(previous.id)

    diff = diff_identifiers(current_rows, previous_rows, shape)
    released = newly_released(current_rows, previous_rows, shape)

    return UploadComparison(
        upload=upload,
        previous_upload=previous,
        new_ids=diff.new_ids,
        removed_ids=diff.removed_ids,
        released_ids=released,
        new_rows=select_rows_by_identifier(current_rows, diff.new_ids, shape),
        removed_rows=select_rows_by_identifier(previous_rows or [], diff.removed_ids, shape),
        released_rows=select_rows_by_identifier(current_rows, released, shape),
    )
