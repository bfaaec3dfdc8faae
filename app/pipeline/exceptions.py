class ManifestError(Exception):
    """Base class for errors raised by manifest ingestion and comparison."""


class UploadNotFound(ManifestError):
    def __init__(self, upload_id):
        self.upload_id = upload_id
        super().__init__(f'Upload not found: {upload_id}')


class MasterListWriteError(ManifestError):
    """
    A Master List write failed part way through an ingestion.

    Batches that committed before the failure stay applied; the counts say how
    far the ingestion got so the caller can decide whether to retry. Retrying
    the whole upload is safe: inserts upsert by identifier and updates are
    keyed by primary key.
    """

    def __init__(self, items_added, items_updated, attempted_added, attempted_updated):
        self.items_added = items_added
        self.items_updated = items_updated
        self.attempted_added = attempted_added
        self.attempted_updated = attempted_updated
        super().__init__(
            f'Master list write failed: {items_added}/{attempted_added} added, '
            f'{items_updated}/{attempted_updated} updated'
        )
