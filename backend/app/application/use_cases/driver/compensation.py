"""
Upload Compensation
===================

Blob storage is outside the store transaction, so files uploaded for a
workflow that later fails (or for a record being deleted) are removed here.
Removal is best-effort: every failure is logged and reported back, never raised.
"""
import logging
from typing import Iterable, List

from app.domain.models.driver_application import StoredFile
from app.domain.ports.blob_storage import BlobStorage

logger = logging.getLogger(__name__)


def discard_uploaded_files(storage: BlobStorage, files: Iterable[StoredFile]) -> List[StoredFile]:
    """
    Attempt to delete every file.

    Args:
        storage: Blob storage holding the files
        files: Files to delete

    Returns:
        The files that could not be deleted
    """
    failed: List[StoredFile] = []
    for stored in files:
        try:
            deleted = storage.delete(stored.public_id)
        except Exception as e:
            logger.warning(f"Blob delete raised for {stored.public_id}: {e}")
            deleted = False
        if not deleted:
            failed.append(stored)

    if failed:
        logger.warning(
            f"{len(failed)} stored file(s) could not be removed: "
            f"{', '.join(stored.public_id for stored in failed)}"
        )
    return failed
