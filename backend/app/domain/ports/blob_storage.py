"""
Blob Storage Port
=================

Contract for the external file store holding uploaded documents.
"""
from abc import ABC, abstractmethod

from app.domain.models.driver_application import StoredFile, UploadedDocument


class BlobStorage(ABC):
    """External, non-transactional file storage."""

    @abstractmethod
    def upload(self, document: UploadedDocument, folder: str) -> StoredFile:
        """
        Store a file.

        Args:
            document: File received from the client
            folder: Logical folder (key prefix) for the file

        Returns:
            Stable reference id and retrieval URL

        Raises:
            Exception: Any client error; the caller decides how to compensate
        """
        pass

    @abstractmethod
    def delete(self, public_id: str) -> bool:
        """
        Remove a stored file.

        Returns:
            True if the file was deleted, False otherwise
        """
        pass
