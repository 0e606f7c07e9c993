"""
Ports
=====

Contracts for collaborators that live outside the document store:
blob storage, email notification and the transaction boundary.
"""
from .blob_storage import BlobStorage
from .notifier import EmailMessage, Notifier
from .transaction import TransactionManager

__all__ = ["BlobStorage", "EmailMessage", "Notifier", "TransactionManager"]
