from typing import TYPE_CHECKING
from ...domain.ports.blob_storage import BlobStorage
from ...domain.ports.notifier import Notifier
from ...domain.ports.transaction import TransactionManager
from ...infrastructure.db.mongo_transaction import MongoTransactionManager
from ...infrastructure.notifications.smtp_notifier import SmtpNotifier
from ...infrastructure.storage.s3_blob_storage import S3BlobStorage

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class InfrastructureProvider:
    """Registers adapters for the ports that live outside the document store"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(BlobStorage, S3BlobStorage())
        container.register_singleton(Notifier, SmtpNotifier())
        container.register_singleton(
            TransactionManager,
            MongoTransactionManager(container.get("mongo_client")),
        )
