"""
MongoDB Transaction Manager
===========================

TransactionManager backed by pymongo client sessions.
Multi-document transactions require a replica set or sharded cluster.
"""
import logging
from contextlib import contextmanager
from typing import Iterator, Optional

from pymongo.client_session import ClientSession

from app.domain.ports.transaction import TransactionManager
from app.infrastructure.db.mongo_connection import MongoClientManager, get_mongo_client

logger = logging.getLogger(__name__)


class MongoTransactionManager(TransactionManager):
    """Opens a session-scoped transaction for each unit of work."""

    def __init__(self, client: Optional[MongoClientManager] = None):
        self._client = client or get_mongo_client()

    @contextmanager
    def transaction(self) -> Iterator[ClientSession]:
        # start_transaction() commits on clean exit and aborts when the block raises;
        # the outer session context always ends the session.
        with self._client.start_session() as session:
            with session.start_transaction():
                try:
                    yield session
                except Exception:
                    logger.info("Transaction aborted")
                    raise
