# foodhive_api/foodhive/infrastructure/database.py
from __future__ import annotations

import logging

from pymongo import MongoClient
from pymongo.server_api import ServerApi

from foodhive.core import config
from foodhive.infrastructure.mongo_repositories import MongoFoodRepository, MongoPurchaseRepository

log = logging.getLogger("infra.database")


class MongoStore:
    """
    Owns the single MongoClient shared by every request.
    Opened and closed by the application lifespan in main.py.
    """
    def __init__(
        self,
        uri: str = config.MONGO_URI,
        db_name: str = config.MONGO_DB,
        foods_col: str = config.MONGO_FOODS_COL,
        purchases_col: str = config.MONGO_PURCHASES_COL,
        timeout_ms: int = config.MONGO_TIMEOUT_MS,
        use_transactions: bool = config.MONGO_USE_TRANSACTIONS,
    ) -> None:
        self._uri = uri
        self._db_name = db_name
        self._foods_col = foods_col
        self._purchases_col = purchases_col
        self._timeout_ms = timeout_ms
        self._use_transactions = use_transactions
        self._client: MongoClient | None = None
        self.foods: MongoFoodRepository | None = None
        self.purchases: MongoPurchaseRepository | None = None

    def open(self) -> "MongoStore":
        client = MongoClient(
            self._uri,
            server_api=ServerApi("1", strict=True, deprecation_errors=True),
            serverSelectionTimeoutMS=self._timeout_ms,
        )
        try:
            client.admin.command("ping")
        except Exception:
            client.close()
            log.error("MongoDB ping failed for database %r", self._db_name)
            raise
        self._client = client
        log.info("Pinged your deployment. Connected to MongoDB database %r", self._db_name)

        db = self._client[self._db_name]
        self.foods = MongoFoodRepository(db[self._foods_col])
        self.purchases = MongoPurchaseRepository(
            db[self._purchases_col],
            db[self._foods_col],
            self._client,
            use_transactions=self._use_transactions,
        )
        self.foods.ensure_indexes()
        self.purchases.ensure_indexes()
        return self

    def ping(self) -> None:
        if self._client is None:
            raise RuntimeError("MongoStore is not open")
        self._client.admin.command("ping")

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            log.info("MongoDB connection closed")
