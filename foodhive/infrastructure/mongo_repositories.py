# foodhive_api/foodhive/infrastructure/mongo_repositories.py
from __future__ import annotations
from typing import Any, Dict, List, Mapping
import logging
import math

from bson import ObjectId
from bson.errors import InvalidId
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.client_session import ClientSession
from pymongo.collection import Collection

from foodhive.domain.entities import DeleteResult, Food, InsertResult, Owner, Purchase, UpdateResult
from foodhive.domain.errors import InvalidIdentifier, PurchaseFailed
from foodhive.domain.repositories import FoodRepo, PurchaseRepo

log = logging.getLogger("infra.mongo_repo")


def parse_object_id(value: Any) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    try:
        return ObjectId(str(value))
    except (InvalidId, TypeError) as e:
        raise InvalidIdentifier(value) from e


def _as_str_id(v: Any) -> str | None:
    if v is None:
        return None
    return str(v)


def _as_float(v: Any, default: float = 0.0) -> float:
    try:
        x = float(v)
    except (TypeError, ValueError):
        return default
    # legacy rows may hold NaN from unvalidated inserts
    return x if math.isfinite(x) else default


def _as_int(v: Any, default: int = 0) -> int:
    return int(_as_float(v, float(default)))


def _opt_str(v: Any) -> str | None:
    return None if v is None else str(v)


class MongoFoodRepository(FoodRepo):
    """
    Food listings backed by the `foods` collection.
    Reads always hit Mongo (no cache): purchaseCount changes on every order.
    """
    def __init__(self, col: Collection) -> None:
        self._col = col

    def ensure_indexes(self) -> None:
        self._col.create_index([("addedBy.email", ASCENDING)])
        self._col.create_index([("purchaseCount", DESCENDING)])

    def _parse_food(self, doc: Mapping[str, Any]) -> Food:
        added_by = doc.get("addedBy") or {}
        return Food(
            id=_as_str_id(doc.get("_id")),
            name=str(doc.get("name") or ""),
            category=_opt_str(doc.get("category")),
            image=_opt_str(doc.get("image")),
            price=_as_float(doc.get("price")),
            quantity=_as_int(doc.get("quantity")),
            description=_opt_str(doc.get("description")),
            short_description=_opt_str(doc.get("shortDescription")),
            purchase_count=_as_int(doc.get("purchaseCount")),
            food_origin=_opt_str(doc.get("foodOrigin")),
            added_by=Owner(
                name=_opt_str(added_by.get("name")),
                email=str(added_by.get("email") or ""),
            ),
        )

    def all(self) -> List[Food]:
        return [self._parse_food(doc) for doc in self._col.find({})]

    def by_id(self, food_id: str) -> Food | None:
        doc = self._col.find_one({"_id": parse_object_id(food_id)})
        return self._parse_food(doc) if doc else None

    def top_purchased(self, limit: int) -> List[Food]:
        cursor = self._col.find({}).sort("purchaseCount", DESCENDING).limit(limit)
        return [self._parse_food(doc) for doc in cursor]

    def by_owner_email(self, email: str) -> List[Food]:
        return [self._parse_food(doc) for doc in self._col.find({"addedBy.email": email})]

    def insert(self, food: Food) -> InsertResult:
        res = self._col.insert_one(food.to_document())
        log.info("Inserted food %s (%s)", res.inserted_id, food.name)
        return InsertResult(acknowledged=res.acknowledged, inserted_id=_as_str_id(res.inserted_id))

    def update_fields(self, food_id: str, fields: Dict[str, Any]) -> UpdateResult:
        res = self._col.update_one({"_id": parse_object_id(food_id)}, {"$set": dict(fields)})
        return UpdateResult(
            acknowledged=res.acknowledged,
            matched_count=res.matched_count,
            modified_count=res.modified_count,
            upserted_id=_as_str_id(res.upserted_id),
        )


class MongoPurchaseRepository(PurchaseRepo):
    """
    Purchases backed by the `purchases` collection.

    record() writes the purchase and the foods.purchaseCount increment in one
    multi-document transaction. Standalone servers have no transactions; with
    use_transactions=False the insert is undone by a compensating delete.
    """
    def __init__(
        self,
        col: Collection,
        foods_col: Collection,
        client: MongoClient,
        use_transactions: bool = True,
    ) -> None:
        self._col = col
        self._foods = foods_col
        self._client = client
        self._use_transactions = use_transactions

    def ensure_indexes(self) -> None:
        self._col.create_index([("buyerEmail", ASCENDING)])

    def _parse_purchase(self, doc: Mapping[str, Any]) -> Purchase:
        return Purchase(
            id=_as_str_id(doc.get("_id")),
            food_id=str(doc.get("foodId") or ""),
            food_name=_opt_str(doc.get("foodName")),
            buyer_name=_opt_str(doc.get("buyerName")),
            buyer_email=str(doc.get("buyerEmail") or ""),
            quantity=_as_int(doc.get("quantity")),
            price=_as_float(doc.get("price")),
            buying_date=_opt_str(doc.get("buyingDate")),
            food_img=_opt_str(doc.get("foodImg")),
        )

    def _insert_and_count(self, doc: Dict[str, Any], session: ClientSession | None = None) -> str:
        res = self._col.insert_one(doc, session=session)
        upd = self._foods.update_one(
            {"_id": doc["foodId"]},
            {"$inc": {"purchaseCount": 1}},
            session=session,
        )
        if not res.acknowledged or upd.modified_count == 0:
            raise PurchaseFailed()
        return str(res.inserted_id)

    def record(self, purchase: Purchase) -> str:
        doc = purchase.to_document()
        doc["foodId"] = parse_object_id(purchase.food_id)

        if self._use_transactions:
            with self._client.start_session() as session:
                purchase_id = session.with_transaction(lambda s: self._insert_and_count(doc, s))
        else:
            try:
                purchase_id = self._insert_and_count(doc)
            except Exception:
                # insert_one sets doc["_id"]; undo it whatever broke afterwards
                if "_id" in doc:
                    self._col.delete_one({"_id": doc["_id"]})
                    log.warning("Rolled back purchase %s: food %s not incremented", doc["_id"], doc["foodId"])
                raise

        log.info("Recorded purchase %s for food %s", purchase_id, doc["foodId"])
        return purchase_id

    def by_buyer_email(self, email: str) -> List[Purchase]:
        return [self._parse_purchase(doc) for doc in self._col.find({"buyerEmail": email})]

    def delete(self, purchase_id: str) -> DeleteResult:
        res = self._col.delete_one({"_id": parse_object_id(purchase_id)})
        log.info("Deleted purchase %s (deleted=%d)", purchase_id, res.deleted_count)
        return DeleteResult(acknowledged=res.acknowledged, deleted_count=res.deleted_count)
