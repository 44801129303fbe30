# foodhive_api/foodhive/domain/repositories.py
from __future__ import annotations
from typing import Any, Dict, List, Protocol

from foodhive.domain.entities import DeleteResult, Food, InsertResult, Purchase, UpdateResult


class FoodRepo(Protocol):
    def all(self) -> List[Food]: ...

    def by_id(self, food_id: str) -> Food | None: ...

    def top_purchased(self, limit: int) -> List[Food]: ...

    def by_owner_email(self, email: str) -> List[Food]: ...

    def insert(self, food: Food) -> InsertResult: ...

    def update_fields(self, food_id: str, fields: Dict[str, Any]) -> UpdateResult: ...


class PurchaseRepo(Protocol):
    def record(self, purchase: Purchase) -> str:
        """Insert the purchase and bump the food's purchaseCount as one unit.

        Returns the new purchase id; raises PurchaseFailed when the food
        counter could not be incremented (nothing is persisted then).
        """
        ...

    def by_buyer_email(self, email: str) -> List[Purchase]: ...

    def delete(self, purchase_id: str) -> DeleteResult: ...


class Store(Protocol):
    foods: FoodRepo
    purchases: PurchaseRepo

    def ping(self) -> None: ...
