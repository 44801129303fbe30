"""test/conftest.py – shared fixtures: in-memory store + TestClient."""
from __future__ import annotations

from dataclasses import replace
from typing import Any, Dict, List

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from foodhive.domain.entities import DeleteResult, Food, InsertResult, Owner, Purchase, UpdateResult
from foodhive.domain.errors import PurchaseFailed
from foodhive.infrastructure.mongo_repositories import parse_object_id

_FOOD_FIELDS = {
    "name": "name",
    "category": "category",
    "image": "image",
    "price": "price",
    "quantity": "quantity",
    "description": "description",
    "shortDescription": "short_description",
    "purchaseCount": "purchase_count",
    "foodOrigin": "food_origin",
}


class InMemoryFoodRepository:
    def __init__(self) -> None:
        self.docs: Dict[str, Food] = {}

    def all(self) -> List[Food]:
        return list(self.docs.values())

    def by_id(self, food_id: str) -> Food | None:
        return self.docs.get(str(parse_object_id(food_id)))

    def top_purchased(self, limit: int) -> List[Food]:
        return sorted(self.docs.values(), key=lambda f: f.purchase_count, reverse=True)[:limit]

    def by_owner_email(self, email: str) -> List[Food]:
        return [f for f in self.docs.values() if f.added_by.email == email]

    def insert(self, food: Food) -> InsertResult:
        food_id = str(ObjectId())
        self.docs[food_id] = replace(food, id=food_id)
        return InsertResult(acknowledged=True, inserted_id=food_id)

    def update_fields(self, food_id: str, fields: Dict[str, Any]) -> UpdateResult:
        key = str(parse_object_id(food_id))
        food = self.docs.get(key)
        if food is None:
            return UpdateResult(acknowledged=True, matched_count=0, modified_count=0)
        changes: Dict[str, Any] = {_FOOD_FIELDS[k]: v for k, v in fields.items() if k in _FOOD_FIELDS}
        if "addedBy" in fields:
            changes["added_by"] = Owner(name=fields["addedBy"].get("name"), email=fields["addedBy"]["email"])
        updated = replace(food, **changes)
        self.docs[key] = updated
        return UpdateResult(acknowledged=True, matched_count=1, modified_count=int(updated != food))


class InMemoryPurchaseRepository:
    """Mirrors the transactional record(): nothing persists when the food is missing."""

    def __init__(self, foods: InMemoryFoodRepository) -> None:
        self.foods = foods
        self.docs: Dict[str, Purchase] = {}

    def record(self, purchase: Purchase) -> str:
        food_key = str(parse_object_id(purchase.food_id))
        food = self.foods.docs.get(food_key)
        if food is None:
            raise PurchaseFailed()
        purchase_id = str(ObjectId())
        self.docs[purchase_id] = replace(purchase, id=purchase_id, food_id=food_key)
        self.foods.docs[food_key] = replace(food, purchase_count=food.purchase_count + 1)
        return purchase_id

    def by_buyer_email(self, email: str) -> List[Purchase]:
        return [p for p in self.docs.values() if p.buyer_email == email]

    def delete(self, purchase_id: str) -> DeleteResult:
        removed = self.docs.pop(str(parse_object_id(purchase_id)), None)
        return DeleteResult(acknowledged=True, deleted_count=0 if removed is None else 1)


class InMemoryStore:
    def __init__(self) -> None:
        self.foods = InMemoryFoodRepository()
        self.purchases = InMemoryPurchaseRepository(self.foods)
        self.pings = 0

    def ping(self) -> None:
        self.pings += 1


def make_food(**kw) -> Food:
    defaults = dict(
        id=None, name="Chicken Biryani", category="Rice", image="https://img.example/biryani.jpg",
        price=12.5, quantity=10, description="Fragrant rice", short_description="Rice dish",
        purchase_count=0, food_origin="India", added_by=Owner(name="Asha", email="asha@example.com"),
    )
    defaults.update(kw)
    return Food(**defaults)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def client(store):
    from main import create_app
    return TestClient(create_app(store=store))


@pytest.fixture
def food_payload() -> Dict[str, Any]:
    return {
        "name": "Pad Thai",
        "category": "Noodles",
        "image": "https://img.example/padthai.jpg",
        "price": "12.50",
        "quantity": "3",
        "description": "Stir-fried rice noodles",
        "shortDescription": "Noodles",
        "foodOrigin": "Thailand",
        "addedBy": {"name": "Niran", "email": "niran@example.com"},
    }


@pytest.fixture
def seeded_food(store) -> Food:
    res = store.foods.insert(make_food())
    return store.foods.docs[res.inserted_id]
