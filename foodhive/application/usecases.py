# foodhive_api/foodhive/application/usecases.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict

from foodhive.domain.entities import Food, InsertResult, Purchase, UpdateResult
from foodhive.domain.errors import ValidationFailed
from foodhive.domain.repositories import FoodRepo, PurchaseRepo

log = logging.getLogger("app.usecases")


@dataclass(frozen=True)
class AddFood:
    food_repo: FoodRepo

    def __call__(self, food: Food) -> InsertResult:
        log.info("Adding food %r for %s", food.name, food.added_by.email)
        return self.food_repo.insert(food)


@dataclass(frozen=True)
class UpdateFood:
    food_repo: FoodRepo

    def __call__(self, food_id: str, changes: Dict[str, Any]) -> UpdateResult:
        if not changes:
            raise ValidationFailed("No updatable fields supplied")
        return self.food_repo.update_fields(food_id, changes)


#: insert purchase + bump purchaseCount, all-or-nothing
@dataclass(frozen=True)
class PurchaseFood:
    purchase_repo: PurchaseRepo

    def __call__(self, purchase: Purchase) -> str:
        return self.purchase_repo.record(purchase)
