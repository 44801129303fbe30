# foodhive_api/foodhive/domain/entities.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class Owner:
    name: str | None
    email: str

    def to_dict(self) -> Dict[str, Any]:
        return {"name": self.name, "email": self.email}


@dataclass(frozen=True)
class Food:
    id: str | None
    name: str
    category: str | None
    image: str | None
    price: float
    quantity: int
    description: str | None
    short_description: str | None
    purchase_count: int
    food_origin: str | None
    added_by: Owner

    def to_document(self) -> Dict[str, Any]:
        """Stored shape (camelCase, no _id)."""
        return {
            "name": self.name,
            "category": self.category,
            "image": self.image,
            "price": self.price,
            "quantity": self.quantity,
            "description": self.description,
            "shortDescription": self.short_description,
            "purchaseCount": self.purchase_count,
            "foodOrigin": self.food_origin,
            "addedBy": self.added_by.to_dict(),
        }

    def to_dict(self) -> Dict[str, Any]:
        return {"_id": self.id, **self.to_document()}


@dataclass(frozen=True)
class Purchase:
    id: str | None
    food_id: str
    food_name: str | None
    buyer_name: str | None
    buyer_email: str
    quantity: int
    price: float
    buying_date: str | None
    food_img: str | None

    def to_document(self) -> Dict[str, Any]:
        return {
            "foodId": self.food_id,
            "foodName": self.food_name,
            "buyerName": self.buyer_name,
            "buyerEmail": self.buyer_email,
            "quantity": self.quantity,
            "price": self.price,
            "buyingDate": self.buying_date,
            "foodImg": self.food_img,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {"_id": self.id, **self.to_document()}


# Write results keep the driver's camelCase shape on the wire.
@dataclass(frozen=True)
class InsertResult:
    acknowledged: bool
    inserted_id: str | None

    def to_dict(self) -> Dict[str, Any]:
        return {"acknowledged": self.acknowledged, "insertedId": self.inserted_id}


@dataclass(frozen=True)
class UpdateResult:
    acknowledged: bool
    matched_count: int
    modified_count: int
    upserted_id: str | None = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "acknowledged": self.acknowledged,
            "matchedCount": self.matched_count,
            "modifiedCount": self.modified_count,
            "upsertedId": self.upserted_id,
            "upsertedCount": 0 if self.upserted_id is None else 1,
        }


@dataclass(frozen=True)
class DeleteResult:
    acknowledged: bool
    deleted_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"acknowledged": self.acknowledged, "deletedCount": self.deleted_count}
