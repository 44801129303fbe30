# =========================
# FILE: foodhive_api/foodhive/api/schemas.py
# (UPDATED: validate + coerce bodies before they reach Mongo)
# =========================
from __future__ import annotations

from typing import Any, Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

from foodhive.domain.entities import Food, Owner, Purchase


class AddedBy(BaseModel):
    name: Optional[str] = None
    email: str = Field(..., min_length=1)


class AddFoodRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, examples=["Chicken Biryani"])
    category: Optional[str] = None
    image: Optional[str] = None
    price: float = Field(..., ge=0, allow_inf_nan=False, description="Numeric strings are accepted")
    quantity: int = Field(..., ge=0)
    description: Optional[str] = None
    short_description: Optional[str] = Field(default=None, alias="shortDescription")
    purchase_count: int = Field(default=0, ge=0, alias="purchaseCount")
    food_origin: Optional[str] = Field(default=None, alias="foodOrigin")
    added_by: AddedBy = Field(..., alias="addedBy")

    @field_validator("purchase_count", mode="before")
    @classmethod
    def _null_count_is_zero(cls, v: Any) -> Any:
        return 0 if v is None or v == "" else v

    def to_entity(self) -> Food:
        return Food(
            id=None,
            name=self.name,
            category=self.category,
            image=self.image,
            price=self.price,
            quantity=self.quantity,
            description=self.description,
            short_description=self.short_description,
            purchase_count=self.purchase_count,
            food_origin=self.food_origin,
            added_by=Owner(name=self.added_by.name, email=self.added_by.email),
        )


class UpdateFoodRequest(BaseModel):
    """Partial update: only non-null fields present in the body are written."""
    model_config = ConfigDict(populate_by_name=True)

    name: Optional[str] = Field(default=None, min_length=1)
    category: Optional[str] = None
    image: Optional[str] = None
    price: Optional[float] = Field(default=None, ge=0, allow_inf_nan=False)
    quantity: Optional[int] = Field(default=None, ge=0)
    description: Optional[str] = None
    short_description: Optional[str] = Field(default=None, alias="shortDescription")
    purchase_count: Optional[int] = Field(default=None, ge=0, alias="purchaseCount")
    food_origin: Optional[str] = Field(default=None, alias="foodOrigin")
    added_by: Optional[AddedBy] = Field(default=None, alias="addedBy")

    def changes(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_unset=True, exclude_none=True)


class PurchaseRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    food_id: str = Field(..., min_length=1, alias="foodId")
    food_name: Optional[str] = Field(default=None, alias="foodName")
    buyer_name: Optional[str] = Field(default=None, alias="buyerName")
    buyer_email: str = Field(..., min_length=1, alias="buyerEmail")
    quantity: int = Field(default=1, ge=1)
    price: float = Field(default=0.0, ge=0, allow_inf_nan=False)
    buying_date: Optional[str] = Field(default=None, alias="buyingDate")
    food_img: Optional[str] = Field(default=None, alias="foodImg")

    def to_entity(self) -> Purchase:
        return Purchase(
            id=None,
            food_id=self.food_id,
            food_name=self.food_name,
            buyer_name=self.buyer_name,
            buyer_email=self.buyer_email,
            quantity=self.quantity,
            price=self.price,
            buying_date=self.buying_date,
            food_img=self.food_img,
        )


class MessageResponse(BaseModel):
    message: str
