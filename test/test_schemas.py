"""test/test_schemas.py – request coercion/validation."""
import pytest
from pydantic import ValidationError

from foodhive.api.schemas import AddFoodRequest, PurchaseRequest, UpdateFoodRequest


def _food(**kw):
    body = {"name": "Tacos", "price": "12.50", "quantity": "3", "addedBy": {"email": "a@b.c"}}
    body.update(kw)
    return body


class TestAddFoodRequest:
    def test_string_numbers_are_coerced(self):
        food = AddFoodRequest.model_validate(_food()).to_entity()
        assert food.price == 12.5
        assert food.quantity == 3
        assert food.purchase_count == 0
        assert food.id is None

    def test_null_purchase_count_defaults_to_zero(self):
        assert AddFoodRequest.model_validate(_food(purchaseCount=None)).purchase_count == 0

    @pytest.mark.parametrize("field,value", [
        ("price", "abc"),
        ("price", "NaN"),
        ("price", -1),
        ("quantity", "3.5"),
        ("quantity", -2),
    ])
    def test_bad_numbers_rejected(self, field, value):
        with pytest.raises(ValidationError):
            AddFoodRequest.model_validate(_food(**{field: value}))

    def test_stored_document_uses_camel_case(self):
        doc = AddFoodRequest.model_validate(_food(shortDescription="short", foodOrigin="Mexico")).to_entity().to_document()
        assert doc["shortDescription"] == "short"
        assert doc["foodOrigin"] == "Mexico"
        assert doc["purchaseCount"] == 0
        assert doc["addedBy"] == {"name": None, "email": "a@b.c"}


class TestUpdateFoodRequest:
    def test_only_supplied_fields(self):
        req = UpdateFoodRequest.model_validate({"_id": "x", "price": "4", "foodOrigin": "Peru", "category": None})
        assert req.changes() == {"price": 4.0, "foodOrigin": "Peru"}


class TestPurchaseRequest:
    def test_defaults(self):
        p = PurchaseRequest.model_validate({"foodId": "abc", "buyerEmail": "m@x.y"}).to_entity()
        assert p.quantity == 1
        assert p.price == 0.0
        assert p.buying_date is None

    def test_buyer_email_required(self):
        with pytest.raises(ValidationError):
            PurchaseRequest.model_validate({"foodId": "abc"})
