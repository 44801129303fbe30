# foodhive_api/foodhive/api/routes.py
from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from foodhive.api.auth import require_session
from foodhive.api.schemas import AddFoodRequest, PurchaseRequest, UpdateFoodRequest
from foodhive.core import config
from foodhive.domain.errors import Forbidden

log = logging.getLogger("api.routes")
router = APIRouter()


# -------------------------
# Dependencies via app.state (wired in main.create_app)
# -------------------------
def _state(request: Request, name: str):
    value = getattr(request.app.state, name, None)
    if value is None:
        raise RuntimeError(f"{name} not initialized. Check app startup wiring.")
    return value


def get_store(request: Request):
    return _state(request, "store")


def get_food_repo(request: Request):
    return _state(request, "store").foods


def get_purchase_repo(request: Request):
    return _state(request, "store").purchases


def get_add_food(request: Request):
    return _state(request, "add_food")


def get_update_food(request: Request):
    return _state(request, "update_food")


def get_purchase_food(request: Request):
    return _state(request, "purchase_food")


# -------------------------
# System
# -------------------------
@router.get("/", response_class=PlainTextResponse, tags=["System"])
def root() -> str:
    return "This is FoodHive server"


@router.get("/health", tags=["System"])
def health(store=Depends(get_store)) -> Dict[str, Any]:
    store.ping()
    return {"status": "ok", "time": datetime.now().isoformat()}


# -------------------------
# Foods
# -------------------------
@router.get("/foods", tags=["Foods"])
def list_foods(foods=Depends(get_food_repo)) -> List[Dict[str, Any]]:
    return [f.to_dict() for f in foods.all()]


@router.get("/foods/{food_id}", tags=["Foods"])
def get_food(food_id: str, foods=Depends(get_food_repo)) -> Optional[Dict[str, Any]]:
    food = foods.by_id(food_id)
    return food.to_dict() if food else None


@router.get("/topFoods", tags=["Foods"])
def top_foods(foods=Depends(get_food_repo)) -> List[Dict[str, Any]]:
    return [f.to_dict() for f in foods.top_purchased(config.TOP_FOODS_LIMIT)]


@router.get("/myFoods", tags=["Foods"])
def my_foods(
    email: str = Query(..., min_length=1),
    claims: Dict[str, Any] = Depends(require_session),
    foods=Depends(get_food_repo),
) -> List[Dict[str, Any]]:
    token_email = claims.get("email")
    if token_email and token_email != email:
        log.warning("Session for %s asked for foods of %s", token_email, email)
        raise Forbidden()
    return [f.to_dict() for f in foods.by_owner_email(email)]


@router.post("/addFood", tags=["Foods"])
def add_food(req: AddFoodRequest, uc=Depends(get_add_food)) -> Dict[str, Any]:
    return uc(req.to_entity()).to_dict()


@router.put("/updateFood/{food_id}", tags=["Foods"])
def update_food(food_id: str, req: UpdateFoodRequest, uc=Depends(get_update_food)) -> Dict[str, Any]:
    return uc(food_id, req.changes()).to_dict()


# -------------------------
# Purchases
# -------------------------
@router.post("/purchaseFood", tags=["Purchases"])
def purchase_food(req: PurchaseRequest, uc=Depends(get_purchase_food)) -> Dict[str, Any]:
    purchase_id = uc(req.to_entity())
    return {"message": "Purchase successful", "insertedId": purchase_id}


@router.get("/myOrders/{email}", tags=["Purchases"])
def my_orders(email: str, purchases=Depends(get_purchase_repo)) -> List[Dict[str, Any]]:
    return [p.to_dict() for p in purchases.by_buyer_email(email)]


@router.delete("/deleteOrder/{order_id}", tags=["Purchases"])
def delete_order(order_id: str, purchases=Depends(get_purchase_repo)) -> Dict[str, Any]:
    return purchases.delete(order_id).to_dict()
