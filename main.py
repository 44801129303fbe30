from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import anyio
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
load_dotenv()
from foodhive.core import config

from foodhive.api import auth, routes
from foodhive.api.errors import register_exception_handlers
from foodhive.application.usecases import AddFood, PurchaseFood, UpdateFood
from foodhive.domain.repositories import Store
from foodhive.infrastructure.database import MongoStore

log = logging.getLogger("app")


def wire(app: FastAPI, store: Store) -> None:
    # DI for routes.py
    app.state.store = store
    app.state.add_food = AddFood(store.foods)
    app.state.update_food = UpdateFood(store.foods)
    app.state.purchase_food = PurchaseFood(store.purchases)


@asynccontextmanager
async def lifespan(app: FastAPI):
    owned: MongoStore | None = None
    if getattr(app.state, "store", None) is None:
        owned = await anyio.to_thread.run_sync(MongoStore().open)
        wire(app, owned)
    log.info("Startup complete")
    yield
    if owned is not None:
        owned.close()
    log.info("Shutdown.")


def create_app(store: Store | None = None) -> FastAPI:
    """Build the API; pass `store` to skip opening MongoDB (tests, scripts)."""
    app = FastAPI(
        title="FoodHive API",
        description="Food listings and purchase orders over MongoDB.",
        version="1.0.0",
        lifespan=lifespan,
    )

    wildcard = "*" in config.CORS_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if wildcard else config.CORS_ORIGINS,
        allow_credentials=not wildcard,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_exception_handlers(app)

    app.include_router(routes.router)
    app.include_router(auth.router)

    if store is not None:
        wire(app, store)
    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=config.PORT, reload=False)
