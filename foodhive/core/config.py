# foodhive_api/foodhive/core/config.py
from __future__ import annotations
import os
import logging
from typing import List
from urllib.parse import quote_plus


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


LOCAL_MONGO_URI = "mongodb://localhost:27017"


def _build_mongo_uri() -> str:
    uri = os.getenv("MONGO_URI")
    if uri:
        return uri
    user = os.getenv("DB_USER")
    password = os.getenv("DB_PASS")
    if user and password:
        host = os.getenv("MONGO_HOST", "cluster0.mongodb.net")
        return (
            f"mongodb+srv://{quote_plus(user)}:{quote_plus(password)}@{host}/"
            "?retryWrites=true&w=majority&appName=Cluster0"
        )
    return LOCAL_MONGO_URI


def _transactions_enabled(uri: str) -> bool:
    # a bare local mongod is standalone and rejects transactions
    return _env_bool("MONGO_USE_TRANSACTIONS", "false" if uri == LOCAL_MONGO_URI else "true")


# Server
PORT: int = int(os.getenv("PORT", "5000"))
APP_ENV: str = os.getenv("APP_ENV", "development").strip().lower()
IS_PRODUCTION: bool = APP_ENV == "production"
CORS_ORIGINS: List[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

# Mongo settings
MONGO_URI: str = _build_mongo_uri()
MONGO_DB: str = os.getenv("MONGO_DB", "foodhive")
MONGO_FOODS_COL: str = os.getenv("MONGO_FOODS_COL", "foods")
MONGO_PURCHASES_COL: str = os.getenv("MONGO_PURCHASES_COL", "purchases")
MONGO_TIMEOUT_MS: int = int(os.getenv("MONGO_TIMEOUT_MS", "5000"))
MONGO_USE_TRANSACTIONS: bool = _transactions_enabled(MONGO_URI)

TOP_FOODS_LIMIT: int = 8

# Session token
_DEFAULT_SECRET = "foodhive-dev-secret"
ACCESS_TOKEN_SECRET: str = os.getenv("ACCESS_TOKEN_SECRET", _DEFAULT_SECRET)
JWT_ALGORITHM: str = os.getenv("JWT_ALGORITHM", "HS256")
SESSION_TTL_SECONDS: int = 60 * 60
SESSION_COOKIE: str = "token"

# Global logging (module-level loggers inherit this)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s"
)
LOGGER = logging.getLogger("foodhive")

if ACCESS_TOKEN_SECRET == _DEFAULT_SECRET:
    LOGGER.warning("ACCESS_TOKEN_SECRET is not set; using the development default")
