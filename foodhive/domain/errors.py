# foodhive_api/foodhive/domain/errors.py
from __future__ import annotations


class FoodHiveError(Exception):
    """Base for errors the API layer maps to a client response."""

    default_message = "Internal server error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message


class InvalidIdentifier(FoodHiveError):
    def __init__(self, value: object) -> None:
        super().__init__(f"Invalid identifier: {value}")
        self.value = value


class ValidationFailed(FoodHiveError):
    default_message = "Invalid request"


class NotAuthenticated(FoodHiveError):
    default_message = "Unauthorized access"


class Forbidden(FoodHiveError):
    default_message = "Forbidden access"


class PurchaseFailed(FoodHiveError):
    default_message = "Error occurred during purchase"
