"""Pydantic request/response schemas for the Menu API.

These are external contracts, kept separate from the internal Protean
commands. Prices travel as decimals (strings in JSON responses) so they are
never rounded through a float.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Category
# ---------------------------------------------------------------------------
class CreateCategoryRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Espresso Drinks",
                    "description": "Everything built on a shot of espresso",
                }
            ]
        }
    }

    name: str = Field(..., max_length=100)
    description: str | None = Field(None, max_length=500)


class UpdateCategoryRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Hot Drinks", "description": None}]}}

    name: str = Field(..., max_length=100)
    description: str | None = Field(None, max_length=500)


class CategoryIdResponse(BaseModel):
    category_id: str


class CategoryResponse(BaseModel):
    category_id: str
    name: str
    description: str | None = None


class CategoryListResponse(BaseModel):
    categories: list[CategoryResponse]


# ---------------------------------------------------------------------------
# Coffee items
# ---------------------------------------------------------------------------
class CreateCoffeeItemRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Flat White",
                    "description": "Double ristretto with velvety steamed milk",
                    "price": "3.80",
                    "category_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "image_url": "https://cdn.example.com/menu/flat-white.jpg",
                }
            ]
        }
    }

    name: str
    description: str
    price: Decimal
    category_id: str
    image_url: str | None = None


class UpdateCoffeeItemDetailsRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Flat White",
                    "description": "Double ristretto, oat milk on request",
                    "price": "3.90",
                }
            ]
        }
    }

    name: str
    description: str
    price: Decimal


class ChangePriceRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"price": "4.10"}]}}

    price: Decimal


class SetAvailabilityRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"is_available": False}]}}

    is_available: bool


class CoffeeItemIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"coffee_item_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901"}]}}

    coffee_item_id: str


class CoffeeItemResponse(BaseModel):
    coffee_item_id: str
    name: str
    description: str | None = None
    price: Decimal
    is_available: bool
    category_id: str
    category_name: str | None = None
    image_url: str | None = None


class CoffeeItemListResponse(BaseModel):
    coffee_items: list[CoffeeItemResponse]


class PriceHistoryEntryResponse(BaseModel):
    previous_price: Decimal
    new_price: Decimal
    changed_at: datetime


class PriceHistoryResponse(BaseModel):
    coffee_item_id: str
    entries: list[PriceHistoryEntryResponse]


class StatusResponse(BaseModel):
    status: str = "ok"
