"""Pydantic request/response schemas for the Ordering API.

These are external contracts (anti-corruption layer), kept separate from
internal Protean commands.
"""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Shared sub-models
# ---------------------------------------------------------------------------
class OrderItemSchema(BaseModel):
    coffee_item_id: str
    quantity: int = Field(default=1)
    special_instructions: str | None = None


# ---------------------------------------------------------------------------
# Order Request Schemas
# ---------------------------------------------------------------------------
class PlaceOrderRequest(BaseModel):
    customer_id: str
    items: list[OrderItemSchema]
    notes: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "cust-001",
                    "items": [
                        {
                            "coffee_item_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                            "quantity": 2,
                            "special_instructions": "Extra hot",
                        }
                    ],
                    "notes": "Name on cup: Sam",
                }
            ]
        }
    }


class AssignBaristaRequest(BaseModel):
    barista_id: str


class ChangeStatusRequest(BaseModel):
    status: str

    model_config = {"json_schema_extra": {"examples": [{"status": "Ready"}]}}


class CancelOrderRequest(BaseModel):
    reason: str | None = Field(None, max_length=500)


# ---------------------------------------------------------------------------
# Response Schemas
# ---------------------------------------------------------------------------
class OrderIdResponse(BaseModel):
    order_id: str


class StatusResponse(BaseModel):
    status: str = "ok"


class OrderLineResponse(BaseModel):
    coffee_item_id: str
    quantity: int
    unit_price: Decimal
    subtotal: Decimal
    special_instructions: str | None = None


class OrderResponse(BaseModel):
    order_id: str
    customer_id: str
    barista_id: str | None = None
    status: str
    order_date: datetime
    total_price: Decimal
    notes: str | None = None
    cancellation_reason: str | None = None
    lines: list[OrderLineResponse]


class OrderSummaryResponse(BaseModel):
    order_id: str
    customer_id: str
    barista_id: str | None = None
    status: str
    item_count: int
    total_price: Decimal
    order_date: datetime


class OrderListResponse(BaseModel):
    orders: list[OrderSummaryResponse]
