"""FastAPI routes for the Ordering domain."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from ordering.api.schemas import (
    AssignBaristaRequest,
    CancelOrderRequest,
    ChangeStatusRequest,
    OrderIdResponse,
    OrderLineResponse,
    OrderListResponse,
    OrderResponse,
    OrderSummaryResponse,
    PlaceOrderRequest,
    StatusResponse,
)
from ordering.order.assignment import AssignBarista
from ordering.order.cancellation import CancelOrder
from ordering.order.creation import PlaceOrder
from ordering.order.order import Order
from ordering.order.progress import ChangeOrderStatus, CompleteOrder, MarkOrderReady
from ordering.projections.order_summary import OrderSummary

order_router = APIRouter(prefix="/orders", tags=["orders"])


@order_router.post("", status_code=201, response_model=OrderIdResponse)
async def place_order(body: PlaceOrderRequest) -> OrderIdResponse:
    command = PlaceOrder(
        customer_id=body.customer_id,
        items=json.dumps([item.model_dump() for item in body.items]),
        notes=body.notes,
    )
    result = current_domain.process(command, asynchronous=False)
    return OrderIdResponse(order_id=result)


@order_router.get("", response_model=OrderListResponse)
async def list_orders(customer_id: str | None = None, status: str | None = None) -> OrderListResponse:
    """List orders, newest first."""
    query = current_domain.repository_for(OrderSummary)._dao.query
    if customer_id:
        query = query.filter(customer_id=customer_id)
    if status:
        query = query.filter(status=status)

    summaries = query.order_by("-order_date").limit(None).all().items
    return OrderListResponse(
        orders=[
            OrderSummaryResponse(
                order_id=str(s.order_id),
                customer_id=str(s.customer_id),
                barista_id=str(s.barista_id) if s.barista_id else None,
                status=s.status,
                item_count=s.item_count or 0,
                total_price=s.total_price,
                order_date=s.order_date,
            )
            for s in summaries
        ]
    )


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(order_id: str) -> OrderResponse:
    order = current_domain.repository_for(Order).get(order_id)
    return OrderResponse(
        order_id=str(order.id),
        customer_id=str(order.customer_id),
        barista_id=str(order.barista_id) if order.barista_id else None,
        status=order.status,
        order_date=order.order_date,
        total_price=order.total_price,
        notes=order.notes,
        cancellation_reason=order.cancellation_reason,
        lines=[
            OrderLineResponse(
                coffee_item_id=str(line.coffee_item_id),
                quantity=line.quantity,
                unit_price=line.unit_price,
                subtotal=line.subtotal,
                special_instructions=line.special_instructions,
            )
            for line in order.lines
        ],
    )


@order_router.put("/{order_id}/barista", response_model=StatusResponse)
async def assign_barista(order_id: str, body: AssignBaristaRequest) -> StatusResponse:
    command = AssignBarista(order_id=order_id, barista_id=body.barista_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.put("/{order_id}/status", response_model=StatusResponse)
async def change_order_status(order_id: str, body: ChangeStatusRequest) -> StatusResponse:
    command = ChangeOrderStatus(order_id=order_id, status=body.status)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.put("/{order_id}/ready", response_model=StatusResponse)
async def mark_order_ready(order_id: str) -> StatusResponse:
    command = MarkOrderReady(order_id=order_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.put("/{order_id}/complete", response_model=StatusResponse)
async def complete_order(order_id: str) -> StatusResponse:
    command = CompleteOrder(order_id=order_id)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@order_router.put("/{order_id}/cancel", response_model=StatusResponse)
async def cancel_order(order_id: str, body: CancelOrderRequest) -> StatusResponse:
    command = CancelOrder(order_id=order_id, reason=body.reason)
    current_domain.process(command, asynchronous=False)
    return StatusResponse()
