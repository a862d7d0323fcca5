"""Shared BDD fixtures and step definitions for the Ordering domain."""

from decimal import Decimal

import pytest
from ordering.order.events import (
    OrderCancelled,
    OrderCompleted,
    OrderCreated,
    OrderStatusChanged,
)
from ordering.order.order import InvalidStateTransition, Order
from pytest_bdd import given, parsers, then

# Map event name strings to classes for dynamic lookup
_ORDER_EVENT_CLASSES = {
    "OrderCreated": OrderCreated,
    "OrderStatusChanged": OrderStatusChanged,
    "OrderCompleted": OrderCompleted,
    "OrderCancelled": OrderCancelled,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured domain errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse('customer "{customer_id}" ordered {quantity:d} "{coffee_item_id}" at {unit_price}'),
    target_fixture="order",
)
def customer_ordered(customer_id, quantity, coffee_item_id, unit_price):
    return Order.create(
        customer_id=customer_id,
        lines=[
            {
                "coffee_item_id": coffee_item_id,
                "quantity": quantity,
                "unit_price": Decimal(unit_price),
            }
        ],
    )


@given("the order has been started", target_fixture="order")
def order_started(order):
    order.assign_barista("barista-001")
    order.clear_events()
    return order


@given("the order is ready", target_fixture="order")
def order_ready(order):
    order.mark_as_ready()
    order.clear_events()
    return order


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(order, status):
    assert order.status == status


@then(parsers.cfparse("the order total is {total}"))
def order_total_is(order, total):
    assert order.total_price == Decimal(total)


@then("the action fails with an invalid state transition")
def action_fails_with_invalid_transition(error):
    assert error["exc"] is not None, "Expected the transition to be refused"
    assert isinstance(error["exc"], InvalidStateTransition)


@then(parsers.cfparse("a {event_type} order event is raised"))
def order_event_raised(order, event_type):
    event_cls = _ORDER_EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in order.pending_events()
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in order.pending_events()]}"


@then(parsers.cfparse("the pending events are {names}"))
def pending_events_are(order, names):
    expected = [name.strip() for name in names.split(",")]
    assert [type(e).__name__ for e in order.pending_events()] == expected
