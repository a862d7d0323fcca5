"""Shared BDD fixtures and step definitions for the Menu domain."""

from decimal import Decimal

import pytest
from menu.coffee_item.coffee_item import CoffeeItem
from menu.coffee_item.events import (
    CoffeeItemAvailabilityChanged,
    CoffeeItemCreated,
    CoffeeItemDetailsUpdated,
    CoffeeItemPriceChanged,
)
from protean.exceptions import ValidationError
from pytest_bdd import given, parsers, then

_EVENT_CLASSES = {
    "CoffeeItemCreated": CoffeeItemCreated,
    "CoffeeItemDetailsUpdated": CoffeeItemDetailsUpdated,
    "CoffeeItemPriceChanged": CoffeeItemPriceChanged,
    "CoffeeItemAvailabilityChanged": CoffeeItemAvailabilityChanged,
}


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def error():
    """Container for captured validation errors."""
    return {"exc": None}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('a coffee item "{name}" priced at {price}'), target_fixture="coffee_item")
def coffee_item_priced_at(name, price):
    item = CoffeeItem.create(
        name=name,
        description=f"{name} made with our house blend",
        price=Decimal(price),
        category_id="cat-espresso",
    )
    item.clear_events()
    return item


@given("the coffee item is unavailable", target_fixture="coffee_item")
def coffee_item_is_unavailable(coffee_item):
    coffee_item.set_availability(False)
    coffee_item.clear_events()
    return coffee_item


# ---------------------------------------------------------------------------
# Then steps (shared)
# ---------------------------------------------------------------------------
@then("the action fails with a validation error")
def action_fails_with_validation_error(error):
    assert error["exc"] is not None, "Expected a validation error but none was raised"
    assert isinstance(error["exc"], ValidationError)


@then(parsers.cfparse("the coffee item price is {price}"))
def coffee_item_price_is(coffee_item, price):
    assert coffee_item.price == Decimal(price)


@then(parsers.cfparse("a {event_type} event is raised"))
def event_raised(coffee_item, event_type):
    event_cls = _EVENT_CLASSES[event_type]
    assert any(
        isinstance(e, event_cls) for e in coffee_item.pending_events()
    ), f"No {event_type} event found. Events: {[type(e).__name__ for e in coffee_item.pending_events()]}"


@then("no events are raised")
def no_events_raised(coffee_item):
    assert coffee_item.pending_events() == []
