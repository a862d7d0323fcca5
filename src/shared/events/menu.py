"""Cross-domain event contracts for Menu domain events.

These classes define the event shape for consumption by other domains (the
Ordering domain keeps its own copy of menu prices and availability from
them). They are registered as external events via
domain.register_external_event() with matching __type__ strings so Protean's
stream deserialization works correctly.

The source-of-truth events are in src/menu/coffee_item/events.py.
"""

from protean.core.event import BaseEvent
from protean.fields import Boolean, DateTime, Decimal, Identifier, String


class CoffeeItemCreated(BaseEvent):
    """A new coffee item was put on the menu."""

    __version__ = 1

    coffee_item_id = Identifier(required=True)
    name = String(required=True)
    description = String(required=True)
    price = Decimal(required=True)
    category_id = Identifier(required=True)
    image_url = String()
    is_available = Boolean(required=True)
    created_at = DateTime(required=True)


class CoffeeItemPriceChanged(BaseEvent):
    """A coffee item's price moved."""

    __version__ = 1

    coffee_item_id = Identifier(required=True)
    old_price = Decimal(required=True)
    new_price = Decimal(required=True)
    changed_at = DateTime(required=True)


class CoffeeItemAvailabilityChanged(BaseEvent):
    """A coffee item was taken off or put back on sale."""

    __version__ = 1

    coffee_item_id = Identifier(required=True)
    is_available = Boolean(required=True)
    changed_at = DateTime(required=True)
