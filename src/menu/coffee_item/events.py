"""Domain events for the CoffeeItem aggregate.

Created, PriceChanged and AvailabilityChanged are also consumed by the
Ordering context (see ``shared.events.menu``), so their shape is a published
contract.
"""

from protean.fields import Boolean, DateTime, Decimal, Identifier, String

from menu.domain import menu


@menu.event(part_of="CoffeeItem")
class CoffeeItemCreated:
    """A new coffee item was put on the menu."""

    __version__ = 1

    coffee_item_id: Identifier(required=True)
    name: String(required=True)
    description: String(required=True)
    price: Decimal(required=True)
    category_id: Identifier(required=True)
    image_url: String()
    is_available: Boolean(required=True)
    created_at: DateTime(required=True)


@menu.event(part_of="CoffeeItem")
class CoffeeItemDetailsUpdated:
    """The name or description of a coffee item was edited."""

    __version__ = 1

    coffee_item_id: Identifier(required=True)
    name: String(required=True)
    description: String(required=True)


@menu.event(part_of="CoffeeItem")
class CoffeeItemPriceChanged:
    """A coffee item's price moved. Orders already placed keep their old price."""

    __version__ = 1

    coffee_item_id: Identifier(required=True)
    old_price: Decimal(required=True)
    new_price: Decimal(required=True)
    changed_at: DateTime(required=True)


@menu.event(part_of="CoffeeItem")
class CoffeeItemAvailabilityChanged:
    """A coffee item was taken off or put back on sale."""

    __version__ = 1

    coffee_item_id: Identifier(required=True)
    is_available: Boolean(required=True)
    changed_at: DateTime(required=True)
