"""Menu prices — Ordering's local copy of what is on the menu and at what price.

Maintained by ``ordering.order.menu_events`` from Menu domain events. New
orders read unit prices from here, which is what fixes the price on each
order line.
"""

from protean.fields import Boolean, DateTime, Decimal, Identifier, String

from ordering.domain import ordering


@ordering.projection
class MenuItemPrice:
    coffee_item_id = Identifier(identifier=True, required=True)
    name = String(max_length=100)
    price = Decimal(required=True)
    is_available = Boolean(default=True)
    updated_at = DateTime()
