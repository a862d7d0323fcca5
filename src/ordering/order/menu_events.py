"""Inbound cross-domain event handler — Ordering reacts to Menu events.

Keeps the MenuItemPrice projection in step with the menu: new items, price
changes and availability changes. PlaceOrder reads prices from this
projection, never from the Menu domain.

Cross-domain events are imported from shared.events.menu and registered as
external events via ordering.register_external_event().
"""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.menu import (
    CoffeeItemAvailabilityChanged,
    CoffeeItemCreated,
    CoffeeItemPriceChanged,
)

from ordering.domain import ordering
from ordering.order.order import Order
from ordering.projections.menu_prices import MenuItemPrice

logger = structlog.get_logger(__name__)

# Register external events so Protean can deserialize them
ordering.register_external_event(CoffeeItemCreated, "Menu.CoffeeItemCreated.v1")
ordering.register_external_event(CoffeeItemPriceChanged, "Menu.CoffeeItemPriceChanged.v1")
ordering.register_external_event(CoffeeItemAvailabilityChanged, "Menu.CoffeeItemAvailabilityChanged.v1")


@ordering.event_handler(part_of=Order, stream_category="menu::coffee_item")
class MenuPriceEventHandler:
    """Reacts to Menu domain events to keep local menu prices current."""

    @handle(CoffeeItemCreated)
    def on_coffee_item_created(self, event: CoffeeItemCreated) -> None:
        logger.info(
            "Recording new menu item price",
            coffee_item_id=str(event.coffee_item_id),
            price=str(event.price),
        )
        current_domain.repository_for(MenuItemPrice).add(
            MenuItemPrice(
                coffee_item_id=str(event.coffee_item_id),
                name=event.name,
                price=event.price,
                is_available=event.is_available,
                updated_at=event.created_at,
            )
        )

    @handle(CoffeeItemPriceChanged)
    def on_price_changed(self, event: CoffeeItemPriceChanged) -> None:
        repo = current_domain.repository_for(MenuItemPrice)
        try:
            record = repo.get(str(event.coffee_item_id))
        except ObjectNotFoundError:
            logger.warning(
                "Price change for a menu item never seen before",
                coffee_item_id=str(event.coffee_item_id),
            )
            return

        record.price = event.new_price
        record.updated_at = event.changed_at
        repo.add(record)

    @handle(CoffeeItemAvailabilityChanged)
    def on_availability_changed(self, event: CoffeeItemAvailabilityChanged) -> None:
        repo = current_domain.repository_for(MenuItemPrice)
        try:
            record = repo.get(str(event.coffee_item_id))
        except ObjectNotFoundError:
            logger.warning(
                "Availability change for a menu item never seen before",
                coffee_item_id=str(event.coffee_item_id),
            )
            return

        record.is_available = event.is_available
        record.updated_at = event.changed_at
        repo.add(record)
