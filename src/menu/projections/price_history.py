"""Price history — append-only record of menu price changes."""

import uuid

from protean.core.projector import on
from protean.fields import DateTime, Decimal, Identifier
from protean.utils.globals import current_domain

from menu.coffee_item.coffee_item import CoffeeItem
from menu.coffee_item.events import CoffeeItemPriceChanged
from menu.domain import menu


@menu.projection
class PriceHistory:
    entry_id: Identifier(identifier=True, required=True)
    coffee_item_id: Identifier(required=True)
    previous_price: Decimal(required=True)
    new_price: Decimal(required=True)
    changed_at: DateTime(required=True)


@menu.projector(projector_for=PriceHistory, aggregates=[CoffeeItem])
class PriceHistoryProjector:
    @on(CoffeeItemPriceChanged)
    def on_price_changed(self, event):
        current_domain.repository_for(PriceHistory).add(
            PriceHistory(
                entry_id=str(uuid.uuid4()),
                coffee_item_id=event.coffee_item_id,
                previous_price=event.old_price,
                new_price=event.new_price,
                changed_at=event.changed_at,
            )
        )
