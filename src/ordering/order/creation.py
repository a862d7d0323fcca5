"""Order placement — command and handler."""

import json

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order
from ordering.order.pricing import snapshot_lines

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {coffee_item_id, quantity, special_instructions}
    notes = Text()


@ordering.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        try:
            items = json.loads(command.items) if isinstance(command.items, str) else command.items
        except json.JSONDecodeError:
            raise ValidationError({"items": ["Items must be valid JSON"]}) from None

        if not isinstance(items, list):
            raise ValidationError({"items": ["Items must be a list"]})

        order = Order.create(
            customer_id=command.customer_id,
            lines=snapshot_lines(items),
            notes=command.notes,
        )
        current_domain.repository_for(Order).add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            customer_id=str(order.customer_id),
            total_price=str(order.total_price),
            item_count=len(order.lines),
        )
        return str(order.id)
