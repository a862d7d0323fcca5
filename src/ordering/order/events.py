"""Domain events for the Order aggregate.

Events are versioned, immutable facts. They are queued on the aggregate as
it changes and dispatched when the repository commits the aggregate.
"""

from protean.fields import DateTime, Decimal, Identifier, Integer, String, Text

from ordering.domain import ordering


@ordering.event(part_of="Order")
class OrderCreated:
    """A customer placed an order. Line prices are already fixed."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    total_price = Decimal(required=True)
    item_count = Integer(required=True)
    notes = Text()
    order_date = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderStatusChanged:
    """An order moved from one status to another."""

    __version__ = 1

    order_id = Identifier(required=True)
    previous_status = String(required=True)
    new_status = String(required=True)
    barista_id = Identifier()
    changed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderCompleted:
    """The customer collected the order. Always follows an OrderStatusChanged."""

    __version__ = 1

    order_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    total_price = Decimal(required=True)
    completed_at = DateTime(required=True)


@ordering.event(part_of="Order")
class OrderCancelled:
    """An order was cancelled before completion."""

    __version__ = 1

    order_id = Identifier(required=True)
    reason = String(max_length=500)
    previous_status = String(required=True)
    cancelled_at = DateTime(required=True)
