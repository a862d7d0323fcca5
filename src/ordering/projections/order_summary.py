"""Order summary — lightweight listing/history view."""

from protean.core.projector import on
from protean.fields import DateTime, Decimal, Identifier, Integer, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.events import (
    OrderCancelled,
    OrderCompleted,
    OrderCreated,
    OrderStatusChanged,
)
from ordering.order.order import Order


@ordering.projection
class OrderSummary:
    order_id = Identifier(identifier=True, required=True)
    customer_id = Identifier(required=True)
    barista_id = Identifier()
    status = String(required=True)
    item_count = Integer(default=0)
    total_price = Decimal()
    cancellation_reason = String(max_length=500)
    order_date = DateTime()
    completed_at = DateTime()
    updated_at = DateTime()


@ordering.projector(projector_for=OrderSummary, aggregates=[Order])
class OrderSummaryProjector:
    @on(OrderCreated)
    def on_order_created(self, event):
        current_domain.repository_for(OrderSummary).add(
            OrderSummary(
                order_id=event.order_id,
                customer_id=event.customer_id,
                status="Pending",
                item_count=event.item_count,
                total_price=event.total_price,
                order_date=event.order_date,
                updated_at=event.order_date,
            )
        )

    @on(OrderStatusChanged)
    def on_status_changed(self, event):
        repo = current_domain.repository_for(OrderSummary)
        summary = repo.get(event.order_id)
        summary.status = event.new_status
        if event.barista_id:
            summary.barista_id = event.barista_id
        summary.updated_at = event.changed_at
        repo.add(summary)

    @on(OrderCompleted)
    def on_order_completed(self, event):
        repo = current_domain.repository_for(OrderSummary)
        summary = repo.get(event.order_id)
        summary.completed_at = event.completed_at
        repo.add(summary)

    @on(OrderCancelled)
    def on_order_cancelled(self, event):
        repo = current_domain.repository_for(OrderSummary)
        summary = repo.get(event.order_id)
        summary.status = "Cancelled"
        summary.cancellation_reason = event.reason
        summary.updated_at = event.cancelled_at
        repo.add(summary)
