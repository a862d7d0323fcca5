"""Order progress — status change, ready and completion commands and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.command(part_of="Order")
class ChangeOrderStatus:
    order_id = Identifier(required=True)
    status = String(required=True, max_length=20)


@ordering.command(part_of="Order")
class MarkOrderReady:
    order_id = Identifier(required=True)


@ordering.command(part_of="Order")
class CompleteOrder:
    order_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class OrderProgressHandler:
    @handle(ChangeOrderStatus)
    def change_status(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.change_status(command.status)
        repo.add(order)

    @handle(MarkOrderReady)
    def mark_ready(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.mark_as_ready()
        repo.add(order)

    @handle(CompleteOrder)
    def complete_order(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.complete()
        repo.add(order)
