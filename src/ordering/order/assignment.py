"""Barista assignment — command and handler."""

import structlog
from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from ordering.domain import ordering
from ordering.order.order import Order

logger = structlog.get_logger(__name__)


@ordering.command(part_of="Order")
class AssignBarista:
    order_id = Identifier(required=True)
    barista_id = Identifier(required=True)


@ordering.command_handler(part_of=Order)
class AssignBaristaHandler:
    @handle(AssignBarista)
    def assign_barista(self, command):
        repo = current_domain.repository_for(Order)
        order = repo.get(command.order_id)
        order.assign_barista(command.barista_id)
        repo.add(order)

        logger.info(
            "Barista started order",
            order_id=str(order.id),
            barista_id=str(command.barista_id),
        )
