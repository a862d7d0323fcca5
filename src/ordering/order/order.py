"""Order aggregate — the core of the ordering domain.

State Machine:
    PENDING → IN_PROGRESS → READY → COMPLETED
    CANCELLED (from PENDING, IN_PROGRESS, READY)

COMPLETED and CANCELLED are terminal. Assigning a barista is the only way
out of PENDING into IN_PROGRESS through the barista workflow, and always
starts progress on the order in the same step.

The aggregate never looks up menu prices: callers hand it lines whose unit
prices were already snapshotted (see ``ordering.order.pricing``), so a menu
price change can never alter an order that was already placed.
"""

import decimal
from datetime import UTC, datetime
from enum import Enum

from protean import invariant
from protean.exceptions import InvalidStateError, ValidationError
from protean.fields import DateTime, Decimal, HasMany, Identifier, Integer, String, Text

from ordering.domain import ordering
from ordering.order.events import (
    OrderCancelled,
    OrderCompleted,
    OrderCreated,
    OrderStatusChanged,
)

MAX_QUANTITY = 10
SPECIAL_INSTRUCTIONS_MAX_LENGTH = 200
CANCELLATION_REASON_MAX_LENGTH = 500
MAX_UNIT_PRICE = decimal.Decimal("10000")
_ZERO = decimal.Decimal("0")


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    READY = "Ready"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.IN_PROGRESS, OrderStatus.CANCELLED},
    OrderStatus.IN_PROGRESS: {OrderStatus.READY, OrderStatus.CANCELLED},
    OrderStatus.READY: {OrderStatus.COMPLETED, OrderStatus.CANCELLED},
    OrderStatus.COMPLETED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}


class InvalidStateTransition(InvalidStateError):
    """The order's current status does not allow the requested change."""


def _coerce_status(value):
    try:
        return OrderStatus(value)
    except ValueError:
        allowed = ", ".join(s.value for s in OrderStatus)
        raise ValidationError({"status": [f"'{value}' is not a valid order status. Expected one of: {allowed}"]}) from None


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@ordering.entity(part_of="Order")
class OrderLine:
    """One coffee item on an order, with the price it was sold at.

    ``unit_price`` is a copy of the menu price at the moment the order was
    placed, not a reference to the live menu.
    """

    coffee_item_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1, max_value=MAX_QUANTITY)
    unit_price = Decimal(required=True)
    special_instructions = String(max_length=SPECIAL_INSTRUCTIONS_MAX_LENGTH)

    @invariant.post
    def unit_price_must_be_a_menu_price(self):
        if self.unit_price is not None and not _ZERO < self.unit_price <= MAX_UNIT_PRICE:
            raise ValidationError({"unit_price": [f"Unit price must be greater than 0 and at most {MAX_UNIT_PRICE}"]})

    @property
    def subtotal(self):
        return self.unit_price * self.quantity


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@ordering.aggregate
class Order:
    customer_id = Identifier(required=True)
    barista_id = Identifier()
    order_date = DateTime(required=True)
    status = String(
        choices=OrderStatus,
        default=OrderStatus.PENDING.value,
    )
    total_price = Decimal(default=_ZERO)
    notes = Text()
    cancellation_reason = String(max_length=CANCELLATION_REASON_MAX_LENGTH)
    lines = HasMany(OrderLine)
    updated_at = DateTime()

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def create(cls, customer_id, lines, notes=None):
        """Place a new order.

        Args:
            customer_id: The customer placing the order.
            lines: ``OrderLine`` objects, or dicts with coffee_item_id,
                quantity, unit_price and optional special_instructions.
                Unit prices must already be resolved by the caller.
            notes: Free-text notes for the barista.
        """
        errors = {}
        if not customer_id or not str(customer_id).strip():
            errors["customer_id"] = ["Customer is required"]
        if not lines:
            errors["lines"] = ["An order must contain at least one item"]
        if errors:
            raise ValidationError(errors)

        order_lines = [line if isinstance(line, OrderLine) else OrderLine(**line) for line in lines]
        total_price = sum((line.subtotal for line in order_lines), _ZERO)
        now = datetime.now(UTC)

        order = cls(
            customer_id=customer_id,
            order_date=now,
            status=OrderStatus.PENDING.value,
            total_price=total_price,
            notes=notes,
            lines=order_lines,
            updated_at=now,
        )
        order.raise_(
            OrderCreated(
                order_id=str(order.id),
                customer_id=str(customer_id),
                total_price=total_price,
                item_count=len(order_lines),
                notes=notes,
                order_date=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    @property
    def current_status(self):
        return OrderStatus(self.status)

    def recalculate_total_price(self):
        """Recompute the total from the lines. Raises no event."""
        self.total_price = sum((line.subtotal for line in self.lines), _ZERO)
        return self.total_price

    # -------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------
    def assign_barista(self, barista_id):
        """Hand a pending order to a barista, which also starts it."""
        if not barista_id:
            raise ValidationError({"barista_id": ["Barista is required"]})

        current = self.current_status
        if current != OrderStatus.PENDING:
            raise InvalidStateTransition(
                f"A barista can only be assigned to a Pending order, this one is {current.value}"
            )

        self.barista_id = barista_id
        self.change_status(OrderStatus.IN_PROGRESS)

    def change_status(self, new_status):
        target = _coerce_status(new_status)
        current = self.current_status
        if target == current:
            return

        if target not in _VALID_TRANSITIONS[current]:
            raise InvalidStateTransition(f"Cannot transition from {current.value} to {target.value}")

        now = datetime.now(UTC)
        self.status = target.value
        self.updated_at = now

        self.raise_(
            OrderStatusChanged(
                order_id=str(self.id),
                previous_status=current.value,
                new_status=target.value,
                barista_id=self.barista_id,
                changed_at=now,
            )
        )
        if target == OrderStatus.COMPLETED:
            self.raise_(
                OrderCompleted(
                    order_id=str(self.id),
                    customer_id=str(self.customer_id),
                    total_price=self.total_price,
                    completed_at=now,
                )
            )

    def mark_as_ready(self):
        current = self.current_status
        if current != OrderStatus.IN_PROGRESS:
            raise InvalidStateTransition(f"Only an InProgress order can be marked ready, this one is {current.value}")
        self.change_status(OrderStatus.READY)

    def complete(self):
        current = self.current_status
        if current != OrderStatus.READY:
            raise InvalidStateTransition(f"Only a Ready order can be completed, this one is {current.value}")
        self.change_status(OrderStatus.COMPLETED)

    def cancel(self, reason=None):
        """Cancel the order from any status except Completed.

        Cancelling an already cancelled order does nothing.
        """
        current = self.current_status
        if current == OrderStatus.COMPLETED:
            raise InvalidStateTransition("Cannot cancel a completed order")
        if current == OrderStatus.CANCELLED:
            return

        if reason and len(reason) > CANCELLATION_REASON_MAX_LENGTH:
            raise ValidationError(
                {"reason": [f"Cancellation reason cannot exceed {CANCELLATION_REASON_MAX_LENGTH} characters"]}
            )

        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLED.value
        self.cancellation_reason = reason
        self.updated_at = now

        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                reason=reason,
                previous_status=current.value,
                cancelled_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Event buffer
    # -------------------------------------------------------------------
    def pending_events(self):
        """Events raised since the last successful save, as a copy."""
        return list(self._events)

    def clear_events(self):
        self._events.clear()
