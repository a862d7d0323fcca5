"""Tests for Order state machine — valid transitions and invalid transition guards."""

from decimal import Decimal

import pytest
from ordering.order.events import OrderCancelled, OrderCompleted, OrderStatusChanged
from ordering.order.order import InvalidStateTransition, Order, OrderStatus
from protean.exceptions import InvalidStateError, ValidationError


def _make_order():
    return Order.create(
        customer_id="cust-001",
        lines=[{"coffee_item_id": "item-espresso", "quantity": 1, "unit_price": Decimal("2.50")}],
    )


def _order_at_state(target_status):
    """Create an order and advance it to the desired state."""
    order = _make_order()
    order.clear_events()

    if target_status == OrderStatus.PENDING:
        return order

    if target_status == OrderStatus.CANCELLED:
        order.cancel("Changed my mind")
        order.clear_events()
        return order

    order.assign_barista("barista-001")
    order.clear_events()
    if target_status == OrderStatus.IN_PROGRESS:
        return order

    order.mark_as_ready()
    order.clear_events()
    if target_status == OrderStatus.READY:
        return order

    order.complete()
    order.clear_events()
    return order


_ALLOWED = {
    (OrderStatus.PENDING, OrderStatus.IN_PROGRESS),
    (OrderStatus.PENDING, OrderStatus.CANCELLED),
    (OrderStatus.IN_PROGRESS, OrderStatus.READY),
    (OrderStatus.IN_PROGRESS, OrderStatus.CANCELLED),
    (OrderStatus.READY, OrderStatus.COMPLETED),
    (OrderStatus.READY, OrderStatus.CANCELLED),
}

_ALL_PAIRS = [(source, target) for source in OrderStatus for target in OrderStatus if source != target]


class TestChangeStatusTable:
    @pytest.mark.parametrize(
        "source,target",
        [pair for pair in _ALL_PAIRS if pair in _ALLOWED],
        ids=lambda s: s.value,
    )
    def test_allowed_transition(self, source, target):
        order = _order_at_state(source)
        order.change_status(target.value)

        assert order.status == target.value
        status_events = [e for e in order.pending_events() if isinstance(e, OrderStatusChanged)]
        assert len(status_events) == 1
        assert status_events[0].previous_status == source.value
        assert status_events[0].new_status == target.value

    @pytest.mark.parametrize(
        "source,target",
        [pair for pair in _ALL_PAIRS if pair not in _ALLOWED],
        ids=lambda s: s.value,
    )
    def test_forbidden_transition(self, source, target):
        order = _order_at_state(source)
        with pytest.raises(InvalidStateTransition):
            order.change_status(target.value)

        assert order.status == source.value
        assert order.pending_events() == []

    @pytest.mark.parametrize("status", list(OrderStatus), ids=lambda s: s.value)
    def test_same_status_is_a_no_op(self, status):
        order = _order_at_state(status)
        order.change_status(status.value)

        assert order.status == status.value
        assert order.pending_events() == []

    def test_accepts_enum_members(self):
        order = _order_at_state(OrderStatus.PENDING)
        order.change_status(OrderStatus.IN_PROGRESS)
        assert order.status == OrderStatus.IN_PROGRESS.value

    def test_unknown_status_is_a_validation_error(self):
        order = _order_at_state(OrderStatus.PENDING)
        with pytest.raises(ValidationError) as exc:
            order.change_status("Brewing")
        assert "status" in exc.value.messages

    def test_invalid_transition_is_an_invalid_state_error(self):
        assert issubclass(InvalidStateTransition, InvalidStateError)

    def test_change_status_to_cancelled_raises_only_status_changed(self):
        order = _order_at_state(OrderStatus.PENDING)
        order.change_status(OrderStatus.CANCELLED.value)

        events = order.pending_events()
        assert [type(e) for e in events] == [OrderStatusChanged]

    def test_change_status_to_completed_also_raises_order_completed(self):
        order = _order_at_state(OrderStatus.READY)
        order.change_status(OrderStatus.COMPLETED.value)

        events = order.pending_events()
        assert [type(e) for e in events] == [OrderStatusChanged, OrderCompleted]
        assert events[1].total_price == Decimal("2.50")
        assert events[1].customer_id == "cust-001"


class TestAssignBarista:
    def test_assign_starts_the_order(self):
        order = _order_at_state(OrderStatus.PENDING)
        order.assign_barista("barista-001")

        assert order.barista_id == "barista-001"
        assert order.status == OrderStatus.IN_PROGRESS.value

        events = order.pending_events()
        assert len(events) == 1
        assert isinstance(events[0], OrderStatusChanged)
        assert events[0].barista_id == "barista-001"

    def test_barista_is_required(self):
        order = _order_at_state(OrderStatus.PENDING)
        with pytest.raises(ValidationError):
            order.assign_barista("")
        assert order.status == OrderStatus.PENDING.value

    @pytest.mark.parametrize(
        "status",
        [OrderStatus.IN_PROGRESS, OrderStatus.READY, OrderStatus.COMPLETED, OrderStatus.CANCELLED],
        ids=lambda s: s.value,
    )
    def test_only_pending_orders_can_be_assigned(self, status):
        order = _order_at_state(status)
        with pytest.raises(InvalidStateTransition):
            order.assign_barista("barista-002")
        assert order.pending_events() == []


class TestMarkAsReady:
    def test_from_in_progress(self):
        order = _order_at_state(OrderStatus.IN_PROGRESS)
        order.mark_as_ready()
        assert order.status == OrderStatus.READY.value

    @pytest.mark.parametrize(
        "status",
        [OrderStatus.PENDING, OrderStatus.READY, OrderStatus.COMPLETED, OrderStatus.CANCELLED],
        ids=lambda s: s.value,
    )
    def test_from_other_states_fails(self, status):
        order = _order_at_state(status)
        with pytest.raises(InvalidStateTransition):
            order.mark_as_ready()
        assert order.status == status.value


class TestComplete:
    def test_from_ready(self):
        order = _order_at_state(OrderStatus.READY)
        order.complete()
        assert order.status == OrderStatus.COMPLETED.value

    @pytest.mark.parametrize(
        "status",
        [OrderStatus.PENDING, OrderStatus.IN_PROGRESS, OrderStatus.COMPLETED, OrderStatus.CANCELLED],
        ids=lambda s: s.value,
    )
    def test_from_other_states_fails(self, status):
        order = _order_at_state(status)
        with pytest.raises(InvalidStateTransition):
            order.complete()
        assert order.status == status.value


class TestCancel:
    @pytest.mark.parametrize(
        "status",
        [OrderStatus.PENDING, OrderStatus.IN_PROGRESS, OrderStatus.READY],
        ids=lambda s: s.value,
    )
    def test_cancel_from_open_states(self, status):
        order = _order_at_state(status)
        order.cancel("Customer left")

        assert order.status == OrderStatus.CANCELLED.value
        assert order.cancellation_reason == "Customer left"

        events = order.pending_events()
        assert len(events) == 1
        assert isinstance(events[0], OrderCancelled)
        assert events[0].previous_status == status.value
        assert events[0].reason == "Customer left"

    def test_cancel_without_reason(self):
        order = _order_at_state(OrderStatus.PENDING)
        order.cancel()
        assert order.status == OrderStatus.CANCELLED.value
        assert order.cancellation_reason is None

    def test_cancel_completed_order_fails(self):
        order = _order_at_state(OrderStatus.COMPLETED)
        with pytest.raises(InvalidStateTransition):
            order.cancel("Too late")
        assert order.status == OrderStatus.COMPLETED.value

    def test_cancel_cancelled_order_is_a_no_op(self):
        order = _order_at_state(OrderStatus.CANCELLED)
        order.cancel("Again")

        assert order.cancellation_reason == "Changed my mind"
        assert order.pending_events() == []

    def test_overlong_reason_is_rejected(self):
        order = _order_at_state(OrderStatus.PENDING)
        with pytest.raises(ValidationError):
            order.cancel("x" * 501)
        assert order.status == OrderStatus.PENDING.value
        assert order.pending_events() == []
