"""Tests for the FIFO withdrawal engine."""

from datetime import UTC, date, datetime
from decimal import Decimal

import pytest

from stockledger.core.entities.inventory import Batch
from stockledger.core.exceptions import (
    InsufficientStockError,
    InvalidQuantityError,
    ValidationError,
)
from stockledger.core.services.fifo_engine import (
    fifo_order,
    plan_withdrawal,
    total_available,
)


def _batch(batch_id: str, qty: str, price: str, day: date, name: str = "Widget") -> Batch:
    return Batch(
        id=batch_id,
        name=name,
        quantity=Decimal(qty),
        price=Decimal(price),
        purchase_date=day,
    )


class TestFifoOrder:
    def test_oldest_first(self, widget_batches):
        ordered = fifo_order(reversed(widget_batches))
        assert [b.id for b in ordered] == ["b1", "b2"]

    def test_same_date_keeps_input_order(self):
        day = date(2024, 1, 1)
        batches = [_batch("x", "1", "1", day), _batch("y", "1", "1", day)]
        assert [b.id for b in fifo_order(batches)] == ["x", "y"]

    def test_same_date_earliest_created_first(self):
        day = date(2024, 1, 1)
        first = _batch("first", "1", "1", day).model_copy(
            update={"created_at": datetime(2024, 1, 1, 8, tzinfo=UTC)}
        )
        second = _batch("second", "1", "2", day).model_copy(
            update={"created_at": datetime(2024, 1, 1, 9, tzinfo=UTC)}
        )
        assert [b.id for b in fifo_order([second, first])] == ["first", "second"]

    def test_total_available(self, widget_batches):
        assert total_available(widget_batches) == Decimal("8")


class TestPlanWithdrawal:
    def test_spans_two_batches(self, widget_batches):
        plan = plan_withdrawal(widget_batches, 6)

        assert [(l.batch_id, l.quantity_consumed, l.line_cost) for l in plan.lines] == [
            ("b1", Decimal("5"), Decimal("10.00")),
            ("b2", Decimal("1"), Decimal("2.50")),
        ]
        assert plan.total_cost == Decimal("12.50")
        assert plan.quantity_consumed == Decimal("6")

    def test_resulting_quantities(self, widget_batches):
        plan = plan_withdrawal(widget_batches, 6)
        updated = plan.updated_batches(widget_batches)

        assert [(b.id, b.quantity) for b in updated] == [
            ("b1", Decimal("0")),
            ("b2", Decimal("2")),
        ]
        assert plan.lines[0].exhausts_batch
        assert not plan.lines[1].exhausts_batch

    def test_planning_does_not_mutate_input(self, widget_batches):
        plan_withdrawal(widget_batches, 6)
        assert [b.quantity for b in widget_batches] == [Decimal("5"), Decimal("3")]

    def test_input_order_irrelevant(self, widget_batches):
        plan = plan_withdrawal(list(reversed(widget_batches)), 6)
        assert [l.batch_id for l in plan.lines] == ["b1", "b2"]

    def test_single_batch_partial(self, widget_batches):
        plan = plan_withdrawal(widget_batches, "2")
        assert len(plan.lines) == 1
        assert plan.lines[0].quantity_after == Decimal("3")
        assert plan.total_cost == Decimal("4.00")

    def test_exact_total_exhausts_everything(self, widget_batches):
        plan = plan_withdrawal(widget_batches, 8)
        updated = plan.updated_batches(widget_batches)
        assert all(b.quantity == 0 for b in updated)
        assert plan.total_cost == Decimal("17.50")

    def test_insufficient_stock(self, widget_batches):
        with pytest.raises(InsufficientStockError) as exc_info:
            plan_withdrawal(widget_batches, 10)

        assert exc_info.value.available == Decimal("8")
        assert exc_info.value.requested == Decimal("10")
        assert [b.quantity for b in widget_batches] == [Decimal("5"), Decimal("3")]

    def test_no_batches_is_insufficient(self):
        with pytest.raises(InsufficientStockError) as exc_info:
            plan_withdrawal([], 1)
        assert exc_info.value.available == Decimal("0")

    def test_zero_batches_skipped(self, widget_batches):
        empty = _batch("b0", "0", "9.99", date(2023, 12, 1))
        plan = plan_withdrawal([empty] + widget_batches, 1)
        assert [l.batch_id for l in plan.lines] == ["b1"]

    def test_fractional_quantities_sum_exactly(self):
        batches = [
            _batch("a", "0.1", "3", date(2024, 1, 1)),
            _batch("b", "0.2", "3", date(2024, 1, 2)),
        ]
        plan = plan_withdrawal(batches, "0.3")
        assert plan.quantity_consumed == Decimal("0.3")
        assert sum(b.quantity for b in plan.updated_batches(batches)) == Decimal("0")

    def test_float_request_has_no_binary_noise(self):
        batches = [_batch("a", "1", "1", date(2024, 1, 1))]
        plan = plan_withdrawal(batches, 0.1)
        assert plan.lines[0].quantity_after == Decimal("0.9")

    @pytest.mark.parametrize("requested", [0, -1, "0.0"])
    def test_non_positive_request_rejected(self, widget_batches, requested):
        with pytest.raises(InvalidQuantityError):
            plan_withdrawal(widget_batches, requested)

    def test_mixed_names_rejected(self, widget_batches):
        other = _batch("g1", "1", "1", date(2024, 1, 1), name="Gadget")
        with pytest.raises(ValidationError):
            plan_withdrawal(widget_batches + [other], 1)

    def test_unsaved_batch_rejected(self):
        unsaved = Batch(name="Widget", quantity=1, purchase_date=date(2024, 1, 1))
        with pytest.raises(ValidationError):
            plan_withdrawal([unsaved], 1)

    def test_line_costs_use_each_batch_price(self):
        batches = [
            _batch("a", "2", "1.1111", date(2024, 1, 1)),
            _batch("b", "2", "3.3333", date(2024, 1, 2)),
        ]
        plan = plan_withdrawal(batches, 3)
        assert plan.lines[0].line_cost == Decimal("2.2222")
        assert plan.lines[1].line_cost == Decimal("3.3333")
        assert plan.total_cost == Decimal("5.5555")
