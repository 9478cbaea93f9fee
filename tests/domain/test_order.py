"""Unit tests for the Order aggregate and its lines."""

import pytest

from facture.domain.exceptions import EntityNotFoundError, ValidationError
from facture.domain.model.order import Order, OrderLine
from facture.domain.model.value_objects import Quantity


class TestOrderLine:

    def test_new_line_is_unselected_with_quantity_one(self):
        line = OrderLine()
        assert line.item_id == ""
        assert line.quantity == Quantity(1)

    def test_select_item_strips_whitespace(self):
        line = OrderLine()
        line.select_item("  CI1 ")
        assert line.item_id == "CI1"

    def test_change_quantity(self):
        line = OrderLine()
        line.change_quantity(4)
        assert line.quantity.value == 4

    def test_change_quantity_below_one_keeps_old_value(self):
        line = OrderLine.of("CI1", 3)
        with pytest.raises(ValidationError, match="must be positive"):
            line.change_quantity(0)
        assert line.quantity.value == 3


class TestOrderLines:

    def test_add_line_appends_at_end(self):
        order = Order(client_name="Alice")
        order.add_line("CI1", 2)
        order.add_line("CE11")
        assert [line.item_id for line in order.lines] == ["CI1", "CE11"]
        assert order.lines[1].quantity.value == 1

    def test_add_line_defaults_to_blank(self):
        line = Order().add_line()
        assert line.item_id == ""
        assert line.quantity.value == 1

    def test_add_line_with_invalid_quantity_appends_nothing(self):
        order = Order()
        with pytest.raises(ValidationError):
            order.add_line("CI1", 0)
        assert order.lines == []

    def test_remove_line_by_position(self):
        order = Order()
        order.add_line("CI1")
        order.add_line("CE11")
        order.add_line("CM1")
        removed = order.remove_line(1)
        assert removed.item_id == "CE11"
        assert [line.item_id for line in order.lines] == ["CI1", "CM1"]

    def test_remove_out_of_range_rejected(self):
        order = Order()
        order.add_line("CI1")
        with pytest.raises(EntityNotFoundError, match="No line at position 2"):
            order.remove_line(1)

    def test_negative_position_rejected(self):
        order = Order()
        order.add_line("CI1")
        with pytest.raises(EntityNotFoundError):
            order.line(-1)

    def test_lines_are_edited_in_place(self):
        order = Order()
        order.add_line()
        order.line(0).select_item("CM1")
        order.line(0).change_quantity(5)
        assert order.lines[0] == OrderLine.of("CM1", 5)

    def test_empty_order_is_allowed_while_editing(self):
        order = Order()
        order.add_line()
        order.remove_line(0)
        assert order.lines == []

    def test_rename_client_strips(self):
        order = Order()
        order.rename_client("  École Al Falah  ")
        assert order.client_name == "École Al Falah"
