"""Order aggregate: the lines a client is being invoiced for.

The Order is an aggregate root that owns its lines. Unlike a submitted
invoice it is edited in place: lines are appended, re-pointed at another
catalog item, re-quantified and removed while the user fills the form.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from facture.domain.exceptions import EntityNotFoundError
from facture.domain.model.value_objects import Quantity

UNSELECTED = ""


@dataclass
class OrderLine:
    """One line of the order.

    ``item_id`` is empty until the user picks a catalog item; the quantity
    always satisfies the ``Quantity`` invariant (>= 1).
    """

    item_id: str = UNSELECTED
    quantity: Quantity = field(default_factory=lambda: Quantity(1))

    def select_item(self, item_id: str) -> None:
        self.item_id = item_id.strip()

    def change_quantity(self, qty: int) -> None:
        """Set a new quantity; raises ValidationError below 1 and keeps the old one."""
        self.quantity = Quantity(qty)

    @staticmethod
    def of(item_id: str, qty: int) -> OrderLine:
        return OrderLine(item_id=item_id, quantity=Quantity(qty))


@dataclass
class Order:
    """The in-progress order: a client name and its ordered lines.

    Line order is display order only. An order may be empty while it is
    being edited; the form refuses to submit it in that state.
    """

    client_name: str = ""
    lines: list[OrderLine] = field(default_factory=list)

    # --- Line management ------------------------------------------------------

    def add_line(self, item_id: str = UNSELECTED, qty: int = 1) -> OrderLine:
        """Append a new line (unselected, quantity 1 by default) and return it."""
        line = OrderLine.of(item_id, qty)
        self.lines.append(line)
        return line

    def remove_line(self, position: int) -> OrderLine:
        """Remove and return the line at 0-based *position*."""
        self._check_position(position)
        return self.lines.pop(position)

    def line(self, position: int) -> OrderLine:
        self._check_position(position)
        return self.lines[position]

    def rename_client(self, name: str) -> None:
        self.client_name = name.strip()

    # --- Internal helpers -----------------------------------------------------

    def _check_position(self, position: int) -> None:
        if not 0 <= position < len(self.lines):
            raise EntityNotFoundError(
                f"No line at position {position + 1} "
                f"(order has {len(self.lines)} line(s))"
            )
