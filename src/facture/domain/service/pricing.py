"""Domain service: Pricing.

Computes the running total shown while the form is being edited. It is
deliberately tolerant: a line whose item is not selected yet, or no longer
in the catalog, contributes nothing instead of raising.
"""

from __future__ import annotations

from collections.abc import Iterable

from facture.domain.model.catalog import Catalog
from facture.domain.model.order import OrderLine
from facture.domain.model.value_objects import Money


def line_price(line: OrderLine, catalog: Catalog) -> Money | None:
    """Price of a single line, or None when its item does not resolve."""
    item = catalog.lookup(line.item_id)
    if item is None:
        return None
    return item.unit_price * line.quantity.value


def line_total(line: OrderLine, catalog: Catalog) -> int:
    price = line_price(line, catalog)
    return price.amount if price is not None else 0


def compute_total(lines: Iterable[OrderLine], catalog: Catalog) -> int:
    """Sum of ``unit_price * quantity`` over every resolvable line."""
    total = Money.zero()
    for line in lines:
        price = line_price(line, catalog)
        if price is not None:
            total = total + price
    return total.amount
