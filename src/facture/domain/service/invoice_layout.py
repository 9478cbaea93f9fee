"""Domain service: Invoice layout.

Builds the content of the invoice from a snapshot of the order. Lines whose
item does not resolve are left out of the table, so the printed invoice
never carries a blank row; they add nothing to the total either.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from facture.domain.model.catalog import Catalog
from facture.domain.model.document import TABLE_HEADER, InvoiceLayout, InvoiceRow
from facture.domain.model.order import OrderLine
from facture.domain.model.value_objects import Money
from facture.domain.service.french_dates import format_long_date
from facture.domain.service.pricing import compute_total

BRAND_TEXT = "AS SHABIL"
DOCUMENT_TITLE = "FACTURE"


def build_rows(lines: Sequence[OrderLine], catalog: Catalog) -> tuple[InvoiceRow, ...]:
    rows: list[InvoiceRow] = []
    for line in lines:
        item = catalog.lookup(line.item_id)
        if item is None:
            continue
        rows.append(
            InvoiceRow(
                title=item.title,
                quantity=str(line.quantity),
                unit_price=str(item.unit_price),
                line_total=str(item.unit_price * line.quantity.value),
            )
        )
    return tuple(rows)


def build_invoice_layout(
    client_name: str,
    lines: Sequence[OrderLine],
    catalog: Catalog,
    now: datetime,
    brand_text: str = BRAND_TEXT,
) -> InvoiceLayout:
    """Lay out the invoice for *client_name* as of *now*."""
    total = compute_total(lines, catalog)
    return InvoiceLayout(
        badge_text=brand_text,
        title=DOCUMENT_TITLE,
        client_line=f"Client: {client_name}",
        date_line=f"Date: {format_long_date(now)}",
        header=TABLE_HEADER,
        rows=build_rows(lines, catalog),
        total=total,
        total_line=f"Total: {Money(total)}",
    )
