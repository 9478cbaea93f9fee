"""The rendered invoice and the content model it is printed from.

``InvoiceLayout`` is what goes on the page, in reading order; a
``DocumentWriter`` turns it into printable bytes. ``RenderedDocument``
bundles both with the moment it was issued and never changes afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

TABLE_HEADER = ("Manuel", "Quantité", "Prix unitaire", "Total")
DEFAULT_FILENAME = "facture.pdf"


@dataclass(frozen=True)
class InvoiceRow:
    """A table body row, already formatted for display."""

    title: str
    quantity: str
    unit_price: str
    line_total: str

    def cells(self) -> tuple[str, str, str, str]:
        return (self.title, self.quantity, self.unit_price, self.line_total)


@dataclass(frozen=True)
class InvoiceLayout:
    badge_text: str
    title: str
    client_line: str
    date_line: str
    header: tuple[str, ...]
    rows: tuple[InvoiceRow, ...]
    total: int
    total_line: str

    def body(self) -> list[tuple[str, str, str, str]]:
        return [row.cells() for row in self.rows]


@dataclass(frozen=True)
class WrittenDocument:
    """Printable bytes produced by a DocumentWriter."""

    content: bytes
    page_count: int
    media_type: str = "application/pdf"


@dataclass(frozen=True)
class RenderedDocument:
    layout: InvoiceLayout
    issued_at: datetime
    content: bytes
    page_count: int
    filename: str = DEFAULT_FILENAME
    media_type: str = "application/pdf"

    @property
    def total(self) -> int:
        return self.layout.total

    @property
    def rows(self) -> tuple[InvoiceRow, ...]:
        return self.layout.rows

    @property
    def size(self) -> int:
        return len(self.content)
