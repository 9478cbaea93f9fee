"""Entry points for presentation code.

``compute_total`` backs the live running total and never raises for
well-formed lines; ``render`` issues an invoice on submission and degrades
to an empty table rather than failing on unresolved selections.
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime

from facture.application.render_invoice import RenderInvoiceHandler
from facture.domain.model.catalog import Catalog
from facture.domain.model.document import RenderedDocument
from facture.domain.model.order import OrderLine
from facture.domain.service.pricing import compute_total
from facture.domain.writer.document_writer import DocumentWriter
from facture.infrastructure import bootstrap


def render(
    client_name: str,
    lines: Sequence[OrderLine],
    catalog: Catalog | None = None,
    now: datetime | None = None,
    writer: DocumentWriter | None = None,
) -> RenderedDocument:
    """Render the invoice for *lines*, defaulting to the shipped catalog."""
    handler = RenderInvoiceHandler(
        catalog if catalog is not None else bootstrap.catalog(),
        writer if writer is not None else bootstrap.document_writer(),
    )
    return handler.handle(client_name, lines, now=now)


__all__ = ["compute_total", "render"]
