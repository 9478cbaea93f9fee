"""Application service: Render Invoice use case.

Snapshots the order lines, lays the invoice out and hands the layout to the
document writer. Runs once per submission; the live total on screen goes
through ``compute_total`` directly.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime

from facture.domain.model.catalog import Catalog
from facture.domain.model.document import DEFAULT_FILENAME, RenderedDocument
from facture.domain.model.order import OrderLine
from facture.domain.service.invoice_layout import BRAND_TEXT, build_invoice_layout
from facture.domain.writer.document_writer import DocumentWriter


def local_now() -> datetime:
    return datetime.now().astimezone()


class RenderInvoiceHandler:

    def __init__(
        self,
        catalog: Catalog,
        writer: DocumentWriter,
        clock: Callable[[], datetime] = local_now,
        filename: str = DEFAULT_FILENAME,
        brand_text: str = BRAND_TEXT,
    ) -> None:
        self._catalog = catalog
        self._writer = writer
        self._clock = clock
        self._filename = filename
        self._brand_text = brand_text

    def handle(
        self,
        client_name: str,
        lines: Sequence[OrderLine],
        now: datetime | None = None,
    ) -> RenderedDocument:
        """Render a new invoice.

        The lines are copied first so later edits to the form cannot leak
        into a document that has already been issued.
        """
        issued_at = now or self._clock()
        snapshot = [OrderLine(line.item_id, line.quantity) for line in lines]

        layout = build_invoice_layout(
            client_name,
            snapshot,
            self._catalog,
            issued_at,
            brand_text=self._brand_text,
        )
        written = self._writer.write(layout)

        return RenderedDocument(
            layout=layout,
            issued_at=issued_at,
            content=written.content,
            page_count=written.page_count,
            filename=self._filename,
            media_type=written.media_type,
        )
