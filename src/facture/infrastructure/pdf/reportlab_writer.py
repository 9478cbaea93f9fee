"""Utilities for printing invoices to PDF with reportlab."""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from time import perf_counter
from xml.sax.saxutils import escape

from reportlab.lib.colors import HexColor
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.pdfgen import canvas
from reportlab.platypus import Paragraph, Table, TableStyle

from facture.domain.model.document import InvoiceLayout, WrittenDocument
from facture.domain.writer.document_writer import DocumentWriter
from facture.infrastructure.logging_config import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class InvoiceStyle:
    """Colors and page geometry of the printed invoice.

    Vertical positions are millimetres from the top edge of the page.
    """

    page_size: tuple[float, float] = A4
    brand_color: str = "#0066CC"
    accent_color: str = "#0066CC"
    badge_text_color: str = "#FFFFFF"
    text_color: str = "#000000"
    header_text_color: str = "#FFFFFF"
    row_color: str = "#FFFFFF"
    alternate_row_color: str = "#F5F5F5"
    grid_color: str = "#C8C8C8"

    margin: float = 14
    badge_center: float = 20
    badge_radius: float = 10
    badge_baseline: float = 24
    badge_font_size: int = 8
    title_baseline: float = 40
    title_font_size: int = 16
    client_x: float = 20
    client_baseline: float = 70
    date_baseline: float = 78
    client_font_size: int = 12
    table_top: float = 85
    table_font_size: int = 10
    column_widths: tuple[float, ...] = (92, 25, 32, 33)
    total_x: float = 150
    total_gap: float = 10
    total_font_size: int = 14


class ReportlabInvoiceWriter(DocumentWriter):
    """Print an ``InvoiceLayout`` on A4 pages.

    Content order: brand badge, title, client block, line table, total.
    The table flows onto new pages (header repeated) when it is longer than
    the first page; the total always sits below the table's last row.
    """

    def __init__(
        self,
        style: InvoiceStyle | None = None,
        invariant: bool = False,
        compress: bool = True,
    ) -> None:
        self._style = style or InvoiceStyle()
        self._invariant = invariant
        self._compress = compress

    def write(self, layout: InvoiceLayout) -> WrittenDocument:
        start = perf_counter()
        buffer = BytesIO()
        pdf_canvas = canvas.Canvas(
            buffer,
            pagesize=self._style.page_size,
            invariant=int(self._invariant),
            pageCompression=int(self._compress),
        )
        pdf_canvas.setTitle(layout.title)
        pdf_canvas.setAuthor(layout.badge_text)

        self._draw_badge(pdf_canvas, layout.badge_text)
        self._draw_title(pdf_canvas, layout.title)
        self._draw_client_block(pdf_canvas, layout.client_line, layout.date_line)
        final_y, pages = self._draw_table(pdf_canvas, layout)
        pages = self._draw_total(pdf_canvas, layout.total_line, final_y, pages)

        pdf_canvas.save()
        content = buffer.getvalue()
        logger.debug(
            "Printed invoice: %d row(s), %d page(s), %d bytes in %.3fs",
            len(layout.rows),
            pages,
            len(content),
            perf_counter() - start,
        )
        return WrittenDocument(content=content, page_count=pages)

    # --- Page sections --------------------------------------------------------

    def _draw_badge(self, pdf_canvas: canvas.Canvas, text: str) -> None:
        style = self._style
        center_x = self._page_width / 2

        pdf_canvas.setFillColor(HexColor(style.brand_color))
        pdf_canvas.circle(
            center_x,
            self._from_top(style.badge_center),
            style.badge_radius * mm,
            stroke=0,
            fill=1,
        )
        pdf_canvas.setFillColor(HexColor(style.badge_text_color))
        pdf_canvas.setFont("Helvetica-Bold", style.badge_font_size)
        pdf_canvas.drawCentredString(center_x, self._from_top(style.badge_baseline), text)

    def _draw_title(self, pdf_canvas: canvas.Canvas, title: str) -> None:
        style = self._style
        pdf_canvas.setFillColor(HexColor(style.accent_color))
        pdf_canvas.setFont("Helvetica-Bold", style.title_font_size)
        pdf_canvas.drawCentredString(
            self._page_width / 2, self._from_top(style.title_baseline), title
        )

    def _draw_client_block(
        self, pdf_canvas: canvas.Canvas, client_line: str, date_line: str
    ) -> None:
        style = self._style
        pdf_canvas.setFillColor(HexColor(style.text_color))
        pdf_canvas.setFont("Helvetica", style.client_font_size)
        x = style.client_x * mm
        pdf_canvas.drawString(x, self._from_top(style.client_baseline), client_line)
        pdf_canvas.drawString(x, self._from_top(style.date_baseline), date_line)

    def _draw_table(self, pdf_canvas: canvas.Canvas, layout: InvoiceLayout) -> tuple[float, int]:
        """Draw the line table, breaking pages as needed.

        Returns the y coordinate of the table's bottom edge on the last page
        and the number of pages used so far.
        """
        style = self._style
        x = style.margin * mm
        width = self._content_width
        bottom = style.margin * mm
        top = self._from_top(style.table_top)
        fresh_page = False
        pages = 1

        table = self._build_table(layout)
        while True:
            available = top - bottom
            _, height = table.wrapOn(pdf_canvas, width, available)
            if height <= available:
                table.drawOn(pdf_canvas, x, top - height)
                return top - height, pages

            parts = table.split(width, available)
            if len(parts) < 2:
                if fresh_page:
                    # a single row taller than a page: let it overflow
                    table.drawOn(pdf_canvas, x, top - height)
                    return top - height, pages
            else:
                head, table = parts[0], parts[1]
                _, head_height = head.wrapOn(pdf_canvas, width, available)
                head.drawOn(pdf_canvas, x, top - head_height)

            pdf_canvas.showPage()
            pages += 1
            top = self._page_height - style.margin * mm
            fresh_page = True

    def _draw_total(
        self, pdf_canvas: canvas.Canvas, total_line: str, final_y: float, pages: int
    ) -> int:
        style = self._style
        y = final_y - style.total_gap * mm
        if y < style.margin * mm:
            pdf_canvas.showPage()
            pages += 1
            y = self._page_height - (style.margin + style.total_gap) * mm

        pdf_canvas.setFillColor(HexColor(style.accent_color))
        pdf_canvas.setFont("Helvetica-Bold", style.total_font_size)
        pdf_canvas.drawString(style.total_x * mm, y, total_line)
        return pages

    # --- Table ----------------------------------------------------------------

    def _build_table(self, layout: InvoiceLayout) -> Table:
        style = self._style
        title_style = ParagraphStyle(
            "InvoiceItemTitle",
            fontName="Helvetica",
            fontSize=style.table_font_size,
            leading=style.table_font_size * 1.2,
            textColor=HexColor(style.text_color),
        )

        data: list[list[object]] = [list(layout.header)]
        for title, quantity, unit_price, line_total in layout.body():
            data.append(
                [Paragraph(escape(title), title_style), quantity, unit_price, line_total]
            )

        commands: list[tuple] = [
            ("GRID", (0, 0), (-1, -1), 0.25, HexColor(style.grid_color)),
            ("BACKGROUND", (0, 0), (-1, 0), HexColor(style.accent_color)),
            ("TEXTCOLOR", (0, 0), (-1, 0), HexColor(style.header_text_color)),
            ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ("FONTNAME", (0, 1), (-1, -1), "Helvetica"),
            ("FONTSIZE", (0, 0), (-1, -1), style.table_font_size),
            ("VALIGN", (0, 0), (-1, -1), "MIDDLE"),
        ]
        if layout.rows:
            commands.append(
                (
                    "ROWBACKGROUNDS",
                    (0, 1),
                    (-1, -1),
                    [HexColor(style.row_color), HexColor(style.alternate_row_color)],
                )
            )

        return Table(
            data,
            colWidths=[w * mm for w in style.column_widths],
            repeatRows=1,
            style=TableStyle(commands),
        )

    # --- Geometry helpers -----------------------------------------------------

    @property
    def _page_width(self) -> float:
        return self._style.page_size[0]

    @property
    def _page_height(self) -> float:
        return self._style.page_size[1]

    @property
    def _content_width(self) -> float:
        return self._page_width - 2 * self._style.margin * mm

    def _from_top(self, offset: float) -> float:
        return self._page_height - offset * mm


__all__ = ["InvoiceStyle", "ReportlabInvoiceWriter"]
