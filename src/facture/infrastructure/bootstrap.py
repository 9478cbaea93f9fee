"""Builds the catalog, PDF writer and form used by the CLI.

The bundled catalog is read once per path and shared by every command
run in the same process.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from facture.application.invoice_form import InvoiceForm
from facture.application.render_invoice import RenderInvoiceHandler
from facture.domain.model.catalog import Catalog
from facture.infrastructure.pdf.reportlab_writer import ReportlabInvoiceWriter
from facture.infrastructure.persistence.json_catalog_loader import (
    DEFAULT_CATALOG_PATH,
    load_catalog,
)


@lru_cache(maxsize=None)
def catalog(path: Path = DEFAULT_CATALOG_PATH) -> Catalog:
    """Load the catalog once per path; later calls reuse it."""
    return load_catalog(path)


def document_writer() -> ReportlabInvoiceWriter:
    return ReportlabInvoiceWriter()


def render_handler(catalog_path: Path = DEFAULT_CATALOG_PATH) -> RenderInvoiceHandler:
    return RenderInvoiceHandler(catalog(catalog_path), document_writer())


def invoice_form(catalog_path: Path = DEFAULT_CATALOG_PATH) -> InvoiceForm:
    return InvoiceForm(catalog(catalog_path), render_handler(catalog_path))
