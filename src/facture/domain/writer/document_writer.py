"""Abstract writer turning an invoice layout into printable bytes.

Defined in the domain layer so the domain never depends on a PDF library.
Concrete implementations (reportlab, in-memory fakes) live elsewhere.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from facture.domain.model.document import InvoiceLayout, WrittenDocument


class DocumentWriter(ABC):

    @abstractmethod
    def write(self, layout: InvoiceLayout) -> WrittenDocument:
        """Print *layout* and return the resulting document bytes."""
