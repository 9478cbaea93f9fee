"""Application service: the invoice form session.

Owns the single in-progress ``Order`` of an editing session. Every mutation
is followed by a fresh ``compute_total`` so the caller can redisplay the
running total; submission validates the fields and renders the invoice.
"""

from __future__ import annotations

from datetime import datetime

from facture.application.dto import FormDTO, FormLineDTO, LineSpec
from facture.application.render_invoice import RenderInvoiceHandler
from facture.domain.exceptions import (
    EntityNotFoundError,
    FieldError,
    FormValidationError,
    ValidationError,
)
from facture.domain.model.catalog import Catalog
from facture.domain.model.document import RenderedDocument
from facture.domain.model.order import Order
from facture.domain.model.value_objects import Money
from facture.domain.service.pricing import compute_total, line_price

# Field-level messages, worded as the form shows them to the user.
CLIENT_NAME_REQUIRED = "Le nom du client est requis"
ITEM_REQUIRED = "Veuillez sélectionner un manuel"
QUANTITY_MINIMUM = "La quantité doit être au moins 1"
LINES_REQUIRED = "Ajoutez au moins un manuel"

CLIENT_FIELD = "client_name"
LINES_FIELD = "lines"


def item_field(position: int) -> str:
    return f"lines.{position}.item_id"


def quantity_field(position: int) -> str:
    return f"lines.{position}.quantity"


class InvoiceForm:
    """Editable invoice form.

    A new form starts with one blank line, ready for a first selection.
    Positions are 0-based; the CLI shows them 1-based.
    """

    def __init__(
        self,
        catalog: Catalog,
        render_handler: RenderInvoiceHandler,
        order: Order | None = None,
    ) -> None:
        self._catalog = catalog
        self._render_handler = render_handler
        if order is None:
            order = Order()
            order.add_line()
        self._order = order

    # --- Factory --------------------------------------------------------------

    @classmethod
    def from_specs(
        cls,
        catalog: Catalog,
        render_handler: RenderInvoiceHandler,
        client_name: str,
        specs: list[LineSpec],
    ) -> InvoiceForm:
        """Build a filled-in form, e.g. from command-line arguments.

        Each spec goes through the same checks as an interactive edit.
        """
        form = cls(catalog, render_handler, order=Order())
        form.set_client_name(client_name)
        for spec in specs:
            form.add_line(spec.item_id, spec.quantity)
        return form

    # --- Editing --------------------------------------------------------------

    @property
    def client_name(self) -> str:
        return self._order.client_name

    def set_client_name(self, name: str) -> None:
        self._order.rename_client(name)

    def add_line(self, item_id: str = "", qty: int = 1) -> int:
        """Append a line and return its position.

        Nothing is appended when the item or the quantity is refused.
        """
        item_id = item_id.strip()
        self._check_item(item_id)
        position = len(self._order.lines)
        try:
            self._order.add_line(item_id, qty)
        except ValidationError as exc:
            raise FormValidationError(
                [FieldError(quantity_field(position), QUANTITY_MINIMUM)]
            ) from exc
        return position

    def remove_line(self, position: int) -> None:
        self._order.remove_line(position)

    def select_item(self, position: int, item_id: str) -> None:
        """Point a line at a catalog item; unknown ids are refused."""
        line = self._order.line(position)
        item_id = item_id.strip()
        self._check_item(item_id)
        line.select_item(item_id)

    def change_quantity(self, position: int, qty: int) -> None:
        """Change a line's quantity; below 1 the line keeps its old value."""
        line = self._order.line(position)
        try:
            line.change_quantity(qty)
        except ValidationError as exc:
            raise FormValidationError(
                [FieldError(quantity_field(position), QUANTITY_MINIMUM)]
            ) from exc

    # --- Queries --------------------------------------------------------------

    @property
    def total(self) -> int:
        return compute_total(self._order.lines, self._catalog)

    def errors(self) -> list[FieldError]:
        """Every field that would block submission, in form order."""
        errors: list[FieldError] = []
        if not self._order.client_name:
            errors.append(FieldError(CLIENT_FIELD, CLIENT_NAME_REQUIRED))
        if not self._order.lines:
            errors.append(FieldError(LINES_FIELD, LINES_REQUIRED))
        for position, line in enumerate(self._order.lines):
            if line.item_id not in self._catalog:
                errors.append(FieldError(item_field(position), ITEM_REQUIRED))
        return errors

    def snapshot(self) -> FormDTO:
        lines = []
        for position, line in enumerate(self._order.lines):
            item = self._catalog.lookup(line.item_id)
            price = line_price(line, self._catalog)
            lines.append(
                FormLineDTO(
                    number=position + 1,
                    item_id=line.item_id,
                    title=item.title if item else "",
                    quantity=line.quantity.value,
                    unit_price=str(item.unit_price) if item else "",
                    line_total=str(price) if price is not None else "",
                )
            )
        return FormDTO(
            client_name=self._order.client_name,
            lines=lines,
            total=str(Money(self.total)),
        )

    # --- Submission -----------------------------------------------------------

    def submit(self, now: datetime | None = None) -> RenderedDocument:
        """Validate the form and render a new invoice."""
        errors = self.errors()
        if errors:
            raise FormValidationError(errors)

        return self._render_handler.handle(
            self._order.client_name, self._order.lines, now=now
        )

    # --- Internal helpers -----------------------------------------------------

    def _check_item(self, item_id: str) -> None:
        if item_id and item_id not in self._catalog:
            raise EntityNotFoundError(f"Manuel inconnu : '{item_id}'")
