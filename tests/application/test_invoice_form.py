"""Integration tests for the invoice form session.

Uses the fake document writer, no file I/O.
"""

from datetime import datetime

import pytest

from facture.application.dto import LineSpec
from facture.application.invoice_form import (
    CLIENT_NAME_REQUIRED,
    ITEM_REQUIRED,
    LINES_REQUIRED,
    QUANTITY_MINIMUM,
    InvoiceForm,
)
from facture.application.render_invoice import RenderInvoiceHandler
from facture.domain.exceptions import (
    EntityNotFoundError,
    FieldError,
    FormValidationError,
)
from tests.fakes import FakeDocumentWriter, make_catalog

NOW = datetime(2026, 10, 17, 9, 0)


def _setup() -> tuple[InvoiceForm, FakeDocumentWriter]:
    catalog = make_catalog()
    writer = FakeDocumentWriter()
    form = InvoiceForm(catalog, RenderInvoiceHandler(catalog, writer, clock=lambda: NOW))
    return form, writer


class TestInvoiceFormEditing:

    def test_new_form_has_one_blank_line(self):
        form, _ = _setup()
        assert len(form.snapshot().lines) == 1
        assert form.snapshot().lines[0].item_id == ""
        assert form.snapshot().lines[0].quantity == 1
        assert form.total == 0

    def test_total_follows_every_edit(self):
        form, _ = _setup()
        form.select_item(0, "CI1")
        assert form.total == 1100
        form.change_quantity(0, 2)
        assert form.total == 2200
        position = form.add_line("CE11")
        assert position == 1
        assert form.total == 3800
        form.remove_line(0)
        assert form.total == 1600

    def test_blank_line_added_contributes_zero(self):
        form, _ = _setup()
        form.select_item(0, "CM1")
        form.add_line()
        assert form.total == 2000

    def test_unknown_item_refused(self):
        form, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="Manuel inconnu"):
            form.select_item(0, "XX9")
        assert form.snapshot().lines[0].item_id == ""

    def test_add_line_with_unknown_item_appends_nothing(self):
        form, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            form.add_line("XX9", 2)
        assert len(form.snapshot().lines) == 1

    def test_quantity_below_minimum_refused_and_kept(self):
        form, _ = _setup()
        form.change_quantity(0, 3)
        with pytest.raises(FormValidationError) as excinfo:
            form.change_quantity(0, 0)
        assert excinfo.value.errors == [FieldError("lines.0.quantity", QUANTITY_MINIMUM)]
        assert form.snapshot().lines[0].quantity == 3

    def test_add_line_with_zero_quantity_appends_nothing(self):
        form, _ = _setup()
        with pytest.raises(FormValidationError) as excinfo:
            form.add_line("CI1", 0)
        assert excinfo.value.errors[0].field == "lines.1.quantity"
        assert len(form.snapshot().lines) == 1

    def test_selection_can_be_cleared(self):
        form, _ = _setup()
        form.select_item(0, "CI1")
        form.select_item(0, "")
        assert form.total == 0

    def test_remove_missing_line(self):
        form, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            form.remove_line(3)


class TestInvoiceFormValidation:

    def test_errors_on_fresh_form(self):
        form, _ = _setup()
        assert form.errors() == [
            FieldError("client_name", CLIENT_NAME_REQUIRED),
            FieldError("lines.0.item_id", ITEM_REQUIRED),
        ]

    def test_no_lines(self):
        form, _ = _setup()
        form.set_client_name("Alice")
        form.remove_line(0)
        assert form.errors() == [FieldError("lines", LINES_REQUIRED)]

    def test_whitespace_client_name_is_missing(self):
        form, _ = _setup()
        form.set_client_name("   ")
        form.select_item(0, "CI1")
        assert form.errors() == [FieldError("client_name", CLIENT_NAME_REQUIRED)]

    def test_submit_with_errors_renders_nothing(self):
        form, writer = _setup()
        with pytest.raises(FormValidationError) as excinfo:
            form.submit()
        assert len(excinfo.value.errors) == 2
        assert "Le nom du client est requis" in str(excinfo.value)
        assert writer.layouts == []


class TestInvoiceFormSubmission:

    def test_submit_renders_invoice(self):
        form, writer = _setup()
        form.set_client_name("Alice")
        form.select_item(0, "CI1")
        form.change_quantity(0, 2)
        form.add_line("CE11", 1)

        document = form.submit()

        assert document.total == 3800
        assert document.layout.client_line == "Client: Alice"
        assert document.issued_at == NOW
        assert len(writer.layouts) == 1

    def test_resubmission_renders_current_state(self):
        form, _ = _setup()
        form.set_client_name("Alice")
        form.select_item(0, "CI1")
        first = form.submit()
        form.change_quantity(0, 5)
        second = form.submit(now=datetime(2024, 1, 1))

        assert second is not first
        assert first.total == 1100
        assert second.total == 5500
        assert second.layout.date_line == "Date: lundi 1 janvier 2024"


class TestInvoiceFormFromSpecs:

    def test_builds_filled_form(self):
        catalog = make_catalog()
        handler = RenderInvoiceHandler(catalog, FakeDocumentWriter(), clock=lambda: NOW)
        form = InvoiceForm.from_specs(
            catalog, handler, "Bob", [LineSpec("CI1", 1), LineSpec("CI1", 2)]
        )
        assert form.client_name == "Bob"
        assert len(form.snapshot().lines) == 2
        assert form.total == 3300
        assert len(form.submit().rows) == 2

    def test_unknown_item_in_specs(self):
        catalog = make_catalog()
        handler = RenderInvoiceHandler(catalog, FakeDocumentWriter())
        with pytest.raises(EntityNotFoundError, match="XX9"):
            InvoiceForm.from_specs(catalog, handler, "Bob", [LineSpec("XX9", 1)])

    def test_empty_specs_fail_validation(self):
        catalog = make_catalog()
        handler = RenderInvoiceHandler(catalog, FakeDocumentWriter())
        form = InvoiceForm.from_specs(catalog, handler, "Bob", [])
        assert form.errors() == [FieldError("lines", LINES_REQUIRED)]


class TestInvoiceFormSnapshot:

    def test_snapshot_lists_lines_and_total(self):
        form, _ = _setup()
        form.set_client_name("Alice")
        form.select_item(0, "CE11")
        form.change_quantity(0, 2)
        form.add_line()

        dto = form.snapshot()

        assert dto.client_name == "Alice"
        assert dto.total == "3200 FCFA"
        assert [line.number for line in dto.lines] == [1, 2]
        assert dto.lines[0].unit_price == "1600 FCFA"
        assert dto.lines[0].line_total == "3200 FCFA"
        assert dto.lines[1].title == ""
        assert dto.lines[1].line_total == ""
