"""CLI commands for pricing and printing invoices."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import click

from facture.application.dto import FormDTO, LineSpec
from facture.application.invoice_form import InvoiceForm
from facture.domain.exceptions import DomainException, FormValidationError
from facture.domain.model.document import DEFAULT_FILENAME, RenderedDocument
from facture.domain.model.order import OrderLine
from facture.domain.model.value_objects import Money
from facture.domain.service.pricing import compute_total
from facture.infrastructure import bootstrap
from facture.infrastructure.logging_config import get_logger

logger = get_logger(__name__)

_output_option = click.option(
    "--output",
    "-o",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=DEFAULT_FILENAME,
    show_default=True,
    help="Where to save the PDF.",
)


def _parse_items(raw: str) -> list[LineSpec]:
    """Parse 'CI1:2,CE11:1' into a LineSpec list."""
    specs: list[LineSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ItemId:Quantity'."
            )
        item_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for item '{item_id}'."
            )
        specs.append(LineSpec(item_id=item_id.strip(), quantity=qty))
    return specs


def _total_banner(total: int) -> str:
    return f"Total de la commande : {Money(total)}"


def _display_form(dto: FormDTO) -> None:
    """Shared formatting for displaying the form state."""
    click.echo(f"Client: {dto.client_name or '-'}")
    if not dto.lines:
        click.echo("  (aucun manuel)")
    for line in dto.lines:
        title = line.title or "Sélectionnez un manuel"
        click.echo(
            f"  {line.number:>2}. {line.item_id or '-':<6} {title[:40]:<40} "
            f"x{line.quantity:<4} {line.line_total:>12}"
        )
    click.echo(f"Total de la commande : {dto.total}")


def _display_errors(exc: FormValidationError) -> None:
    for error in exc.errors:
        click.echo(f"  - {error.field}: {error.message}", err=True)


def _save(document: RenderedDocument, output: Path) -> None:
    output.write_bytes(document.content)
    logger.info("Wrote %s (%d bytes, %d page(s))", output, document.size, document.page_count)

    click.echo(f"Facture enregistrée : {output} ({document.page_count} page(s))")
    click.echo(document.layout.client_line)
    click.echo(document.layout.date_line)
    click.echo()
    click.echo(f"  {'Manuel':<40} {'Qté':>5} {'Prix':>12} {'Total':>12}")
    click.echo(f"  {'-'*72}")
    for row in document.rows:
        click.echo(
            f"  {row.title[:40]:<40} {row.quantity:>5} {row.unit_price:>12} {row.line_total:>12}"
        )
    click.echo(f"  {'-'*72}")
    click.echo(f"  {document.layout.total_line:>72}")


@click.command("total")
@click.option("--items", required=True, help="Items as 'ItemId:Qty,ItemId:Qty'.")
@click.pass_obj
def invoice_total(obj: dict, items: str) -> None:
    """Print the running total; unknown items count as 0."""
    specs = _parse_items(items)
    try:
        lines = [OrderLine.of(spec.item_id, spec.quantity) for spec in specs]
        total = compute_total(lines, bootstrap.catalog(obj["catalog_path"]))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(_total_banner(total))


@click.command("create")
@click.option("--client", required=True, help="Client name.")
@click.option("--items", required=True, help="Items as 'ItemId:Qty,ItemId:Qty'.")
@click.option(
    "--date",
    "issued_on",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Invoice date (defaults to today).",
)
@_output_option
@click.pass_obj
def invoice_create(
    obj: dict, client: str, items: str, issued_on: datetime | None, output: Path
) -> None:
    """Print an invoice to PDF."""
    specs = _parse_items(items)

    try:
        form = InvoiceForm.from_specs(
            bootstrap.catalog(obj["catalog_path"]),
            bootstrap.render_handler(obj["catalog_path"]),
            client_name=client,
            specs=specs,
        )
        document = form.submit(now=issued_on)
    except FormValidationError as exc:
        _display_errors(exc)
        raise click.ClickException("La facture n'a pas été générée.")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _save(document, output)


_FORM_HELP = """\
Commandes :
  client NOM       changer le nom du client
  add [ID [QTE]]   ajouter un manuel
  item N ID        choisir le manuel de la ligne N
  qty N QTE        changer la quantité de la ligne N
  remove N         supprimer la ligne N
  show             afficher la commande
  done             générer la facture
  quit             quitter sans générer"""


def _position(raw: str) -> int:
    try:
        return int(raw) - 1
    except ValueError:
        raise click.BadParameter(f"Invalid line number '{raw}'.")


def _quantity(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid quantity '{raw}'.")


def _apply(form: InvoiceForm, command: str, args: list[str]) -> None:
    """Run one editing command against the form."""
    if command == "client" and args:
        form.set_client_name(" ".join(args))
    elif command == "add" and len(args) <= 2:
        item_id = args[0] if args else ""
        qty = _quantity(args[1]) if len(args) == 2 else 1
        form.add_line(item_id, qty)
    elif command == "item" and len(args) == 2:
        form.select_item(_position(args[0]), args[1])
    elif command == "qty" and len(args) == 2:
        form.change_quantity(_position(args[0]), _quantity(args[1]))
    elif command == "remove" and len(args) == 1:
        form.remove_line(_position(args[0]))
    else:
        raise click.BadParameter(f"Unknown command '{' '.join([command, *args])}'.")


@click.command("form")
@_output_option
@click.pass_obj
def invoice_form(obj: dict, output: Path) -> None:
    """Fill the invoice form interactively, then print it."""
    try:
        form = bootstrap.invoice_form(obj["catalog_path"])
    except DomainException as exc:
        raise click.ClickException(str(exc))

    form.set_client_name(click.prompt("Nom de client", default="", show_default=False))
    click.echo(_FORM_HELP)
    _display_form(form.snapshot())

    while True:
        raw = click.prompt(">", prompt_suffix=" ").strip()
        if not raw:
            continue
        command, *args = raw.split()
        command = command.lower()

        if command == "quit":
            click.echo("Facture abandonnée.")
            return
        if command == "show":
            _display_form(form.snapshot())
            continue
        if command == "help":
            click.echo(_FORM_HELP)
            continue
        if command == "done":
            try:
                document = form.submit()
            except FormValidationError as exc:
                _display_errors(exc)
                continue
            _save(document, output)
            return

        try:
            _apply(form, command, args)
        except FormValidationError as exc:
            _display_errors(exc)
        except click.BadParameter as exc:
            click.echo(f"Erreur : {exc.format_message()}", err=True)
        except DomainException as exc:
            click.echo(f"Erreur : {exc}", err=True)
        click.echo(_total_banner(form.total))
