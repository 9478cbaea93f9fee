import logging
from pathlib import Path

import click

from facture.infrastructure.cli.catalog_commands import catalog_list
from facture.infrastructure.cli.invoice_commands import (
    invoice_create,
    invoice_form,
    invoice_total,
)
from facture.infrastructure.logging_config import setup_logging
from facture.infrastructure.persistence.json_catalog_loader import DEFAULT_CATALOG_PATH


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug output to stderr.")
@click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=DEFAULT_CATALOG_PATH,
    show_default=False,
    help="Catalog JSON file (defaults to the bundled textbook list).",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, catalog_path: Path) -> None:
    """Facture: textbook invoice generator"""
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    ctx.obj = {"catalog_path": catalog_path}


@cli.group()
def catalog() -> None:
    """Browse the textbook catalog."""


@cli.group()
def invoice() -> None:
    """Price and print invoices."""


# Register subcommands
catalog.add_command(catalog_list)
invoice.add_command(invoice_create)
invoice.add_command(invoice_form)
invoice.add_command(invoice_total)
