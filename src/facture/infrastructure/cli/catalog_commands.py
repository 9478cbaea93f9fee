"""CLI commands for the catalog."""

from __future__ import annotations

import click

from facture.domain.exceptions import DomainException
from facture.infrastructure import bootstrap


@click.command("list")
@click.pass_obj
def catalog_list(obj: dict) -> None:
    """List every textbook with its unit price."""
    try:
        items = bootstrap.catalog(obj["catalog_path"]).items()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not items:
        click.echo("No textbooks found.")
        return

    click.echo(f"{'ID':<6} Manuel")
    click.echo("-" * 60)
    for item in items:
        click.echo(f"{item.id:<6} {item.title} - {item.unit_price}")
