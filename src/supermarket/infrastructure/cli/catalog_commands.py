"""CLI commands for the product catalog."""

from __future__ import annotations

from pathlib import Path

import click

from supermarket.domain.exceptions import DomainException
from supermarket.infrastructure.bootstrap import catalog_repository
from supermarket.infrastructure.cli.checkout_commands import catalog_option


@click.command("list")
@catalog_option
def catalog_list(catalog_path: Path | None) -> None:
    """List all products in the catalog."""
    try:
        products = catalog_repository(catalog_path).list_all()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'Name':<20} {'Price':>10}  {'Offer'}")
    click.echo("-" * 45)
    for p in products:
        click.echo(f"{p.name:<20} {str(p.price):>10}  {p.offer.display_name or '-'}")
