"""CLI commands for running a checkout."""

from __future__ import annotations

from pathlib import Path

import click

from supermarket.application.checkout import CheckoutHandler
from supermarket.domain.exceptions import DomainException
from supermarket.infrastructure.bootstrap import DEFAULT_BASKET, catalog_repository
from supermarket.infrastructure.cli.receipt_printer import render_receipt

catalog_option = click.option(
    "--catalog",
    "catalog_path",
    type=click.Path(dir_okay=False, path_type=Path),
    envvar="SUPERMARKET_CATALOG",
    default=None,
    help="JSON catalog file (defaults to the built-in catalog).",
)


@click.command("checkout")
@catalog_option
def checkout(catalog_path: Path | None) -> None:
    """Scan the demonstration basket and print its receipt."""
    try:
        handler = CheckoutHandler(catalog=catalog_repository(catalog_path))
        dto = handler.handle_names(DEFAULT_BASKET)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(render_receipt(dto), nl=False)
