import click

from supermarket.infrastructure.cli.catalog_commands import catalog_list
from supermarket.infrastructure.cli.checkout_commands import checkout
from supermarket.infrastructure.log_config import configure_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug events to stderr.")
def cli(verbose: bool) -> None:
    """SUPERMARKET plc checkout"""
    configure_logging(verbose)


@cli.group()
def catalog() -> None:
    """Inspect the product catalog."""


# Register subcommands
cli.add_command(checkout)
catalog.add_command(catalog_list)
