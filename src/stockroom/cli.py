# SPDX-FileCopyrightText: 2024-present Richard Dahl <richard@dahl.us>
# SPDX-License-Identifier: MIT
# SPDX-Package-Name: stockroom
"""
stockroom CLI entrypoint.

Runs the demonstration sequence against a fresh in-memory inventory.
"""

import typer

from stockroom import __version__
from stockroom.config import get_settings
from stockroom.domain import Clothing, Electronic, InventoryManager, Perishable
from stockroom.logging import LogLevel, get_logger, set_package_level

logger = get_logger(__name__)

app = typer.Typer(help="stockroom CLI: in-memory inventory demonstration.")


@app.command()
def demo(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log at DEBUG level."),
) -> None:
    """Build a small inventory, adjust it and print the results."""
    settings = get_settings()
    if verbose or settings.debug:
        set_package_level(LogLevel.DEBUG)
    logger.debug("demo started", env=settings.env)

    manager = InventoryManager()

    apple = Perishable("P1", "Apple", 0.5, 10)
    phone = Electronic("E1", "Phone", 200.0, 12)
    shirt = Clothing("C1", "Shirt", 20.0, "M", "Cotton")

    apple.receive(100)
    phone.receive(50)
    shirt.receive(30)

    manager.add_item(apple)
    manager.add_item(phone)
    manager.add_item(shirt)

    phone.apply_discount(10)

    sep = settings.description_separator
    typer.echo("Items:")
    for item in manager:
        typer.echo(item.describe(sep))
    typer.echo(f"Total Value: {manager.total_value()}")
    typer.echo(
        f"Total Quantity by Perishable: {manager.total_quantity_by_category('Perishable')}"
    )
    for qty in (60, 20, 21):
        typer.echo(f"Issue {qty} from P1: {manager.issue('P1', qty)}")


@app.command()
def version() -> None:
    """Print the stockroom version."""
    typer.echo(__version__)


if __name__ == "__main__":
    app()
