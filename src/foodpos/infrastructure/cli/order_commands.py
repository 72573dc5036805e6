"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from foodpos.application.build_product import BuildProductHandler
from foodpos.application.dto import OrderDTO, ProductSpec
from foodpos.application.show_order import ShowOrderHandler
from foodpos.domain.exceptions import DomainException
from foodpos.domain.model.order import Order
from foodpos.infrastructure.bootstrap import catalog, configure_logging


@click.command("order")
@click.option(
    "--item",
    "items",
    multiple=True,
    required=True,
    help="Product as 'burger:SIZE:FILLING', 'drink:TYPE' or 'salad:TYPE[:GRAMS]'.",
)
@click.option(
    "--delete",
    "deletions",
    multiple=True,
    type=int,
    help="1-based line to remove after all items are added.",
)
@click.option("--pay", is_flag=True, help="Pay for the order, closing it.")
@click.option("--verbose", is_flag=True, help="Show informational notices.")
def order_place(items: tuple[str, ...], deletions: tuple[int, ...], pay: bool, verbose: bool) -> None:
    """Build an order, optionally remove lines, and optionally pay."""
    configure_logging(verbose)
    builder = BuildProductHandler(catalog())
    order = Order()

    try:
        for raw in items:
            order.add(builder.handle(ProductSpec.parse(raw)))
        for index in deletions:
            order.delete_by_index(index)
        if pay:
            order.pay_for()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(ShowOrderHandler().handle(order))


def _display_order(dto: OrderDTO) -> None:
    click.echo(f"Order  (status={dto.status})")
    click.echo()
    click.echo(f"  {'#':>3} {'Product':<8} {'Details':<28} {'Energy':>10} {'Price':>10}")
    click.echo(f"  {'-'*62}")
    for line in dto.lines:
        click.echo(
            f"  {line.position:>3} {line.kind:<8} {line.details:<28} "
            f"{line.energy:>10} {line.price:>10}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Order Total':<41} {dto.energy:>10} {dto.price:>10}")
