"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from foodpos.application.show_order import calories, tugriks
from foodpos.infrastructure.bootstrap import catalog


@click.command("menu")
def menu_show() -> None:
    """List every catalog preset."""
    menu = catalog()
    click.echo(f"  {'Category':<16} {'Variant':<10} {'Energy':>10} {'Price':>10}")
    click.echo(f"  {'-'*49}")
    for category in menu.categories():
        for key in menu.keys(category):
            preset = menu.lookup(category, key)
            click.echo(
                f"  {category.value:<16} {key:<10} "
                f"{calories(preset.energy):>10} {tugriks(preset.price):>10}"
            )
