import click

from foodpos.infrastructure.cli.menu_commands import menu_show
from foodpos.infrastructure.cli.order_commands import order_place


@click.group()
def cli() -> None:
    """foodpos — burgers, drinks and salads at the counter"""


# Register subcommands
cli.add_command(menu_show)
cli.add_command(order_place)
